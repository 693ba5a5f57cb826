"""
Gesture normalization, matching and recognition.

This module provides the $1 unistroke and $N multistroke template
recognizers together with the template library and capture session that
feed them.
"""

from .types import Template, TemplateVariant, MatchResult
from .templates import TemplateLibrary
from .recognizer import Recognizer, best_match
from .capture import GestureCapture

__all__ = [
    'Template',
    'TemplateVariant',
    'MatchResult',
    'TemplateLibrary',
    'Recognizer',
    'best_match',
    'GestureCapture'
]
