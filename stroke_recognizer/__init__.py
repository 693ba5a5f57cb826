"""
Stroke Recognizer Package
Template-based recognition of unistroke and multistroke gestures.
"""

from .config.settings import RecognitionConfig, UNISTROKE, MULTISTROKE
from .gestures.recognizer import Recognizer
from .gestures.capture import GestureCapture
from .gestures.types import MatchResult
from .utils.errors import DegenerateInputError, LengthMismatchError, RecognitionError

__version__ = "1.0.0"
__all__ = [
    "Recognizer",
    "GestureCapture",
    "MatchResult",
    "RecognitionConfig",
    "UNISTROKE",
    "MULTISTROKE",
    "RecognitionError",
    "DegenerateInputError",
    "LengthMismatchError",
]
