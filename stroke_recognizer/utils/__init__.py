"""
Utilities package for gesture normalization and matching.

This package provides the geometry primitives, exception types and result
logging shared by the recognizer components.
"""

from .errors import (
    RecognitionError,
    InvalidGestureError,
    DegenerateInputError,
    TooManyStrokesError,
    LengthMismatchError
)
from .gesture_utils import (
    Point,
    GeometryUtils,
    PathUtils
)
from .logger import RecognitionLogger

__all__ = [
    'Point',
    'GeometryUtils',
    'PathUtils',
    'RecognitionLogger',
    'RecognitionError',
    'InvalidGestureError',
    'DegenerateInputError',
    'TooManyStrokesError',
    'LengthMismatchError'
]
