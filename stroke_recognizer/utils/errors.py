"""
Exceptions raised while training or recognizing gestures.

Recognizing against an empty library is not an error: it yields
``MatchResult.no_match()``.
"""


class RecognitionError(ValueError):
    """Base class for recognizer errors."""


class InvalidGestureError(RecognitionError):
    """The gesture is malformed for the requested operation."""


class DegenerateInputError(InvalidGestureError):
    """A stroke has fewer than 2 points or the path has ~zero length."""


class TooManyStrokesError(InvalidGestureError):
    """A multistroke template has more strokes than the permutation cap allows."""


class LengthMismatchError(RecognitionError):
    """Two canonical paths of different lengths were compared."""
