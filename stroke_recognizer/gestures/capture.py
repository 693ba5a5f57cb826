"""
Point capture session for pointer, touch and pen input.

Collects points stroke by stroke while the user draws, then hands the
completed gesture to a Recognizer. Recognition runs synchronously; the
completion callback is invoked on the caller's thread before detect()
returns.
"""

import logging
from typing import Callable, List, Optional

from ..utils.errors import InvalidGestureError
from ..utils.gesture_utils import Point
from ..utils.logger import RecognitionLogger
from .recognizer import Recognizer
from .types import MatchResult

logger = logging.getLogger(__name__)


class GestureCapture:
    """Accumulates strokes for one gesture at a time."""

    def __init__(self, recognizer: Recognizer, result_logger: Optional[RecognitionLogger] = None):
        self.recognizer = recognizer
        self.result_logger = result_logger
        self._strokes: List[List[Point]] = []
        self._current: Optional[List[Point]] = None

    @property
    def strokes(self) -> List[List[Point]]:
        """Completed strokes plus the stroke in progress, if it has points."""
        strokes = [list(s) for s in self._strokes]
        if self._current:
            strokes.append(list(self._current))
        return strokes

    @property
    def is_drawing(self) -> bool:
        return self._current is not None

    def begin_stroke(self):
        """Pen down: start a new stroke, closing any stroke in progress."""
        if self._current is not None:
            self.end_stroke()
        self._current = []

    def add_point(self, x: float, y: float, t: Optional[float] = None):
        """Append a point to the current stroke, starting one if needed."""
        if self._current is None:
            self._current = []
        self._current.append(Point(x, y, t))

    def end_stroke(self):
        """Pen up: close the current stroke. Empty strokes are discarded."""
        if self._current:
            self._strokes.append(self._current)
        self._current = None

    def reset(self):
        """Discard all captured points."""
        self._strokes = []
        self._current = None

    def detect(self, completion: Optional[Callable[[MatchResult], None]] = None) -> MatchResult:
        """Recognize the captured gesture and pass the result to completion."""
        strokes = self.strokes
        if not strokes:
            raise InvalidGestureError("Nothing has been captured")

        result = self.recognizer.recognize(strokes)
        if self.result_logger:
            self.result_logger.log_result(result, len(strokes))
        if completion is not None:
            completion(result)
        return result

    def train(self, name: str) -> int:
        """Store the captured gesture as a template, returns its variant count."""
        strokes = self.strokes
        if not strokes:
            raise InvalidGestureError("Nothing has been captured")

        count = self.recognizer.add_template(name, strokes)
        if self.result_logger:
            self.result_logger.log_training(name, count)
        logger.debug(f"Trained '{name}' from {len(strokes)} captured stroke(s)")
        return count
