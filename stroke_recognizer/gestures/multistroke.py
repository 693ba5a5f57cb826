"""
$N multistroke combinatorics.

A multistroke gesture can be drawn with its strokes in any order and each
stroke in either direction. Training expands a template into every
ordering crossed with every per-stroke direction (n! * 2^n unistrokes) so
recognition only has to compare against stored variants.
"""

import logging
import numbers
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config.settings import RecognitionConfig
from ..utils.errors import DegenerateInputError, InvalidGestureError, TooManyStrokesError
from ..utils.gesture_utils import Point, PathUtils
from .normalizer import normalize_multistroke
from .types import TemplateVariant

logger = logging.getLogger(__name__)


def _looks_like_point(value: Any) -> bool:
    if isinstance(value, (Point, dict)):
        return True
    if isinstance(value, (list, tuple)) and value:
        return isinstance(value[0], numbers.Real)
    return False


def prepare_strokes(gesture: Sequence[Any]) -> List[List[Point]]:
    """
    Convert a caller gesture into a list of validated strokes.

    Accepts a list of strokes, or a single stroke given directly as a list
    of points. Every stroke must have at least 2 points.
    """
    if gesture is None or len(gesture) == 0:
        raise InvalidGestureError("Gesture has no strokes")

    if _looks_like_point(gesture[0]):
        gesture = [gesture]

    strokes = []
    for i, stroke in enumerate(gesture):
        points = PathUtils.to_points(stroke)
        if len(points) < 2:
            raise DegenerateInputError(f"Stroke {i} has {len(points)} point(s), need at least 2")
        strokes.append(points)
    return strokes


def heap_permutations(n: int) -> Iterator[Tuple[int, ...]]:
    """Yield every ordering of range(n) exactly once (Heap's algorithm)."""
    if n < 1:
        return

    order = list(range(n))

    def permute(k: int) -> Iterator[Tuple[int, ...]]:
        if k == 1:
            yield tuple(order)
            return
        for i in range(k - 1):
            yield from permute(k - 1)
            if k % 2 == 0:
                order[i], order[k - 1] = order[k - 1], order[i]
            else:
                order[0], order[k - 1] = order[k - 1], order[0]
        yield from permute(k - 1)

    yield from permute(n)


def make_unistrokes(strokes: List[List[Point]], orders: Iterable[Sequence[int]]) -> Iterator[List[Point]]:
    """
    Concatenate strokes for every ordering and direction combination.

    Bit i of the direction mask reverses the i-th stroke of the ordering.
    """
    for order in orders:
        for mask in range(2 ** len(order)):
            unistroke = []
            for i, index in enumerate(order):
                if (mask >> i) & 1:
                    unistroke.extend(PathUtils.reverse(strokes[index]))
                else:
                    unistroke.extend(strokes[index])
            yield unistroke


def combine_strokes(strokes: List[List[Point]]) -> List[Point]:
    """Join a gesture's strokes in the order they were drawn."""
    return PathUtils.concatenate(strokes)


def generate_variants(strokes: List[List[Point]], config: Optional[RecognitionConfig] = None) -> List[TemplateVariant]:
    """Normalize every order/direction unistroke of a multistroke template."""
    config = config or RecognitionConfig()
    if len(strokes) > config.max_strokes:
        raise TooManyStrokesError(
            f"{len(strokes)} strokes exceeds the limit of {config.max_strokes}"
        )

    variants = [normalize_multistroke(unistroke, config)
                for unistroke in make_unistrokes(strokes, heap_permutations(len(strokes)))]
    logger.debug(f"Generated {len(variants)} variants from {len(strokes)} stroke(s)")
    return variants
