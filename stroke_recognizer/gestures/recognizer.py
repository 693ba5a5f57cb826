"""
$1 Unistroke / $N Multistroke Recognizer

Classifies a completed gesture against a library of trained templates and
returns the closest template with a similarity score. Matching is invariant
to translation and uniform scale, and to rotation within the configured
search window.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import logging
import math
import time
from functools import reduce
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..config.settings import RecognitionConfig, UNISTROKE
from ..utils.errors import InvalidGestureError
from ..utils.gesture_utils import Point
from .multistroke import combine_strokes, prepare_strokes
from .normalizer import normalize_multistroke, normalize_unistroke
from .shape_matcher import angle_between_vectors, distance_at_best_angle, score
from .templates import TemplateLibrary
from .types import MatchResult, TemplateVariant

logger = logging.getLogger(__name__)

Candidate = Tuple[Optional[str], float]


def best_match(candidates: Iterable[Candidate]) -> Candidate:
    """Fold (name, distance) pairs into the closest one; the first seen wins ties."""
    return reduce(lambda best, c: c if c[1] < best[1] else best, candidates, (None, math.inf))


class Recognizer:
    """Template matcher for unistroke or multistroke gestures."""

    def __init__(self, mode: str = UNISTROKE, config: Optional[RecognitionConfig] = None):
        self.config = config or RecognitionConfig()
        self.library = TemplateLibrary(mode, self.config)

    @property
    def mode(self) -> str:
        return self.library.mode

    def add_template(self, name: str, strokes: Sequence[Any]) -> int:
        """Add a trained template, returns the number of variants stored for it."""
        return len(self.library.add_template(name, strokes).variants)

    def recognize(self, gesture: Sequence[Any]) -> MatchResult:
        """
        Recognize a gesture.

        Args:
            gesture: List of strokes, each a list of Points, (x, y) pairs or
                dicts with 'x' and 'y' keys. A single stroke may be passed
                directly as a list of points.

        Returns:
            MatchResult with name, score, and timing, or MatchResult.no_match()
            when the library is empty or every template was pruned.
        """
        t0 = time.time() * 1000
        strokes = prepare_strokes(gesture)

        if self.mode == UNISTROKE:
            if len(strokes) != 1:
                raise InvalidGestureError(
                    f"Unistroke recognition takes exactly one stroke, got {len(strokes)}"
                )
            candidates = list(self._unistroke_candidates(normalize_unistroke(strokes[0], self.config)))
        else:
            variant = normalize_multistroke(combine_strokes(strokes), self.config)
            candidates = list(self._multistroke_candidates(variant))

        name, distance = best_match(candidates)
        t1 = time.time() * 1000

        if name is None:
            logger.info(f"No match among {len(self.library)} template(s)")
            return MatchResult.no_match(len(candidates), t1 - t0)

        similarity = score(distance, self.config.square_size,
                           self.config.half_diagonal_factor, self.config.legacy_score_order)
        logger.info(f"Best template: {name} with distance {distance:.4f} (score {similarity:.3f})")

        if similarity < self.config.similarity_threshold:
            logger.info(f"Score {similarity:.3f} below threshold {self.config.similarity_threshold:.2f}")
            return MatchResult.no_match(len(candidates), t1 - t0)

        return MatchResult(name, similarity, distance, len(candidates), t1 - t0)

    def _unistroke_candidates(self, points: List[Point]) -> Iterator[Candidate]:
        for template in self.library:
            d = self._distance(points, template.variants[0].points)
            logger.debug(f"Template {template.name}: distance {d:.4f}")
            yield template.name, d

    def _multistroke_candidates(self, candidate: TemplateVariant) -> Iterator[Candidate]:
        for template in self.library:
            for variant in template.variants:
                if angle_between_vectors(candidate.vector, variant.vector) > self.config.pruning_threshold:
                    continue
                d = self._distance(candidate.points, variant.points)
                logger.debug(f"Template {template.name}: distance {d:.4f}")
                yield template.name, d

    def _distance(self, points: List[Point], template_points: List[Point]) -> float:
        return distance_at_best_angle(points, template_points,
                                      self.config.angle_range, self.config.angle_precision)
