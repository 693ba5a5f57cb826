"""
Records shared by the template library and the recognizer.

These are the in-memory structures a persistence layer may serialize; no
encoding is defined here.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..utils.gesture_utils import Point


@dataclass
class TemplateVariant:
    """One canonical path of a template plus its start direction vector."""
    points: List[Point]
    vector: Optional[Point] = None


@dataclass
class Template:
    """A named trained shape with one or more canonical variants."""
    name: str
    variants: List[TemplateVariant] = field(default_factory=list)
    stroke_count: int = 1

    @property
    def paths(self) -> List[List[Point]]:
        return [v.points for v in self.variants]

    @property
    def vectors(self) -> List[Point]:
        return [v.vector for v in self.variants]


@dataclass
class MatchResult:
    """Result of a recognition with name, score, and timing."""
    name: Optional[str]
    score: float
    distance: float = math.inf
    comparisons: int = 0
    time_ms: float = 0.0

    @classmethod
    def no_match(cls, comparisons: int = 0, time_ms: float = 0.0) -> 'MatchResult':
        return cls(None, 0.0, math.inf, comparisons, time_ms)

    @property
    def matched(self) -> bool:
        return self.name is not None
