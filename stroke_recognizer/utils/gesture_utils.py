"""
Shared geometry utilities for gesture normalization and matching.

This module provides the point primitive and the pure vector math used by
the normalizer, the shape matcher and the multistroke combiner.
"""

import math
from typing import Any, Iterable, List, Optional, Tuple

from .errors import InvalidGestureError


class Point:
    """Represents a 2D point with optional timestamp."""

    def __init__(self, x: float, y: float, timestamp: Optional[float] = None):
        self.x = float(x)
        self.y = float(y)
        self.t = timestamp

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-10 and abs(self.y - other.y) < 1e-10

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_centroid(points: List[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            return Point(0, 0)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def rotate_points(points: List[Point], angle: float, centroid: Optional[Point] = None) -> List[Point]:
        """Rotate points by angle (radians) about centroid, or the origin if none is given."""
        cx = centroid.x if centroid is not None else 0.0
        cy = centroid.y if centroid is not None else 0.0
        cos = math.cos(angle)
        sin = math.sin(angle)

        rotated = []
        for point in points:
            dx = point.x - cx
            dy = point.y - cy
            rotated.append(Point(dx * cos - dy * sin + cx, dx * sin + dy * cos + cy))

        return rotated

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def bounding_box(points: List[Point]) -> Tuple[float, float, float, float]:
        """Return (min_x, min_y, width, height) of the axis-aligned bounding box."""
        if not points:
            return 0.0, 0.0, 0.0, 0.0

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return min_x, min_y, max_x - min_x, max_y - min_y

    @staticmethod
    def scale_points(points: List[Point], sx: float, sy: float) -> List[Point]:
        """Scale each axis independently about the origin."""
        return [Point(p.x * sx, p.y * sy) for p in points]

    @staticmethod
    def translate_points(points: List[Point], dx: float, dy: float) -> List[Point]:
        """Shift every point by (dx, dy)."""
        return [Point(p.x + dx, p.y + dy) for p in points]


class PathUtils:
    """Utility class for converting and reordering caller paths."""

    @staticmethod
    def to_point(value: Any) -> Point:
        """Convert a Point, (x, y) pair or {'x', 'y'} dict to a Point."""
        if isinstance(value, Point):
            return Point(value.x, value.y, value.t)
        try:
            if isinstance(value, dict):
                return Point(value['x'], value['y'], value.get('t'))
            x, y = value[0], value[1]
            return Point(x, y)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise InvalidGestureError(f"Cannot interpret {value!r} as a point: {e}") from e

    @staticmethod
    def to_points(stroke: Iterable[Any]) -> List[Point]:
        """Convert a caller stroke into a fresh list of Points."""
        return [PathUtils.to_point(p) for p in stroke]

    @staticmethod
    def reverse(points: List[Point]) -> List[Point]:
        """Return the stroke traced in the opposite direction."""
        return list(reversed(points))

    @staticmethod
    def concatenate(strokes: Iterable[List[Point]]) -> List[Point]:
        """Join strokes end to end into one path."""
        joined = []
        for stroke in strokes:
            joined.extend(stroke)
        return joined
