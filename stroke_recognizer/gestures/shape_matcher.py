"""
Rotation-optimized distance between canonical paths.

Implements the $1 path distance, Golden Section Search over a bounded
rotation window, and conversion of a distance into a [0, 1] score.
"""

import math
from typing import List

from ..config.settings import RecognizerSettings
from ..utils.errors import LengthMismatchError
from ..utils.gesture_utils import Point, GeometryUtils

# Golden ratio conjugate (≈0.618)
PHI = 0.5 * (-1.0 + math.sqrt(5.0))


def path_distance(points1: List[Point], points2: List[Point]) -> float:
    """Average Euclidean distance between corresponding points."""
    if len(points1) != len(points2):
        raise LengthMismatchError(
            f"Cannot compare paths of {len(points1)} and {len(points2)} points"
        )

    distance = 0.0
    for p1, p2 in zip(points1, points2):
        distance += GeometryUtils.calculate_distance(p1, p2)

    return distance / len(points1)


def distance_at_angle(points: List[Point], template_points: List[Point], angle: float) -> float:
    """Calculate distance after rotating points about the origin."""
    rotated_points = GeometryUtils.rotate_points(points, angle)
    return path_distance(rotated_points, template_points)


def distance_at_best_angle(points: List[Point], template_points: List[Point],
                           angle_range: float = RecognizerSettings.ANGLE_RANGE,
                           threshold: float = RecognizerSettings.ANGLE_PRECISION) -> float:
    """
    Find the minimum distance over rotations in [-angle_range, +angle_range].

    Uses Golden Section Search, which assumes the distance is unimodal in the
    angle over the window. Stops once the bracket is narrower than threshold.
    """
    theta_a = -angle_range
    theta_b = angle_range

    x1 = PHI * theta_a + (1 - PHI) * theta_b
    f1 = distance_at_angle(points, template_points, x1)

    x2 = (1 - PHI) * theta_a + PHI * theta_b
    f2 = distance_at_angle(points, template_points, x2)

    while abs(theta_b - theta_a) > threshold:
        if f1 < f2:
            theta_b = x2
            x2 = x1
            f2 = f1
            x1 = PHI * theta_a + (1 - PHI) * theta_b
            f1 = distance_at_angle(points, template_points, x1)
        else:
            theta_a = x1
            x1 = x2
            f1 = f2
            x2 = (1 - PHI) * theta_a + PHI * theta_b
            f2 = distance_at_angle(points, template_points, x2)

    return min(f1, f2)


def angle_between_vectors(a: Point, b: Point) -> float:
    """Angle in radians between two unit vectors."""
    dot = a.x * b.x + a.y * b.y
    return math.acos(max(-1.0, min(1.0, dot)))


def score(distance: float, size: float = RecognizerSettings.SQUARE_SIZE,
          half_diagonal_factor: float = RecognizerSettings.HALF_DIAGONAL_FACTOR,
          legacy_order: bool = False) -> float:
    """
    Convert a path distance to a similarity score in [0, 1].

    The standard form divides by the half diagonal of the reference square.
    legacy_order evaluates ``1 - distance / factor * diagonal`` left to right
    instead, which penalizes any nonzero distance far more steeply.
    """
    if math.isinf(distance) or math.isnan(distance):
        return 0.0

    diagonal = math.sqrt(size ** 2 + size ** 2)
    if legacy_order:
        similarity = 1.0 - (distance / half_diagonal_factor) * diagonal
    else:
        similarity = 1.0 - distance / (half_diagonal_factor * diagonal)

    return max(0.0, min(1.0, similarity))
