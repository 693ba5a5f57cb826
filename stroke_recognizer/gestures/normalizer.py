"""
Gesture normalization for the $1 and $N recognizers.

Turns a raw path into a canonical point sequence: resampled to a fixed
number of equally spaced points, rotated to its indicative angle, scaled
into a reference square and centered on the origin.

Reference: https://depts.washington.edu/acelab/proj/dollar/ndollar.html
"""

import math
from typing import List, Optional

from ..config.settings import RecognitionConfig, RecognizerSettings, UNISTROKE, MULTISTROKE
from ..utils.errors import DegenerateInputError
from ..utils.gesture_utils import Point, GeometryUtils
from .types import TemplateVariant

ORIGIN = Point(0, 0)


def resample(points: List[Point], n: int, epsilon: float = RecognizerSettings.EPSILON) -> List[Point]:
    """Resample a path into n points spaced equally along its arc length."""
    if len(points) < 2:
        raise DegenerateInputError(f"Need at least 2 points to resample, got {len(points)}")

    total_length = GeometryUtils.calculate_path_length(points)
    if total_length <= epsilon:
        raise DegenerateInputError("Path has zero length")

    interval = total_length / (n - 1)
    D = 0.0
    path = list(points)  # q is inserted into the working copy, not the caller's list
    resampled = [Point(path[0].x, path[0].y)]

    i = 1
    while i < len(path):
        prev_point = path[i-1]
        curr_point = path[i]
        d = GeometryUtils.calculate_distance(prev_point, curr_point)
        if d > 0 and D + d >= interval:
            ratio = (interval - D) / d
            q = Point(prev_point.x + ratio * (curr_point.x - prev_point.x),
                      prev_point.y + ratio * (curr_point.y - prev_point.y))
            resampled.append(q)
            path.insert(i, q)
            D = 0.0
        else:
            D += d
        i += 1

    # sometimes we fall a rounding-error short of adding the last point
    while len(resampled) < n:
        resampled.append(Point(path[-1].x, path[-1].y))

    return resampled[:n]


def indicative_angle(points: List[Point]) -> float:
    """Angle between the first point and the centroid."""
    c = GeometryUtils.calculate_centroid(points)
    return math.atan2(c.y - points[0].y, c.x - points[0].x)


def rotate_by(points: List[Point], theta: float) -> List[Point]:
    """Rotate points about the origin."""
    return GeometryUtils.rotate_points(points, theta)


def rotate_to_zero(points: List[Point]) -> List[Point]:
    return rotate_by(points, -indicative_angle(points))


def scale_to_square(points: List[Point], size: float = RecognizerSettings.SQUARE_SIZE,
                    epsilon: float = RecognizerSettings.EPSILON) -> List[Point]:
    """Scale each axis independently so the bounding box becomes size x size."""
    _, _, width, height = GeometryUtils.bounding_box(points)
    width = max(width, epsilon)
    height = max(height, epsilon)
    return GeometryUtils.scale_points(points, size / width, size / height)


def scale_dim_to(points: List[Point], size: float = RecognizerSettings.SQUARE_SIZE,
                 delta: float = RecognizerSettings.ONE_D_THRESHOLD,
                 epsilon: float = RecognizerSettings.EPSILON) -> List[Point]:
    """
    Scale into a size x size square, uniformly when the gesture is close to 1D.

    Gestures whose bounding box aspect ratio is at most delta (lines, dashes)
    keep their proportions; everything else is stretched per axis.
    """
    _, _, width, height = GeometryUtils.bounding_box(points)
    width = max(width, epsilon)
    height = max(height, epsilon)

    if min(width / height, height / width) <= delta:
        factor = size / max(width, height)
        return GeometryUtils.scale_points(points, factor, factor)
    return GeometryUtils.scale_points(points, size / width, size / height)


def translate_to(points: List[Point], target: Point = ORIGIN) -> List[Point]:
    """Shift points so their centroid lands on target."""
    c = GeometryUtils.calculate_centroid(points)
    return GeometryUtils.translate_points(points, target.x - c.x, target.y - c.y)


def direction_vector(points: List[Point], index: int) -> Point:
    """Unit vector from the first point to points[index]; (0, 0) if they coincide."""
    dx = points[index].x - points[0].x
    dy = points[index].y - points[0].y
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return Point(0, 0)
    return Point(dx / length, dy / length)


def normalize_unistroke(points: List[Point], config: Optional[RecognitionConfig] = None) -> List[Point]:
    """Canonical path for the $1 recognizer."""
    config = config or RecognitionConfig()
    canonical = resample(points, config.num_points(UNISTROKE), config.epsilon)
    canonical = rotate_to_zero(canonical)
    canonical = scale_to_square(canonical, config.square_size, config.epsilon)
    return translate_to(canonical, ORIGIN)


def normalize_multistroke(points: List[Point], config: Optional[RecognitionConfig] = None) -> TemplateVariant:
    """Canonical path and start direction vector for the $N recognizer."""
    config = config or RecognitionConfig()
    canonical = resample(points, config.num_points(MULTISTROKE), config.epsilon)
    omega = indicative_angle(canonical)
    canonical = rotate_by(canonical, -omega)
    canonical = scale_dim_to(canonical, config.square_size, config.one_d_threshold, config.epsilon)
    if config.use_bounded_rotation_invariance:
        canonical = rotate_by(canonical, omega)
    canonical = translate_to(canonical, ORIGIN)
    vector = direction_vector(canonical, config.start_angle_index(MULTISTROKE))
    return TemplateVariant(canonical, vector)
