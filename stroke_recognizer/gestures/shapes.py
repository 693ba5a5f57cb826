"""
Generated raw strokes for common shapes.

Used to seed a template library for the demo and to build test gestures.
Every generator returns a list of strokes, each a list of (x, y) tuples.
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..config.settings import UNISTROKE, MULTISTROKE

Stroke = List[Tuple[float, float]]


def _to_stroke(xs: np.ndarray, ys: np.ndarray) -> Stroke:
    return list(zip(xs.tolist(), ys.tolist()))


def polyline(corners: Sequence[Tuple[float, float]], points_per_segment: int = 8) -> Stroke:
    """Densify a polyline so every segment carries points_per_segment samples."""
    corners = np.asarray(corners, dtype=float)
    segments = []
    for start, end in zip(corners[:-1], corners[1:]):
        t = np.linspace(0.0, 1.0, points_per_segment, endpoint=False)
        segments.append(start + np.outer(t, end - start))
    segments.append(corners[-1:])
    dense = np.vstack(segments)
    return _to_stroke(dense[:, 0], dense[:, 1])


def circle(radius: float = 50.0, num_points: int = 32) -> List[Stroke]:
    angles = np.linspace(0.0, 2 * np.pi, num_points + 1)
    return [_to_stroke(radius * np.cos(angles), radius * np.sin(angles))]


def star(points: int = 5, outer_radius: float = 50.0, inner_radius: float = 20.0) -> List[Stroke]:
    angles = np.pi * np.arange(points * 2 + 1) / points - np.pi / 2
    radii = np.where(np.arange(points * 2 + 1) % 2 == 0, outer_radius, inner_radius)
    return [polyline(list(zip(radii * np.cos(angles), radii * np.sin(angles))), 4)]


def heart(scale: float = 2.0) -> List[Stroke]:
    t = np.linspace(0.0, 2 * np.pi, 64)
    x = 16 * np.sin(t) ** 3
    y = -(13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t))
    return [_to_stroke(x * scale, y * scale)]


def triangle() -> List[Stroke]:
    return [polyline([(50, 0), (100, 100), (0, 100), (50, 0)])]


def rectangle() -> List[Stroke]:
    return [polyline([(0, 0), (100, 0), (100, 60), (0, 60), (0, 0)])]


def check() -> List[Stroke]:
    return [polyline([(0, 50), (30, 90), (100, 0)])]


def zigzag() -> List[Stroke]:
    return [polyline([(0, 0), (25, 50), (50, 0), (75, 50), (100, 0)])]


# Multistroke shapes

def x_shape() -> List[Stroke]:
    return [polyline([(30, 146), (106, 222)]), polyline([(30, 225), (106, 146)])]


def t_shape() -> List[Stroke]:
    return [polyline([(30, 7), (103, 7)]), polyline([(66, 7), (66, 87)])]


def h_shape() -> List[Stroke]:
    return [
        polyline([(188, 137), (188, 225)]),
        polyline([(188, 180), (241, 180)]),
        polyline([(241, 137), (241, 225)]),
    ]


def i_shape() -> List[Stroke]:
    return [
        polyline([(371, 149), (371, 221)]),
        polyline([(341, 149), (401, 149)]),
        polyline([(341, 221), (401, 221)]),
    ]


def arrowhead() -> List[Stroke]:
    return [
        polyline([(506, 349), (574, 349)]),
        polyline([(525, 306), (584, 349), (525, 388)]),
    ]


UNISTROKE_SHAPES = {
    'circle': circle,
    'triangle': triangle,
    'rectangle': rectangle,
    'star': star,
    'heart': heart,
    'check': check,
    'zigzag': zigzag,
}

MULTISTROKE_SHAPES = {
    'X': x_shape,
    'T': t_shape,
    'H': h_shape,
    'I': i_shape,
    'arrowhead': arrowhead,
}


def default_templates(mode: str = UNISTROKE) -> Dict[str, List[Stroke]]:
    """Return name -> strokes for the built-in shapes of a recognition mode."""
    if mode == UNISTROKE:
        shapes = UNISTROKE_SHAPES
    elif mode == MULTISTROKE:
        shapes = MULTISTROKE_SHAPES
    else:
        raise ValueError(f"Unknown recognition mode: {mode}")
    return {name: generate() for name, generate in shapes.items()}


def transform(strokes: List[Stroke], scale: float = 1.0, angle: float = 0.0,
              offset: Tuple[float, float] = (0.0, 0.0)) -> List[Stroke]:
    """Scale, rotate (radians, about the origin) and translate strokes."""
    rotation = np.array([[np.cos(angle), -np.sin(angle)], [np.sin(angle), np.cos(angle)]])
    transformed = []
    for stroke in strokes:
        points = (np.asarray(stroke, dtype=float) * scale) @ rotation.T + np.asarray(offset, dtype=float)
        transformed.append(_to_stroke(points[:, 0], points[:, 1]))
    return transformed
