"""
Configuration settings for the stroke recognizer.
"""

import math

UNISTROKE = 'unistroke'
MULTISTROKE = 'multistroke'
MODES = (UNISTROKE, MULTISTROKE)


class RecognizerSettings:
    """Configuration constants for template matching."""

    # Resampling
    NUM_POINTS_UNISTROKE = 32
    NUM_POINTS_MULTISTROKE = 96

    # Scaling
    SQUARE_SIZE = 250.0
    ONE_D_THRESHOLD = 0.3  # aspect ratio below which a gesture is treated as 1D
    EPSILON = 1e-6

    # Golden section search window (radians)
    ANGLE_RANGE = math.pi / 4
    ANGLE_PRECISION = 0.1

    # Multistroke pruning
    START_ANGLE_INDEX_DIVISOR = 8
    PRUNING_THRESHOLD = math.pi / 6
    MAX_STROKES = 5

    # Score normalization: 1 - distance / (HALF_DIAGONAL_FACTOR * diagonal)
    HALF_DIAGONAL_FACTOR = 0.5


class RecognitionConfig:
    """Per-recognizer configuration seeded from RecognizerSettings."""

    def __init__(self, **overrides):
        self.square_size = RecognizerSettings.SQUARE_SIZE
        self.one_d_threshold = RecognizerSettings.ONE_D_THRESHOLD
        self.epsilon = RecognizerSettings.EPSILON
        self.angle_range = RecognizerSettings.ANGLE_RANGE
        self.angle_precision = RecognizerSettings.ANGLE_PRECISION
        self.start_angle_index_divisor = RecognizerSettings.START_ANGLE_INDEX_DIVISOR
        self.pruning_threshold = RecognizerSettings.PRUNING_THRESHOLD
        self.max_strokes = RecognizerSettings.MAX_STROKES
        self.half_diagonal_factor = RecognizerSettings.HALF_DIAGONAL_FACTOR
        self.legacy_score_order = False
        self.use_bounded_rotation_invariance = False
        self.similarity_threshold = 0.0
        self.unistroke_points = RecognizerSettings.NUM_POINTS_UNISTROKE
        self.multistroke_points = RecognizerSettings.NUM_POINTS_MULTISTROKE

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise TypeError(f"Unknown recognition setting: {key}")
            setattr(self, key, value)

    def num_points(self, mode: str) -> int:
        """Number of resampled points for the given recognition mode."""
        if mode == UNISTROKE:
            return self.unistroke_points
        if mode == MULTISTROKE:
            return self.multistroke_points
        raise ValueError(f"Unknown recognition mode: {mode}")

    def start_angle_index(self, mode: str) -> int:
        """Index of the point used to compute a path's direction vector."""
        return self.num_points(mode) // self.start_angle_index_divisor

    def set_pruning_threshold(self, threshold: float):
        """Set the direction vector pruning threshold (0 to pi radians)."""
        self.pruning_threshold = max(0.0, min(math.pi, threshold))

    def disable_pruning(self):
        """Accept every variant regardless of its start direction."""
        self.pruning_threshold = math.pi

    def set_similarity_threshold(self, threshold: float):
        """Set the similarity threshold (0.0-1.0)."""
        self.similarity_threshold = max(0.0, min(1.0, threshold))

    def get_similarity_threshold(self) -> float:
        """Get the current similarity threshold."""
        return self.similarity_threshold
