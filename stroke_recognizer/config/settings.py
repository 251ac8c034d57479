"""
Configuration settings for the stroke recognizer.
"""

from dataclasses import dataclass


class RecognizerConfig:
    """Configuration constants for unistroke recognition."""

    # Normalization
    NUM_POINTS = 64
    SQUARE_SIZE = 250.0

    # Golden section search (angles in degrees)
    ANGLE_RANGE = 45.0
    ANGLE_PRECISION = 2.0
    MAX_SEARCH_ITERATIONS = 100

    # Recognition
    MIN_PATH_LENGTH = 100.0
    MATCH_THRESHOLD = 0.8

    # Storage
    TEMPLATE_FILE = 'data.gestures'


@dataclass(frozen=True)
class SearchSettings:
    """Parameters of the matching search.

    Angles are in degrees. ``n_jobs`` other than 1 spreads the templates
    over a joblib worker pool.
    """
    square_size: float = RecognizerConfig.SQUARE_SIZE
    angle_range: float = RecognizerConfig.ANGLE_RANGE
    angle_precision: float = RecognizerConfig.ANGLE_PRECISION
    max_iterations: int = RecognizerConfig.MAX_SEARCH_ITERATIONS
    n_jobs: int = 1

    @classmethod
    def defaults(cls) -> 'SearchSettings':
        return cls()
