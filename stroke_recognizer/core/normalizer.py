"""
Path normalization for the $1 Unistroke Recognizer.

A raw path is resampled to a fixed number of equally spaced points, rotated
so its indicative angle is zero, scaled non-uniformly to a reference square
and translated so its centroid is at the origin.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import logging
import math
from typing import Iterable, Union

import numpy as np

from ..config.settings import RecognizerConfig
from ..utils.geometry import GeometryUtils, PointLike
from .exceptions import DegeneratePathError
from .path import NormalizedPath, Path2D

logger = logging.getLogger(__name__)

# An axis this much smaller than the other is rounding residue, not extent.
DEGENERATE_EXTENT_RATIO = 1e-9


def resample(points: np.ndarray, num_points: int = RecognizerConfig.NUM_POINTS) -> np.ndarray:
    """Resample a path to ``num_points`` points equally spaced by arc length."""
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    if not np.all(np.isfinite(points)):
        raise DegeneratePathError("Path contains non-finite coordinates")

    points = GeometryUtils.remove_duplicates(points)
    if len(points) < 2:
        raise DegeneratePathError(f"Need at least 2 distinct points, got {len(points)}")

    lengths = GeometryUtils.segment_lengths(points)
    cumulative = np.concatenate(([0.0], np.cumsum(lengths)))
    total_length = cumulative[-1]
    if total_length <= 0.0:
        raise DegeneratePathError("Path has zero length")

    targets = np.linspace(0.0, total_length, num_points)
    return np.column_stack((
        np.interp(targets, cumulative, points[:, 0]),
        np.interp(targets, cumulative, points[:, 1]),
    ))


def indicative_angle(points: np.ndarray) -> float:
    """Angle from the centroid to the first point, in radians."""
    centroid = GeometryUtils.calculate_centroid(points)
    return math.atan2(points[0, 1] - centroid[1], points[0, 0] - centroid[0])


def rotate_to_zero(points: np.ndarray) -> np.ndarray:
    """Rotate about the centroid so the first point lies on the positive x-axis."""
    return GeometryUtils.rotate_points(points, -indicative_angle(points))


def scale_to_square(points: np.ndarray, size: float = RecognizerConfig.SQUARE_SIZE) -> np.ndarray:
    """
    Scale points non-uniformly so the bounding box becomes a ``size`` square.

    A flat axis (a straight horizontal or vertical stroke) keeps its scale.
    """
    min_x, max_x, min_y, max_y = GeometryUtils.get_bounds(points)
    width = max_x - min_x
    height = max_y - min_y
    extent = max(width, height)

    scale_x = size / width if width > extent * DEGENERATE_EXTENT_RATIO else 1.0
    scale_y = size / height if height > extent * DEGENERATE_EXTENT_RATIO else 1.0
    return points * np.array([scale_x, scale_y])


def translate_to_origin(points: np.ndarray) -> np.ndarray:
    """Translate points so the centroid is at the origin."""
    return points - GeometryUtils.calculate_centroid(points)


def normalize(path: Union[Path2D, Iterable[PointLike]],
              num_points: int = RecognizerConfig.NUM_POINTS,
              square_size: float = RecognizerConfig.SQUARE_SIZE) -> NormalizedPath:
    """
    Convert a raw path into its canonical normalized form.

    Args:
        path: A Path2D or any sequence of points
        num_points: Number of points in the normalized path
        square_size: Side of the reference square

    Returns:
        The NormalizedPath

    Raises:
        DegeneratePathError: If the path has fewer than 2 distinct points
            or zero length
    """
    points = path.to_array() if isinstance(path, Path2D) else GeometryUtils.to_array(path)
    logger.debug(f"Normalizing path of {len(points)} points to {num_points}")
    points = resample(points, num_points)
    points = rotate_to_zero(points)
    points = scale_to_square(points, square_size)
    points = translate_to_origin(points)
    return NormalizedPath(points)
