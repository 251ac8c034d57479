"""
Shared geometry utilities for stroke normalization and matching.

Paths are handled internally as ``(n, 2)`` float arrays so that the
per-point arithmetic of resampling, rotation and distance runs in numpy.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Point:
    """Represents an immutable 2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


PointLike = Union[Point, Tuple[float, float], Sequence[float], Dict[str, float]]


class GeometryUtils:
    """Utility class for geometric calculations on point arrays."""

    @staticmethod
    def coordinates(point: PointLike) -> Tuple[float, float]:
        """Extract (x, y) from a Point, an {'x', 'y'} dict or an (x, y) pair."""
        if isinstance(point, Point):
            return point.x, point.y
        if isinstance(point, Mapping):
            return float(point['x']), float(point['y'])
        return float(point[0]), float(point[1])

    @staticmethod
    def to_array(points: Iterable[PointLike]) -> np.ndarray:
        """Convert points to an (n, 2) float array."""
        coords = [GeometryUtils.coordinates(p) for p in points]
        if not coords:
            return np.empty((0, 2), dtype=float)
        return np.asarray(coords, dtype=float)

    @staticmethod
    def to_points(array: np.ndarray) -> Tuple[Point, ...]:
        """Convert an (n, 2) array back to a tuple of Points."""
        return tuple(Point(float(x), float(y)) for x, y in array)

    @staticmethod
    def calculate_centroid(points: np.ndarray) -> np.ndarray:
        """Calculate the centroid of a point array."""
        if len(points) == 0:
            return np.zeros(2)
        return points.mean(axis=0)

    @staticmethod
    def segment_lengths(points: np.ndarray) -> np.ndarray:
        """Lengths of the segments between consecutive points."""
        if len(points) < 2:
            return np.zeros(0)
        deltas = np.diff(points, axis=0)
        return np.hypot(deltas[:, 0], deltas[:, 1])

    @staticmethod
    def calculate_path_length(points: np.ndarray) -> float:
        """Calculate total path length."""
        return float(GeometryUtils.segment_lengths(points).sum())

    @staticmethod
    def remove_duplicates(points: np.ndarray) -> np.ndarray:
        """Remove consecutive duplicate points."""
        if len(points) < 2:
            return points
        keep = np.ones(len(points), dtype=bool)
        keep[1:] = np.any(np.diff(points, axis=0) != 0, axis=1)
        return points[keep]

    @staticmethod
    def rotate_points(points: np.ndarray, angle: float,
                      center: Optional[np.ndarray] = None) -> np.ndarray:
        """Rotate points by ``angle`` radians around a center (default: centroid)."""
        if center is None:
            center = GeometryUtils.calculate_centroid(points)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = points[:, 0] - center[0]
        dy = points[:, 1] - center[1]
        return np.column_stack((
            dx * cos_a - dy * sin_a + center[0],
            dx * sin_a + dy * cos_a + center[1],
        ))

    @staticmethod
    def get_bounds(points: np.ndarray) -> Tuple[float, float, float, float]:
        """Get bounding box of a path as (min_x, max_x, min_y, max_y)."""
        if len(points) == 0:
            return 0.0, 0.0, 0.0, 0.0
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        return float(min_x), float(max_x), float(min_y), float(max_y)
