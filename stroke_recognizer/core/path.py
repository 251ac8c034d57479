"""
Path value types: raw recorded paths and normalized paths.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..utils.geometry import GeometryUtils, Point, PointLike


class Path2D:
    """A 2D path made up of (x, y) points, in the order they were captured."""

    def __init__(self, points: Optional[Iterable[PointLike]] = None):
        self._points: List[Point] = []
        for point in points or ():
            x, y = GeometryUtils.coordinates(point)
            self.push(x, y)

    def push(self, x: float, y: float):
        """Add a new point to this path."""
        self._points.append(Point(float(x), float(y)))

    def is_new_point(self, x: float, y: float) -> bool:
        """Return True if (x, y) differs from the last point in this path."""
        if not self._points:
            return True
        last = self._points[-1]
        return last.x != x or last.y != y

    def points(self) -> List[Tuple[float, float]]:
        """Return the points that make up this path as (x, y) tuples."""
        return [(p.x, p.y) for p in self._points]

    def length(self) -> float:
        """Total arc length of the path."""
        return GeometryUtils.calculate_path_length(self.to_array())

    def to_array(self) -> np.ndarray:
        return GeometryUtils.to_array(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self):
        return f"Path2D({len(self._points)} points)"


class NormalizedPath:
    """
    Immutable, fixed-length path produced by the normalizer.

    The points are stored as a read-only ``(n, 2)`` array; ``points`` gives
    them back as Point values.
    """

    __slots__ = ('_array',)

    def __init__(self, points):
        if isinstance(points, np.ndarray):
            array = np.array(points, dtype=float)
        else:
            array = GeometryUtils.to_array(points)
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) array of points, got shape {array.shape}")
        array.setflags(write=False)
        self._array = array

    @property
    def points(self) -> Tuple[Point, ...]:
        return GeometryUtils.to_points(self._array)

    def as_array(self) -> np.ndarray:
        return self._array

    def to_list(self) -> List[List[float]]:
        """Points as plain [x, y] lists, for serialization."""
        return self._array.tolist()

    def __len__(self) -> int:
        return len(self._array)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __eq__(self, other):
        if not isinstance(other, NormalizedPath):
            return NotImplemented
        return np.array_equal(self._array, other._array)

    __hash__ = None

    def __repr__(self):
        return f"NormalizedPath({len(self._array)} points)"
