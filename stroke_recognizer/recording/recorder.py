"""
Stroke recording between a start and a stop signal.
"""

import logging
from typing import List, Optional, Tuple

from ..core.path import Path2D

logger = logging.getLogger(__name__)


class GestureRecorder:
    """
    Collects pointer positions into a Path2D while recording is active.

    Consecutive duplicate positions are dropped, so a pointer resting in
    place does not add points.
    """

    def __init__(self):
        self._current: Optional[Path2D] = None

    @property
    def is_recording(self) -> bool:
        return self._current is not None

    def start(self):
        """Start a new recording, discarding any unfinished one."""
        if self._current is not None:
            logger.debug(f"Discarding unfinished recording of {len(self._current)} points")
        self._current = Path2D()

    def add_point(self, x: float, y: float) -> bool:
        """Record a pointer position; returns True if it was stored."""
        if self._current is None or not self._current.is_new_point(x, y):
            return False
        self._current.push(x, y)
        return True

    def current_points(self) -> List[Tuple[float, float]]:
        """Points recorded so far, empty when idle."""
        return self._current.points() if self._current is not None else []

    def stop(self) -> Optional[Path2D]:
        """Finish recording and return the path, or None if nothing was recording."""
        path, self._current = self._current, None
        if path is not None:
            logger.debug(f"Recorded path with {len(path)} points")
        return path
