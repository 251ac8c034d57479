"""
Utilities package for stroke geometry and logging.
"""

from .geometry import Point, GeometryUtils
from .logger import MatchLogger, setup_logging

__all__ = [
    'Point',
    'GeometryUtils',
    'MatchLogger',
    'setup_logging'
]
