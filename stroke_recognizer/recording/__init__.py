"""
Pointer stroke recording.
"""

from .recorder import GestureRecorder

__all__ = ['GestureRecorder']
