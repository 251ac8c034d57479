"""
Gesture recognition front end.

This module ties the normalizer, matcher and template store together into
a recognizer that works on raw recorded strokes.
"""

from .dollar_recognizer import DollarRecognizer

__all__ = [
    'DollarRecognizer'
]
