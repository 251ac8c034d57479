"""
Interactive template training.

``TrainerSession`` holds the trainer logic; the pygame window lives in
``stroke_recognizer.training.app``.
"""

from .session import RecordMode, TrainerSession

__all__ = ['RecordMode', 'TrainerSession']
