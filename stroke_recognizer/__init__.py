"""
Stroke Recognizer Package
A $1 Unistroke Recognizer for matching drawn paths against gesture templates.
"""

from .core import (
    Path2D,
    NormalizedPath,
    Template,
    TemplateSet,
    MatchResult,
    normalize,
    find_matching_template,
    find_matching_template_with_defaults,
    RecognitionError,
    DegeneratePathError,
    EmptyTemplateSetError,
)
from .gestures.dollar_recognizer import DollarRecognizer
from .recording.recorder import GestureRecorder

__version__ = "1.0.0"
__all__ = [
    "Path2D",
    "NormalizedPath",
    "Template",
    "TemplateSet",
    "MatchResult",
    "normalize",
    "find_matching_template",
    "find_matching_template_with_defaults",
    "RecognitionError",
    "DegeneratePathError",
    "EmptyTemplateSetError",
    "DollarRecognizer",
    "GestureRecorder",
]
