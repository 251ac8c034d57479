"""
Errors raised by the stroke recognizer.
"""


class RecognitionError(Exception):
    """Base class for all recognizer errors."""


class DegeneratePathError(RecognitionError):
    """The path has fewer than 2 distinct points or no arc length."""


class PathTooShortError(DegeneratePathError):
    """The path is too short to be treated as a gesture."""

    def __init__(self, length: float, min_length: float):
        super().__init__(f"Path length {length:.1f} is below the minimum of {min_length:.1f}")
        self.length = length
        self.min_length = min_length


class EmptyTemplateSetError(RecognitionError):
    """Matching was attempted without any templates."""


class NoMatchError(RecognitionError):
    """No template could be compared against the candidate."""


class TemplateFormatError(RecognitionError):
    """A template document could not be read."""
