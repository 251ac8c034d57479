"""
Core matching engine: normalization, distance, angle search and template selection.
"""

from .exceptions import (
    RecognitionError,
    DegeneratePathError,
    PathTooShortError,
    EmptyTemplateSetError,
    NoMatchError,
    TemplateFormatError,
)
from .path import Path2D, NormalizedPath
from .normalizer import normalize
from .templates import Template, TemplateSet
from .matcher import (
    MatchResult,
    path_distance,
    distance_at_angle,
    optimal_distance,
    distance_to_score,
    find_matching_template,
    find_matching_template_with_defaults,
)

__all__ = [
    'RecognitionError',
    'DegeneratePathError',
    'PathTooShortError',
    'EmptyTemplateSetError',
    'NoMatchError',
    'TemplateFormatError',
    'Path2D',
    'NormalizedPath',
    'normalize',
    'Template',
    'TemplateSet',
    'MatchResult',
    'path_distance',
    'distance_at_angle',
    'optimal_distance',
    'distance_to_score',
    'find_matching_template',
    'find_matching_template_with_defaults',
]
