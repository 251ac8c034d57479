"""
Template matching for the $1 Unistroke Recognizer.

A normalized candidate is compared against each template by the mean
distance between index-aligned points. The residual rotation left over by
normalization is removed by a Golden Section Search over the angle.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np
from joblib import Parallel, delayed

from ..config.settings import RecognizerConfig
from ..utils.geometry import GeometryUtils
from .exceptions import EmptyTemplateSetError, NoMatchError
from .path import NormalizedPath
from .templates import Template

logger = logging.getLogger(__name__)

# Golden ratio conjugate (~0.618)
PHI = 0.5 * (-1.0 + math.sqrt(5.0))

ORIGIN = np.zeros(2)

PathLike = Union[NormalizedPath, np.ndarray]


@dataclass(frozen=True)
class MatchResult:
    """Best matching template with its similarity score and raw distance."""
    template: Template
    score: float
    distance: float

    @property
    def name(self) -> str:
        return self.template.name


def _as_array(path: PathLike) -> np.ndarray:
    return path.as_array() if isinstance(path, NormalizedPath) else path


def path_distance(a: PathLike, b: PathLike) -> float:
    """Mean Euclidean distance between index-aligned points of two paths."""
    a = _as_array(a)
    b = _as_array(b)
    if len(a) != len(b) or len(a) == 0:
        return math.inf
    deltas = a - b
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).mean())


def distance_at_angle(candidate: PathLike, template: PathLike, angle: float) -> float:
    """Rotate the candidate by ``angle`` radians about the origin and measure it."""
    rotated = GeometryUtils.rotate_points(_as_array(candidate), angle, center=ORIGIN)
    return path_distance(rotated, template)


def optimal_distance(candidate: PathLike, template: PathLike,
                     angle_range: float = math.radians(RecognizerConfig.ANGLE_RANGE),
                     angle_precision: float = math.radians(RecognizerConfig.ANGLE_PRECISION),
                     max_iterations: int = RecognizerConfig.MAX_SEARCH_ITERATIONS) -> float:
    """
    Find the smallest distance over rotations in [-angle_range, angle_range].

    Golden Section Search: two probes sit at the golden-ratio positions of
    the bracket; each step drops the part beyond the worse probe, shrinking
    the bracket by PHI.

    Args:
        candidate: Normalized candidate path
        template: Normalized template path
        angle_range: Half-width of the search window (radians)
        angle_precision: Stop once the bracket is this narrow (radians)
        max_iterations: Stop after this many steps regardless

    Returns:
        The minimum distance found
    """
    if max_iterations < 0:
        raise ValueError(f"max_iterations must not be negative, got {max_iterations}")

    candidate = _as_array(candidate)
    template = _as_array(template)

    theta_a = -abs(angle_range)
    theta_b = abs(angle_range)

    x1 = PHI * theta_a + (1.0 - PHI) * theta_b
    f1 = distance_at_angle(candidate, template, x1)
    x2 = (1.0 - PHI) * theta_a + PHI * theta_b
    f2 = distance_at_angle(candidate, template, x2)

    iterations = 0
    while abs(theta_b - theta_a) > angle_precision:
        if iterations >= max_iterations:
            logger.debug(f"Angle search stopped after {iterations} iterations, "
                         f"bracket {math.degrees(theta_b - theta_a):.3f} deg")
            break
        if f1 < f2:
            theta_b = x2
            x2 = x1
            f2 = f1
            x1 = PHI * theta_a + (1.0 - PHI) * theta_b
            f1 = distance_at_angle(candidate, template, x1)
        else:
            theta_a = x1
            x1 = x2
            f1 = f2
            x2 = (1.0 - PHI) * theta_a + PHI * theta_b
            f2 = distance_at_angle(candidate, template, x2)
        iterations += 1

    return min(f1, f2)


def distance_to_score(distance: float, square_size: float = RecognizerConfig.SQUARE_SIZE) -> float:
    """Convert distance to a similarity score; 1.0 is a perfect match."""
    half_diagonal = 0.5 * math.sqrt(square_size ** 2 + square_size ** 2)
    return 1.0 - distance / half_diagonal


def find_matching_template(candidate: NormalizedPath,
                           templates: Iterable[Template],
                           square_size: float = RecognizerConfig.SQUARE_SIZE,
                           angle_range: float = RecognizerConfig.ANGLE_RANGE,
                           angle_precision: float = RecognizerConfig.ANGLE_PRECISION,
                           max_iterations: int = RecognizerConfig.MAX_SEARCH_ITERATIONS,
                           n_jobs: int = 1) -> MatchResult:
    """
    Find the template closest to a normalized candidate path.

    ``angle_range`` and ``angle_precision`` are in degrees. When several
    templates share the smallest distance the first one wins.

    Raises:
        EmptyTemplateSetError: If there are no templates
        NoMatchError: If no template could be compared to the candidate
    """
    templates = list(templates)
    if not templates:
        raise EmptyTemplateSetError("No templates to match against")

    range_rad = math.radians(angle_range)
    precision_rad = math.radians(angle_precision)

    if n_jobs == 1:
        distances = [
            optimal_distance(candidate, template.path, range_rad, precision_rad, max_iterations)
            for template in templates
        ]
    else:
        distances = Parallel(n_jobs=n_jobs, prefer='threads')(
            delayed(optimal_distance)(candidate, template.path, range_rad, precision_rad, max_iterations)
            for template in templates
        )

    best_template = None
    best_distance = math.inf
    for template, distance in zip(templates, distances):
        logger.debug(f"Template {template.name}: distance {distance:.4f}")
        if distance < best_distance:
            best_distance = distance
            best_template = template

    if best_template is None:
        raise NoMatchError(f"None of {len(templates)} templates could be compared")

    score = distance_to_score(best_distance, square_size)
    logger.debug(f"Best template: {best_template.name} with distance {best_distance:.4f} (score {score:.3f})")
    return MatchResult(best_template, score, best_distance)


def find_matching_template_with_defaults(candidate: NormalizedPath,
                                         templates: Iterable[Template]) -> MatchResult:
    """
    Find the closest template using the default search settings.

    Matches within a 90 degree range (-45 to 45) with 2 degree precision.
    """
    return find_matching_template(
        candidate,
        templates,
        RecognizerConfig.SQUARE_SIZE,
        RecognizerConfig.ANGLE_RANGE,
        RecognizerConfig.ANGLE_PRECISION,
    )
