"""
$1 Unistroke Recognizer

Front end that owns a template set and the matching settings, and takes
raw recorded paths all the way to a match.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import logging
from typing import Iterable, Optional, Tuple, Union

from ..config.settings import RecognizerConfig, SearchSettings
from ..core.exceptions import DegeneratePathError, PathTooShortError
from ..core.matcher import MatchResult, find_matching_template
from ..core.normalizer import normalize
from ..core.path import NormalizedPath, Path2D
from ..core.templates import Template, TemplateSet
from ..storage import template_store
from ..utils.geometry import PointLike

logger = logging.getLogger(__name__)

RawPath = Union[Path2D, Iterable[PointLike]]


class DollarRecognizer:
    """$1 Unistroke Recognizer for gesture classification."""

    def __init__(self, templates: Optional[Iterable[Template]] = None,
                 settings: Optional[SearchSettings] = None,
                 threshold: float = RecognizerConfig.MATCH_THRESHOLD,
                 min_path_length: float = RecognizerConfig.MIN_PATH_LENGTH,
                 num_points: int = RecognizerConfig.NUM_POINTS):
        """
        Initialize the recognizer.

        Args:
            templates: Initial templates, matched in the given order
            settings: Angle search settings (defaults if None)
            threshold: Minimum score for ``recognize`` to report a match
            min_path_length: Shorter raw paths are rejected as too short
            num_points: Resampling size for new templates and candidates
        """
        self.templates = TemplateSet(templates)
        self.settings = settings or SearchSettings.defaults()
        self.threshold = 0.0
        self.set_threshold(threshold)
        self.min_path_length = min_path_length
        self.num_points = num_points

    def add_template(self, name: str, points: RawPath) -> int:
        """Add a new gesture template, returns count of templates with this name."""
        template = Template.from_path(name, points, self.num_points, self.settings.square_size)
        count = self.templates.add(template)
        logger.info(f"Added template '{name}' ({count} with this name)")
        return count

    def add_templates_from(self, templates: Iterable[Template]) -> int:
        """Append already normalized templates, returns how many were added."""
        added = 0
        for template in templates:
            self.templates.add(template)
            added += 1
        return added

    def delete_templates(self, name: Optional[str] = None) -> int:
        """Delete templates called ``name`` (all templates if None), returns count removed."""
        if name is None:
            removed = len(self.templates)
            self.templates.clear()
            return removed
        return self.templates.remove(name)

    def normalize(self, path: RawPath) -> NormalizedPath:
        return normalize(path, self.num_points, self.settings.square_size)

    def match(self, path: RawPath) -> MatchResult:
        """
        Find the best matching template for a raw path.

        Raises:
            DegeneratePathError: If the path has fewer than 2 points
            PathTooShortError: If the path is shorter than ``min_path_length``
            EmptyTemplateSetError: If there are no templates
        """
        if not isinstance(path, Path2D):
            path = Path2D(path)
        if len(path) < 2:
            raise DegeneratePathError(f"Need at least 2 points, got {len(path)}")
        length = path.length()
        if length < self.min_path_length:
            raise PathTooShortError(length, self.min_path_length)

        candidate = self.normalize(path)
        settings = self.settings
        return find_matching_template(
            candidate,
            self.templates,
            settings.square_size,
            settings.angle_range,
            settings.angle_precision,
            settings.max_iterations,
            settings.n_jobs,
        )

    def recognize(self, path: RawPath) -> Optional[MatchResult]:
        """Match a raw path; returns None when the best score is below the threshold."""
        result = self.match(path)
        if result.score < self.threshold:
            logger.debug(f"Best match {result.name} scored {result.score:.3f}, "
                         f"below threshold {self.threshold:.2f}")
            return None
        return result

    def classify_with_score(self, path: RawPath) -> Tuple[Optional[str], float]:
        """
        Classify a path and return both classification and similarity score.

        Returns:
            (template name, score), with None as the name when the score is
            below the threshold
        """
        result = self.match(path)
        name = result.name if result.score >= self.threshold else None
        return name, result.score

    def set_threshold(self, threshold: float):
        """Set the similarity threshold (0.0-1.0)."""
        self.threshold = max(0.0, min(1.0, threshold))

    def get_threshold(self) -> float:
        """Get the current similarity threshold."""
        return self.threshold

    def save_templates(self, filename: str) -> int:
        """Save templates to file."""
        return template_store.save_templates(self.templates, filename)

    def load_templates(self, filename: str, normalized: bool = True) -> int:
        """Load templates from file and append them, returns how many were added."""
        loaded = template_store.load_templates(
            filename, normalized, self.num_points, self.settings.square_size
        )
        return self.add_templates_from(loaded)
