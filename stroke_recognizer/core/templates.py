"""
Gesture templates and the ordered template set they are matched from.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from ..config.settings import RecognizerConfig
from ..utils.geometry import PointLike
from .exceptions import DegeneratePathError
from .normalizer import normalize
from .path import NormalizedPath, Path2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """A named, normalized reference gesture."""
    name: str
    path: NormalizedPath

    @classmethod
    def from_path(cls, name: str, path: Union[Path2D, Iterable[PointLike]],
                  num_points: int = RecognizerConfig.NUM_POINTS,
                  square_size: float = RecognizerConfig.SQUARE_SIZE) -> 'Template':
        """Create a template by normalizing a raw path."""
        return cls(name, normalize(path, num_points, square_size))

    @classmethod
    def from_normalized(cls, name: str, points) -> 'Template':
        """
        Create a template from previously normalized points.

        Only meant for rebuilding stored templates; the points are used as-is.
        """
        path = points if isinstance(points, NormalizedPath) else NormalizedPath(points)
        if len(path) < 2:
            raise DegeneratePathError(f"Template '{name}' needs at least 2 points, got {len(path)}")
        return cls(name, path)


class TemplateSet:
    """
    Insertion-ordered collection of templates.

    Several templates may share a name to represent variants of one gesture.
    Iteration order is insertion order, which makes tie-breaking during
    matching reproducible.
    """

    def __init__(self, templates: Optional[Iterable[Template]] = None):
        self._templates: List[Template] = list(templates or ())

    def add(self, template: Template) -> int:
        """Append a template, returns count of templates with this name."""
        self._templates.append(template)
        return self.count(template.name)

    def replace(self, name: str, template: Template):
        """Replace the first template called ``name``, or append if there is none."""
        for idx, existing in enumerate(self._templates):
            if existing.name == name:
                self._templates[idx] = template
                return
        self._templates.append(template)

    def remove(self, name: str) -> int:
        """Remove every template called ``name``, returns how many were removed."""
        kept = [t for t in self._templates if t.name != name]
        removed = len(self._templates) - len(kept)
        self._templates = kept
        if removed:
            logger.debug(f"Removed {removed} template(s) named '{name}'")
        return removed

    def clear(self):
        self._templates = []

    def count(self, name: str) -> int:
        return sum(1 for t in self._templates if t.name == name)

    def names(self) -> List[str]:
        """Distinct template names in insertion order."""
        return list(dict.fromkeys(t.name for t in self._templates))

    def __iter__(self) -> Iterator[Template]:
        return iter(list(self._templates))

    def __len__(self) -> int:
        return len(self._templates)

    def __getitem__(self, index: int) -> Template:
        return self._templates[index]

    def __repr__(self):
        return f"TemplateSet({len(self._templates)} templates)"
