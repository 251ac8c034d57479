"""
JSON persistence for gesture templates.

Templates are stored in their normalized form so loading them does not
normalize again:

    {"templates": [{"name": "circle", "path": [[x, y], ...]}, ...]}

A bare list of template entries is accepted as well, and points may be
written either as [x, y] pairs or as {"x": .., "y": ..} mappings.
"""

import json
import logging
import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from ..config.settings import RecognizerConfig
from ..core.exceptions import DegeneratePathError, TemplateFormatError
from ..core.templates import Template, TemplateSet

logger = logging.getLogger(__name__)


def serialize_templates(templates: Iterable[Template]) -> str:
    """Serialize templates as a JSON document."""
    data = {
        'templates': [
            {'name': template.name, 'path': template.path.to_list()}
            for template in templates
        ]
    }
    return json.dumps(data, indent=2)


def save_templates(templates: Iterable[Template], filename: str) -> int:
    """Save templates to a file, returns the number of templates written."""
    templates = list(templates)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(serialize_templates(templates))
    logger.info(f"Saved {len(templates)} templates to '{filename}'")
    return len(templates)


def _parse_point(point_data: Any) -> Tuple[float, float]:
    if isinstance(point_data, Mapping):
        x, y = point_data['x'], point_data['y']
    elif isinstance(point_data, (list, tuple)) and len(point_data) == 2:
        x, y = point_data
    else:
        raise ValueError("expected [x, y] or {'x': .., 'y': ..}")
    if isinstance(x, bool) or isinstance(y, bool):
        raise ValueError("coordinates must be numbers")
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError("coordinates must be finite")
    return x, y


def _parse_template(index: int, item: Any, normalized: bool, num_points: int,
                    square_size: float) -> Optional[Template]:
    """Validate one template entry; returns None (with a warning) if it is unusable."""
    if not isinstance(item, Mapping):
        logger.warning(f"Skipping template {index}: not a dictionary")
        return None

    if 'name' not in item:
        logger.warning(f"Skipping template {index}: missing 'name' field")
        return None
    name = str(item['name']).strip()
    if not name:
        logger.warning(f"Skipping template {index}: empty name")
        return None

    points_data = item.get('path', item.get('points'))
    if not isinstance(points_data, list):
        logger.warning(f"Skipping template '{name}': 'path' must be a list")
        return None
    if len(points_data) < 2:
        logger.warning(f"Skipping template '{name}': need at least 2 points")
        return None

    points: List[Tuple[float, float]] = []
    for j, point_data in enumerate(points_data):
        try:
            points.append(_parse_point(point_data))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping template '{name}': invalid point {j} ({e})")
            return None

    try:
        if normalized:
            template = Template.from_normalized(name, points)
        else:
            template = Template.from_path(name, points, num_points, square_size)
    except DegeneratePathError as e:
        logger.warning(f"Skipping template '{name}': {e}")
        return None

    if normalized and len(template.path) != num_points:
        logger.warning(f"Template '{name}' has {len(template.path)} points, expected {num_points}; "
                       f"it will not match candidates of a different length")
    return template


def deserialize_templates(text: str, normalized: bool = True,
                          num_points: int = RecognizerConfig.NUM_POINTS,
                          square_size: float = RecognizerConfig.SQUARE_SIZE) -> TemplateSet:
    """
    Parse a JSON template document.

    Args:
        text: The JSON document
        normalized: True if the stored paths are already normalized,
            False to normalize raw paths once while loading
        num_points: Resampling size used for raw paths
        square_size: Reference square used for raw paths

    Returns:
        TemplateSet with every valid entry, in document order

    Raises:
        TemplateFormatError: If the document is not JSON or has no template list
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TemplateFormatError(f"Invalid template JSON: {e}") from e

    templates_data = data.get('templates', data) if isinstance(data, dict) else data
    if not isinstance(templates_data, list):
        raise TemplateFormatError("Invalid template format. Expected list of templates.")

    templates = TemplateSet()
    for i, item in enumerate(templates_data):
        template = _parse_template(i, item, normalized, num_points, square_size)
        if template is not None:
            templates.add(template)

    if len(templates) < len(templates_data):
        logger.warning(f"Loaded {len(templates)} of {len(templates_data)} templates")
    return templates


def load_templates(filename: str, normalized: bool = True,
                   num_points: int = RecognizerConfig.NUM_POINTS,
                   square_size: float = RecognizerConfig.SQUARE_SIZE) -> TemplateSet:
    """Load templates from a file. See ``deserialize_templates``."""
    with open(filename, 'r', encoding='utf-8') as f:
        text = f.read()
    templates = deserialize_templates(text, normalized, num_points, square_size)
    logger.info(f"Successfully loaded {len(templates)} templates from '{filename}'")
    return templates
