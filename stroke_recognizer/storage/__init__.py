"""
Template persistence.
"""

from .template_store import (
    serialize_templates,
    deserialize_templates,
    save_templates,
    load_templates,
)

__all__ = [
    'serialize_templates',
    'deserialize_templates',
    'save_templates',
    'load_templates',
]
