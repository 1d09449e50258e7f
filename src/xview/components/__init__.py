"""
Component definitions, the component registry and built-in components.
"""

from xview.components.definition import (
    ComponentDefinition,
    Dependency,
    InputSpec,
    ViewComponent,
    tag_name_for,
)
from xview.components.registry import ComponentRegistry, get_default_registry

__all__ = [
    "ComponentDefinition",
    "ComponentRegistry",
    "Dependency",
    "InputSpec",
    "ViewComponent",
    "get_default_registry",
    "tag_name_for",
]
