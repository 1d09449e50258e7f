"""
xview - server-side HTML view components

xview expands custom ``<x-...>`` tags in markup into the rendered templates of
registered components, with attribute binding, body slots and dependency
injection.
"""

from importlib.metadata import version

from xview.components import ComponentRegistry, ViewComponent, get_default_registry
from xview.container import Container
from xview.core import ViewSettings
from xview.session import Session
from xview.view import ViewHandle, view

__version__ = version("xview")

__all__ = [
    "__version__",
    "view",
    "ViewHandle",
    "ViewComponent",
    "ComponentRegistry",
    "get_default_registry",
    "Container",
    "Session",
    "ViewSettings",
]
