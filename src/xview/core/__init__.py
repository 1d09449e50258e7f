"""
Core xview building blocks.

This package provides the shared type aliases and engine settings.
"""

from xview.core.settings import ViewSettings
from xview.core.types import RenderContext

__all__ = [
    "ViewSettings",
    "RenderContext",
]
