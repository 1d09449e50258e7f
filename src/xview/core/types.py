"""
Core type definitions for xview.

This module contains type aliases shared by the scanner, the expansion
engine and the view facade.
"""

from typing import Any

RenderContext = dict[str, Any]
