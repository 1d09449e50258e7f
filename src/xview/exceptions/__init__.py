"""
xview exception classes.

This package provides all exception types raised while scanning markup,
registering components and rendering views.
"""

from xview.exceptions.core import (
    ComponentError,
    ComponentRegistrationError,
    CyclicExpansionError,
    DependencyResolutionError,
    ExpressionEvaluationError,
    MalformedMarkupError,
    MarkupError,
    MarkupLocation,
    TemplateRenderError,
    UnknownComponentError,
    XViewError,
)

__all__ = [
    "XViewError",
    "MarkupError",
    "MarkupLocation",
    "MalformedMarkupError",
    "ComponentError",
    "UnknownComponentError",
    "ComponentRegistrationError",
    "DependencyResolutionError",
    "CyclicExpansionError",
    "TemplateRenderError",
    "ExpressionEvaluationError",
]
