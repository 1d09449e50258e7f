"""
Exception classes for xview markup processing and component expansion.

This module defines specific exception types for the error conditions that
can occur while scanning markup, resolving components and rendering them.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class MarkupLocation:
    """
    Position of a construct inside a markup string.

    Params:
        line: Line number (1-based)
        column: Column number (1-based)
        position: Character offset from the start of the markup
    """

    line: int
    column: int
    position: int = 0

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class XViewError(Exception):
    """Base exception for all xview errors."""

    pass


class MarkupError(XViewError):
    """Base exception for errors in the markup itself."""

    pass


class MalformedMarkupError(MarkupError):
    """Raised when component tags are unterminated, unbalanced or unparsable."""

    def __init__(
        self,
        message: str,
        tag_name: str | None = None,
        location: MarkupLocation | None = None,
    ):
        """
        Initialize the exception.

        Params:
            message: Description of what is malformed
            tag_name: Name of the offending tag, if known
            location: Where the offending tag starts, if known
        """
        self.tag_name = tag_name
        self.location = location
        if location is not None:
            message = f"{message} at {location}"
        super().__init__(message)


class ComponentError(XViewError):
    """Base exception for component registration and expansion failures."""

    pass


class UnknownComponentError(ComponentError):
    """Raised when a tag has no registered component definition."""

    def __init__(self, tag_name: str, known: list[str] | None = None):
        self.tag_name = tag_name
        self.known = sorted(known or [])
        message = f"No component registered for tag '{tag_name}'"
        if self.known:
            message += f". Registered components: {', '.join(self.known)}"
        super().__init__(message)


class ComponentRegistrationError(ComponentError):
    """Raised when a component definition cannot be registered."""

    def __init__(self, tag_name: str, reason: str):
        self.tag_name = tag_name
        self.reason = reason
        super().__init__(f"Cannot register component '{tag_name}': {reason}")


class DependencyResolutionError(ComponentError):
    """Raised when an injected component dependency cannot be resolved."""

    def __init__(self, tag_name: str, parameter_name: str, required_type: Any):
        """
        Initialize the exception.

        Params:
            tag_name: Component whose dependency failed
            parameter_name: Constructor parameter being injected
            required_type: Type requested from the resolver
        """
        self.tag_name = tag_name
        self.parameter_name = parameter_name
        self.required_type = required_type
        type_name = getattr(required_type, "__qualname__", repr(required_type))
        super().__init__(
            f"Cannot resolve dependency '{parameter_name}: {type_name}' for component '{tag_name}'"
        )


class CyclicExpansionError(ComponentError):
    """Raised when component expansion exceeds the configured depth limit."""

    def __init__(self, chain: tuple[str, ...], max_depth: int):
        self.chain = chain
        self.max_depth = max_depth
        tail = " -> ".join(chain[-8:])
        if len(chain) > 8:
            tail = "... -> " + tail
        super().__init__(
            f"Component expansion exceeded maximum depth {max_depth}: {tail}"
        )


class TemplateRenderError(ComponentError):
    """Raised when a component's own template fails to render."""

    def __init__(self, tag_name: str, reason: str):
        self.tag_name = tag_name
        self.reason = reason
        super().__init__(f"Template of component '{tag_name}' failed to render: {reason}")


class ExpressionEvaluationError(XViewError):
    """Raised when a dynamic attribute expression cannot be evaluated."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot evaluate expression '{expression}': {reason}")
