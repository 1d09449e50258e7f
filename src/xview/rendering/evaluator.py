"""
Expression evaluation for dynamic attributes.

A dynamic attribute such as ``:value="user.name"`` carries expression source
that is evaluated against the render context of the markup it was written in.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

from jinja2 import StrictUndefined, TemplateError, Undefined
from jinja2.sandbox import SandboxedEnvironment

from xview.core.types import RenderContext
from xview.exceptions import ExpressionEvaluationError


class ExpressionEvaluator(Protocol):
    """Evaluates expression source against a render context."""

    def evaluate(self, source: str, context: RenderContext) -> Any: ...


class JinjaExpressionEvaluator:
    """Evaluates Jinja2 expressions in a sandboxed environment.

    Expressions use Jinja2 syntax: attribute access (``this.input``),
    subscripts, filters (``name | upper``), calls and literals.
    """

    def __init__(self):
        self.environment = SandboxedEnvironment(undefined=StrictUndefined)
        self._compile = lru_cache(maxsize=512)(self._compile_uncached)

    def _compile_uncached(self, source: str):
        return self.environment.compile_expression(source, undefined_to_none=False)

    def evaluate(self, source: str, context: RenderContext) -> Any:
        """
        Evaluate an expression.

        Params:
            source: Jinja2 expression source
            context: Variables visible to the expression

        Returns:
            The expression's value

        Raises:
            ExpressionEvaluationError: On syntax errors, undefined names or
                exceptions raised while evaluating
        """
        try:
            expression = self._compile(source.strip())
        except TemplateError as e:
            raise ExpressionEvaluationError(source, str(e)) from e

        try:
            value = expression(**context)
        except TemplateError as e:
            raise ExpressionEvaluationError(source, str(e)) from e
        except Exception as e:
            raise ExpressionEvaluationError(source, f"{type(e).__name__}: {e}") from e

        if isinstance(value, Undefined):
            raise ExpressionEvaluationError(source, "expression refers to an undefined value")
        return value
