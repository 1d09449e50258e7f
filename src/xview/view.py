"""
Public entry point: ``view(markup).data(...).render()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from xview.components.registry import ComponentRegistry, get_default_registry
from xview.container import Container, DependencyResolver
from xview.core.settings import ViewSettings
from xview.core.types import RenderContext
from xview.rendering.engine import ExpansionEngine
from xview.rendering.evaluator import ExpressionEvaluator


class ViewHandle:
    """Markup plus root data, rendered on demand.

    Inside the markup, data entries are reachable directly (``:foo="input"``)
    or as attributes of ``this`` (``:foo="this.input"``). ``this`` is a
    namespace of the data only, so an entry named ``data`` or ``render`` is
    still reachable there. On the handle itself such names resolve to the
    methods; use ``get`` for them.
    """

    def __init__(self, source: str, engine: ExpansionEngine):
        self._source = source
        self._engine = engine
        self._data: dict[str, Any] = {}

    @property
    def source(self) -> str:
        return self._source

    def data(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> ViewHandle:
        """Merge entries into the root context, overwriting existing names."""
        if values:
            self._data.update(values)
        self._data.update(kwargs)
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def render(self) -> str:
        """Expand the markup against the accumulated data."""
        return self._engine.render(self._source, self._root_context())

    def _root_context(self) -> RenderContext:
        context: RenderContext = dict(self._data)
        context["this"] = SimpleNamespace(**self._data)
        return context

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not real attributes.
        data = self.__dict__.get("_data", {})
        if name in data:
            return data[name]
        raise AttributeError(name)

    def __repr__(self) -> str:
        return f"ViewHandle({self._source[:40]!r})"


def view(
    source: str | Path,
    *,
    registry: ComponentRegistry | None = None,
    container: DependencyResolver | None = None,
    evaluator: ExpressionEvaluator | None = None,
    settings: ViewSettings | None = None,
) -> ViewHandle:
    """
    Create a view for markup or a template file.

    Params:
        source: Markup string, or a Path to a file holding the markup
        registry: Components available to the view; defaults to the built-ins
        container: Resolver for injected dependencies; defaults to a fresh Container
        evaluator: Evaluator for dynamic attributes; defaults to Jinja2 expressions
        settings: Markup syntax and recursion limits

    Returns:
        ViewHandle ready for ``data(...)`` and ``render()``
    """
    if isinstance(source, Path):
        source = source.read_text(encoding="utf-8")

    engine = ExpansionEngine(
        registry=registry if registry is not None else get_default_registry(),
        resolver=container if container is not None else Container(),
        evaluator=evaluator,
        settings=settings,
    )
    return ViewHandle(source, engine)
