"""
Attribute bag exposed to component templates.

Attributes a component does not declare as inputs are collected here so the
component's template can echo them onto its root element, in the order the
caller wrote them.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from attrs import frozen
from markupsafe import escape


@frozen
class RenderedAttribute:
    """An attribute ready for output; ``literal`` values are emitted verbatim."""

    name: str
    value: Any
    literal: bool = False


class ComponentAttributes:
    """Ordered attributes rendering as `` name="value" ...`` (leading space included).

    Literal text written in markup is emitted as-is; evaluated values are
    HTML-escaped. ``True`` renders a bare attribute name, while ``False`` and
    ``None`` omit the attribute.
    """

    def __init__(self, attributes: list[RenderedAttribute] | None = None):
        self._attributes: dict[str, RenderedAttribute] = {}
        for attribute in attributes or []:
            self._attributes[attribute.name] = attribute

    def get(self, name: str, default: Any = None) -> Any:
        attribute = self._attributes.get(name)
        return default if attribute is None else attribute.value

    def without(self, *names: str) -> ComponentAttributes:
        """Copy of the bag with the given attributes removed."""
        return ComponentAttributes(
            [attribute for attribute in self._attributes.values() if attribute.name not in names]
        )

    def names(self) -> list[str]:
        return list(self._attributes)

    def __html__(self) -> str:
        parts = []
        for attribute in self._attributes.values():
            rendered = _render_attribute(attribute)
            if rendered:
                parts.append(rendered)
        return "".join(f" {part}" for part in parts)

    def __str__(self) -> str:
        return self.__html__()

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __bool__(self) -> bool:
        return bool(self._attributes)

    def __repr__(self) -> str:
        return f"ComponentAttributes({self.__html__().strip()!r})"


def _render_attribute(attribute: RenderedAttribute) -> str:
    value = attribute.value
    if attribute.literal:
        if value is None:
            return attribute.name
        quote = "'" if "\"" in value else "\""
        return f"{attribute.name}={quote}{value}{quote}"
    if value is True:
        return attribute.name
    if value is False or value is None:
        return ""
    return f'{attribute.name}="{escape(value)}"'
