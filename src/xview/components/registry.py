"""
Component registry.

Maps tag names to component definitions. Registries are populated at
startup and treated as read-only while views render; ``freeze()`` enforces
that for registries shared between concurrent renders.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from attrs import evolve

from xview.components.definition import (
    ComponentDefinition,
    InputSpec,
    ViewComponent,
)
from xview.exceptions import ComponentRegistrationError, UnknownComponentError
from xview.markup import DEFAULT_TAG_PREFIX

ComponentClass = TypeVar("ComponentClass", bound=type[ViewComponent])


class ComponentRegistry:
    """Registry of component definitions keyed by exact, case-sensitive tag name.

    Params:
        prefix: Tag prefix every registered tag name must start with
    """

    def __init__(self, prefix: str = DEFAULT_TAG_PREFIX):
        self.prefix = prefix
        self._definitions: dict[str, ComponentDefinition] = {}
        self._frozen = False

    def register(
        self, tag_name: str, definition: ComponentDefinition, *, replace: bool = False
    ) -> ComponentDefinition:
        """
        Register a component definition under a tag name.

        Params:
            tag_name: Tag name including prefix
            definition: Definition to store
            replace: Allow overwriting an existing registration

        Returns:
            The stored definition

        Raises:
            ComponentRegistrationError: If the registry is frozen, the tag name
                lacks the prefix, or the name is taken and replace is False
        """
        if self._frozen:
            raise ComponentRegistrationError(tag_name, "registry is frozen")
        if not tag_name.startswith(self.prefix) or len(tag_name) == len(self.prefix):
            raise ComponentRegistrationError(
                tag_name, f"tag names must start with '{self.prefix}'"
            )
        if tag_name in self._definitions and not replace:
            raise ComponentRegistrationError(tag_name, "tag name is already registered")
        if definition.tag_name != tag_name:
            definition = evolve(definition, tag_name=tag_name)

        self._definitions[tag_name] = definition
        return definition

    def register_template(
        self,
        tag_name: str,
        template_source: str,
        inputs: Mapping[str, Any] | Iterable[str | InputSpec] = (),
        *,
        replace: bool = False,
    ) -> ComponentDefinition:
        """Register a template-only component that needs no dependencies."""
        return self.register(
            tag_name,
            ComponentDefinition(tag_name=tag_name, template_source=template_source, inputs=inputs),
            replace=replace,
        )

    def register_component(
        self,
        component_class: type[ViewComponent],
        tag_name: str | None = None,
        *,
        replace: bool = False,
    ) -> ComponentDefinition:
        """Register a ViewComponent subclass, deriving its tag name when not given."""
        definition = ComponentDefinition.from_class(component_class, tag_name, prefix=self.prefix)
        return self.register(definition.tag_name, definition, replace=replace)

    def component(self, component_class: ComponentClass) -> ComponentClass:
        """Class decorator form of ``register_component``."""
        self.register_component(component_class)
        return component_class

    def lookup(self, tag_name: str) -> ComponentDefinition:
        """
        Get the definition registered for a tag name.

        Raises:
            UnknownComponentError: If nothing is registered under the exact name
        """
        try:
            return self._definitions[tag_name]
        except KeyError:
            raise UnknownComponentError(tag_name, list(self._definitions)) from None

    def tags(self) -> list[str]:
        return list(self._definitions)

    def copy(self) -> ComponentRegistry:
        """Return an unfrozen registry holding the same definitions."""
        clone = ComponentRegistry(self.prefix)
        clone._definitions = dict(self._definitions)
        return clone

    def freeze(self) -> ComponentRegistry:
        """Make the registry read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


_default_registry: ComponentRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ComponentRegistry:
    """Return the process-wide registry holding the built-in components."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            from xview.components.builtin import register_builtin_components

            registry = ComponentRegistry()
            register_builtin_components(registry)
            _default_registry = registry.freeze()
    return _default_registry
