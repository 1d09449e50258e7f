"""
Component definitions.

A component definition bundles everything the expansion engine needs to
render a tag: its Jinja2 template, the inputs it declares, and the
dependencies its constructor expects from the resolver.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar

import inflection
from attrs import field, frozen

from xview.exceptions import ComponentRegistrationError
from xview.markup import DEFAULT_TAG_PREFIX


class ViewComponent:
    """
    Base class for class-based components.

    Subclasses declare their template and inputs as class attributes. Every
    annotated ``__init__`` parameter is injected by the dependency resolver,
    and the instance is available to the template as ``this``.

    Example:
        class GreetingComponent(ViewComponent):
            template = "<p>{{ this.greeter.greet(name) }}</p>"
            inputs = {"name": "world"}

            def __init__(self, greeter: Greeter):
                self.greeter = greeter
    """

    template: ClassVar[str] = ""
    inputs: ClassVar[Mapping[str, Any]] = {}
    tag_name: ClassVar[str | None] = None


@frozen
class Dependency:
    """A constructor parameter to be supplied by the dependency resolver."""

    parameter_name: str
    required_type: Any


@frozen
class InputSpec:
    """A declared component input and the value used when the attribute is absent."""

    name: str
    default: Any = None


def _as_inputs(inputs: Mapping[str, Any] | Iterable[str | InputSpec]) -> tuple[InputSpec, ...]:
    if isinstance(inputs, Mapping):
        return tuple(InputSpec(name, default) for name, default in inputs.items())
    return tuple(item if isinstance(item, InputSpec) else InputSpec(item) for item in inputs)


@frozen
class ComponentDefinition:
    """
    Immutable description of a registered component.

    Params:
        tag_name: Unique tag name including prefix (e.g. "x-input")
        template_source: Jinja2 template rendered for every expansion
        dependencies: Ordered constructor parameters resolved per expansion
        inputs: Declared inputs bound as template variables
        factory: Callable receiving resolved dependencies as keyword arguments;
            its return value is exposed to the template as ``this``
    """

    tag_name: str
    template_source: str
    dependencies: tuple[Dependency, ...] = field(default=(), converter=tuple)
    inputs: tuple[InputSpec, ...] = field(default=(), converter=_as_inputs)
    factory: Callable[..., Any] | None = None

    @property
    def input_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.inputs)

    @classmethod
    def from_class(
        cls,
        component_class: type[ViewComponent],
        tag_name: str | None = None,
        *,
        prefix: str = DEFAULT_TAG_PREFIX,
    ) -> ComponentDefinition:
        """
        Build a definition from a ViewComponent subclass.

        Params:
            component_class: Component class to describe
            tag_name: Explicit tag name; defaults to the class attribute
                ``tag_name`` or one derived from the class name
            prefix: Tag prefix used when deriving the tag name

        Returns:
            ComponentDefinition whose factory is the class itself

        Raises:
            ComponentRegistrationError: If a constructor parameter has no type
                annotation or is variadic
        """
        tag = tag_name or component_class.tag_name or tag_name_for(component_class.__name__, prefix)
        return cls(
            tag_name=tag,
            template_source=component_class.template,
            dependencies=constructor_dependencies(component_class, tag),
            inputs=component_class.inputs,
            factory=component_class,
        )


def tag_name_for(class_name: str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """
    Derive a component tag name from a class name.

    Examples:
        "InputComponent" -> "x-input"
        "WithInjectionComponent" -> "x-with-injection"
        "HTTPStatus" -> "x-http-status"
    """
    if class_name.endswith("Component") and class_name != "Component":
        class_name = class_name[: -len("Component")]
    return prefix + inflection.dasherize(inflection.underscore(class_name))


def constructor_dependencies(component_class: type, tag_name: str) -> tuple[Dependency, ...]:
    """Collect the annotated constructor parameters of a component class."""
    init = component_class.__init__
    if init is object.__init__:
        return ()

    try:
        hints = typing.get_type_hints(init)
    except NameError as e:
        raise ComponentRegistrationError(tag_name, f"unresolvable constructor annotation: {e}") from e

    dependencies = []
    for parameter in list(inspect.signature(init).parameters.values())[1:]:
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            raise ComponentRegistrationError(
                tag_name, f"variadic constructor parameter '{parameter.name}' cannot be injected"
            )
        if parameter.name not in hints:
            raise ComponentRegistrationError(
                tag_name, f"constructor parameter '{parameter.name}' has no type annotation"
            )
        dependencies.append(Dependency(parameter.name, hints[parameter.name]))

    return tuple(dependencies)
