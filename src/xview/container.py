"""
Dependency container used to inject component constructor parameters.

``Container`` is a thin layer over ``diwire.Container``. The expansion engine
only relies on the ``DependencyResolver`` protocol, so any object exposing
``resolve(type)`` can be passed to a view instead.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

import diwire
from diwire import Lifetime
from diwire.exceptions import DIWireDependencyNotRegisteredError, DIWireInvalidProviderSpecError

T = TypeVar("T")


class DependencyResolver(Protocol):
    """Resolves a requested type to an instance."""

    def resolve(self, requested_type: Any) -> Any: ...


class Container:
    """Type-keyed container with singletons, factories and constructor autowiring.

    Resolution order for a requested type:
      1. An instance registered with ``singleton``.
      2. A factory registered with ``register``; called on every resolution.
      3. Autowiring by diwire: a concrete class whose constructor parameters
         are annotated (or defaulted) is built with resolved arguments.

    Builtins, protocols and abstract classes are never autowired.
    """

    def __init__(self):
        self._container = diwire.Container()
        self._registered: set[Any] = set()

    def singleton(self, requested_type: type[T], instance: T) -> Container:
        self._container.add_instance(instance, provides=requested_type)
        self._registered.add(requested_type)
        return self

    def register(self, requested_type: type[T], factory: Callable[[Container], T]) -> Container:
        """Register a factory receiving the container and returning a new instance."""
        self._container.add_factory(
            lambda: factory(self),
            provides=requested_type,
            lifetime=Lifetime.TRANSIENT,
        )
        self._registered.add(requested_type)
        return self

    def has(self, requested_type: Any) -> bool:
        return requested_type in self._registered

    def resolve(self, requested_type: Any) -> Any:
        """
        Resolve an instance of the requested type.

        Raises:
            LookupError: If the type is neither registered nor autowirable
        """
        if requested_type not in self._registered and not _autowirable(requested_type):
            raise LookupError(f"No binding registered for {_type_name(requested_type)}")

        try:
            return self._container.resolve(requested_type)
        except (DIWireDependencyNotRegisteredError, DIWireInvalidProviderSpecError) as e:
            raise LookupError(f"Cannot resolve {_type_name(requested_type)}: {e}") from e


def _autowirable(requested_type: Any) -> bool:
    if not inspect.isclass(requested_type) or inspect.isabstract(requested_type):
        return False
    if requested_type.__module__ == "builtins":
        return False
    return not getattr(requested_type, "_is_protocol", False)


def _type_name(requested_type: Any) -> str:
    return getattr(requested_type, "__qualname__", repr(requested_type))
