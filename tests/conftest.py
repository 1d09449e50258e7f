"""
Shared test fixtures for the xview test suite.
"""

import pytest

from xview import Container, Session, ViewComponent, get_default_registry


class Greeter:
    """Service injected into the with-injection component."""

    def greet(self) -> str:
        return "hi"


class WithInjectionComponent(ViewComponent):
    template = "{{ this.greeter.greet() }}"

    def __init__(self, greeter: Greeter):
        self.greeter = greeter


@pytest.fixture
def registry():
    """Built-in components plus the ``x-my`` and ``x-with-injection`` test components.

    ``x-my`` echoes every attribute onto a ``<div>`` around its body.
    """
    registry = get_default_registry().copy()
    registry.register_template("x-my", "<div{{ attributes }}>{{ slot }}</div>")
    registry.register_component(WithInjectionComponent)
    return registry


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def container(session):
    """Container serving the ``session`` fixture for every Session request."""
    return Container().singleton(Session, session)
