"""
Components shipped with xview.
"""

from xview.components.builtin.form import FormComponent
from xview.components.builtin.input import InputComponent

BUILTIN_COMPONENTS = (InputComponent, FormComponent)


def register_builtin_components(registry) -> None:
    """Register every built-in component in the given registry."""
    for component_class in BUILTIN_COMPONENTS:
        registry.register_component(component_class)


__all__ = [
    "BUILTIN_COMPONENTS",
    "FormComponent",
    "InputComponent",
    "register_builtin_components",
]
