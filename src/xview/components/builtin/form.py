"""
Form wrapper component.
"""

from xview.components.definition import ViewComponent


class FormComponent(ViewComponent):
    """``<form>`` element around the caller's body; posts by default."""

    inputs = {"action": "", "method": "post"}
    template = """<form action="{{ action }}" method="{{ method }}"{{ attributes }}>
{{ slot }}
</form>
"""
