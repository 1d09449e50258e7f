"""
Form input component that restores submitted values and shows validation failures.
"""

from typing import Any

from xview.components.definition import ViewComponent
from xview.session import Session
from xview.validation import Rule


class InputComponent(ViewComponent):
    """Labelled ``<input>`` bound to the session's flashed form state.

    Usage:
        <x-input name="email" label="Email" type="email" />
    """

    inputs = {"name": "", "label": "", "type": "text"}
    template = """<div>
    <label for="{{ name }}">{{ label }}</label>
    <input type="{{ type }}" name="{{ name }}" id="{{ name }}" value="{{ this.original_value(name) }}"{{ attributes }}/>
{% for error in this.errors_for(name) %}
    <div class="error">{{ error.message() }}</div>
{% endfor %}
</div>
"""

    def __init__(self, session: Session):
        self.session = session

    def original_value(self, name: str) -> Any:
        return self.session.original_value(name)

    def errors_for(self, name: str) -> list[Rule]:
        return self.session.errors_for(name)
