"""
Body slots passed from a component tag into the component's template.

While the child template renders, the slot stands in as an opaque marker.
Once the child output is fully expanded, markers are swapped for the body
markup, which is expanded at most once and only when referenced.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable


class Slot:
    """Caller-supplied body content of a component tag.

    Params:
        body: Unexpanded markup captured between the open and close tags
        expand: Callable expanding the body in the caller's context
    """

    def __init__(self, body: str, expand: Callable[[str], str]):
        self.body = body
        self.marker = f"<!--xview-slot:{uuid.uuid4().hex}-->"
        self._expand = expand
        self._expanded: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.body.strip()

    def expanded(self) -> str:
        """Body markup with its components expanded; computed on first use."""
        if self._expanded is None:
            self._expanded = self._expand(self.body) if self.body else ""
        return self._expanded

    def splice(self, output: str) -> str:
        """Replace every marker occurrence in ``output`` with the expanded body."""
        if self.marker not in output:
            return output
        return output.replace(self.marker, self.expanded())

    def __html__(self) -> str:
        return self.marker

    def __str__(self) -> str:
        return self.marker

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self) -> str:
        return f"Slot({self.body!r})"
