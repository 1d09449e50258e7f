"""
Token and attribute value types produced by the markup layer.

Tokens partition a markup string exactly: concatenating the ``source`` of
every token yields the original input.
"""

from attrs import frozen

from xview.exceptions import MarkupLocation


@frozen
class TextToken:
    """Literal markup that is not a component tag (plain HTML, text, whitespace)."""

    source: str
    position: int = 0
    line: int = 1
    column: int = 1


@frozen
class TagOpenToken:
    """
    Opening component tag.

    Params:
        name: Full tag name including the prefix (e.g. "x-input")
        raw_attributes: Unparsed attribute text between the name and the tag end
        self_closing: True for ``<x-name />`` forms
        source: Exact text of the tag as written
    """

    name: str
    raw_attributes: str
    self_closing: bool
    source: str
    position: int = 0
    line: int = 1
    column: int = 1

    @property
    def location(self) -> MarkupLocation:
        return MarkupLocation(self.line, self.column, self.position)


@frozen
class TagCloseToken:
    """Closing component tag such as ``</x-name>``."""

    name: str
    source: str
    position: int = 0
    line: int = 1
    column: int = 1

    @property
    def location(self) -> MarkupLocation:
        return MarkupLocation(self.line, self.column, self.position)


Token = TextToken | TagOpenToken | TagCloseToken


@frozen
class LiteralValue:
    """Static attribute value; ``None`` marks a bare boolean attribute."""

    text: str | None


@frozen
class ExpressionValue:
    """Dynamic attribute value holding expression source to evaluate."""

    source: str


AttributeValue = LiteralValue | ExpressionValue
