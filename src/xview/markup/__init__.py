"""
Markup layer: tag scanning and attribute parsing.
"""

from xview.markup.attributes import DEFAULT_BINDING_SIGIL, parse_attributes
from xview.markup.scanner import DEFAULT_TAG_PREFIX, markup_source, scan
from xview.markup.tokens import (
    AttributeValue,
    ExpressionValue,
    LiteralValue,
    TagCloseToken,
    TagOpenToken,
    TextToken,
    Token,
)

__all__ = [
    "scan",
    "markup_source",
    "parse_attributes",
    "DEFAULT_TAG_PREFIX",
    "DEFAULT_BINDING_SIGIL",
    "Token",
    "TextToken",
    "TagOpenToken",
    "TagCloseToken",
    "AttributeValue",
    "LiteralValue",
    "ExpressionValue",
]
