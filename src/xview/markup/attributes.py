"""
Attribute parsing for component tags.

Turns the raw attribute text of an opening tag into an ordered mapping of
attribute name to value descriptor. Names carrying the binding sigil become
dynamic expressions; everything else is kept as a literal string.
"""

import re

from xview.exceptions import MalformedMarkupError
from xview.markup.tokens import AttributeValue, ExpressionValue, LiteralValue

DEFAULT_BINDING_SIGIL = ":"

ATTRIBUTE_PATTERN = re.compile(
    r"""
    \s*
    (?P<name>[^\s"'=<>/`]+)
    (?:
        \s*=\s*
        (?:
            "(?P<double>[^"]*)"
          | '(?P<single>[^']*)'
          | (?P<bare>[^\s"'=<>`]+)
        )
    )?
    """,
    re.VERBOSE,
)


def parse_attributes(
    raw: str, *, sigil: str = DEFAULT_BINDING_SIGIL
) -> dict[str, AttributeValue]:
    """
    Parse raw tag attribute text into ordered attribute descriptors.

    Quoted text is kept verbatim: entities are not decoded and nothing is
    escaped. A later duplicate of the same name overwrites the earlier value
    but keeps its original position.

    Params:
        raw: Attribute text as it appears inside the opening tag
        sigil: Name prefix marking a dynamic expression

    Returns:
        Mapping of attribute name (sigil stripped) to LiteralValue or ExpressionValue

    Raises:
        MalformedMarkupError: If the text contains something that is not an attribute,
            or a dynamic attribute has no expression

    Examples:
        'foo="1" :bar="user.name"' -> {"foo": LiteralValue("1"), "bar": ExpressionValue("user.name")}
        'disabled' -> {"disabled": LiteralValue(None)}
    """
    attributes: dict[str, AttributeValue] = {}
    position = 0
    end = len(raw.rstrip())

    while position < end:
        match = ATTRIBUTE_PATTERN.match(raw, position)
        if match is None or match.end() == position:
            raise MalformedMarkupError(f"Invalid attribute syntax: {raw[position:].strip()!r}")
        position = match.end()

        name = match.group("name")
        value = _matched_value(match)

        if sigil and name.startswith(sigil):
            name = name[len(sigil) :]
            if not name:
                raise MalformedMarkupError(f"Dynamic attribute without a name: {match.group(0).strip()!r}")
            if value is None or not value.strip():
                raise MalformedMarkupError(f"Dynamic attribute '{name}' has no expression")
            attributes[name] = ExpressionValue(value)
        else:
            attributes[name] = LiteralValue(value)

    return attributes


def _matched_value(match: re.Match) -> str | None:
    for group in ("double", "single", "bare"):
        value = match.group(group)
        if value is not None:
            return value
    return None
