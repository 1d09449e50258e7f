"""
Tag scanner for component markup.

The scanner splits markup into literal text and component open/close tags.
It is lazy: tokens are produced as the input is consumed, while open tags
are tracked on a stack so that mismatched closing tags fail immediately and
unterminated components are reported once the end of input is reached.
"""

import re
from collections.abc import Iterable, Iterator
from functools import lru_cache

from xview.exceptions import MalformedMarkupError, MarkupLocation
from xview.markup.tokens import TagCloseToken, TagOpenToken, TextToken, Token

DEFAULT_TAG_PREFIX = "x-"

# A name, optionally followed by "=" and a double-quoted, single-quoted or
# unquoted value.
_ATTRIBUTE_NO_GROUPS = r"""[^\s"'=<>/`]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?"""

_NAME_TAIL = r"[A-Za-z0-9_][\w.-]*"


@lru_cache(maxsize=16)
def _compile_patterns(prefix: str) -> tuple[re.Pattern, re.Pattern, re.Pattern]:
    """Build (candidate, open, close) patterns for a tag prefix."""
    escaped = re.escape(prefix)
    candidate = re.compile(rf"</?{escaped}[A-Za-z0-9_]")
    open_tag = re.compile(
        rf"<(?P<name>{escaped}{_NAME_TAIL})"
        rf"(?P<attributes>(?:\s+{_ATTRIBUTE_NO_GROUPS})*)"
        rf"\s*(?P<self_closing>/?)>"
    )
    close_tag = re.compile(rf"</(?P<name>{escaped}{_NAME_TAIL})\s*>")
    return candidate, open_tag, close_tag


class _Cursor:
    """Tracks line and column while the scanner moves through the markup."""

    def __init__(self, markup: str):
        self.markup = markup
        self.line = 1
        self.line_start = 0
        self.offset = 0

    def location(self) -> MarkupLocation:
        return MarkupLocation(self.line, self.offset - self.line_start + 1, self.offset)

    def advance_to(self, offset: int) -> None:
        segment = self.markup[self.offset : offset]
        newlines = segment.count("\n")
        if newlines:
            self.line += newlines
            self.line_start = self.offset + segment.rindex("\n") + 1
        self.offset = offset


def scan(markup: str, *, prefix: str = DEFAULT_TAG_PREFIX) -> Iterator[Token]:
    """
    Lazily tokenize markup into text and component tags.

    Params:
        markup: Markup to scan
        prefix: Tag-name prefix identifying components

    Yields:
        TextToken, TagOpenToken and TagCloseToken in source order

    Raises:
        MalformedMarkupError: If a component tag cannot be parsed, a closing tag
            has no opener or does not match the innermost open tag, or an opening
            tag is never closed
    """
    candidate, open_tag, close_tag = _compile_patterns(prefix)
    cursor = _Cursor(markup)
    open_tags: list[TagOpenToken] = []

    while cursor.offset < len(markup):
        found = candidate.search(markup, cursor.offset)
        if found is None:
            location = cursor.location()
            yield TextToken(markup[cursor.offset :], location.position, location.line, location.column)
            break

        if found.start() > cursor.offset:
            location = cursor.location()
            yield TextToken(
                markup[cursor.offset : found.start()],
                location.position,
                location.line,
                location.column,
            )
            cursor.advance_to(found.start())

        location = cursor.location()
        if markup.startswith("</", found.start()):
            match = close_tag.match(markup, found.start())
            if match is None:
                raise MalformedMarkupError("Invalid closing component tag", location=location)
            name = match.group("name")
            if not open_tags:
                raise MalformedMarkupError(
                    f"Closing tag </{name}> has no matching opening tag",
                    tag_name=name,
                    location=location,
                )
            if open_tags[-1].name != name:
                raise MalformedMarkupError(
                    f"Closing tag </{name}> does not match <{open_tags[-1].name}>",
                    tag_name=name,
                    location=location,
                )
            open_tags.pop()
            token: Token = TagCloseToken(
                name, match.group(0), location.position, location.line, location.column
            )
        else:
            match = open_tag.match(markup, found.start())
            if match is None:
                raise MalformedMarkupError("Unterminated or invalid component tag", location=location)
            name = match.group("name")
            token = TagOpenToken(
                name,
                match.group("attributes"),
                bool(match.group("self_closing")),
                match.group(0),
                location.position,
                location.line,
                location.column,
            )
            if not token.self_closing:
                open_tags.append(token)

        cursor.advance_to(match.end())
        yield token

    if open_tags:
        first = open_tags[0]
        raise MalformedMarkupError(
            f"Component tag <{first.name}> is never closed",
            tag_name=first.name,
            location=first.location,
        )


def markup_source(tokens: Iterable[Token]) -> str:
    """Reassemble the exact markup a sequence of tokens was scanned from."""
    return "".join(token.source for token in tokens)
