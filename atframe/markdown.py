"""Line-oriented markdown parsing into renderable lines and inline spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LinePurpose(Enum):
    """What a parsed line represents."""

    EMPTY = "empty"
    NORMAL = "normal"
    BULLET = "bullet"
    HEADLINE = "headline"
    HIGHLIGHT_BLOCK = "highlight_block"
    SEPARATOR = "separator"


class SpanKind(Enum):
    """Kind of an inline run of text."""

    TEXT = "text"
    LINK = "link"
    HIGHLIGHT = "highlight"
    EMPHASIS = "emphasis"
    CODE_BLOCK = "code_block"


@dataclass(frozen=True)
class Span:
    """A run of text; links carry their target."""

    kind: SpanKind
    text: str
    target: str | None = None


@dataclass(frozen=True)
class MarkdownLine:
    """One rendered line: its purpose, indentation and spans.

    ``level`` is the heading depth for headlines and 0 otherwise.
    """

    purpose: LinePurpose
    indent: int = 0
    spans: tuple[Span, ...] = ()
    level: int = 0

    @property
    def text(self) -> str:
        """The visible text of the line."""
        return "".join(span.text for span in self.spans)


def _match_link(text: str, start: int, end: int) -> tuple[Span, int] | None:
    close = text.find("]", start + 1, end)
    if close == -1 or close + 1 >= end or text[close + 1] != "(":
        return None
    paren = text.find(")", close + 2, end)
    if paren == -1:
        return None
    return Span(SpanKind.LINK, text[start + 1 : close], text[close + 2 : paren]), paren + 1


def _match_highlight(text: str, start: int, end: int) -> tuple[Span, int] | None:
    close = text.find("`", start + 1, end)
    if close == -1:
        return None
    return Span(SpanKind.HIGHLIGHT, text[start + 1 : close]), close + 1


def _match_emphasis(text: str, start: int, end: int) -> tuple[Span, int] | None:
    if start + 1 >= end or text[start + 1] != "*":
        return None
    close = text.find("*", start + 2, end)
    if close == -1 or close + 1 >= end or text[close + 1] != "*":
        return None
    return Span(SpanKind.EMPHASIS, text[start + 2 : close]), close + 2


_INLINE_MATCHERS = {
    "[": _match_link,
    "`": _match_highlight,
    "*": _match_emphasis,
}


def _parse_inline(text: str, start: int, end: int) -> tuple[Span, ...]:
    spans: list[Span] = []
    plain_start = start
    pos = start
    while pos < end:
        matcher = _INLINE_MATCHERS.get(text[pos])
        found = matcher(text, pos, end) if matcher else None
        if found is None:
            pos += 1
            continue
        span, after = found
        if plain_start < pos:
            spans.append(Span(SpanKind.TEXT, text[plain_start:pos]))
        spans.append(span)
        plain_start = pos = after
    if plain_start < end:
        spans.append(Span(SpanKind.TEXT, text[plain_start:end]))
    return tuple(spans)


def parse_markdown(text: str) -> list[MarkdownLine]:
    """Parse markdown text into lines ready to be laid out.

    Blank lines become EMPTY lines only where they add visible space: runs of
    blank lines collapse to one, and a blank line right after a headline is
    dropped. Parsing stops at the first NUL character.
    """
    text = text.split("\0", 1)[0]
    length = len(text)
    lines: list[MarkdownLine] = []
    last = LinePurpose.EMPTY
    pos = 0

    while pos < length:
        x = pos
        while x < length and text[x] in " \t":
            x += 1
        indent = x - pos
        eol = text.find("\n", x)
        if eol == -1:
            eol = length
        char = text[x] if x < length else ""

        if char == "\n":
            if last not in (LinePurpose.EMPTY, LinePurpose.HEADLINE):
                lines.append(MarkdownLine(LinePurpose.EMPTY, indent))
            last = LinePurpose.EMPTY
            pos = x + 1
            continue

        if char == "#":
            segment = text[x:eol]
            hashes = len(segment) - len(segment.lstrip("#"))
            if x + hashes < length and text[x + hashes] == " ":
                heading = text[x + hashes + 1 : eol]
                spans = (Span(SpanKind.TEXT, heading),) if heading else ()
                lines.append(MarkdownLine(LinePurpose.HEADLINE, indent, spans, hashes))
                last = LinePurpose.HEADLINE
                pos = eol + 1
                continue

        if text.startswith("---", x):
            lines.append(MarkdownLine(LinePurpose.SEPARATOR, indent))
            last = LinePurpose.SEPARATOR
            pos = x + 4
            continue

        if text.startswith("```", x):
            begin = eol + 1
            close = text.find("```", begin) if begin < length else -1
            if close != -1:
                content = text[begin:close]
                if content.endswith("\n"):
                    content = content[:-1]
                lines.append(
                    MarkdownLine(
                        LinePurpose.HIGHLIGHT_BLOCK, indent, (Span(SpanKind.CODE_BLOCK, content),)
                    )
                )
                last = LinePurpose.HIGHLIGHT_BLOCK
                close_eol = text.find("\n", close)
                pos = length if close_eol == -1 else close_eol
                continue

        if char == "-":
            start = x + 1
            if start < eol and text[start] == " ":
                start += 1
            purpose = LinePurpose.BULLET
        else:
            start = x
            purpose = LinePurpose.NORMAL

        lines.append(MarkdownLine(purpose, indent, _parse_inline(text, start, eol)))
        last = purpose
        pos = eol + 1

    return lines