"""Split chapter Markdown into paragraph and pass-through events using markdown-it-py."""

import re
from collections.abc import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .events import Event, Source, Text

# markdown-it counts lines on \n, \r\n and \r only (unlike str.splitlines)
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")

_md = MarkdownIt("commonmark").enable("table")


def tokenize(content: str) -> Iterator[Event]:
    """Turn chapter content into an ordered stream of events.

    Every single-line, plain-text paragraph becomes a Text event, wherever it
    sits (top level, block quote or list item). All other lines are grouped
    into Source events, so joining every event's source gives back the input
    unchanged.

    Args:
        content: Raw Markdown of one chapter.

    Yields:
        Text events for plain-text paragraphs, Source events for everything else.
    """
    lines = _LINE_RE.findall(content)
    tokens = _md.parse(content)
    cursor = 0

    for index, token in enumerate(tokens):
        if token.type != "paragraph_open" or token.map is None:
            continue

        start, end = token.map
        payload = _plain_paragraph(tokens, index)
        if payload is None or end - start != 1 or start < cursor:
            continue

        source = lines[start]
        offset = source.find(payload)
        if offset < 0:
            continue

        if start > cursor:
            yield Source("".join(lines[cursor:start]))
        yield Text(
            payload,
            source,
            line=start + 1,
            prefix=source[:offset],
            blank_after=end < len(lines) and not _is_blank(lines[end]),
        )
        cursor = end

    if cursor < len(lines):
        yield Source("".join(lines[cursor:]))


def _plain_paragraph(tokens: list[Token], index: int) -> str | None:
    """Return the source text of a paragraph whose inline content is only text, else None."""
    if index + 1 >= len(tokens):
        return None

    inline = tokens[index + 1]
    if inline.type != "inline" or not inline.children:
        return None
    if any(child.type != "text" for child in inline.children):
        return None
    # Raw content, so a backslash-escaped marker stays literal
    return inline.content


def _is_blank(line: str) -> bool:
    """True for an empty line, also inside block quotes (">")."""
    return not line.strip().replace(">", "").strip()
