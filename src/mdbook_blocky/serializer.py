"""Render an event stream back to Markdown text."""

from collections.abc import Iterable

from .events import Event, Html


def render(events: Iterable[Event]) -> str:
    """Join events into Markdown.

    Text and Source events are written back exactly as they were read.
    Html events replace the paragraph text on their line, keeping its container
    prefix and line ending. When the next line is not blank, a blank line is
    inserted so the following block is not swallowed into an HTML block.
    """
    parts = []
    for event in events:
        if isinstance(event, Html):
            parts.append(event.prefix + event.payload + event.ending)
            if event.blank_after:
                parts.append(_blank_line(event))
        else:
            parts.append(event.source)
    return "".join(parts)


def _blank_line(event: Html) -> str:
    """An empty line inside the same block quotes as the replaced line."""
    newline = event.ending.lstrip(" \t") or "\n"
    return ">" * event.prefix.count(">") + newline
