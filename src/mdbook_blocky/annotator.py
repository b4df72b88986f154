"""Rewrite block annotation markers into wrapper <div> elements."""

from collections.abc import Iterable, Iterator

from .events import Event, Html, Text
from .markers import MarkerKind, classify

MAX_DEPTH = 254
BLOCK_CLASS = "blocky-block"
LEVEL_CLASS_PREFIX = "block-level-"
CLOSE_MARKUP = "</div>"


class BlockyError(Exception):
    """Malformed block nesting in a chapter."""

    def __init__(self, message: str, payload: str, line: int = 0):
        if line:
            message = f"{message} at line {line}"
        super().__init__(f"{message}: {payload}")
        self.payload = payload
        self.line = line


class DepthOverflow(BlockyError):
    def __init__(self, payload: str, line: int = 0):
        super().__init__(f"Blocks nested deeper than {MAX_DEPTH} levels", payload, line)


class UnmatchedClose(BlockyError):
    def __init__(self, payload: str, line: int = 0):
        super().__init__("Closing marker without an open block", payload, line)


def open_markup(name: str, depth: int) -> str:
    """Build the opening <div> for a block at the given (1-based) nesting depth."""
    classes = f"{name} {BLOCK_CLASS}"
    if depth > 1:
        classes += f" {LEVEL_CLASS_PREFIX}{depth - 1}"
    return f'<div class="{classes}">'


class BlockAnnotator:
    """Iterator replacing marker paragraphs with wrapper markup.

    Pulls one event from the wrapped stream per event it yields. The nesting
    depth belongs to this instance; create a new annotator for every chapter.
    """

    def __init__(self, events: Iterable[Event]):
        self._events = iter(events)
        self.depth = 0

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        event = next(self._events)
        if not isinstance(event, Text):
            return event

        marker = classify(event.payload)
        if marker.kind is MarkerKind.OPEN:
            if self.depth >= MAX_DEPTH:
                raise DepthOverflow(event.payload, event.line)
            self.depth += 1
            return _replace(event, open_markup(marker.name, self.depth))

        if marker.kind is MarkerKind.CLOSE:
            # Only the depth is tracked; the close marker's name is not compared.
            if self.depth == 0:
                raise UnmatchedClose(event.payload, event.line)
            self.depth -= 1
            return _replace(event, CLOSE_MARKUP)

        return event


def _replace(event: Text, markup: str) -> Html:
    """Markup taking the place of a marker's paragraph text on the same line."""
    return Html(markup, prefix=event.prefix, ending=event.ending, blank_after=event.blank_after)
