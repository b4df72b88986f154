"""Event types flowing between the tokenizer, the annotator and the serializer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Text:
    """A single-line paragraph made only of plain text.

    `source` is the whole line; `prefix` is whatever precedes the paragraph text
    on it (indentation, "> " or list markers). `blank_after` is set when the
    next line is not blank, so generated markup needs a blank line after it.
    """

    payload: str
    source: str
    line: int = 0
    prefix: str = ""
    blank_after: bool = False

    @property
    def ending(self) -> str:
        return self.source[len(self.prefix) + len(self.payload) :]


@dataclass(frozen=True)
class Html:
    """Generated markup, written out verbatim in place of a Text line."""

    payload: str
    prefix: str = ""
    ending: str = "\n"
    blank_after: bool = False


@dataclass(frozen=True)
class Source:
    """Any other run of document lines, kept as-is."""

    source: str


Event = Text | Html | Source
