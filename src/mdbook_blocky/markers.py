"""Block annotation marker detection."""

from enum import Enum
from typing import NamedTuple


OPEN_PREFIX = "{:."
CLOSE_PREFIX = "{:/."
SUFFIX = "}"

# Shortest payload worth inspecting: the close prefix plus the suffix.
# An empty-named open marker ("{:.}") is shorter and stays plain text.
MIN_MARKER_LEN = len(CLOSE_PREFIX) + len(SUFFIX)


class MarkerKind(Enum):
    OPEN = "open"
    CLOSE = "close"
    PLAIN = "plain"


class Marker(NamedTuple):
    kind: MarkerKind
    name: str | None = None


PLAIN = Marker(MarkerKind.PLAIN)


def classify(payload: str) -> Marker:
    """Classify a paragraph's text as an open marker, close marker or plain text.

    Args:
        payload: The plain text content of a paragraph.

    Returns:
        A Marker carrying the class name for open and close markers.
    """
    if len(payload) < MIN_MARKER_LEN or not payload.endswith(SUFFIX):
        return PLAIN

    if payload.startswith(OPEN_PREFIX):
        return Marker(MarkerKind.OPEN, payload[len(OPEN_PREFIX) : -len(SUFFIX)])
    if payload.startswith(CLOSE_PREFIX):
        return Marker(MarkerKind.CLOSE, payload[len(CLOSE_PREFIX) : -len(SUFFIX)])
    return PLAIN
