"""mdbook preprocessor protocol: stdin payload, version check and renderer support."""

import json
from typing import TextIO

from .book import ON_ERROR_CHOICES

NAME = "blocky"
# mdbook release whose preprocessor JSON layout this package follows
MDBOOK_VERSION = "0.4.40"
SUPPORTED_RENDERERS = {"html"}


class ProtocolError(Exception):
    """The preprocessor input from mdbook could not be understood."""


def parse_input(stream: TextIO) -> tuple[dict, dict]:
    """Read the [context, book] pair mdbook writes to the preprocessor's stdin.

    Raises:
        ProtocolError: The input is not JSON or not a [context, book] pair.
    """
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Invalid JSON on stdin: {e}") from e
    except UnicodeDecodeError as e:
        raise ProtocolError(f"stdin is not valid UTF-8: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise ProtocolError("Expected a [context, book] array on stdin")

    context, book = data
    if not isinstance(context, dict) or not isinstance(book, dict):
        raise ProtocolError("Expected a [context, book] array on stdin")
    return context, book


def version_warning(context: dict) -> str | None:
    """Return a warning when mdbook's version differs from the one this targets.

    Versions are compared on major.minor only.
    """
    version = context.get("mdbook_version")
    if not version:
        return None
    if _major_minor(version) == _major_minor(MDBOOK_VERSION):
        return None
    return (
        f"The {NAME} preprocessor targets mdbook {MDBOOK_VERSION}, "
        f"but is being called from mdbook {version}"
    )


def _major_minor(version: str) -> tuple[str, ...]:
    return tuple(version.split(".")[:2])


def supports_renderer(renderer: str) -> bool:
    return renderer in SUPPORTED_RENDERERS


def load_options(context: dict) -> dict:
    """Read this preprocessor's table from book.toml ([preprocessor.blocky]).

    Raises:
        ProtocolError: The on-error setting is not a known policy.
    """
    table = context.get("config", {}).get("preprocessor", {}).get(NAME) or {}
    options = {}

    on_error = table.get("on-error")
    if on_error is not None:
        if on_error not in ON_ERROR_CHOICES:
            raise ProtocolError(
                f"preprocessor.{NAME}.on-error must be one of {', '.join(ON_ERROR_CHOICES)}, "
                f"not {on_error!r}"
            )
        options["on_error"] = on_error

    return options
