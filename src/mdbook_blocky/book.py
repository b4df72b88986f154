"""Walk an mdbook book and annotate every chapter."""

from collections.abc import Iterator
from dataclasses import dataclass

from .annotator import BlockyError
from .transform import annotate_content

ON_ERROR_CHOICES = ("abort", "skip")


class ChapterError(Exception):
    """A chapter could not be annotated."""

    def __init__(self, chapter: str, error: BlockyError):
        super().__init__(f"{chapter}: {error}")
        self.chapter = chapter
        self.error = error


@dataclass
class ChapterReport:
    name: str
    path: str | None
    open_blocks: int = 0
    error: BlockyError | None = None


def iter_chapters(items: list) -> Iterator[dict]:
    """Yield every chapter in a list of book items, depth first.

    Separators and part titles are skipped.
    """
    for item in items:
        if not isinstance(item, dict) or "Chapter" not in item:
            continue
        chapter = item["Chapter"]
        yield chapter
        yield from iter_chapters(chapter.get("sub_items") or [])


def process_book(book: dict, on_error: str = "abort") -> list[ChapterReport]:
    """Annotate the content of every chapter in place.

    Args:
        book: The book object from mdbook's preprocessor input.
        on_error: "abort" to stop at the first malformed chapter, "skip" to
            leave that chapter unchanged and keep going.

    Returns:
        One report per chapter with content.

    Raises:
        ChapterError: A chapter has malformed nesting and on_error is "abort".
    """
    if on_error not in ON_ERROR_CHOICES:
        raise ValueError(f"on_error must be one of {ON_ERROR_CHOICES}, not {on_error!r}")

    reports = []
    for chapter in iter_chapters(book.get("sections") or []):
        content = chapter.get("content")
        if not content:
            continue

        report = ChapterReport(name=chapter.get("name", ""), path=chapter.get("path"))
        try:
            result = annotate_content(content)
        except BlockyError as e:
            if on_error == "abort":
                raise ChapterError(report.path or report.name, e) from e
            report.error = e
        else:
            chapter["content"] = result.text
            report.open_blocks = result.open_blocks
        reports.append(report)

    return reports
