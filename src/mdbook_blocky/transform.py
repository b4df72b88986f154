"""Per-chapter block annotation."""

from dataclasses import dataclass

from .annotator import BlockAnnotator
from .serializer import render
from .tokenizer import tokenize


@dataclass(frozen=True)
class AnnotatedContent:
    text: str
    open_blocks: int = 0


def annotate_content(content: str) -> AnnotatedContent:
    """Replace block annotation markers in one chapter's Markdown.

    Args:
        content: Raw Markdown of a single chapter.

    Returns:
        The rewritten Markdown and the number of blocks left unclosed.

    Raises:
        DepthOverflow: More than MAX_DEPTH blocks are open at once.
        UnmatchedClose: A closing marker appears with no block open.
    """
    annotator = BlockAnnotator(tokenize(content))
    text = render(annotator)
    return AnnotatedContent(text, annotator.depth)
