"""Extract plain text from memomark nodes.

Used for heading anchors, memo titles in the memo list and the short
preview line under each title.

Example:
    >>> from memomark import parse, extract_text
    >>> doc = parse("# Hello **World**")
    >>> extract_text(doc.children[0])
    'Hello World'
"""

from __future__ import annotations

from collections.abc import Iterable

from memomark.nodes import (
    BlankLine,
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    ListItem,
    Node,
    Paragraph,
    Span,
    SpanNode,
    TableRow,
)
from memomark.parser import parse
from memomark.utils.text import truncate


def spans_text(spans: Iterable[Span]) -> str:
    """Concatenate the visible text of spans, styling dropped."""
    return "".join(span.text for span in spans)


def extract_text(node: Node | SpanNode | Iterable[Span]) -> str:
    """Extract plain text from a block, a span or a span sequence.

    Table rows join their cells with " | ", code blocks join their lines
    with newlines and documents join their blocks with newlines.

    Args:
        node: Any block node, span, or iterable of spans

    Returns:
        Plain text with markdown delimiters removed
    """
    match node:
        case SpanNode():
            return node.text
        case Heading() | Paragraph() | Blockquote() | ListItem():
            return spans_text(node.spans)
        case TableRow():
            return " | ".join(spans_text(cell) for cell in node.cells)
        case CodeBlock():
            return node.code
        case Image():
            return node.alt
        case HorizontalRule() | BlankLine():
            return ""
        case Document():
            return "\n".join(
                text for text in (extract_text(child) for child in node.children) if text
            )
        case Node():
            return ""
        case _:
            return spans_text(node)


def _text_lines(source: str) -> list[str]:
    lines = []
    for block in parse(source).children:
        text = extract_text(block).strip()
        if isinstance(block, CodeBlock):
            text = block.raw_lines[0].strip()
        if text:
            lines.append(text)
    return lines


def display_title(source: str, fallback: str = "") -> str:
    """Title for a memo without an explicit title.

    Takes the first block with visible text, markdown removed.

    Example:
        >>> display_title("\\n# **Trip** plan\\n- passport")
        'Trip plan'
    """
    lines = _text_lines(source)
    return lines[0] if lines else fallback


def preview_text(
    source: str,
    max_length: int | None = None,
    *,
    skip_title: bool = False,
) -> str:
    """One-line preview of a memo body.

    Args:
        source: Memo text
        max_length: Truncate to this many characters (None = no limit)
        skip_title: Start after the block used by display_title()

    Returns:
        Text of the first (or second) textual block, possibly truncated;
        empty when there is nothing to show
    """
    lines = _text_lines(source)
    index = 1 if skip_title else 0
    if index >= len(lines):
        return ""
    text = lines[index]
    if max_length is not None:
        text = truncate(text, max_length)
    return text
