"""Inline span tokenizer.

Splits a fragment of block text into typed spans. Each round asks all
five scanners for their leftmost match and takes the one that starts
first; when several start at the same offset, the earlier entry in
SPAN_PRIORITY wins (code, link, strikethrough, bold, italic). Text
before the winner becomes PlainText and scanning resumes after it.

Matched content is never re-tokenized, so styles do not nest.

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from memomark.nodes import Bold, Code, Italic, Link, PlainText, Span, Strikethrough
from memomark.parsing.inline.scanners import SCANNERS
from memomark.parsing.inline.tokens import SpanMatch


def _span_for(found: SpanMatch) -> Span:
    match found.kind:
        case "code":
            return Code(found.text)
        case "link":
            return Link(found.text, found.href)
        case "strikethrough":
            return Strikethrough(found.text)
        case "bold":
            return Bold(found.text)
        case _:
            return Italic(found.text)


def _next_match(text: str, start: int) -> SpanMatch | None:
    """Leftmost match across all scanners, ties broken by priority."""
    best: SpanMatch | None = None
    for scanner in SCANNERS:
        found = scanner(text, start)
        # Strict < keeps the higher-priority scanner on ties
        if found is not None and (best is None or found.start < best.start):
            best = found
            if best.start == start:
                break
    return best


def parse_inline(text: str) -> tuple[Span, ...]:
    """Tokenize a text fragment into inline spans.

    Args:
        text: Block content with its block marker already removed

    Returns:
        Contiguous spans whose text concatenates to the fragment minus
        markdown delimiters. Empty input gives an empty tuple.

    Example:
        >>> parse_inline("**bold** and *italic*")
        (Bold(text='bold'), PlainText(text=' and '), Italic(text='italic'))
    """
    spans: list[Span] = []
    pos = 0
    length = len(text)

    while pos < length:
        found = _next_match(text, pos)
        if found is None:
            break
        if found.start > pos:
            spans.append(PlainText(text[pos : found.start]))
        spans.append(_span_for(found))
        pos = found.end

    if pos < length:
        spans.append(PlainText(text[pos:]))

    return tuple(spans)


class InlineParsingMixin:
    """Inline tokenization for the block parser.

    Required Host Attributes: None

    """

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        """Resolve block text into spans."""
        return parse_inline(text)
