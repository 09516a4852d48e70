"""Inline match results for the span tokenizer.

Uses a NamedTuple for match candidates: immutable, cheap to create
and unpackable in the tokenizer loop.

Thread Safety:
All matches are immutable and safe to share across threads.

"""

from __future__ import annotations

from typing import Literal, NamedTuple, TypeAlias

# Listed in tie-break priority order
SpanKind: TypeAlias = Literal["code", "link", "strikethrough", "bold", "italic"]

SPAN_PRIORITY: tuple[SpanKind, ...] = ("code", "link", "strikethrough", "bold", "italic")


class SpanMatch(NamedTuple):
    """One candidate match of an inline pattern.

    Attributes:
        kind: Which pattern matched
        start: Offset of the opening delimiter
        end: Offset just past the closing delimiter
        text: Content between the delimiters (link text for links)
        href: Link target, empty for other kinds

    """

    kind: SpanKind
    start: int
    end: int
    text: str
    href: str = ""
