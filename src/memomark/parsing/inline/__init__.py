"""Inline span tokenizer for memomark."""

from memomark.parsing.inline.core import InlineParsingMixin, parse_inline
from memomark.parsing.inline.tokens import SPAN_PRIORITY, SpanKind, SpanMatch

__all__ = [
    "SPAN_PRIORITY",
    "InlineParsingMixin",
    "SpanKind",
    "SpanMatch",
    "parse_inline",
]
