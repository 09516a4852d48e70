"""Blockquote classifier mixin."""

from __future__ import annotations

from memomark.tokens import LineToken, LineType


class QuoteClassifierMixin:
    """Mixin providing blockquote classification."""

    def _make_token(
        self,
        line_type: LineType,
        content: str,
        line_index: int,
        *,
        indent_level: int = 0,
        **fields: object,
    ) -> LineToken:
        """Create a line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_blockquote(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as a quoted line ("> text" or a bare ">")."""
        if content.startswith("> "):
            quoted = content[2:].strip()
        elif content.rstrip() == ">":
            quoted = ""
        else:
            return None
        return self._make_token(
            LineType.BLOCKQUOTE, quoted, line_index, indent_level=indent_level
        )
