"""Horizontal rule classifier mixin."""

from __future__ import annotations

from memomark.lexer.modes import HORIZONTAL_RULES
from memomark.tokens import LineToken, LineType


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

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

    def _try_classify_horizontal_rule(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as a horizontal rule.

        Only the exact strings "---", "***" and "___" count; spaced or
        longer variants ("- - -", "----") are ordinary text.

        Args:
            content: Line with surrounding whitespace stripped
            line_index: Zero-based source line
            indent_level: Nesting depth of the line

        Returns:
            HORIZONTAL_RULE token if valid, None otherwise.
        """
        if content not in HORIZONTAL_RULES:
            return None
        return self._make_token(
            LineType.HORIZONTAL_RULE, "", line_index, indent_level=indent_level
        )
