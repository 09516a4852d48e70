"""Pipe table row classifier mixin."""

from __future__ import annotations

from memomark.tokens import LineToken, LineType


class TableClassifierMixin:
    """Mixin providing table row classification."""

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

    def _try_classify_table_row(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as a table row.

        A row is any line that, after trimming, starts and ends with "|".
        The trimmed line is kept as content; cells are split by the parser.

        Args:
            content: Line with surrounding whitespace stripped
            line_index: Zero-based source line
            indent_level: Nesting depth of the line

        Returns:
            TABLE_ROW token if the line is a row, None otherwise.
        """
        if not (content.startswith("|") and content.endswith("|")):
            return None
        return self._make_token(
            LineType.TABLE_ROW, content, line_index, indent_level=indent_level
        )
