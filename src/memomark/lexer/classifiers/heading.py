"""Heading classifier mixin."""

from __future__ import annotations

from memomark.tokens import LineToken, LineType

MAX_HEADING_LEVEL = 6


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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

    def _try_classify_heading(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as a heading.

        Headings start with 1-6 # characters followed by a space or tab.
        Seven or more #s make an ordinary paragraph.

        Args:
            content: Line with leading whitespace stripped
            line_index: Zero-based source line
            indent_level: Nesting depth of the line

        Returns:
            HEADING token if valid, None otherwise.
        """
        level = 0
        pos = 0
        while pos < len(content) and content[pos] == "#":
            level += 1
            pos += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        if pos >= len(content) or content[pos] not in " \t":
            return None

        return self._make_token(
            LineType.HEADING,
            content[pos + 1 :].strip(),
            line_index,
            indent_level=indent_level,
            level=level,
        )
