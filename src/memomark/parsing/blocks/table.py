"""Pipe table parsing for memomark.

Rows are kept as individual TableRow blocks. The first row of a run is
the header; a second row made only of "-", ":" and whitespace is the
header separator and is dropped.

    | Item  | Qty |    <- header row
    |-------|----:|    <- separator (dropped)
    | Milk  | 2   |    <- data row
"""

from __future__ import annotations

from memomark.location import SourceLocation
from memomark.nodes import Span, TableRow
from memomark.tokens import LineToken

_SEPARATOR_CHARS = frozenset("-:")


def split_cells(row: str) -> list[str]:
    """Split a trimmed "|a|b|" line into trimmed cell strings.

    Examples:
        >>> split_cells("| a | b |")
        ['a', 'b']
        >>> split_cells("|")
        ['']
    """
    inner = row[1:-1] if len(row) >= 2 else ""
    return [cell.strip() for cell in inner.split("|")]


def is_separator_row(cells: list[str]) -> bool:
    """True when every cell holds only "-", ":" and whitespace."""
    return all(
        all(char in _SEPARATOR_CHARS or char.isspace() for char in cell) for cell in cells
    )


class TableParsingMixin:
    """Mixin for pipe table parsing.

    Required Host Methods:
        - _parse_inline(text) -> tuple[Span, ...]
        - _location(token) -> SourceLocation

    """

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        raise NotImplementedError

    def _location(self, token: LineToken) -> SourceLocation:
        raise NotImplementedError

    def _parse_table(self, rows: list[LineToken]) -> list[TableRow]:
        """Turn a run of consecutive TABLE_ROW tokens into TableRow blocks.

        Args:
            rows: The buffered row tokens, in source order (at least one)

        Returns:
            One TableRow per kept row; the first is the header.
        """
        split = [(token, split_cells(token.content)) for token in rows]
        if len(split) >= 2 and is_separator_row(split[1][1]):
            del split[1]

        return [
            TableRow(
                location=self._location(token),
                cells=tuple(self._parse_inline(cell) for cell in cells),
                is_header=index == 0,
            )
            for index, (token, cells) in enumerate(split)
        ]
