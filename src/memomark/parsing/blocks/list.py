"""List item parsing and ordered-list numbering.

Items are emitted one block per line; nesting lives in indent_level.
Ordered items draw their ordinal from an IndentCounterTable that keeps
an independent sequence per depth.
"""

from __future__ import annotations

from memomark.location import SourceLocation
from memomark.nodes import ListItem, Span
from memomark.numbering import format_ordinal
from memomark.tokens import LineToken, LineType


class IndentCounterTable:
    """Next ordinal per indentation level, for one document.

    An ordered item at level L takes the next number at L and clears
    every deeper level, so a nested run restarts at ① under each new
    parent. Nothing else clears counters: a paragraph, heading or
    unordered item between two ordered items does not restart the
    numbering.

    Usage:
            >>> table = IndentCounterTable()
            >>> table.next_ordinal(0), table.next_ordinal(1), table.next_ordinal(0)
            (1, 1, 2)

    """

    __slots__ = ("_counters",)

    def __init__(self) -> None:
        self._counters: dict[int, int] = {}

    def next_ordinal(self, level: int) -> int:
        """Consume the next ordinal at ``level`` and clear deeper levels."""
        ordinal = self._counters.get(level, 0) + 1
        self._counters[level] = ordinal
        self.clear_deeper(level)
        return ordinal

    def clear_deeper(self, level: int) -> None:
        """Forget the sequences of all levels strictly deeper than ``level``."""
        for deeper in [key for key in self._counters if key > level]:
            del self._counters[deeper]

    def peek(self, level: int) -> int:
        """Last ordinal emitted at ``level`` (0 if none)."""
        return self._counters.get(level, 0)

    def __len__(self) -> int:
        return len(self._counters)


class ListParsingMixin:
    """Mixin for checklist, unordered and ordered items.

    Required Host Attributes:
        - _counters: IndentCounterTable

    Required Host Methods:
        - _parse_inline(text) -> tuple[Span, ...]
        - _location(token) -> SourceLocation

    """

    _counters: IndentCounterTable

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        raise NotImplementedError

    def _location(self, token: LineToken) -> SourceLocation:
        raise NotImplementedError

    def _parse_list_item(self, token: LineToken) -> ListItem:
        """Build a ListItem from a classified list line."""
        spans = self._parse_inline(token.content)
        location = self._location(token)

        match token.type:
            case LineType.CHECKLIST_ITEM:
                return ListItem(
                    location=location,
                    kind="checklist",
                    indent_level=token.indent_level,
                    spans=spans,
                    checked=token.checked,
                    marker=token.marker,
                )
            case LineType.ORDERED_ITEM:
                ordinal = self._counters.next_ordinal(token.indent_level)
                return ListItem(
                    location=location,
                    kind="ordered",
                    indent_level=token.indent_level,
                    spans=spans,
                    ordinal=ordinal,
                    ordinal_display=format_ordinal(ordinal, token.indent_level),
                    marker=token.marker,
                )
            case _:
                return ListItem(
                    location=location,
                    kind="unordered",
                    indent_level=token.indent_level,
                    spans=spans,
                    marker=token.marker,
                )
