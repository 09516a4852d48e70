"""List item classifier mixin.

Handles the three list kinds. Checklists must be tried before plain
unordered items because "- [ ] " also starts with "- ".
"""

from __future__ import annotations

from memomark.lexer.modes import CHECKLIST_PREFIXES, UNORDERED_PREFIXES
from memomark.tokens import LineToken, LineType


class ListClassifierMixin:
    """Mixin providing checklist, unordered and ordered item classification."""

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

    def _try_classify_checklist(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as a checklist item.

        Recognizes "- [ ] ", "- [x] " and "- [X] ".
        """
        for prefix in CHECKLIST_PREFIXES:
            if content.startswith(prefix):
                return self._make_token(
                    LineType.CHECKLIST_ITEM,
                    content[len(prefix) :].strip(),
                    line_index,
                    indent_level=indent_level,
                    checked=prefix[3] != " ",
                    marker=prefix.rstrip(),
                )
        return None

    def _try_classify_unordered(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as an unordered item ("- ", "* ", "+ ")."""
        if content.startswith(UNORDERED_PREFIXES):
            return self._make_token(
                LineType.UNORDERED_ITEM,
                content[2:].strip(),
                line_index,
                indent_level=indent_level,
                marker=content[0],
            )
        return None

    def _try_classify_ordered(
        self, content: str, line_index: int, indent_level: int = 0
    ) -> LineToken | None:
        """Try to classify content as an ordered item.

        Ordered items are a run of ASCII digits, a "." and a space or tab.
        The number written in the source is kept as the marker only; display
        ordinals are assigned by the parser.
        """
        pos = 0
        while pos < len(content) and content[pos] in "0123456789":
            pos += 1

        if pos == 0 or content[pos : pos + 1] != ".":
            return None
        if content[pos + 1 : pos + 2] not in (" ", "\t"):
            return None

        return self._make_token(
            LineType.ORDERED_ITEM,
            content[pos + 2 :].strip(),
            line_index,
            indent_level=indent_level,
            marker=content[: pos + 1],
        )
