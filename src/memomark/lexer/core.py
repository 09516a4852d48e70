"""Line classifier: one token per source line.

Implements a small two-mode state machine. In BLOCK mode each line is
offered to the classifiers in a fixed priority order; a fence line
switches to CODE_FENCE mode, where every line is raw code until the
next fence line.

No regex in the hot path. Every line classifies (worst case PARAGRAPH),
so tokenization is total over all string input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from memomark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    TableClassifierMixin,
    ThematicClassifierMixin,
)
from memomark.lexer.modes import IMAGE_OPENER, IMAGE_SEPARATOR, LexerMode
from memomark.tokens import LineToken, LineType


def split_lines(source: str) -> list[str]:
    """Split source into lines the way every component of memomark does.

    Lines are separated by "\\n" only, so line indices agree between the
    parser and the checklist side channel. A trailing "\\r" stays part of
    the line and is ignored by classification.
    """
    return source.split("\n")


def calc_indent_level(line: str) -> int:
    """Compute the nesting depth of a line from its leading whitespace.

    Each tab adds one level. Each run of consecutive spaces adds half
    its length (rounded down), so a single space adds nothing. The scan
    stops at the first character that is neither a space nor a tab.

    Examples:
        >>> calc_indent_level("    - item")
        2
        >>> calc_indent_level("\\t - item")
        1
        >>> calc_indent_level("  \\t  x")
        3
    """
    level = 0
    space_run = 0
    for char in line:
        if char == " ":
            space_run += 1
        elif char == "\t":
            level += space_run // 2 + 1
            space_run = 0
        else:
            break
    return level + space_run // 2


class Lexer(
    FenceClassifierMixin,
    TableClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
):
    """Line classifier producing one LineToken per source line.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\n- [x] done")
            >>> for token in lexer.tokenize():
            ...     print(token)
        LineToken(HEADING, 'Hello', line 0)
        LineToken(BLANK, '', line 1)
        LineToken(CHECKLIST_ITEM, 'done', line 2)

    Truncation:
        ``line_limit`` keeps only the first N raw lines. It is applied
        before classification, so a fence or table cut by the limit is
        seen as unterminated.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_lines",
        "_mode",
        "_total_lines",
    )

    def __init__(self, source: str, *, line_limit: int | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            line_limit: Keep only the first N raw lines (None = all)
        """
        lines = split_lines(source)
        self._total_lines = len(lines)
        if line_limit is not None:
            lines = lines[: max(line_limit, 0)]
        self._lines = lines
        self._mode = LexerMode.BLOCK

    @property
    def line_count(self) -> int:
        """Number of raw lines that will be classified."""
        return len(self._lines)

    @property
    def total_lines(self) -> int:
        """Number of raw lines in the source before truncation."""
        return self._total_lines

    @property
    def mode(self) -> LexerMode:
        return self._mode

    def tokenize(self) -> Iterator[LineToken]:
        """Classify every kept line in order.

        Yields:
            One LineToken per line; the mode carries over between lines.
        """
        for index, line in enumerate(self._lines):
            yield self.classify(line, index)

    def classify(self, line: str, line_index: int) -> LineToken:
        """Classify one line against the current mode and update the mode.

        Args:
            line: Raw source line (without newline)
            line_index: Zero-based index of the line

        Returns:
            The line's token; never None.
        """
        line = line.removesuffix("\r")
        lead = line.lstrip()

        fence = self._try_classify_fence(
            lead, line_index, in_fence=self._mode is LexerMode.CODE_FENCE
        )
        if fence is not None:
            self._mode = (
                LexerMode.CODE_FENCE if fence.type is LineType.FENCE_OPEN else LexerMode.BLOCK
            )
            return fence

        if self._mode is LexerMode.CODE_FENCE:
            return self._make_token(LineType.CODE_LINE, line, line_index)

        return self._classify_block_line(line, lead, line_index)

    def _classify_block_line(self, line: str, lead: str, line_index: int) -> LineToken:
        """Classify a line outside of code fences.

        Order matters: images beat tables, tables beat headings, and
        checklists must be tried before unordered items.
        """
        trimmed = lead.rstrip()
        if not trimmed:
            return self._make_token(LineType.BLANK, "", line_index)

        if IMAGE_OPENER in trimmed and IMAGE_SEPARATOR in trimmed:
            return self._make_token(LineType.IMAGE, trimmed, line_index)

        indent = calc_indent_level(line)

        token = (
            self._try_classify_table_row(trimmed, line_index, indent)
            or self._try_classify_heading(lead, line_index, indent)
            or self._try_classify_checklist(lead, line_index, indent)
            or self._try_classify_unordered(lead, line_index, indent)
            or self._try_classify_ordered(lead, line_index, indent)
            or self._try_classify_blockquote(lead, line_index, indent)
            or self._try_classify_horizontal_rule(trimmed, line_index, indent)
        )
        if token is not None:
            return token

        return self._make_token(
            LineType.PARAGRAPH, trimmed, line_index, indent_level=indent
        )

    def _make_token(
        self,
        line_type: LineType,
        content: str,
        line_index: int,
        *,
        indent_level: int = 0,
        **fields: object,
    ) -> LineToken:
        """Create a line token.

        Args:
            line_type: Classification of the line
            content: Extracted content
            line_index: Zero-based source line
            indent_level: Nesting depth
            **fields: Kind-specific LineToken fields (level, checked, marker, info)

        Returns:
            New LineToken
        """
        return LineToken(
            type=line_type,
            content=content,
            line_index=line_index,
            indent_level=indent_level,
            **fields,
        )


def classify_line(line: str, *, in_fence: bool = False, line_index: int = 0) -> LineToken:
    """Classify a single line without building a document.

    Args:
        line: Raw source line
        in_fence: Whether a code fence is open before this line
        line_index: Index to record on the token

    Returns:
        The line's token

    Example:
        >>> classify_line("  1. first").type.name
        'ORDERED_ITEM'
    """
    lexer = Lexer("")
    if in_fence:
        lexer._mode = LexerMode.CODE_FENCE
    return lexer.classify(line, line_index)
