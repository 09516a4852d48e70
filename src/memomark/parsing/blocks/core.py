"""Block parsing for memomark.

Turns classified lines into blocks. Most kinds map one line to one
block; fenced code and tables consume a run of lines.
"""

from __future__ import annotations

from memomark.config import RenderConfig
from memomark.lexer.modes import IMAGE_OPENER, IMAGE_SEPARATOR
from memomark.location import SourceLocation
from memomark.nodes import (
    BlankLine,
    Block,
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    Paragraph,
    Span,
)
from memomark.parsing.blocks.list import ListParsingMixin
from memomark.parsing.blocks.table import TableParsingMixin
from memomark.tokens import LineToken, LineType


def parse_image(line: str) -> tuple[str, str] | None:
    """Extract (alt, src) from the first ![alt](src) on a line.

    Examples:
        >>> parse_image("![receipt](photos/receipt.png)")
        ('receipt', 'photos/receipt.png')
        >>> parse_image("![broken](") is None
        True
    """
    start = line.find(IMAGE_OPENER)
    while start != -1:
        middle = line.find(IMAGE_SEPARATOR, start + len(IMAGE_OPENER))
        if middle == -1:
            return None
        end = line.find(")", middle + len(IMAGE_SEPARATOR))
        if end == -1:
            return None
        src = line[middle + len(IMAGE_SEPARATOR) : end].strip()
        if src:
            return line[start + len(IMAGE_OPENER) : middle], src
        start = line.find(IMAGE_OPENER, start + 1)
    return None


class BlockParsingMixin(ListParsingMixin, TableParsingMixin):
    """Block-level parsing over the line token stream.

    Required Host Attributes:
        - _config: RenderConfig
        - _tokens: list[LineToken]
        - _pos: int

    Required Host Methods:
        - _parse_inline(text) -> tuple[Span, ...]
        - _location(token, end=None) -> SourceLocation

    """

    _config: RenderConfig
    _tokens: list[LineToken]
    _pos: int

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        raise NotImplementedError

    def _location(self, token: LineToken, end: LineToken | None = None) -> SourceLocation:
        raise NotImplementedError

    def _parse_block(self) -> list[Block]:
        """Parse the block starting at the current token and advance past it.

        Returns:
            Zero blocks for skipped lines, several for a table run,
            otherwise exactly one.
        """
        token = self._tokens[self._pos]

        match token.type:
            case LineType.FENCE_OPEN:
                code = self._parse_code_fence()
                return [code] if code is not None else []
            case LineType.TABLE_ROW:
                return list(self._parse_table(self._collect(LineType.TABLE_ROW)))

        self._pos += 1

        match token.type:
            case LineType.BLANK:
                if self._config.preserve_blank_lines:
                    return [BlankLine(location=self._location(token))]
                return []
            case LineType.IMAGE:
                image = self._parse_image_line(token)
                return [image] if image is not None else []
            case LineType.HEADING:
                return [
                    Heading(
                        location=self._location(token),
                        level=min(max(token.level, 1), 6),
                        spans=self._parse_inline(token.content),
                    )
                ]
            case LineType.CHECKLIST_ITEM | LineType.UNORDERED_ITEM | LineType.ORDERED_ITEM:
                return [self._parse_list_item(token)]
            case LineType.BLOCKQUOTE:
                return [
                    Blockquote(
                        location=self._location(token),
                        spans=self._parse_inline(token.content),
                    )
                ]
            case LineType.HORIZONTAL_RULE:
                return [HorizontalRule(location=self._location(token))]
            case _:
                # PARAGRAPH, plus fence close or code lines that lost
                # their opening fence
                return [
                    Paragraph(
                        location=self._location(token),
                        spans=self._parse_inline(token.content),
                    )
                ]

    def _collect(self, line_type: LineType) -> list[LineToken]:
        """Consume and return the run of consecutive tokens of one type."""
        start = self._pos
        while self._pos < len(self._tokens) and self._tokens[self._pos].type is line_type:
            self._pos += 1
        return self._tokens[start : self._pos]

    def _parse_code_fence(self) -> CodeBlock | None:
        """Parse a fenced code block starting at a FENCE_OPEN token.

        Code lines are kept verbatim. A fence still open at end of input
        yields a block with ``closed=False``. A fence with no lines
        yields nothing.
        """
        opener = self._tokens[self._pos]
        self._pos += 1

        lines = self._collect(LineType.CODE_LINE)
        closer: LineToken | None = None
        if self._pos < len(self._tokens) and self._tokens[self._pos].type is LineType.FENCE_CLOSE:
            closer = self._tokens[self._pos]
            self._pos += 1

        if not lines:
            return None

        return CodeBlock(
            location=self._location(opener, closer or lines[-1]),
            raw_lines=tuple(token.content for token in lines),
            info=opener.info,
            closed=closer is not None,
        )

    def _parse_image_line(self, token: LineToken) -> Image | None:
        """Image block for an image line, when images are enabled."""
        if not self._config.images_enabled:
            return None
        parsed = parse_image(token.content)
        if parsed is None:
            return None
        alt, src = parsed
        return Image(location=self._location(token), alt=alt, src=src)
