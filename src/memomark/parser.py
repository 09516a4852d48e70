"""Block assembler producing a typed Document.

Consumes the Lexer's line tokens and builds immutable block nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline span tokenization
- `BlockParsingMixin`: Block dispatch, code fences, images
- `ListParsingMixin`: List items and ordered numbering (via BlockParsingMixin)
- `TableParsingMixin`: Pipe tables (via BlockParsingMixin)

Thread Safety:
- Parser instances are single-use; all state is per parse
- Configuration is an explicit frozen RenderConfig
- The resulting Document is immutable and safe to share

"""

from __future__ import annotations

from memomark.config import DEFAULT_CONFIG, RenderConfig
from memomark.lexer import Lexer
from memomark.location import SourceLocation
from memomark.nodes import Block, Document
from memomark.parsing import BlockParsingMixin, IndentCounterTable, InlineParsingMixin
from memomark.tokens import LineToken
from memomark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Block assembler for memo markdown.

    Usage:
            >>> parser = Parser("# Groceries\\n- [ ] milk")
            >>> blocks = parser.parse()
            >>> blocks[1].kind, blocks[1].checked
            ('checklist', False)

    Truncation:
        ``config.line_limit`` keeps the first N raw lines before any
        classification. A fence or table cut by the limit renders as far
        as it got.

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one
        per parse. The resulting blocks are immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_config",
        "_source_file",
        "_tokens",
        "_pos",
        "_counters",
        "_line_count",
    )

    def __init__(
        self,
        source: str,
        config: RenderConfig | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Markdown source text
            config: Render configuration (defaults to RenderConfig())
            source_file: Optional source file path recorded on locations
        """
        self._source = source
        self._config = config or DEFAULT_CONFIG
        self._source_file = source_file
        self._tokens: list[LineToken] = []
        self._pos = 0
        self._counters = IndentCounterTable()
        self._line_count = 0

    @property
    def line_count(self) -> int:
        """Raw lines consumed by the last parse (after truncation)."""
        return self._line_count

    def parse(self) -> tuple[Block, ...]:
        """Parse the source into blocks.

        Never raises for string input: every line classifies and every
        fragment tokenizes.

        Returns:
            Blocks in source order
        """
        lexer = Lexer(self._source, line_limit=self._config.line_limit)
        if lexer.line_count < lexer.total_lines:
            logger.debug(
                "Truncated source from %d to %d lines", lexer.total_lines, lexer.line_count
            )

        self._tokens = list(lexer.tokenize())
        self._line_count = lexer.line_count
        self._pos = 0
        self._counters = IndentCounterTable()

        blocks: list[Block] = []
        while self._pos < len(self._tokens):
            blocks.extend(self._parse_block())
        return tuple(blocks)

    def _location(self, token: LineToken, end: LineToken | None = None) -> SourceLocation:
        """Location covering ``token`` through ``end`` (inclusive)."""
        location = SourceLocation(
            lineno=token.line_index + 1,
            col_offset=1,
            source_file=self._source_file,
        )
        if end is not None and end.line_index != token.line_index:
            return SourceLocation(
                lineno=location.lineno,
                col_offset=1,
                end_lineno=end.line_index + 1,
                source_file=self._source_file,
            )
        return location


def parse(
    source: str,
    *,
    config: RenderConfig | None = None,
    line_limit: int | None = None,
    source_file: str | None = None,
) -> Document:
    """Parse memo markdown into a Document.

    Args:
        source: Markdown source text
        config: Render configuration (defaults to RenderConfig())
        line_limit: Overrides ``config.line_limit`` when given
        source_file: Optional source file path recorded on locations

    Returns:
        Document root node

    Example:
        >>> doc = parse("1. a\\n  1. sub\\n  2. sub\\n2. b")
        >>> [item.ordinal_display for item in doc.children]
        ['1.', '①', '②', '2.']
    """
    config = config or DEFAULT_CONFIG
    if line_limit is not None:
        config = config.replace(line_limit=line_limit)

    parser = Parser(source, config, source_file=source_file)
    blocks = parser.parse()
    return Document(
        location=SourceLocation(
            lineno=1,
            col_offset=1,
            end_lineno=max(parser.line_count, 1),
            source_file=source_file,
        ),
        children=blocks,
        line_count=parser.line_count,
    )
