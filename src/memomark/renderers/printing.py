"""Paginated print renderer.

Lays a document out on fixed-size pages for printing and PDF export:

1. Each block becomes a PrintElement: its spans are turned into styled
   text runs and wrapped to the printable width with a TextMeasurer.
2. Elements are stacked top to bottom. An element that would cross
   ``page.content_bottom`` moves to a new page; an element taller than
   a whole page is split between lines first.
3. Headings receive chapter numbers as they are placed and are
   collected into an outline (page numbers included) for PDF bookmarks.

Positions are in points measured from the top-left corner of the page.

Thread Safety:
All per-render state lives in a _PageCursor created by render().
Renderer instances can be shared across threads.

"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from typing import TypeAlias

from memomark.config import PageSetup, RenderConfig
from memomark.errors import RenderError
from memomark.nodes import (
    BlankLine,
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    Italic,
    Link,
    ListItem,
    Paragraph,
    Span,
    Strikethrough,
    TableRow,
)
from memomark.numbering import ChapterCounter
from memomark.renderers.fonts import ReportlabMeasurer
from memomark.renderers.protocol import TextMeasurer
from memomark.renderers.views import BlockKind, block_kind, list_marker
from memomark.text import spans_text
from memomark.utils.logger import get_logger

logger = get_logger(__name__)

HEADING_SCALES: tuple[float, ...] = (2.2, 1.8, 1.5, 1.25, 1.1, 1.1)

CELL_SEPARATOR = "  |  "

_PIECES = re.compile(r"\s+|\S+")


@dataclass(frozen=True, slots=True)
class TextRun:
    """A piece of a printed line sharing one style."""

    text: str
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    strike: bool = False
    href: str = ""
    checkbox: bool | None = None

    def same_style(self, other: TextRun) -> bool:
        return (
            self.bold == other.bold
            and self.italic == other.italic
            and self.monospace == other.monospace
            and self.strike == other.strike
            and self.href == other.href
            and self.checkbox == other.checkbox
        )


PrintLine: TypeAlias = tuple[TextRun, ...]


@dataclass(frozen=True, slots=True)
class PrintElement:
    """One positioned block on a page.

    Attributes:
        kind: Block type
        line_index: Zero-based source line of the block
        lines: Wrapped lines of styled runs (empty for rules and blank lines)
        font_size: Text size in points
        line_height: Distance between baselines
        height: Total height on the page
        x: Left edge of the text
        y: Top edge of the element, from the top of the page
        chapter: Chapter number of a heading ("2. 1.")
        marker: List marker glyph
        level: Heading level, 0 otherwise
        continued: True for the second and later parts of a split block

    """

    kind: BlockKind
    line_index: int
    lines: tuple[PrintLine, ...]
    font_size: float
    line_height: float
    height: float
    x: float
    y: float = 0.0
    chapter: str = ""
    marker: str = ""
    level: int = 0
    continued: bool = False

    @property
    def text(self) -> str:
        """Plain text of the element, lines joined with newlines."""
        return "\n".join("".join(run.text for run in line) for line in self.lines)


@dataclass(frozen=True, slots=True)
class PrintPage:
    """One page of laid-out elements (1-indexed ``number``)."""

    number: int
    elements: tuple[PrintElement, ...]


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    """Heading entry for a PDF outline / table of contents."""

    level: int
    title: str
    chapter: str
    page_number: int
    line_index: int

    @property
    def label(self) -> str:
        return f"{self.chapter} {self.title}" if self.chapter else self.title


@dataclass(frozen=True, slots=True)
class PrintDocument:
    """Paginated document ready for page-layout output.

    Always holds at least one page, even for an empty memo.

    """

    pages: tuple[PrintPage, ...]
    outline: tuple[OutlineEntry, ...]
    page_setup: PageSetup
    title: str = ""

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def elements(self) -> list[PrintElement]:
        """All elements across pages, in order."""
        return [element for page in self.pages for element in page.elements]


@dataclass(slots=True)
class _PageCursor:
    """Per-render layout state."""

    page: PageSetup
    pages: list[PrintPage] = field(default_factory=list)
    current: list[PrintElement] = field(default_factory=list)
    outline: list[OutlineEntry] = field(default_factory=list)
    chapters: ChapterCounter = field(default_factory=ChapterCounter)
    y: float = 0.0

    def __post_init__(self) -> None:
        self.y = self.page.margin_top

    @property
    def page_number(self) -> int:
        return len(self.pages) + 1

    def new_page(self) -> None:
        self.pages.append(PrintPage(number=self.page_number, elements=tuple(self.current)))
        self.current = []
        self.y = self.page.margin_top

    def place(self, element: PrintElement) -> PrintElement:
        """Put an element at the cursor, breaking the page when it does not fit."""
        if self.current and self.y + element.height > self.page.content_bottom:
            logger.debug(
                "Page break before line %d (page %d)", element.line_index, self.page_number + 1
            )
            self.new_page()
        placed = dataclasses.replace(element, y=self.y)
        self.current.append(placed)
        self.y += element.height + self.page.element_spacing
        return placed

    def finish(self) -> tuple[PrintPage, ...]:
        if self.current or not self.pages:
            self.new_page()
        return tuple(self.pages)


def spans_to_runs(
    spans: tuple[Span, ...], *, bold: bool = False, italic: bool = False
) -> list[TextRun]:
    """Styled runs for spans; ``bold``/``italic`` apply to every run."""
    runs: list[TextRun] = []
    for span in spans:
        match span:
            case Bold():
                runs.append(TextRun(span.text, bold=True, italic=italic))
            case Italic():
                runs.append(TextRun(span.text, bold=bold, italic=True))
            case Strikethrough():
                runs.append(TextRun(span.text, bold=bold, italic=italic, strike=True))
            case Code():
                runs.append(TextRun(span.text, monospace=True))
            case Link():
                runs.append(TextRun(span.text, bold=bold, italic=italic, href=span.href))
            case _:
                runs.append(TextRun(span.text, bold=bold, italic=italic))
    return runs


def _merge(runs: list[TextRun]) -> PrintLine:
    """Drop trailing whitespace and join neighbouring runs of equal style."""
    while runs and runs[-1].text.isspace():
        runs.pop()
    merged: list[TextRun] = []
    for run in runs:
        if merged and merged[-1].same_style(run):
            merged[-1] = dataclasses.replace(merged[-1], text=merged[-1].text + run.text)
        else:
            merged.append(run)
    return tuple(merged)


def wrap_runs(
    runs: list[TextRun], max_width: float, size: float, measurer: TextMeasurer
) -> list[PrintLine]:
    """Greedy line wrapping of styled runs.

    Breaks at whitespace; a word wider than a whole line (or text
    without spaces, as in Japanese) is broken between characters.
    Whitespace at the start of a wrapped line is dropped.

    Args:
        runs: Styled runs in reading order
        max_width: Available width in points
        size: Font size in points
        measurer: Width source

    Returns:
        Wrapped lines; empty when there is no visible text
    """

    def measure(text: str, run: TextRun) -> float:
        return measurer.width(
            text, size, bold=run.bold, italic=run.italic, monospace=run.monospace
        )

    lines: list[PrintLine] = []
    current: list[TextRun] = []
    width = 0.0

    def flush() -> None:
        nonlocal current, width
        line = _merge(current)
        if line:
            lines.append(line)
        current = []
        width = 0.0

    for run in runs:
        for piece_text in _PIECES.findall(run.text):
            piece = dataclasses.replace(run, text=piece_text)
            piece_width = measure(piece_text, run)

            if piece_text.isspace():
                if current:
                    current.append(piece)
                    width += piece_width
                continue

            if current and width + piece_width > max_width:
                flush()

            if width + piece_width <= max_width:
                current.append(piece)
                width += piece_width
                continue

            # Wider than a whole line: break between characters
            chunk = ""
            chunk_width = 0.0
            for char in piece_text:
                char_width = measure(char, run)
                if (chunk or current) and width + chunk_width + char_width > max_width:
                    if chunk:
                        current.append(dataclasses.replace(run, text=chunk))
                    flush()
                    chunk, chunk_width = "", 0.0
                chunk += char
                chunk_width += char_width
            if chunk:
                current.append(dataclasses.replace(run, text=chunk))
                width += chunk_width

    flush()
    return lines


class PrintRenderer:
    """Render a document to a paginated PrintDocument.

    Usage:
        >>> renderer = PrintRenderer(RenderConfig.for_print())
        >>> printed = renderer.render(parse("# Report\\n## Summary"))
        >>> [e.chapter for e in printed.elements()]
        ['', '1.']

    Thread Safety:
        Stateless between calls. Instances can be shared across threads.

    """

    __slots__ = ("_config", "_measurer", "_title")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        measurer: TextMeasurer | None = None,
        title: str = "",
    ) -> None:
        """Initialize renderer.

        Args:
            config: Render config; its ``page`` holds the geometry
            measurer: Text width source (default: reportlab Helvetica metrics)
            title: Document title carried to the PDF metadata
        """
        self._config = config or RenderConfig.for_print()
        self._measurer = measurer or ReportlabMeasurer()
        self._title = title

    def render(self, node: Document) -> PrintDocument:
        """Lay out a document on pages.

        Args:
            node: Parsed document

        Returns:
            PrintDocument with at least one page
        """
        page = self._config.page
        cursor = _PageCursor(page=page)

        for block in node.children:
            element = self._layout(block, cursor)
            for part in self._split(element):
                placed = cursor.place(part)
                if isinstance(block, Heading) and not part.continued:
                    cursor.outline.append(
                        OutlineEntry(
                            level=block.level,
                            title=spans_text(block.spans),
                            chapter=placed.chapter,
                            page_number=cursor.page_number,
                            line_index=block.location.line_index,
                        )
                    )

        pages = cursor.finish()
        logger.debug("Laid out %d blocks on %d pages", len(node.children), len(pages))
        return PrintDocument(
            pages=pages,
            outline=tuple(cursor.outline),
            page_setup=page,
            title=self._title,
        )

    # =========================================================================
    # Block layout
    # =========================================================================

    def _layout(self, block: Block, cursor: _PageCursor) -> PrintElement:
        """Measure and wrap one block (position is assigned later)."""
        page = self._config.page
        body = page.body_font_size

        match block:
            case Heading():
                size = page.heading_base_size * HEADING_SCALES[min(max(block.level, 1), 6) - 1]
                chapter = cursor.chapters.next(block.level)
                if not self._config.chapter_numbering:
                    chapter = ""
                runs = [TextRun(f"{chapter} ", bold=True)] if chapter else []
                runs += spans_to_runs(block.spans, bold=True)
                return self._element(block, runs, size, chapter=chapter, level=block.level)
            case ListItem():
                indent = block.indent_level * page.list_indent
                marker = list_marker(block)
                # Checklist markers are drawn as boxes, not glyphs
                checkbox = block.checked if block.kind == "checklist" else None
                runs = [TextRun(f"{marker} ", checkbox=checkbox)] + spans_to_runs(block.spans)
                return self._element(block, runs, body, indent=indent, marker=marker)
            case TableRow():
                runs = []
                for index, cell in enumerate(block.cells):
                    if index:
                        runs.append(TextRun(CELL_SEPARATOR))
                    runs += spans_to_runs(cell, bold=block.is_header)
                return self._element(block, runs, body)
            case CodeBlock():
                return self._code_element(block)
            case Blockquote():
                runs = spans_to_runs(block.spans, italic=True)
                return self._element(block, runs, body, indent=page.list_indent)
            case Image():
                return self._element(block, [TextRun(f"[{block.alt}]", italic=True)], body)
            case HorizontalRule() | BlankLine():
                line_height = body * page.line_spacing
                return PrintElement(
                    kind=block_kind(block),
                    line_index=block.location.line_index,
                    lines=(),
                    font_size=body,
                    line_height=line_height,
                    height=line_height,
                    x=page.margin_left,
                )
            case Paragraph():
                return self._element(block, spans_to_runs(block.spans), body)
            case _:
                raise RenderError(
                    f"Cannot lay out {type(block).__name__}", block.location.line_index
                )

    def _element(
        self,
        block: Block,
        runs: list[TextRun],
        size: float,
        *,
        indent: float = 0.0,
        chapter: str = "",
        marker: str = "",
        level: int = 0,
    ) -> PrintElement:
        page = self._config.page
        width = max(page.printable_width - indent, size)
        lines = wrap_runs(runs, width, size, self._measurer)
        line_height = size * page.line_spacing
        return PrintElement(
            kind=block_kind(block),
            line_index=block.location.line_index,
            lines=tuple(lines),
            font_size=size,
            line_height=line_height,
            height=max(len(lines), 1) * line_height,
            x=page.margin_left + indent,
            chapter=chapter,
            marker=marker,
            level=level,
        )

    def _code_element(self, block: CodeBlock) -> PrintElement:
        """Code keeps its line breaks; long lines wrap between characters."""
        page = self._config.page
        size = page.code_font_size
        lines: list[PrintLine] = []
        for raw in block.raw_lines:
            text = raw.replace("\t", "    ")
            wrapped = wrap_runs(
                [TextRun(text, monospace=True)], page.printable_width, size, self._measurer
            )
            # Keep blank code lines and leading indentation
            if not text.strip():
                lines.append((TextRun(" ", monospace=True),))
            elif text[0].isspace():
                indent = text[: len(text) - len(text.lstrip())]
                first = (TextRun(indent, monospace=True),) + wrapped[0]
                lines.extend([_merge(list(first)), *wrapped[1:]])
            else:
                lines.extend(wrapped)
        line_height = size * page.line_spacing
        return PrintElement(
            kind=BlockKind.CODE_BLOCK,
            line_index=block.location.line_index,
            lines=tuple(lines),
            font_size=size,
            line_height=line_height,
            height=max(len(lines), 1) * line_height,
            x=page.margin_left,
        )

    def _split(self, element: PrintElement) -> list[PrintElement]:
        """Split an element taller than a full page into page-sized parts."""
        page = self._config.page
        full = page.content_bottom - page.margin_top
        if element.height <= full or len(element.lines) <= 1:
            return [element]

        per_page = max(int(full // element.line_height), 1)
        parts: list[PrintElement] = []
        for start in range(0, len(element.lines), per_page):
            chunk = element.lines[start : start + per_page]
            parts.append(
                dataclasses.replace(
                    element,
                    lines=chunk,
                    height=len(chunk) * element.line_height,
                    continued=start > 0,
                )
            )
        return parts
