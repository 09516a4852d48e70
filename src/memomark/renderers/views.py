"""View descriptors shared by the preview and widget renderers.

A descriptor is a flat, immutable description of one block for a UI
layer to draw. It carries the block's kind, indentation, checklist state
and source line index so the host can attach handlers such as "toggle
checklist item at line K" without looking back at the markdown.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for
each render() call. Renderer instances can be shared across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from memomark.config import DEFAULT_CONFIG, RenderConfig
from memomark.nodes import (
    BlankLine,
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    ListItem,
    Paragraph,
    PlainText,
    Span,
    TableRow,
)
from memomark.numbering import ChapterCounter
from memomark.text import spans_text
from memomark.utils.logger import get_logger
from memomark.utils.text import slugify

logger = get_logger(__name__)

BULLET = "•"
CHECKED_BOX = "☑︎"
UNCHECKED_BOX = "◻︎"


class BlockKind(Enum):
    """Block type tag on descriptors and print elements."""

    HEADING = "heading"
    LIST_ITEM = "list_item"
    TABLE_ROW = "table_row"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    HORIZONTAL_RULE = "horizontal_rule"
    PARAGRAPH = "paragraph"
    BLANK_LINE = "blank_line"
    IMAGE = "image"


def block_kind(block: Block) -> BlockKind:
    """Tag for a block node."""
    match block:
        case Heading():
            return BlockKind.HEADING
        case ListItem():
            return BlockKind.LIST_ITEM
        case TableRow():
            return BlockKind.TABLE_ROW
        case CodeBlock():
            return BlockKind.CODE_BLOCK
        case Blockquote():
            return BlockKind.BLOCKQUOTE
        case HorizontalRule():
            return BlockKind.HORIZONTAL_RULE
        case BlankLine():
            return BlockKind.BLANK_LINE
        case Image():
            return BlockKind.IMAGE
        case _:
            return BlockKind.PARAGRAPH


def list_marker(item: ListItem) -> str:
    """Glyph drawn before a list item."""
    match item.kind:
        case "checklist":
            return CHECKED_BOX if item.checked else UNCHECKED_BOX
        case "ordered":
            return item.ordinal_display
        case _:
            return BULLET


@dataclass(frozen=True, slots=True)
class ViewDescriptor:
    """One block, ready for a UI layer to draw.

    Attributes:
        kind: Block type
        line_index: Zero-based first source line (checklist toggles use it)
        end_line_index: Zero-based last source line
        indent_level: List nesting depth
        indent: Horizontal indentation in points
        font_size: Text size in points
        bold: Whether the block text is drawn bold (headings)
        level: Heading level, 0 for other blocks
        spans: Inline content
        marker: Bullet, ordinal or checkbox glyph for list items
        list_kind: "unordered", "ordered" or "checklist" for list items
        checked: Checklist state, None for other blocks
        interactive: True when tapping the block toggles a checklist item
        anchor: Heading slug that "#anchor" links resolve to
        chapter: Chapter number prefix for headings ("2. 1.")
        cells: Table row cells
        is_header: Whether a table row is the header row
        code: Code block lines
        src: Image source

    """

    kind: BlockKind
    line_index: int
    end_line_index: int
    indent_level: int = 0
    indent: float = 0.0
    font_size: float = 16.0
    bold: bool = False
    level: int = 0
    spans: tuple[Span, ...] = ()
    marker: str = ""
    list_kind: str = ""
    checked: bool | None = None
    interactive: bool = False
    anchor: str = ""
    chapter: str = ""
    cells: tuple[tuple[Span, ...], ...] = ()
    is_header: bool = False
    code: tuple[str, ...] = ()
    src: str = ""

    @property
    def text(self) -> str:
        """Plain text of the descriptor, chapter prefix included."""
        if self.kind is BlockKind.CODE_BLOCK:
            return "\n".join(self.code)
        if self.kind is BlockKind.TABLE_ROW:
            return " | ".join(spans_text(cell) for cell in self.cells)
        body = spans_text(self.spans)
        return f"{self.chapter} {body}" if self.chapter else body


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call, so renderer instances hold no
    state between renders.

    """

    chapters: ChapterCounter = field(default_factory=ChapterCounter)
    seen_anchors: set[str] = field(default_factory=set)

    def unique_anchor(self, text: str) -> str:
        """Slug for a heading, suffixed "-1", "-2"... when already used."""
        base = slugify(text) or "section"
        anchor = base
        counter = 1
        while anchor in self.seen_anchors:
            anchor = f"{base}-{counter}"
            counter += 1
        self.seen_anchors.add(anchor)
        return anchor


class DescriptorRenderer:
    """Base for renderers that turn blocks into ViewDescriptors.

    Subclasses choose the policy: which blocks to drop, heading sizes,
    whether headings carry chapter numbers and anchors.

    """

    __slots__ = ("_config",)

    heading_scales: tuple[float, ...] = (2.2, 1.8, 1.5, 1.25, 1.1, 1.1)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, node: Document) -> tuple[ViewDescriptor, ...]:
        """Render a document to view descriptors, one per kept block.

        Args:
            node: Parsed document

        Returns:
            Descriptors in source order
        """
        ctx = RenderContext()
        views: list[ViewDescriptor] = []
        for block in node.children:
            if not self._keep(block):
                continue
            views.append(self._describe(block, ctx))
        return tuple(views)

    def _keep(self, block: Block) -> bool:
        """Whether a block produces a descriptor."""
        return True

    def heading_size(self, level: int) -> float:
        scales = self.heading_scales
        return self._config.base_font_size * scales[min(max(level, 1), len(scales)) - 1]

    def _describe(self, block: Block, ctx: RenderContext) -> ViewDescriptor:
        """Build the descriptor for one block."""
        base: dict[str, Any] = {
            "kind": block_kind(block),
            "line_index": block.location.line_index,
            "end_line_index": block.location.end_line_index,
            "font_size": self._config.base_font_size,
        }

        match block:
            case Heading():
                base["font_size"] = self.heading_size(block.level)
                return ViewDescriptor(
                    **base,
                    bold=True,
                    level=block.level,
                    spans=block.spans,
                    anchor=self._anchor(block, ctx),
                    chapter=self._chapter(block, ctx),
                )
            case ListItem():
                return ViewDescriptor(
                    **base,
                    indent_level=block.indent_level,
                    indent=block.indent_level * self._config.indent_width,
                    spans=block.spans,
                    marker=list_marker(block),
                    list_kind=block.kind,
                    checked=block.checked if block.kind == "checklist" else None,
                    interactive=block.kind == "checklist",
                )
            case TableRow():
                return ViewDescriptor(**base, cells=block.cells, is_header=block.is_header)
            case CodeBlock():
                return ViewDescriptor(**base, code=block.raw_lines)
            case Blockquote() | Paragraph():
                return ViewDescriptor(**base, spans=block.spans)
            case Image():
                return ViewDescriptor(**base, spans=(PlainText(block.alt),), src=block.src)
            case _:
                return ViewDescriptor(**base)

    def _anchor(self, heading: Heading, ctx: RenderContext) -> str:
        return ""

    def _chapter(self, heading: Heading, ctx: RenderContext) -> str:
        return ""
