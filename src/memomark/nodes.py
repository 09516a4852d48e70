"""Typed document nodes for memomark.

All nodes are frozen dataclasses with slots, so a Document can be handed
to any renderer (or thread) without copying.

Node Hierarchy:
SpanNode (inline, compared by value)
├── PlainText
├── Code
├── Bold
├── Italic
├── Strikethrough
└── Link
Node (block-level, tracks source lines)
├── Document
├── Heading
├── ListItem
├── TableRow
├── CodeBlock
├── Blockquote
├── HorizontalRule
├── Paragraph
├── BlankLine      (only when blank lines are preserved)
└── Image          (only when images are enabled)

Styles never nest: a span's text is taken verbatim from between its
delimiters.

"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from memomark.location import SourceLocation

# =============================================================================
# Inline spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class SpanNode:
    """Base class for inline spans.

    ``text`` is the visible text with markdown delimiters removed.

    """

    text: str


@dataclass(frozen=True, slots=True)
class PlainText(SpanNode):
    """Unstyled text between (or instead of) styled spans."""


@dataclass(frozen=True, slots=True)
class Code(SpanNode):
    """Inline code.

    Markdown: `code`

    """


@dataclass(frozen=True, slots=True)
class Bold(SpanNode):
    """Bold text.

    Markdown: **text**

    """


@dataclass(frozen=True, slots=True)
class Italic(SpanNode):
    """Italic text.

    Markdown: *text* (a single asterisk not touching another one)

    """


@dataclass(frozen=True, slots=True)
class Strikethrough(SpanNode):
    """Struck-out text.

    Markdown: ~~text~~

    """


@dataclass(frozen=True, slots=True)
class Link(SpanNode):
    """Hyperlink.

    Markdown: [text](href). ``href`` starting with ``#`` targets a
    heading anchor inside the same memo.

    """

    href: str

    @property
    def is_internal(self) -> bool:
        """True for ``#anchor`` links to a heading in the same memo."""
        return self.href.startswith("#")

    @property
    def is_external(self) -> bool:
        """True for http(s) links that open outside the app."""
        return self.href.startswith(("http://", "https://"))


Span: TypeAlias = PlainText | Code | Bold | Italic | Strikethrough | Link


# =============================================================================
# Block nodes
# =============================================================================


ListKind: TypeAlias = Literal["unordered", "ordered", "checklist"]


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all block nodes.

    All blocks track the source lines they came from so renderers can
    attach interaction handlers by line index.

    """

    location: SourceLocation

    @property
    def line_index(self) -> int:
        return self.location.line_index


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: # Title (1-6 hashes followed by a space)

    """

    level: int
    spans: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """One list line.

    Items are not grouped into list containers; nesting is expressed by
    ``indent_level`` alone.

    Attributes:
        kind: "unordered", "ordered" or "checklist"
        indent_level: Zero-based nesting depth
        spans: Item text
        checked: Checklist state (always False for other kinds)
        ordinal: Sequential number at this depth (ordered only)
        ordinal_display: Formatted ordinal such as "1.", "②" or "iv."
        marker: Marker as written in the source ("-", "*", "+", "3.")

    """

    kind: ListKind
    indent_level: int
    spans: tuple[Span, ...]
    checked: bool = False
    ordinal: int | None = None
    ordinal_display: str = ""
    marker: str = ""


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """One row of a pipe table.

    A table is a run of consecutive rows; the first row of a run is the
    header. The ``|---|`` separator row never becomes a node.

    """

    cells: tuple[tuple[Span, ...], ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    Markdown:
        ```python
        code
        ```

    Lines are kept verbatim and never inline-tokenized. ``closed`` is
    False when input (or a line limit) ended before the closing fence.

    """

    raw_lines: tuple[str, ...]
    info: str = ""
    closed: bool = True

    @property
    def code(self) -> str:
        """The block's lines joined with newlines."""
        return "\n".join(self.raw_lines)


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """One quoted line.

    Markdown: > text

    """

    spans: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markdown: ---, *** or ___ on a line of its own

    """


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A line of ordinary text."""

    spans: tuple[Span, ...]


@dataclass(frozen=True, slots=True)
class BlankLine(Node):
    """An empty source line kept for layout in the full preview."""


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image line.

    Markdown: ![alt](src)

    """

    alt: str
    src: str


Block: TypeAlias = (
    Heading
    | ListItem
    | TableRow
    | CodeBlock
    | Blockquote
    | HorizontalRule
    | Paragraph
    | BlankLine
    | Image
)


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a parsed memo.

    Attributes:
        children: Blocks in source order
        line_count: Raw source lines consumed (after any line limit)

    """

    children: tuple[Block, ...]
    line_count: int = 0
