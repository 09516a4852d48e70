"""LineType and LineToken definitions for the line classifier.

The lexer turns every raw source line into exactly one LineToken. The
parser consumes the token stream and assembles blocks.

Thread Safety:
LineToken is frozen (immutable) and safe to share across threads.
LineType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineType(Enum):
    """Classification of one source line.

    Organized by category:
    - Skipped lines (BLANK, IMAGE)
    - Code fence lines
    - Block lines (headings, lists, tables, quotes, rules, paragraphs)

    """

    # Skipped by compact renderers
    BLANK = auto()
    IMAGE = auto()  # ![alt](src)

    # Code fences
    FENCE_OPEN = auto()  # ```lang
    FENCE_CLOSE = auto()  # ```
    CODE_LINE = auto()  # Anything inside an open fence

    # Blocks
    TABLE_ROW = auto()  # | a | b |
    HEADING = auto()  # # Title
    CHECKLIST_ITEM = auto()  # - [ ] task
    UNORDERED_ITEM = auto()  # - item, * item, + item
    ORDERED_ITEM = auto()  # 1. item
    BLOCKQUOTE = auto()  # > quote
    HORIZONTAL_RULE = auto()  # ---, ***, ___
    PARAGRAPH = auto()

    @property
    def is_skip(self) -> bool:
        """True for lines that never produce a block in compact output."""
        return self in (LineType.BLANK, LineType.IMAGE)

    @property
    def is_list_item(self) -> bool:
        return self in (
            LineType.CHECKLIST_ITEM,
            LineType.UNORDERED_ITEM,
            LineType.ORDERED_ITEM,
        )


@dataclass(frozen=True, slots=True)
class LineToken:
    """A classified source line.

    Attributes:
        type: Classification of the line
        content: Extracted content (marker stripped; raw text for code lines)
        line_index: Zero-based index of the line in the source
        indent_level: Nesting depth from leading tabs and spaces
        level: Heading level (1-6) for headings, otherwise 0
        checked: Checklist state for checklist items
        marker: List marker as written ("-", "*", "+", "12.")
        info: Info string of an opening fence ("python")

    """

    type: LineType
    content: str
    line_index: int
    indent_level: int = 0
    level: int = 0
    checked: bool = False
    marker: str = ""
    info: str = ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        content_preview = self.content[:20] + "..." if len(self.content) > 20 else self.content
        return f"LineToken({self.type.name}, {content_preview!r}, line {self.line_index})"
