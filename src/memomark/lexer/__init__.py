"""Line classifier for memomark.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, helpers
├── core.py              # Lexer class (mixin composition + mode switching)
├── modes.py             # LexerMode enum, marker constants
└── classifiers/         # One mixin per line kind
    ├── fence.py         # ``` fences
    ├── table.py         # | pipe | rows |
    ├── heading.py       # # headings
    ├── list.py          # checklist, unordered, ordered items
    ├── quote.py         # > quotes
    └── thematic.py      # --- rules

Usage:
    >>> from memomark.lexer import Lexer
    >>> [t.type.name for t in Lexer("# Hi\\n1. one").tokenize()]
    ['HEADING', 'ORDERED_ITEM']

"""

from memomark.lexer.core import Lexer, calc_indent_level, classify_line, split_lines
from memomark.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "calc_indent_level", "classify_line", "split_lines"]
