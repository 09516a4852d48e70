"""Parsing mixins for memomark.

Architecture:
parsing/
├── blocks/              # Block assembly
│   ├── core.py          # BlockParsingMixin: dispatch, fences, images
│   ├── list.py          # ListParsingMixin, IndentCounterTable
│   └── table.py         # TableParsingMixin
└── inline/              # Inline span tokenizer
    ├── core.py          # parse_inline, InlineParsingMixin
    ├── scanners.py      # One scanner per span pattern
    └── tokens.py        # SpanMatch

"""

from memomark.parsing.blocks import BlockParsingMixin, IndentCounterTable
from memomark.parsing.inline import InlineParsingMixin, parse_inline

__all__ = [
    "BlockParsingMixin",
    "IndentCounterTable",
    "InlineParsingMixin",
    "parse_inline",
]
