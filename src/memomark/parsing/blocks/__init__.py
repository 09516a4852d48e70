"""Block parsing mixins for memomark."""

from memomark.parsing.blocks.core import BlockParsingMixin, parse_image
from memomark.parsing.blocks.list import IndentCounterTable, ListParsingMixin
from memomark.parsing.blocks.table import TableParsingMixin, is_separator_row, split_cells

__all__ = [
    "BlockParsingMixin",
    "IndentCounterTable",
    "ListParsingMixin",
    "TableParsingMixin",
    "is_separator_row",
    "parse_image",
    "split_cells",
]
