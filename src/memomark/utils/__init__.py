"""Utility modules for memomark.

Provides:
- text: slugify, escape_html, truncate for text processing
- logger: get_logger for logging
"""

from memomark.utils.logger import get_logger
from memomark.utils.text import escape_html, slugify, truncate

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
    "truncate",
]
