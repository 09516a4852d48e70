"""Lexer operating modes and marker constants."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes on fence lines:
    - BLOCK: Classifying ordinary markdown lines
    - CODE_FENCE: Inside a fenced code block, every line is raw code

    """

    BLOCK = auto()
    CODE_FENCE = auto()


FENCE_MARKER = "```"

CHECKLIST_PREFIXES = ("- [ ] ", "- [x] ", "- [X] ")

UNORDERED_PREFIXES = ("- ", "* ", "+ ")

HORIZONTAL_RULES = frozenset({"---", "***", "___"})

# Both must appear on a line for it to count as an image line
IMAGE_OPENER = "!["
IMAGE_SEPARATOR = "]("
