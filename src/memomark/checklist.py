"""Checklist toggle side channel.

Interactive renderers tag checklist rows with their source line index.
When the user taps a checkbox the host sends that index back here and
stores the returned text. A request that does not point at a checklist
line is a no-op, not an error: the text comes back unchanged.

Example:
    >>> toggle_checklist("- [ ] task", 0)
    '- [x] task'
    >>> toggle_checklist("- [x] task", 0)
    '- [ ] task'
    >>> toggle_checklist("plain", 0)
    'plain'
"""

from __future__ import annotations

from memomark.lexer import Lexer, LexerMode, classify_line, split_lines
from memomark.tokens import LineType
from memomark.utils.logger import get_logger

logger = get_logger(__name__)

UNCHECKED = "- [ ] "
CHECKED_MARKERS = ("- [x] ", "- [X] ")


def _locate(source: str, line_index: int) -> tuple[list[str], int, str] | None:
    """Find the checklist marker on a line.

    Returns (lines, marker offset, marker) or None when the index is out
    of range, the line sits inside a code fence, or it is not a
    checklist item.
    """
    lines = split_lines(source)
    if not 0 <= line_index < len(lines):
        logger.debug("Checklist toggle ignored: line %d out of range", line_index)
        return None

    if _inside_fence(lines, line_index):
        logger.debug("Checklist toggle ignored: line %d is code", line_index)
        return None

    token = classify_line(lines[line_index], line_index=line_index)
    if token.type is not LineType.CHECKLIST_ITEM:
        logger.debug("Checklist toggle ignored: line %d is %s", line_index, token.type.name)
        return None

    line = lines[line_index]
    offset = len(line) - len(line.lstrip())
    return lines, offset, line[offset : offset + len(UNCHECKED)]


def _rewrite(
    source: str, located: tuple[list[str], int, str], line_index: int, checked: bool
) -> str:
    lines, offset, marker = located
    if (marker in CHECKED_MARKERS) == checked:
        return source

    replacement = CHECKED_MARKERS[0] if checked else UNCHECKED
    line = lines[line_index]
    lines[line_index] = line[:offset] + replacement + line[offset + len(marker) :]
    return "\n".join(lines)


def _inside_fence(lines: list[str], line_index: int) -> bool:
    lexer = Lexer("\n".join(lines[:line_index]))
    for _ in lexer.tokenize():
        pass
    return lexer.mode is LexerMode.CODE_FENCE


def checklist_state(source: str, line_index: int) -> bool | None:
    """Checked state of the checklist item at ``line_index``.

    Returns:
        True or False for a checklist line, None for anything else
    """
    located = _locate(source, line_index)
    if located is None:
        return None
    _, _, marker = located
    return marker in CHECKED_MARKERS


def set_checklist_state(source: str, line_index: int, checked: bool) -> str:
    """Set the checklist item at ``line_index`` to ``checked``.

    Only the marker on that line changes; every other character of the
    source, including line endings, is preserved.

    Args:
        source: Full memo text
        line_index: Zero-based line of the item
        checked: Desired state

    Returns:
        Updated text, or ``source`` unchanged when the line is not a
        checklist item
    """
    located = _locate(source, line_index)
    if located is None:
        return source
    return _rewrite(source, located, line_index, checked)


def toggle_checklist(source: str, line_index: int) -> str:
    """Flip the checklist item at ``line_index``.

    Checked items ("- [x] ", "- [X] ") become "- [ ] ", unchecked items
    become "- [x] ".

    Args:
        source: Full memo text
        line_index: Zero-based line of the item

    Returns:
        Updated text, or ``source`` unchanged for an out-of-range index
        or a line that is not a checklist item
    """
    located = _locate(source, line_index)
    if located is None:
        return source
    _, _, marker = located
    return _rewrite(source, located, line_index, marker not in CHECKED_MARKERS)
