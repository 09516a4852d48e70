"""Ordinal and chapter numbering.

List ordinals change style with nesting depth:

    level 0   1. 2. 3.        arabic
    level 1   ① ② ③          circled digits (1-50)
    level 2   i. ii. iii.     lowercase roman (1-50)
    level 3   a. b. c.        lowercase latin (1-26)
    level 4+  1. 2. 3.        arabic

Out-of-range ordinals fall back to arabic digits. Circled glyphs carry
no trailing period; every other style does.

Headings get chapter numbers independently of lists (see ChapterCounter).

Example:
    >>> format_number(3, level=1)
    '③'
    >>> format_ordinal(4, level=2)
    'iv.'
"""

from __future__ import annotations

# ①..⑳ are U+2460..U+2473, ㉑..㉟ U+3251..U+325F, ㊱..㊿ U+32B1..U+32BF
_CIRCLED: tuple[str, ...] = (
    tuple(chr(0x2460 + i) for i in range(20))
    + tuple(chr(0x3251 + i) for i in range(15))
    + tuple(chr(0x32B1 + i) for i in range(15))
)

_ROMAN_PAIRS: tuple[tuple[int, str], ...] = (
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)

CIRCLED_MAX = len(_CIRCLED)
ROMAN_MAX = 50
ALPHA_MAX = 26


def to_circled(n: int) -> str:
    """Circled digit glyph for 1..50, arabic digits otherwise."""
    if 1 <= n <= CIRCLED_MAX:
        return _CIRCLED[n - 1]
    return str(n)


def to_roman(n: int) -> str:
    """Lowercase roman numeral for 1..50, arabic digits otherwise."""
    if not 1 <= n <= ROMAN_MAX:
        return str(n)

    parts: list[str] = []
    remaining = n
    for value, symbol in _ROMAN_PAIRS:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value
    return "".join(parts)


def to_alpha(n: int) -> str:
    """Lowercase latin letter for 1..26, arabic digits otherwise."""
    if 1 <= n <= ALPHA_MAX:
        return chr(ord("a") + n - 1)
    return str(n)


def format_number(ordinal: int, level: int) -> str:
    """Format an ordinal in the style of its indentation level.

    Args:
        ordinal: Sequential number, starting at 1
        level: Zero-based indentation level

    Returns:
        The bare glyph, without any display suffix

    Examples:
        >>> format_number(51, level=1)
        '51'
        >>> format_number(27, level=3)
        '27'
    """
    match level:
        case 1:
            return to_circled(ordinal)
        case 2:
            return to_roman(ordinal)
        case 3:
            return to_alpha(ordinal)
        case _:
            return str(ordinal)


def format_ordinal(ordinal: int, level: int) -> str:
    """Format an ordinal for display, including its suffix.

    Level 1 (circled) gets no trailing period, even when it falls back
    to arabic digits; all other levels append ".".
    """
    number = format_number(ordinal, level)
    if level == 1:
        return number
    return f"{number}."


class ChapterCounter:
    """Hierarchical heading numbers for print and preview.

    A level-1 heading opens a new chapter: it resets every deeper counter
    and is shown without a number. Level 2 headings are numbered "1.",
    "2.", ...; deeper headings extend the number ("1. 2.", "1. 2. 1.").
    Each heading resets the counters below it.

    Usage:
            >>> counter = ChapterCounter()
            >>> counter.next(1), counter.next(2), counter.next(3), counter.next(2)
            ('', '1.', '1. 1.', '2.')

    Thread Safety:
        Create one per render call; instances hold mutable state.

    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        # index 0 is level 2, index 4 is level 6
        self._counts: list[int] = [0, 0, 0, 0, 0]

    def next(self, level: int) -> str:
        """Advance the counters for a heading and return its chapter prefix.

        Args:
            level: Heading level 1-6 (clamped)

        Returns:
            Display prefix such as "2." or "2. 1.", empty for level 1
        """
        level = min(max(level, 1), 6)
        if level == 1:
            self._counts = [0, 0, 0, 0, 0]
            return ""

        slot = level - 2
        self._counts[slot] += 1
        for deeper in range(slot + 1, len(self._counts)):
            self._counts[deeper] = 0
        return " ".join(f"{count}." for count in self._counts[: slot + 1])

    def reset(self) -> None:
        self._counts = [0, 0, 0, 0, 0]
