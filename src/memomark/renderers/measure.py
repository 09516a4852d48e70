"""Font-independent text measurement.

FixedWidthMeasurer estimates widths from character counts: every
character is ``ratio`` of the font size wide, and East Asian wide or
fullwidth characters count double. It needs no font files, so layout
with it is identical on every machine.
"""

from __future__ import annotations

import unicodedata


class FixedWidthMeasurer:
    """Deterministic width estimate for layout without font metrics.

    Usage:
            >>> FixedWidthMeasurer().width("abcd", 10)
            20.0
            >>> FixedWidthMeasurer().width("メモ", 10)
            20.0

    """

    __slots__ = ("_ratio",)

    def __init__(self, ratio: float = 0.5) -> None:
        self._ratio = ratio

    def width(
        self,
        text: str,
        size: float,
        *,
        bold: bool = False,
        italic: bool = False,
        monospace: bool = False,
    ) -> float:
        units = 0
        for char in text:
            units += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
        return units * size * self._ratio
