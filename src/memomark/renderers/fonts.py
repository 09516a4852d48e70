"""Fonts and text metrics for print output.

Print layout and the PDF writer must agree on fonts, so both take a
FontSet. The default set uses the standard PDF Helvetica and Courier
faces, which need no font files. ``FontSet.cjk()`` switches to a
built-in Japanese CID font for memos written in Japanese.

Example:
    >>> measurer = ReportlabMeasurer()
    >>> measurer.width("Memo", 12) > 0
    True

"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont

CJK_FONT = "HeiseiKakuGo-W5"


def _encodable(char: str, face: object) -> bool:
    encoding = getattr(face, "encName", "")
    if "UCS" in encoding:
        return True
    try:
        char.encode(encoding)
    except UnicodeEncodeError:
        return False
    except LookupError:
        return True
    return True


def drawable_text(text: str, font_name: str) -> str:
    """Replace circled numbers the font cannot draw with arabic digits.

    Standard PDF fonts only cover their single-byte encodings (plus the
    Symbol and ZapfDingbats substitutes), so circled numbers past ⑩
    have no glyph there. Other characters are left alone.

    Example:
        >>> drawable_text("⑪", "Helvetica")
        '11'
    """
    if text.isascii():
        return text
    font = pdfmetrics.getFont(font_name)
    faces = [font, *getattr(font, "substitutionFonts", ())]
    chars = []
    for char in text:
        circled = unicodedata.name(char, "").startswith("CIRCLED NUMBER")
        if circled and not any(_encodable(char, face) for face in faces):
            chars.append(str(int(unicodedata.numeric(char))))
        else:
            chars.append(char)
    return "".join(chars)


@dataclass(frozen=True, slots=True)
class FontSet:
    """Font names per text style.

    Attributes:
        regular: Body text
        bold: Headings, table headers, bold spans
        italic: Italic spans, quotes
        bold_italic: Italic spans inside bold context
        monospace: Code

    """

    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    italic: str = "Helvetica-Oblique"
    bold_italic: str = "Helvetica-BoldOblique"
    monospace: str = "Courier"

    def font_name(
        self, *, bold: bool = False, italic: bool = False, monospace: bool = False
    ) -> str:
        """Font for a style combination; monospace wins over the others."""
        if monospace:
            return self.monospace
        if bold and italic:
            return self.bold_italic
        if bold:
            return self.bold
        if italic:
            return self.italic
        return self.regular

    @classmethod
    def cjk(cls) -> FontSet:
        """Japanese-capable set built on a CID font shipped with reportlab.

        CID fonts have a single weight, so every style maps to it.
        """
        pdfmetrics.registerFont(UnicodeCIDFont(CJK_FONT))
        return cls(
            regular=CJK_FONT,
            bold=CJK_FONT,
            italic=CJK_FONT,
            bold_italic=CJK_FONT,
            monospace=CJK_FONT,
        )


DEFAULT_FONTS = FontSet()


class ReportlabMeasurer:
    """TextMeasurer backed by reportlab font metrics.

    Thread Safety:
        Holds only an immutable FontSet; safe to share.

    """

    __slots__ = ("_fonts",)

    def __init__(self, fonts: FontSet | None = None) -> None:
        self._fonts = fonts or DEFAULT_FONTS

    @property
    def fonts(self) -> FontSet:
        return self._fonts

    def width(
        self,
        text: str,
        size: float,
        *,
        bold: bool = False,
        italic: bool = False,
        monospace: bool = False,
    ) -> float:
        name = self._fonts.font_name(bold=bold, italic=italic, monospace=monospace)
        return pdfmetrics.stringWidth(drawable_text(text, name), name, size)
