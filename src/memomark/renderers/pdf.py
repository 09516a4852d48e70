"""PDF output for paginated print documents.

Draws a PrintDocument with reportlab's canvas. Layout is already final
when it arrives here: this module only converts top-left positions to
PDF coordinates, selects fonts and adds link annotations plus an
outline of the headings. Checklist markers are drawn as outline boxes
rather than glyphs.

Example:
    >>> from memomark import render_print
    >>> data = write_pdf(render_print("# Trip\\n- [ ] passport"))
    >>> data[:5]
    b'%PDF-'

"""

from __future__ import annotations

import io

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from memomark.errors import RenderError
from memomark.renderers.fonts import DEFAULT_FONTS, FontSet, drawable_text
from memomark.renderers.printing import PrintDocument, PrintElement, PrintLine
from memomark.renderers.views import BlockKind
from memomark.utils.logger import get_logger

logger = get_logger(__name__)

CODE_BACKGROUND = 0.95
RULE_WIDTH = 0.5
CHECKBOX_SCALE = 0.7


def write_pdf(
    document: PrintDocument,
    *,
    fonts: FontSet | None = None,
    title: str | None = None,
) -> bytes:
    """Render a paginated document to PDF bytes.

    Args:
        document: Output of PrintRenderer.render()
        fonts: Font set; must match the one used to measure the layout
        title: PDF title metadata (defaults to ``document.title``)

    Returns:
        The PDF file contents

    Raises:
        RenderError: If reportlab cannot draw the document (for example an
            unregistered font name in ``fonts``)
    """
    fonts = fonts or DEFAULT_FONTS
    setup = document.page_setup
    buffer = io.BytesIO()

    try:
        pdf = canvas.Canvas(buffer, pagesize=(setup.width, setup.height))
        pdf.setTitle(title if title is not None else document.title)
        pdf.setCreator("memomark")

        bookmarks = _bookmark_keys(document)
        outline_level = -1
        for page in document.pages:
            for element in page.elements:
                key = bookmarks.get((page.number, element.line_index))
                if key is not None and element.kind is BlockKind.HEADING and not element.continued:
                    outline_level = _add_bookmark(pdf, element, key, outline_level, setup.height)
                _draw_element(pdf, element, fonts, setup.height, setup.printable_width)
            pdf.showPage()
        pdf.save()
    except (KeyError, ValueError) as exc:
        raise RenderError(f"Failed to write PDF: {exc}") from exc

    logger.debug("Wrote PDF with %d pages", document.page_count)
    return buffer.getvalue()


def _bookmark_keys(document: PrintDocument) -> dict[tuple[int, int], str]:
    return {
        (entry.page_number, entry.line_index): f"heading-{entry.line_index}"
        for entry in document.outline
    }


def _add_bookmark(
    pdf: canvas.Canvas, element: PrintElement, key: str, previous: int, page_height: float
) -> int:
    """Add an outline entry; levels may deepen by at most one step at a time."""
    level = min(element.level - 1, previous + 1)
    label = element.text.replace("\n", " ")
    pdf.bookmarkHorizontal(key, 0, page_height - element.y)
    pdf.addOutlineEntry(label, key, level=level)
    return level


def _draw_element(
    pdf: canvas.Canvas,
    element: PrintElement,
    fonts: FontSet,
    page_height: float,
    printable_width: float,
) -> None:
    top = page_height - element.y

    match element.kind:
        case BlockKind.HORIZONTAL_RULE:
            middle = top - element.height / 2
            pdf.setLineWidth(RULE_WIDTH)
            pdf.line(element.x, middle, element.x + printable_width, middle)
            return
        case BlockKind.BLANK_LINE:
            return
        case BlockKind.CODE_BLOCK:
            pdf.setFillGray(CODE_BACKGROUND)
            pdf.rect(
                element.x - 4,
                top - element.height,
                printable_width + 8,
                element.height,
                stroke=0,
                fill=1,
            )
            pdf.setFillGray(0)

    for index, line in enumerate(element.lines):
        baseline = top - index * element.line_height - element.font_size
        _draw_line(pdf, line, element.x, baseline, element.font_size, fonts)


def _draw_line(
    pdf: canvas.Canvas,
    line: PrintLine,
    x: float,
    baseline: float,
    size: float,
    fonts: FontSet,
) -> None:
    for run in line:
        name = fonts.font_name(bold=run.bold, italic=run.italic, monospace=run.monospace)
        text = drawable_text(run.text, name)
        width = pdfmetrics.stringWidth(text, name, size)
        if run.checkbox is None:
            pdf.setFont(name, size)
            pdf.drawString(x, baseline, text)
        else:
            _draw_checkbox(pdf, x, baseline, size, checked=run.checkbox)

        if run.strike:
            strike_y = baseline + size * 0.3
            pdf.setLineWidth(RULE_WIDTH)
            pdf.line(x, strike_y, x + width, strike_y)
        if run.href.startswith(("http://", "https://")):
            pdf.linkURL(run.href, (x, baseline - 2, x + width, baseline + size), relative=0)

        x += width


def _draw_checkbox(
    pdf: canvas.Canvas, x: float, baseline: float, size: float, *, checked: bool
) -> None:
    """Outline box sitting on the baseline, with a tick when checked."""
    side = size * CHECKBOX_SCALE
    pdf.setLineWidth(RULE_WIDTH)
    pdf.rect(x, baseline, side, side, stroke=1, fill=0)
    if checked:
        pdf.setLineWidth(RULE_WIDTH * 2)
        pdf.line(x + side * 0.2, baseline + side * 0.5, x + side * 0.42, baseline + side * 0.2)
        pdf.line(x + side * 0.42, baseline + side * 0.2, x + side * 0.85, baseline + side * 0.85)
