"""memomark renderers.

Renderers convert a parsed Document into an output for one surface.

Available Renderers:
- PreviewRenderer: View descriptors for the interactive editor preview
- WidgetRenderer: Compact view descriptors for the home-screen widget
- PrintRenderer: Paginated layout with chapter numbers for print/PDF
- HtmlRenderer: HTML export using StringBuilder pattern

``write_pdf`` draws a PrintRenderer result with reportlab.

Thread Safety:
All per-render state is created inside each render() call.
Safe for concurrent use from multiple threads.

"""

from memomark.renderers.fonts import DEFAULT_FONTS, FontSet, ReportlabMeasurer
from memomark.renderers.html import HtmlRenderer, render_html
from memomark.renderers.measure import FixedWidthMeasurer
from memomark.renderers.pdf import write_pdf
from memomark.renderers.preview import PreviewRenderer
from memomark.renderers.printing import (
    OutlineEntry,
    PrintDocument,
    PrintElement,
    PrintPage,
    PrintRenderer,
    TextRun,
)
from memomark.renderers.protocol import DocumentRenderer, TextMeasurer
from memomark.renderers.views import BlockKind, ViewDescriptor
from memomark.renderers.widget import WidgetRenderer, render_widget

__all__ = [  # noqa: RUF022
    # Renderers
    "DocumentRenderer",
    "HtmlRenderer",
    "PreviewRenderer",
    "PrintRenderer",
    "WidgetRenderer",
    # Views
    "BlockKind",
    "ViewDescriptor",
    # Print model
    "OutlineEntry",
    "PrintDocument",
    "PrintElement",
    "PrintPage",
    "TextRun",
    # Measuring
    "DEFAULT_FONTS",
    "FixedWidthMeasurer",
    "FontSet",
    "ReportlabMeasurer",
    "TextMeasurer",
    # Convenience
    "render_html",
    "render_widget",
    "write_pdf",
]
