"""
memomark: the markdown pipeline of a notes app.

Parses the markdown subset used in memos (headings, nested lists with
level-dependent numbering, checklists, pipe tables, fenced code, quotes,
rules) into immutable blocks, and renders them for three surfaces: the
interactive editor preview, the compact home-screen widget and
paginated print/PDF output. HTML export is included.

Quick Start:
    >>> from memomark import parse, render_preview
    >>> doc = parse("# Groceries\\n- [ ] milk\\n- [x] eggs")
    >>> doc.children[1].checked
    False

    >>> views = render_preview("# Groceries\\n- [ ] milk")
    >>> views[1].interactive, views[1].line_index
    (True, 1)

    >>> # Tapping a checklist row rewrites the source
    >>> from memomark import toggle_checklist
    >>> toggle_checklist("- [ ] milk", 0)
    '- [x] milk'

    >>> # Or use the high-level MemoMarkdown class
    >>> from memomark import MemoMarkdown
    >>> md = MemoMarkdown()
    >>> html = md("# Hello **World**")

Print and PDF:
    >>> from memomark import render_pdf
    >>> pdf_bytes = render_pdf("# Report\\n## Summary\\nAll good.")

Installation:
    pip install memomark              # parser, renderers, PDF via reportlab
    pip install memomark[test]        # + pytest and hypothesis
"""

from memomark.checklist import checklist_state, set_checklist_state, toggle_checklist
from memomark.config import DEFAULT_CONFIG, PageSetup, RenderConfig, RenderMode
from memomark.errors import ConfigError, MemomarkError, RenderError
from memomark.lexer import Lexer, classify_line
from memomark.location import SourceLocation
from memomark.nodes import (
    BlankLine,
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    Italic,
    Link,
    ListItem,
    ListKind,
    Paragraph,
    PlainText,
    Span,
    Strikethrough,
    TableRow,
)
from memomark.numbering import ChapterCounter, format_number, format_ordinal
from memomark.parser import Parser, parse
from memomark.parsing import parse_inline
from memomark.renderers import (
    DocumentRenderer,
    FontSet,
    HtmlRenderer,
    PreviewRenderer,
    PrintDocument,
    PrintRenderer,
    ReportlabMeasurer,
    TextMeasurer,
    ViewDescriptor,
    WidgetRenderer,
    render_html,
    render_widget,
    write_pdf,
)
from memomark.serialization import from_dict, from_json, to_dict, to_json
from memomark.text import display_title, extract_text, preview_text
from memomark.tokens import LineToken, LineType

__version__ = "0.1.0"


def render_preview(
    source: str,
    *,
    config: RenderConfig | None = None,
) -> tuple[ViewDescriptor, ...]:
    """Parse and render a memo for the editor preview.

    Args:
        source: Memo text
        config: Preview config (defaults to RenderConfig.for_preview())

    Returns:
        One view descriptor per block

    Example:
        >>> views = render_preview("## Plan\\n1. pack")
        >>> views[0].chapter, views[1].marker
        ('1.', '1.')
    """
    config = config or RenderConfig.for_preview()
    return PreviewRenderer(config).render(parse(source, config=config))


def render_print(
    source: str,
    *,
    config: RenderConfig | None = None,
    measurer: TextMeasurer | None = None,
    title: str | None = None,
) -> PrintDocument:
    """Parse a memo and lay it out on pages.

    Args:
        source: Memo text
        config: Print config (defaults to RenderConfig.for_print())
        measurer: Text width source (defaults to reportlab font metrics)
        title: Document title (defaults to the memo's display title)

    Returns:
        Paginated document with at least one page
    """
    config = config or RenderConfig.for_print()
    if title is None:
        title = display_title(source)
    renderer = PrintRenderer(config, measurer=measurer, title=title)
    return renderer.render(parse(source, config=config))


def render_pdf(
    source: str,
    *,
    config: RenderConfig | None = None,
    fonts: FontSet | None = None,
    title: str | None = None,
) -> bytes:
    """Parse a memo and produce PDF bytes.

    Args:
        source: Memo text
        config: Print config (defaults to RenderConfig.for_print())
        fonts: Font set for metrics and drawing (FontSet.cjk() for Japanese)
        title: PDF title (defaults to the memo's display title)

    Returns:
        PDF file contents

    Raises:
        RenderError: If the PDF cannot be written
    """
    printed = render_print(source, config=config, measurer=ReportlabMeasurer(fonts), title=title)
    return write_pdf(printed, fonts=fonts)


def render(
    source: str,
    *,
    mode: RenderMode | str | None = None,
    config: RenderConfig | None = None,
) -> tuple[ViewDescriptor, ...] | PrintDocument:
    """Parse and render a memo for the surface named by ``mode``.

    Args:
        source: Memo text
        mode: FULL (preview), COMPACT (widget) or PRINT; defaults to
            ``config.mode``, or FULL without a config
        config: Config for that surface (defaults to its preset)

    Returns:
        View descriptors for FULL and COMPACT, a PrintDocument for PRINT

    Raises:
        ConfigError: If ``mode`` is not a known render mode

    Example:
        >>> printed = render("# Report", config=RenderConfig.for_print())
        >>> printed.page_count
        1
    """
    if mode is None:
        mode = config.mode if config is not None else RenderMode.FULL
    elif isinstance(mode, str):
        try:
            mode = RenderMode(mode)
        except ValueError:
            raise ConfigError("mode", f"unknown render mode {mode!r}") from None

    match mode:
        case RenderMode.COMPACT:
            return render_widget(source, config=config)
        case RenderMode.PRINT:
            return render_print(source, config=config)
        case _:
            return render_preview(source, config=config)


class MemoMarkdown:
    """High-level processor holding one RenderConfig.

    Usage:
        >>> md = MemoMarkdown()
        >>> md("# Hello **World**")
        '<h1 id="hello-world">Hello <strong>World</strong></h1>\\n'

        >>> # Same config for every surface
        >>> md = MemoMarkdown(RenderConfig(chapter_numbering=False))
        >>> views = md.preview("## Plan")
        >>> views[0].chapter
        ''

    Thread Safety:
        The config is immutable and every call creates its own parser and
        render context. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize processor.

        Args:
            config: Config shared by every operation (defaults to RenderConfig())
        """
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render a memo to HTML in one call."""
        return self.html(source)

    def parse(self, source: str, *, line_limit: int | None = None) -> Document:
        return parse(source, config=self._config, line_limit=line_limit)

    def parse_many(self, sources: list[str]) -> list[Document]:
        """Parse several memos with the same config.

        Example:
            >>> md = MemoMarkdown()
            >>> docs = md.parse_many(["# Memo 1", "# Memo 2"])
        """
        return [self.parse(source) for source in sources]

    def render(self, source: str) -> tuple[ViewDescriptor, ...] | PrintDocument:
        """Render for the surface named by ``config.mode``."""
        return render(source, config=self._config)

    def preview(self, source: str) -> tuple[ViewDescriptor, ...]:
        return render_preview(source, config=self._config)

    def widget(self, source: str, *, line_limit: int | None = None) -> tuple[ViewDescriptor, ...]:
        """Widget views; mode and image/blank-line options are forced to compact."""
        config = self._config.replace(
            mode=RenderMode.COMPACT,
            preserve_blank_lines=False,
            images_enabled=False,
        )
        return render_widget(source, line_limit=line_limit, config=config)

    def print(self, source: str, *, measurer: TextMeasurer | None = None) -> PrintDocument:
        return render_print(source, config=self._config, measurer=measurer)

    def pdf(self, source: str, *, fonts: FontSet | None = None) -> bytes:
        return render_pdf(source, config=self._config, fonts=fonts)

    def html(self, source: str, *, standalone: bool = False) -> str:
        return render_html(source, config=self._config, standalone=standalone)

    def toggle(self, source: str, line_index: int) -> str:
        """Toggle the checklist item at ``line_index`` (no-op if there is none)."""
        return toggle_checklist(source, line_index)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # High-level API
    "MemoMarkdown",
    "parse",
    "parse_inline",
    "render",
    "render_html",
    "render_pdf",
    "render_preview",
    "render_print",
    "render_widget",
    # Checklist
    "checklist_state",
    "set_checklist_state",
    "toggle_checklist",
    # Numbering
    "ChapterCounter",
    "format_number",
    "format_ordinal",
    # Text
    "display_title",
    "extract_text",
    "preview_text",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "DEFAULT_CONFIG",
    "PageSetup",
    "RenderConfig",
    "RenderMode",
    # Errors
    "ConfigError",
    "MemomarkError",
    "RenderError",
    # Core classes
    "Lexer",
    "LineToken",
    "LineType",
    "Parser",
    "SourceLocation",
    "classify_line",
    # Renderers
    "DocumentRenderer",
    "FontSet",
    "HtmlRenderer",
    "PreviewRenderer",
    "PrintDocument",
    "PrintRenderer",
    "TextMeasurer",
    "ViewDescriptor",
    "WidgetRenderer",
    "write_pdf",
    # Nodes - Blocks
    "BlankLine",
    "Block",
    "Blockquote",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "Image",
    "ListItem",
    "ListKind",
    "Paragraph",
    "TableRow",
    # Nodes - Spans
    "Bold",
    "Code",
    "Italic",
    "Link",
    "PlainText",
    "Span",
    "Strikethrough",
]
