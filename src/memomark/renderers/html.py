"""HTML renderer using StringBuilder pattern.

Renders a memo to an HTML fragment (or a standalone page) for export and
sharing. Blocks arrive flat from the parser, so the renderer regroups
them while walking: consecutive list items become ``<ul>``/``<ol>``,
consecutive table rows one ``<table>`` and consecutive quote lines one
``<blockquote>``.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

"""

from __future__ import annotations

from memomark.config import DEFAULT_CONFIG, RenderConfig
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
    Paragraph,
    Span,
    Strikethrough,
    TableRow,
)
from memomark.parser import parse
from memomark.renderers.views import RenderContext
from memomark.stringbuilder import StringBuilder
from memomark.text import display_title, spans_text
from memomark.utils.logger import get_logger
from memomark.utils.text import escape_html

logger = get_logger(__name__)

_PAGE_HEAD = (
    '<!DOCTYPE html>\n<html>\n<head>\n<meta charset="utf-8" />\n'
    "<title>{title}</title>\n</head>\n<body>\n"
)
_PAGE_FOOT = "</body>\n</html>\n"

_OL_OPEN = '<ol style="list-style-type: none">\n'


def _list_tag(item: ListItem) -> str:
    return "ol" if item.kind == "ordered" else "ul"


class HtmlRenderer:
    """Render a document to HTML.

    Usage:
        >>> from memomark import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1 id="hello-world">Hello <strong>World</strong></h1>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.

    """

    __slots__ = ("_config", "_standalone", "_title")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        standalone: bool = False,
        title: str = "",
    ) -> None:
        """Initialize renderer.

        Args:
            config: Render config (``chapter_numbering`` prefixes headings)
            standalone: Wrap the fragment in a full HTML page
            title: Page title for standalone output
        """
        self._config = config or DEFAULT_CONFIG
        self._standalone = standalone
        self._title = title

    def render(self, node: Document) -> str:
        """Render document to an HTML string.

        Args:
            node: Parsed document

        Returns:
            HTML fragment, or a full page when ``standalone`` is set
        """
        ctx = RenderContext()
        sb = StringBuilder()
        if self._standalone:
            sb.append(_PAGE_HEAD.format(title=escape_html(self._title)))

        children = node.children
        i = 0
        while i < len(children):
            block = children[i]
            match block:
                case ListItem():
                    i = self._render_list(children, i, sb)
                    continue
                case TableRow():
                    i = self._render_table(children, i, sb)
                    continue
                case Blockquote():
                    i = self._render_blockquote(children, i, sb)
                    continue
                case _:
                    self._render_block(block, sb, ctx)
            i += 1

        if self._standalone:
            sb.append(_PAGE_FOOT)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        match block:
            case Heading():
                self._render_heading(block, sb, ctx)
            case Paragraph():
                sb.append("<p>")
                self._render_spans(block.spans, sb)
                sb.append("</p>\n")
            case CodeBlock():
                lang_class = (
                    f' class="language-{escape_html(block.info.split()[0])}"'
                    if block.info.strip()
                    else ""
                )
                sb.append(f"<pre><code{lang_class}>")
                sb.append(escape_html(block.code))
                sb.append("</code></pre>\n")
            case HorizontalRule():
                sb.append("<hr />\n")
            case Image():
                sb.append(
                    f'<p><img src="{escape_html(block.src)}" alt="{escape_html(block.alt)}" /></p>\n'
                )
            case BlankLine():
                pass
            case _:
                logger.warning("No HTML rendering for %s", type(block).__name__)

    def _render_heading(self, heading: Heading, sb: StringBuilder, ctx: RenderContext) -> None:
        anchor = ctx.unique_anchor(spans_text(heading.spans))
        chapter = ctx.chapters.next(heading.level)
        sb.append(f'<h{heading.level} id="{escape_html(anchor)}">')
        if chapter and self._config.chapter_numbering:
            sb.append(f'<span class="chapter">{escape_html(chapter)}</span> ')
        self._render_spans(heading.spans, sb)
        sb.append(f"</h{heading.level}>\n")

    def _render_list(self, children: tuple[Block, ...], start: int, sb: StringBuilder) -> int:
        """Render a run of list items, nesting by indent level.

        Returns:
            Index of the first block after the run
        """
        # Stack of (indent_level, tag) for the open lists
        stack: list[tuple[int, str]] = []
        i = start
        while i < len(children):
            match children[i]:
                case ListItem() as item:
                    pass
                case _:
                    break
            tag = _list_tag(item)

            while stack and (
                stack[-1][0] > item.indent_level
                or (stack[-1][0] == item.indent_level and stack[-1][1] != tag)
            ):
                sb.append(f"</li>\n</{stack.pop()[1]}>\n")
            if stack and stack[-1][0] == item.indent_level:
                sb.append("</li>\n")
            else:
                if stack:
                    sb.append("\n")
                sb.append(_OL_OPEN if tag == "ol" else "<ul>\n")
                stack.append((item.indent_level, tag))

            self._render_list_item(item, sb)
            i += 1

        while stack:
            sb.append(f"</li>\n</{stack.pop()[1]}>\n")
        return i

    def _render_list_item(self, item: ListItem, sb: StringBuilder) -> None:
        match item.kind:
            case "checklist":
                checked = " checked" if item.checked else ""
                sb.append(
                    f'<li class="task-list-item"><input type="checkbox" disabled{checked} /> '
                )
            case "ordered":
                # Display ordinal in the text; the list hides its native marker
                display = escape_html(item.ordinal_display)
                value = f' value="{item.ordinal}"' if item.ordinal is not None else ""
                sb.append(
                    f'<li{value} data-ordinal="{display}"><span class="ordinal">{display}</span> '
                )
            case _:
                sb.append("<li>")
        self._render_spans(item.spans, sb)

    def _render_table(self, children: tuple[Block, ...], start: int, sb: StringBuilder) -> int:
        """Render one table: a header row and the data rows after it.

        A second header row belongs to the next table.

        Returns:
            Index of the first block after the table
        """
        sb.append("<table>\n")
        i = start
        in_body = False
        while i < len(children):
            match children[i]:
                case TableRow() as row if not (row.is_header and i > start):
                    pass
                case _:
                    break
            if row.is_header:
                sb.append("<thead>\n")
            elif not in_body:
                sb.append("<tbody>\n")
                in_body = True
            tag = "th" if row.is_header else "td"
            sb.append("<tr>\n")
            for cell in row.cells:
                sb.append(f"<{tag}>")
                self._render_spans(cell, sb)
                sb.append(f"</{tag}>\n")
            sb.append("</tr>\n")
            if row.is_header:
                sb.append("</thead>\n")
            i += 1
        if in_body:
            sb.append("</tbody>\n")
        sb.append("</table>\n")
        return i

    def _render_blockquote(self, children: tuple[Block, ...], start: int, sb: StringBuilder) -> int:
        sb.append("<blockquote>\n")
        i = start
        while i < len(children):
            match children[i]:
                case Blockquote() as quote:
                    pass
                case _:
                    break
            sb.append("<p>")
            self._render_spans(quote.spans, sb)
            sb.append("</p>\n")
            i += 1
        sb.append("</blockquote>\n")
        return i

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_spans(self, spans: tuple[Span, ...], sb: StringBuilder) -> None:
        for span in spans:
            text = escape_html(span.text)
            match span:
                case Bold():
                    sb.append(f"<strong>{text}</strong>")
                case Italic():
                    sb.append(f"<em>{text}</em>")
                case Strikethrough():
                    sb.append(f"<del>{text}</del>")
                case Code():
                    sb.append(f"<code>{text}</code>")
                case Link():
                    href = escape_html(span.href)
                    if span.is_external:
                        sb.append(
                            f'<a href="{href}" target="_blank" rel="noopener noreferrer">{text}</a>'
                        )
                    else:
                        sb.append(f'<a href="{href}">{text}</a>')
                case _:
                    sb.append(text)


def render_html(
    source: str,
    *,
    config: RenderConfig | None = None,
    standalone: bool = False,
    title: str | None = None,
) -> str:
    """Parse and render a memo to HTML in one call.

    Args:
        source: Memo text
        config: Parse and render config
        standalone: Wrap the fragment in a full HTML page
        title: Page title (defaults to the memo's display title)

    Returns:
        HTML string
    """
    config = config or DEFAULT_CONFIG
    if title is None:
        title = display_title(source)
    renderer = HtmlRenderer(config, standalone=standalone, title=title)
    return renderer.render(parse(source, config=config))
