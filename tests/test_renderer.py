"""Tests for HtmlRenderer."""

from __future__ import annotations

from memomark import parse, render_html
from memomark.config import RenderConfig
from memomark.location import SourceLocation
from memomark.nodes import Document, Heading, PlainText
from memomark.renderers.html import HtmlRenderer

NO_CHAPTERS = RenderConfig(chapter_numbering=False)


class TestHtmlBlocks:
    """Tests for block rendering."""

    def test_render_heading(self) -> None:
        """Test heading rendering with auto-generated ID."""
        loc = SourceLocation(1, 1)
        doc = Document(
            location=loc,
            children=(Heading(location=loc, level=1, spans=(PlainText("Hello World"),)),),
        )

        html = HtmlRenderer().render(doc)

        assert html == '<h1 id="hello-world">Hello World</h1>\n'

    def test_duplicate_heading_ids(self) -> None:
        html = render_html("# Notes\n# Notes")
        assert 'id="notes"' in html
        assert 'id="notes-1"' in html

    def test_chapter_numbers(self) -> None:
        html = render_html("# T\n## A")
        assert html == '<h1 id="t">T</h1>\n<h2 id="a"><span class="chapter">1.</span> A</h2>\n'

    def test_chapter_numbers_disabled(self) -> None:
        assert render_html("## A", config=NO_CHAPTERS) == '<h2 id="a">A</h2>\n'

    def test_paragraph(self) -> None:
        assert render_html("Hello") == "<p>Hello</p>\n"

    def test_code_block_with_language(self) -> None:
        html = render_html("```python\nif a < b:\n    pass\n```")
        assert html == (
            '<pre><code class="language-python">if a &lt; b:\n    pass</code></pre>\n'
        )

    def test_code_block_without_language(self) -> None:
        assert render_html("```\n**x**\n```") == "<pre><code>**x**</code></pre>\n"

    def test_horizontal_rule(self) -> None:
        assert render_html("---") == "<hr />\n"

    def test_blank_lines_render_nothing(self) -> None:
        config = RenderConfig(preserve_blank_lines=True)
        assert render_html("a\n\nb", config=config) == "<p>a</p>\n<p>b</p>\n"

    def test_image(self) -> None:
        config = RenderConfig(images_enabled=True)
        html = render_html('![a "cat"](cat.png)', config=config)
        assert html == '<p><img src="cat.png" alt="a &quot;cat&quot;" /></p>\n'


class TestHtmlGrouping:
    """Flat blocks regrouped into lists, tables and quotes."""

    def test_nested_unordered_list(self) -> None:
        html = render_html("- a\n  - b\n- c")
        assert html == (
            "<ul>\n<li>a\n<ul>\n<li>b</li>\n</ul>\n</li>\n<li>c</li>\n</ul>\n"
        )

    def test_ordered_list_ordinals(self) -> None:
        html = render_html("1. one\n2. two")
        assert html == (
            '<ol style="list-style-type: none">\n'
            '<li value="1" data-ordinal="1."><span class="ordinal">1.</span> one</li>\n'
            '<li value="2" data-ordinal="2."><span class="ordinal">2.</span> two</li>\n'
            "</ol>\n"
        )

    def test_nested_ordinals_shown_in_text(self) -> None:
        html = render_html("1. a\n  1. b\n  2. c")
        assert '<li value="1" data-ordinal="①"><span class="ordinal">①</span> b' in html
        assert '<span class="ordinal">②</span> c' in html

    def test_numbering_continues_across_paragraph(self) -> None:
        html = render_html("1. a\ntext\n2. b")
        assert html.count("<ol") == 2
        assert '<li value="2" data-ordinal="2."><span class="ordinal">2.</span> b' in html

    def test_list_kind_change_starts_new_list(self) -> None:
        html = render_html("- a\n1. b")
        assert html == (
            '<ul>\n<li>a</li>\n</ul>\n<ol style="list-style-type: none">\n'
            '<li value="1" data-ordinal="1."><span class="ordinal">1.</span> b</li>\n</ol>\n'
        )

    def test_checklist(self) -> None:
        html = render_html("- [x] done\n- [ ] todo")
        assert '<li class="task-list-item"><input type="checkbox" disabled checked /> done' in html
        assert '<li class="task-list-item"><input type="checkbox" disabled /> todo' in html
        assert html.startswith("<ul>\n")

    def test_table(self) -> None:
        html = render_html("|a|b|\n|-|-|\n|1|2|")
        assert html == (
            "<table>\n<thead>\n<tr>\n<th>a</th>\n<th>b</th>\n</tr>\n</thead>\n"
            "<tbody>\n<tr>\n<td>1</td>\n<td>2</td>\n</tr>\n</tbody>\n</table>\n"
        )

    def test_tables_split_by_blank_line(self) -> None:
        html = render_html("|a|\n|-|\n|1|\n\n|b|\n|-|\n|2|")
        assert html.count("<table>") == 2
        assert html.count("<thead>") == 2
        assert html == (
            "<table>\n<thead>\n<tr>\n<th>a</th>\n</tr>\n</thead>\n"
            "<tbody>\n<tr>\n<td>1</td>\n</tr>\n</tbody>\n</table>\n"
            "<table>\n<thead>\n<tr>\n<th>b</th>\n</tr>\n</thead>\n"
            "<tbody>\n<tr>\n<td>2</td>\n</tr>\n</tbody>\n</table>\n"
        )

    def test_header_only_tables_stay_separate(self) -> None:
        html = render_html("|a|\n\n|b|")
        assert html == (
            "<table>\n<thead>\n<tr>\n<th>a</th>\n</tr>\n</thead>\n</table>\n"
            "<table>\n<thead>\n<tr>\n<th>b</th>\n</tr>\n</thead>\n</table>\n"
        )

    def test_blockquote_lines_merge(self) -> None:
        html = render_html("> one\n> two")
        assert html == "<blockquote>\n<p>one</p>\n<p>two</p>\n</blockquote>\n"

    def test_separate_groups(self) -> None:
        html = render_html("- a\ntext\n- b")
        assert html.count("<ul>") == 2


class TestHtmlSpans:
    """Inline rendering."""

    def test_styles(self) -> None:
        html = render_html("**b** *i* ~~s~~ `c`")
        assert html == "<p><strong>b</strong> <em>i</em> <del>s</del> <code>c</code></p>\n"

    def test_external_link(self) -> None:
        html = render_html("[site](https://example.com)")
        assert (
            '<a href="https://example.com" target="_blank" rel="noopener noreferrer">site</a>'
            in html
        )

    def test_internal_link(self) -> None:
        html = render_html("[see](#plan)")
        assert '<a href="#plan">see</a>' in html

    def test_escaping(self) -> None:
        assert render_html("a < b & c") == "<p>a &lt; b &amp; c</p>\n"


class TestStandalone:
    """Full-page output."""

    def test_standalone_page(self) -> None:
        html = render_html("# Trip <2024>\n- passport", standalone=True)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Trip &lt;2024&gt;</title>" in html
        assert html.endswith("</body>\n</html>\n")

    def test_explicit_title(self) -> None:
        html = render_html("text", standalone=True, title="Memo")
        assert "<title>Memo</title>" in html

    def test_renderer_reuse(self) -> None:
        renderer = HtmlRenderer()
        doc = parse("## A")
        assert renderer.render(doc) == renderer.render(doc)
