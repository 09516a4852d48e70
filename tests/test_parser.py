"""Tests for block assembly."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from memomark import parse
from memomark.config import RenderConfig
from memomark.nodes import (
    BlankLine,
    Blockquote,
    Bold,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    ListItem,
    Paragraph,
    PlainText,
    TableRow,
)
from memomark.parser import Parser
from memomark.parsing import IndentCounterTable


class TestBlocks:
    """One block per line for the simple kinds."""

    def test_heading(self) -> None:
        (heading,) = parse("## **Plan** B").children
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert heading.spans == (Bold("Plan"), PlainText(" B"))

    def test_paragraph_and_quote_and_rule(self) -> None:
        doc = parse("text\n> quoted\n---")
        assert [type(block) for block in doc.children] == [
            Paragraph,
            Blockquote,
            HorizontalRule,
        ]

    def test_blank_lines_skipped_by_default(self) -> None:
        doc = parse("a\n\n\nb")
        assert len(doc.children) == 2

    def test_blank_lines_preserved_on_request(self) -> None:
        doc = parse("a\n\nb", config=RenderConfig(preserve_blank_lines=True))
        assert isinstance(doc.children[1], BlankLine)
        assert doc.children[1].line_index == 1

    def test_locations_are_line_indices(self) -> None:
        doc = parse("# a\n\n- b\n  - c")
        assert [block.line_index for block in doc.children] == [0, 2, 3]

    def test_document_line_count(self) -> None:
        doc = parse("a\nb\nc")
        assert doc.line_count == 3
        assert doc.location.end_lineno == 3

    def test_empty_source(self) -> None:
        doc = parse("")
        assert doc.children == ()
        assert doc.line_count == 1


class TestLists:
    """List items and ordered numbering."""

    def test_checklist_item(self) -> None:
        (item,) = parse("  - [x] done").children
        assert isinstance(item, ListItem)
        assert item.kind == "checklist"
        assert item.checked is True
        assert item.indent_level == 1
        assert item.spans == (PlainText("done"),)

    def test_nested_ordered_numbering(self) -> None:
        doc = parse("1. a\n  1. sub\n  2. sub\n2. b")
        assert [item.ordinal_display for item in doc.children] == ["1.", "①", "②", "2."]

    def test_nested_run_restarts_under_new_parent(self) -> None:
        doc = parse("1. a\n  1. x\n2. b\n  1. y")
        assert [item.ordinal_display for item in doc.children] == ["1.", "①", "2.", "①"]

    def test_source_numbers_are_ignored(self) -> None:
        doc = parse("5. a\n9. b")
        assert [item.ordinal for item in doc.children] == [1, 2]
        assert [item.marker for item in doc.children] == ["5.", "9."]

    def test_levels_use_their_styles(self) -> None:
        doc = parse("1. a\n  1. b\n    1. c\n      1. d\n        1. e")
        assert [item.ordinal_display for item in doc.children] == ["1.", "①", "i.", "a.", "1."]

    def test_paragraph_does_not_reset_numbering(self) -> None:
        """Counters survive non-list blocks between ordered items."""
        doc = parse("1. a\n2. b\nsome text\n3. c")
        items = [block for block in doc.children if isinstance(block, ListItem)]
        assert [item.ordinal_display for item in items] == ["1.", "2.", "3."]

    def test_heading_and_blank_do_not_reset_numbering(self) -> None:
        doc = parse("1. a\n\n# Next\n1. b")
        items = [block for block in doc.children if isinstance(block, ListItem)]
        assert [item.ordinal for item in items] == [1, 2]

    def test_unordered_items_have_no_ordinal(self) -> None:
        (item,) = parse("* bullet").children
        assert item.kind == "unordered"
        assert item.ordinal is None
        assert item.ordinal_display == ""


class TestIndentCounterTable:
    """Per-level ordinal sequences."""

    def test_next_clears_deeper(self) -> None:
        table = IndentCounterTable()
        assert table.next_ordinal(0) == 1
        assert table.next_ordinal(1) == 1
        assert table.next_ordinal(1) == 2
        assert table.next_ordinal(0) == 2
        assert table.peek(1) == 0
        assert table.next_ordinal(1) == 1

    def test_clear_deeper_keeps_level(self) -> None:
        table = IndentCounterTable()
        table.next_ordinal(0)
        table.next_ordinal(1)
        table.next_ordinal(2)
        table.clear_deeper(0)
        assert len(table) == 1
        assert table.peek(0) == 1


class TestCodeFences:
    """Fenced code blocks."""

    def test_code_is_literal(self) -> None:
        (code,) = parse("```python\n# not heading\n- [ ] not task\n```").children
        assert isinstance(code, CodeBlock)
        assert code.info == "python"
        assert code.raw_lines == ("# not heading", "- [ ] not task")
        assert code.closed is True
        assert code.location.line_index == 0
        assert code.location.end_line_index == 3

    def test_code_keeps_indentation(self) -> None:
        (code,) = parse("```\n    indented\n```").children
        assert code.code == "    indented"

    def test_empty_fence_produces_nothing(self) -> None:
        (paragraph,) = parse("```\n```\ntext").children
        assert isinstance(paragraph, Paragraph)
        assert paragraph.line_index == 2

    def test_unterminated_fence(self) -> None:
        doc = parse("```\nline one\nline two")
        (code,) = doc.children
        assert code.closed is False
        assert code.raw_lines == ("line one", "line two")

    def test_blocks_after_fence(self) -> None:
        doc = parse("```\nx\n```\n# After")
        assert isinstance(doc.children[1], Heading)


class TestTruncation:
    """line_limit truncation before classification."""

    def test_line_limit(self) -> None:
        doc = parse("# a\n- b\n- c\n- d", line_limit=2)
        assert len(doc.children) == 2
        assert doc.line_count == 2

    def test_line_limit_cuts_fence(self) -> None:
        doc = parse("```\none\ntwo\n```", line_limit=2)
        (code,) = doc.children
        assert code.raw_lines == ("one",)
        assert code.closed is False

    def test_line_limit_from_config(self) -> None:
        doc = parse("a\nb\nc", config=RenderConfig(line_limit=1))
        assert len(doc.children) == 1

    def test_argument_overrides_config(self) -> None:
        doc = parse("a\nb\nc", config=RenderConfig(line_limit=1), line_limit=3)
        assert len(doc.children) == 3


class TestImages:
    """Image lines."""

    def test_images_skipped_by_default(self) -> None:
        assert parse("![cat](cat.png)").children == ()

    def test_images_enabled(self) -> None:
        (image,) = parse("![cat](cat.png)", config=RenderConfig(images_enabled=True)).children
        assert isinstance(image, Image)
        assert (image.alt, image.src) == ("cat", "cat.png")


class TestParser:
    """Parser object API."""

    def test_parse_returns_blocks(self) -> None:
        parser = Parser("# Groceries\n- [ ] milk")
        blocks = parser.parse()
        assert isinstance(blocks, tuple)
        assert parser.line_count == 2

    def test_source_file_on_locations(self) -> None:
        doc = parse("# a", source_file="memo.md")
        assert str(doc.children[0].location) == "memo.md:1:1"

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_parse_never_raises(self, source: str) -> None:
        doc = parse(source)
        for block in doc.children:
            assert 0 <= block.line_index < doc.line_count

    @given(st.text(alphabet="|-:# 1.>`\n x[]", max_size=300))
    @settings(max_examples=200)
    def test_table_runs_start_with_header(self, source: str) -> None:
        previous = None
        for block in parse(source).children:
            if isinstance(block, TableRow) and not isinstance(previous, TableRow):
                assert block.is_header
            if isinstance(block, TableRow) and not block.is_header:
                assert isinstance(previous, TableRow)
            previous = block
