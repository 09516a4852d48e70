"""Tests for extract_text(), display titles and preview lines."""

import pytest

from memomark import parse
from memomark.location import SourceLocation
from memomark.nodes import (
    BlankLine,
    Bold,
    CodeBlock,
    HorizontalRule,
    Image,
    Link,
    PlainText,
    TableRow,
)
from memomark.text import display_title, extract_text, preview_text, spans_text

LOC = SourceLocation(lineno=1, col_offset=1)


class TestExtractText:
    """Plain text of nodes."""

    def test_span(self) -> None:
        assert extract_text(Bold("hi")) == "hi"

    def test_span_sequence(self) -> None:
        assert extract_text([PlainText("a "), Link("b", "#b")]) == "a b"

    def test_heading(self) -> None:
        (heading,) = parse("# Hello **World**").children
        assert extract_text(heading) == "Hello World"

    def test_list_item(self) -> None:
        (item,) = parse("- [x] ~~old~~ task").children
        assert extract_text(item) == "old task"

    def test_table_row(self) -> None:
        row = TableRow(location=LOC, cells=((PlainText("a"),), (Bold("b"),)))
        assert extract_text(row) == "a | b"

    def test_code_block(self) -> None:
        block = CodeBlock(location=LOC, raw_lines=("x = 1", "y = 2"))
        assert extract_text(block) == "x = 1\ny = 2"

    def test_image_alt(self) -> None:
        assert extract_text(Image(location=LOC, alt="receipt", src="r.png")) == "receipt"

    @pytest.mark.parametrize("node", [HorizontalRule(location=LOC), BlankLine(location=LOC)])
    def test_no_text(self, node: HorizontalRule | BlankLine) -> None:
        assert extract_text(node) == ""

    def test_document(self) -> None:
        doc = parse("# Title\n---\n- item\n|a|b|")
        assert extract_text(doc) == "Title\nitem\na | b"

    def test_spans_text(self) -> None:
        assert spans_text((PlainText("x"), Bold("y"))) == "xy"


class TestDisplayTitle:
    """Titles for the memo list."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("# Trip plan\n- passport", "Trip plan"),
            ("\n\n**Groceries**\nmilk", "Groceries"),
            ("- [ ] call mom", "call mom"),
            ("---\n> quoted", "quoted"),
            ("```python\nprint(1)\nprint(2)\n```", "print(1)"),
            ("|a|b|\n|-|-|", "a | b"),
        ],
    )
    def test_first_visible_text(self, source: str, expected: str) -> None:
        assert display_title(source) == expected

    def test_fallback(self) -> None:
        assert display_title("", fallback="Untitled") == "Untitled"
        assert display_title("\n---\n", fallback="Untitled") == "Untitled"


class TestPreviewText:
    """Preview line under the title."""

    def test_skip_title_and_truncate(self) -> None:
        source = "# Title\nbuy milk and eggs today"
        assert preview_text(source, max_length=10, skip_title=True) == "buy milk…"

    def test_without_skip(self) -> None:
        assert preview_text("# Title\nbody") == "Title"

    def test_nothing_after_title(self) -> None:
        assert preview_text("# Title", skip_title=True) == ""

    def test_short_text_unchanged(self) -> None:
        assert preview_text("short", max_length=20) == "short"
