"""Tests for memomark utility modules."""

import logging

import pytest


class TestSlugify:
    """Tests for slugify function."""

    def test_basic_slugify(self) -> None:
        from memomark.utils.text import slugify

        assert slugify("Hello World") == "hello-world"
        assert slugify("Hello World!") == "hello-world"
        assert slugify("Q&A: (draft)") == "qa-draft"

    def test_html_entities(self) -> None:
        from memomark.utils.text import slugify

        assert slugify("Test &amp; Code") == "test-code"
        assert slugify("&lt;script&gt;") == "script"

    def test_unicode(self) -> None:
        from memomark.utils.text import slugify

        assert slugify("Café") == "café"
        assert slugify("買い物リスト") == "買い物リスト"

    def test_collapses_hyphens_and_spaces(self) -> None:
        from memomark.utils.text import slugify

        assert slugify("  a -- b  c ") == "a-b-c"
        assert slugify("-edge-") == "edge"

    def test_empty_string(self) -> None:
        from memomark.utils.text import slugify

        assert slugify("") == ""
        assert slugify("!!!") == ""


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_special_characters(self) -> None:
        from memomark.utils.text import escape_html

        assert escape_html('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"
        assert escape_html("Tom & Jerry") == "Tom &amp; Jerry"
        assert escape_html("it's") == "it&#x27;s"

    def test_empty(self) -> None:
        from memomark.utils.text import escape_html

        assert escape_html("") == ""


class TestTruncate:
    """Tests for truncate function."""

    @pytest.mark.parametrize(
        ("text", "max_length", "expected"),
        [
            ("buy milk and eggs", 10, "buy milk…"),
            ("short", 10, "short"),
            ("exactly10!", 10, "exactly10!"),
            ("supercalifragilistic", 6, "super…"),
            ("anything", 0, ""),
        ],
    )
    def test_truncate(self, text: str, max_length: int, expected: str) -> None:
        from memomark.utils.text import truncate

        assert truncate(text, max_length) == expected

    def test_custom_suffix(self) -> None:
        from memomark.utils.text import truncate

        assert truncate("one two three", 9, suffix="...") == "one..."


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_chained_append(self) -> None:
        from memomark.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("<li>").append("milk").append("</li>")
        assert sb.build() == "<li>milk</li>"

    def test_empty(self) -> None:
        from memomark.stringbuilder import StringBuilder

        assert StringBuilder().build() == ""


class TestLogger:
    """Tests for get_logger."""

    def test_prefix(self) -> None:
        from memomark.utils.logger import get_logger

        assert get_logger("widget").name == "memomark.widget"

    def test_module_name_kept(self) -> None:
        from memomark.utils.logger import get_logger

        assert get_logger("memomark.parser").name == "memomark.parser"
        assert get_logger("memomark").name == "memomark"

    def test_returns_stdlib_logger(self) -> None:
        from memomark.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)
