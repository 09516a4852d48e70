"""Error-path and malformed input tests.

Parsing never fails on string input, so most of these check graceful
degradation. Errors exist only for bad configuration and renderer
failures.
"""

import pytest

from memomark import MemoMarkdown, parse, render_html, render_preview
from memomark.errors import ConfigError, MemomarkError, RenderError
from memomark.location import SourceLocation

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestRenderErrorFormatting:
    """Verify RenderError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = RenderError("cannot draw")
        assert str(err) == "cannot draw"
        assert err.line_index is None

    def test_with_line_index(self) -> None:
        err = RenderError("bad block", line_index=4)
        assert str(err) == "line 5: bad block"
        assert err.message == "bad block"

    def test_is_memomark_error(self) -> None:
        assert isinstance(RenderError("x"), MemomarkError)


class TestConfigErrorFormatting:
    def test_field_name(self) -> None:
        err = ConfigError("line_limit", "cannot be negative")
        assert err.field_name == "line_limit"
        assert str(err) == "Invalid config 'line_limit': cannot be negative"

    def test_is_memomark_error(self) -> None:
        assert isinstance(ConfigError("mode", "x"), MemomarkError)


# =========================================================================
# SourceLocation
# =========================================================================


class TestSourceLocation:
    def test_line_index(self) -> None:
        loc = SourceLocation(lineno=3, col_offset=1)
        assert loc.line_index == 2
        assert loc.end_line_index == 2

    def test_multi_line(self) -> None:
        loc = SourceLocation(lineno=2, end_lineno=5)
        assert loc.end_line_index == 4

    def test_str(self) -> None:
        assert str(SourceLocation(10, 5)) == "10:5"
        assert str(SourceLocation(1, 1, source_file="memo.md")) == "memo.md:1:1"

    def test_span_to(self) -> None:
        start = SourceLocation.for_line(1, source_file="a.md")
        end = SourceLocation.for_line(4)
        spanned = start.span_to(end)
        assert (spanned.line_index, spanned.end_line_index) == (1, 4)
        assert spanned.source_file == "a.md"

    def test_unknown(self) -> None:
        assert SourceLocation.unknown().lineno == 0

    def test_code_block_covers_fence_lines(self) -> None:
        (block,) = parse("text\n```\na\nb\n```", config=None).children[1:]
        assert (block.location.line_index, block.location.end_line_index) == (1, 4)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedInput:
    """Malformed markdown never raises."""

    @pytest.mark.parametrize(
        "source",
        [
            "**unclosed bold",
            "`unclosed code",
            "[link](unclosed",
            "~~~~",
            "#######",
            "|",
            "```",
            "- [",
            "1.",
            ">",
            "\x00\x01\x02",
            "\r\n\r\n",
            "\t\t- tabbed",
        ],
    )
    def test_parse_and_render(self, source: str) -> None:
        md = MemoMarkdown()
        md.parse(source)
        md.preview(source)
        md.widget(source)
        md.html(source)

    def test_unterminated_fence_keeps_lines(self) -> None:
        (block,) = parse("```\ncode\nmore").children
        assert block.raw_lines == ("code", "more")  # type: ignore[attr-defined]
        assert block.closed is False  # type: ignore[attr-defined]

    def test_unclosed_markers_stay_literal(self) -> None:
        assert render_html("**bold") == "<p>**bold</p>\n"

    def test_seven_hashes_is_paragraph(self) -> None:
        (view,) = render_preview("####### x")
        assert view.level == 0
        assert view.text == "####### x"

    def test_crlf_line_endings(self) -> None:
        doc = parse("# Title\r\n- [ ] a\r\n")
        assert [block.line_index for block in doc.children] == [0, 1]
