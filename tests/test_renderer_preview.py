"""Tests for the editor preview renderer."""

from __future__ import annotations

import pytest

from memomark import parse, render_preview
from memomark.config import RenderConfig
from memomark.nodes import Bold, PlainText
from memomark.renderers import BlockKind, PreviewRenderer
from memomark.renderers.views import BULLET, CHECKED_BOX, UNCHECKED_BOX


class TestPreviewDescriptors:
    """One descriptor per block."""

    def test_kinds_in_order(self) -> None:
        views = render_preview("# T\n- a\n> q\n---\ntext\n```\nx\n```\n|a|")
        assert [view.kind for view in views] == [
            BlockKind.HEADING,
            BlockKind.LIST_ITEM,
            BlockKind.BLOCKQUOTE,
            BlockKind.HORIZONTAL_RULE,
            BlockKind.PARAGRAPH,
            BlockKind.CODE_BLOCK,
            BlockKind.TABLE_ROW,
        ]

    def test_checklist_is_interactive(self) -> None:
        views = render_preview("# List\n- [ ] milk\n- [x] eggs")
        unchecked, checked = views[1], views[2]
        assert unchecked.interactive is True
        assert unchecked.checked is False
        assert unchecked.marker == UNCHECKED_BOX
        assert unchecked.line_index == 1
        assert checked.checked is True
        assert checked.marker == CHECKED_BOX
        assert checked.list_kind == "checklist"

    def test_other_blocks_not_interactive(self) -> None:
        views = render_preview("- bullet\n1. first\ntext")
        assert [view.interactive for view in views] == [False, False, False]
        assert [view.checked for view in views] == [None, None, None]
        assert views[0].marker == BULLET
        assert views[1].marker == "1."

    def test_indent(self) -> None:
        views = render_preview("- a\n    - b")
        assert [view.indent_level for view in views] == [0, 2]
        assert views[1].indent == pytest.approx(40.0)

    def test_heading_sizes(self) -> None:
        views = render_preview("# a\n## b\n###### c")
        assert [view.font_size for view in views] == pytest.approx([35.2, 28.8, 17.6])
        assert all(view.bold for view in views)

    def test_spans_and_text(self) -> None:
        (view,) = render_preview("**bold** move")
        assert view.spans == (Bold("bold"), PlainText(" move"))
        assert view.text == "bold move"

    def test_table_cells(self) -> None:
        header, row = render_preview("|a|b|\n|-|-|\n|1|2|")
        assert header.is_header is True
        assert row.text == "1 | 2"
        assert row.line_index == 2

    def test_code_lines(self) -> None:
        (view,) = render_preview("```\nline 1\n  line 2\n```")
        assert view.code == ("line 1", "  line 2")
        assert (view.line_index, view.end_line_index) == (0, 3)


class TestPreviewHeadings:
    """Anchors and chapter numbers."""

    def test_chapters(self) -> None:
        views = render_preview("# Title\n## A\n### B\n## C")
        assert [view.chapter for view in views] == ["", "1.", "1. 1.", "2."]
        assert views[2].text == "1. 1. B"

    def test_chapters_disabled(self) -> None:
        config = RenderConfig.for_preview(chapter_numbering=False)
        views = render_preview("## A\n## B", config=config)
        assert [view.chapter for view in views] == ["", ""]

    def test_unique_anchors(self) -> None:
        views = render_preview("## Notes\n## Notes\n## 買い物")
        assert [view.anchor for view in views] == ["notes", "notes-1", "買い物"]

    def test_anchor_fallback_for_symbols(self) -> None:
        (view,) = render_preview("# !!!")
        assert view.anchor == "section"


class TestPreviewOptions:
    """Blank lines and images follow the config."""

    def test_preview_preset_keeps_blank_lines(self) -> None:
        views = render_preview("a\n\nb")
        assert [view.kind for view in views] == [
            BlockKind.PARAGRAPH,
            BlockKind.BLANK_LINE,
            BlockKind.PARAGRAPH,
        ]

    def test_images(self) -> None:
        (view,) = render_preview("![receipt](r.png)")
        assert view.kind is BlockKind.IMAGE
        assert view.src == "r.png"
        assert view.text == "receipt"

    def test_plain_config_drops_blank_and_images(self) -> None:
        views = render_preview("a\n\n![x](y.png)\nb", config=RenderConfig())
        assert [view.kind for view in views] == [BlockKind.PARAGRAPH, BlockKind.PARAGRAPH]

    def test_renderer_is_reusable(self) -> None:
        """Per-render state does not leak between renders."""
        renderer = PreviewRenderer(RenderConfig.for_preview())
        doc = parse("## A")
        first = renderer.render(doc)
        second = renderer.render(doc)
        assert first == second
        assert second[0].anchor == "a"
        assert second[0].chapter == "1."
