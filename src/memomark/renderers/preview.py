"""Interactive editor preview renderer.

Produces one ViewDescriptor per block for the full preview. Checklist
rows are marked interactive and carry their source line index, headings
get anchors for "#anchor" links and, when enabled, chapter numbers.

Blank lines and images appear only when the document was parsed with
``preserve_blank_lines`` / ``images_enabled`` (see RenderConfig.for_preview).

Example:
    >>> from memomark import parse
    >>> from memomark.config import RenderConfig
    >>> config = RenderConfig.for_preview()
    >>> views = PreviewRenderer(config).render(parse("## Plan\\n- [ ] book", config=config))
    >>> views[0].chapter, views[1].interactive, views[1].line_index
    ('1.', True, 1)

"""

from __future__ import annotations

from memomark.nodes import Heading
from memomark.renderers.views import DescriptorRenderer, RenderContext, ViewDescriptor
from memomark.text import spans_text

__all__ = ["PreviewRenderer", "ViewDescriptor"]


class PreviewRenderer(DescriptorRenderer):
    """Render a document for the full editor preview.

    Usage:
        >>> renderer = PreviewRenderer()
        >>> views = renderer.render(doc)

    Thread Safety:
        Stateless between calls; each render() builds its own
        RenderContext. Instances can be shared across threads.

    """

    __slots__ = ()

    def _anchor(self, heading: Heading, ctx: RenderContext) -> str:
        return ctx.unique_anchor(spans_text(heading.spans))

    def _chapter(self, heading: Heading, ctx: RenderContext) -> str:
        # Counters advance even when numbering is off so anchors stay stable
        chapter = ctx.chapters.next(heading.level)
        return chapter if self._config.chapter_numbering else ""
