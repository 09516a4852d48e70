"""Compact widget renderer.

The widget shows the top of a memo in a small, read-only box:

- the source is truncated to the first ``line_limit`` raw lines before
  parsing, so a table or fence cut by the limit shows partially
- blank lines and images never produce a view
- headings are only slightly larger than body text
  (1.4, 1.25, 1.15, 1.05 of the base size; levels 5 and 6 equal body)
- no chapter numbers, no anchors
- ``max_blocks`` optionally caps the number of views

Example:
    >>> views = render_widget("# Todo\\n\\n- [ ] milk\\n- [x] eggs\\n- [ ] tea", line_limit=3)
    >>> [view.kind.value for view in views]
    ['heading', 'list_item']

"""

from __future__ import annotations

from memomark.config import RenderConfig
from memomark.nodes import BlankLine, Block, Document, Image
from memomark.parser import parse
from memomark.renderers.views import DescriptorRenderer, ViewDescriptor
from memomark.utils.logger import get_logger

logger = get_logger(__name__)


class WidgetRenderer(DescriptorRenderer):
    """Render a document for the compact home-screen widget.

    Thread Safety:
        Stateless between calls. Instances can be shared across threads.

    """

    __slots__ = ()

    heading_scales = (1.4, 1.25, 1.15, 1.05, 1.0, 1.0)

    def __init__(self, config: RenderConfig | None = None) -> None:
        super().__init__(config or RenderConfig.for_widget())

    def render(self, node: Document) -> tuple[ViewDescriptor, ...]:
        views = super().render(node)
        limit = self._config.max_blocks
        if limit is not None and len(views) > limit:
            logger.debug("Widget capped %d views to %d", len(views), limit)
            return views[:limit]
        return views

    def _keep(self, block: Block) -> bool:
        return not isinstance(block, (BlankLine, Image))


def render_widget(
    source: str,
    *,
    line_limit: int | None = None,
    config: RenderConfig | None = None,
) -> tuple[ViewDescriptor, ...]:
    """Parse and render a memo for the widget in one call.

    Args:
        source: Memo text
        line_limit: Raw lines to keep; overrides ``config.line_limit``
        config: Widget config (defaults to RenderConfig.for_widget())

    Returns:
        Compact view descriptors
    """
    config = config or RenderConfig.for_widget()
    if line_limit is not None:
        config = config.replace(line_limit=line_limit)
    return WidgetRenderer(config).render(parse(source, config=config))
