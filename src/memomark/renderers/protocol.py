"""Renderer protocols.

Every renderer takes a parsed Document and returns its own output type:
view descriptors for the preview and widget, a paginated model for
print, a string for HTML export.

Example:
    from memomark.renderers.protocol import DocumentRenderer

    def refresh(renderer: DocumentRenderer[tuple[ViewDescriptor, ...]], doc: Document):
        return renderer.render(doc)

"""

from typing import Protocol, TypeVar

from memomark.nodes import Document


T = TypeVar("T", covariant=True)


class DocumentRenderer(Protocol[T]):
    """Protocol for document renderers.

    Implementations must be pure with respect to the document: the
    same Document and config always give the same output.

    """

    def render(self, node: Document) -> T:
        """Render a Document.

        Args:
            node: The parsed document to render.

        Returns:
            Renderer-specific output.

        """
        ...


class TextMeasurer(Protocol):
    """Measures rendered text width for layout.

    The print renderer wraps lines with it. Implementations must return
    a width in points for the given font size and style.

    """

    def width(
        self,
        text: str,
        size: float,
        *,
        bold: bool = False,
        italic: bool = False,
        monospace: bool = False,
    ) -> float:
        """Width of ``text`` set at ``size`` points in the given style."""
        ...
