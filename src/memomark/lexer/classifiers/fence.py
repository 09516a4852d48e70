"""Code fence classifier mixin."""

from __future__ import annotations

from memomark.lexer.modes import FENCE_MARKER
from memomark.tokens import LineToken, LineType


class FenceClassifierMixin:
    """Mixin providing code fence classification."""

    def _make_token(
        self,
        line_type: LineType,
        content: str,
        line_index: int,
        *,
        indent_level: int = 0,
        **fields: object,
    ) -> LineToken:
        """Create a line token. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_fence(
        self, content: str, line_index: int, *, in_fence: bool
    ) -> LineToken | None:
        """Try to classify content as a fence boundary.

        Any line starting with three backticks toggles the fence, so an
        info string on a closing line still closes the block.

        Args:
            content: Line with leading whitespace stripped
            line_index: Zero-based source line
            in_fence: Whether a fence is currently open

        Returns:
            FENCE_OPEN or FENCE_CLOSE token, None if not a fence line.
        """
        if not content.startswith(FENCE_MARKER):
            return None

        if in_fence:
            return self._make_token(LineType.FENCE_CLOSE, "", line_index)

        info = content[len(FENCE_MARKER) :].strip().strip("`").strip()
        return self._make_token(LineType.FENCE_OPEN, "", line_index, info=info)
