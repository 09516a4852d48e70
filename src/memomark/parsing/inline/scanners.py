"""Hand-written scanners for the five inline patterns.

Each scanner finds the leftmost match of its pattern at or after
``start`` and returns it, or None when the rest of the text holds no
match. Text before ``start`` is treated as absent: italic's "not
preceded by *" check never looks behind ``start``.

Content rules (no nesting, content taken verbatim):

    code           `x`       content non-empty, no backtick
    link           [t](h)    t non-empty without "]", h non-empty without ")"
    strikethrough  ~~x~~     content non-empty, no "~"
    bold           **x**     content non-empty, no "*"
    italic         *x*       content non-empty, no "*", not touching another "*"

"""

from __future__ import annotations

from memomark.parsing.inline.tokens import SpanKind, SpanMatch


def scan_code(text: str, start: int) -> SpanMatch | None:
    """Find the leftmost `code` span."""
    pos = text.find("`", start)
    while pos != -1:
        close = text.find("`", pos + 1)
        if close == -1:
            return None
        if close > pos + 1:
            return SpanMatch("code", pos, close + 1, text[pos + 1 : close])
        # Empty content: the closing backtick may open the next span
        pos = close
    return None


def scan_link(text: str, start: int) -> SpanMatch | None:
    """Find the leftmost [text](href) link."""
    pos = text.find("[", start)
    while pos != -1:
        close = text.find("]", pos + 1)
        if close == -1:
            return None
        if close > pos + 1 and text.startswith("(", close + 1):
            paren = text.find(")", close + 2)
            if paren == -1:
                # No ")" anywhere later means no later link can close either
                return None
            if paren > close + 2:
                return SpanMatch(
                    "link",
                    pos,
                    paren + 1,
                    text[pos + 1 : close],
                    text[close + 2 : paren],
                )
        pos = text.find("[", pos + 1)
    return None


def _scan_doubled(text: str, start: int, char: str, kind: SpanKind) -> SpanMatch | None:
    """Find the leftmost span wrapped in a doubled delimiter (~~ or **)."""
    opener = char * 2
    pos = text.find(opener, start)
    while pos != -1:
        close = text.find(char, pos + 2)
        if close == -1:
            return None
        if close > pos + 2 and text.startswith(opener, close):
            return SpanMatch(kind, pos, close + 2, text[pos + 2 : close])
        pos = text.find(opener, pos + 1)
    return None


def scan_strikethrough(text: str, start: int) -> SpanMatch | None:
    """Find the leftmost ~~strikethrough~~ span."""
    return _scan_doubled(text, start, "~", "strikethrough")


def scan_bold(text: str, start: int) -> SpanMatch | None:
    """Find the leftmost **bold** span."""
    return _scan_doubled(text, start, "*", "bold")


def scan_italic(text: str, start: int) -> SpanMatch | None:
    """Find the leftmost *italic* span.

    The opening "*" must not follow another "*" (looking no further back
    than ``start``) and the closing "*" must not be followed by one.
    """
    pos = text.find("*", start)
    while pos != -1:
        close = text.find("*", pos + 1)
        if close == -1:
            return None
        preceded = pos > start and text[pos - 1] == "*"
        followed = text.startswith("*", close + 1)
        if not preceded and close > pos + 1 and not followed:
            return SpanMatch("italic", pos, close + 1, text[pos + 1 : close])
        pos = close
    return None


SCANNERS = (
    scan_code,
    scan_link,
    scan_strikethrough,
    scan_bold,
    scan_italic,
)
