"""Text processing utilities for memomark.

Provides slugification for heading anchors, HTML escaping for the
export renderer and word-boundary truncation for memo previews.

Example:
    >>> from memomark.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re


def slugify(text: str) -> str:
    """Convert heading text to an anchor slug with Unicode support.

    Internal links of the form ``[see](#my-heading)`` resolve against
    these slugs, so the rule must stay stable across renderers. HTML
    entities are decoded first (``&amp;`` counts as ``&``).

    Args:
        text: Text to slugify

    Returns:
        Lowercase slug of Unicode word characters and hyphens

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Q&A: (draft)")
        'qa-draft'
        >>> slugify("買い物リスト")
        '買い物リスト'
    """
    if not text:
        return ""

    text = html_module.unescape(text).lower().strip()

    # \w keeps non-ASCII letters, which memo titles are full of
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s]+", "-", text)
    return text.strip("-")


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts &, <, >, " and ' to HTML entities.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for use in attribute values

    Examples:
        >>> escape_html('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")


def truncate(text: str, max_length: int, suffix: str = "…") -> str:
    """Shorten text to at most max_length characters.

    Breaks at the last space when one exists in the kept part and
    appends suffix. Text that already fits is returned unchanged.

    Examples:
        >>> truncate("buy milk and eggs", 10)
        'buy milk…'
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text

    limit = max(max_length - len(suffix), 0)
    kept = text[:limit]
    if text[limit : limit + 1] != " " and kept.rfind(" ") > 0:
        kept = kept[: kept.rfind(" ")]
    return kept.rstrip() + suffix
