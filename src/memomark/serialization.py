"""Document serialization: JSON round-trip for memomark nodes.

Converts block and span nodes to/from JSON-compatible dicts. Useful for:
- Caching a parsed memo next to its text (skip re-parsing unchanged memos)
- Handing a parsed document to another process (widget extension, print job)
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from memomark import parse
    from memomark.serialization import to_json, from_json

    doc = parse("# Groceries\\n- [ ] milk")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from memomark.location import SourceLocation
from memomark.nodes import (
    BlankLine,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    Italic,
    Link,
    ListItem,
    Node,
    Paragraph,
    PlainText,
    SpanNode,
    Strikethrough,
    TableRow,
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Heading": Heading,
    "ListItem": ListItem,
    "TableRow": TableRow,
    "CodeBlock": CodeBlock,
    "Blockquote": Blockquote,
    "HorizontalRule": HorizontalRule,
    "Paragraph": Paragraph,
    "BlankLine": BlankLine,
    "Image": Image,
    "PlainText": PlainText,
    "Code": Code,
    "Bold": Bold,
    "Italic": Italic,
    "Strikethrough": Strikethrough,
    "Link": Link,
}


def to_dict(node: Node | SpanNode) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes spans, table cells and SourceLocation objects.

    Args:
        node: Any block, span or Document node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Node, SpanNode)):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "end_lineno": value.end_lineno,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node | SpanNode:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the node class.
    Fields missing from ``data`` take their dataclass defaults.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value.get("col_offset", 1),
                end_lineno=value.get("end_lineno"),
                source_file=value.get("source_file"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        # Nested lists are table cells: tuple of span tuples
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
