"""Document tree collaborators: nodes, style, content model, traversal and cursors."""

from inkline.dom.nodes import (
    Node,
    NodeType,
    comment,
    document,
    element,
    fragment,
    insert,
    is_editing_host,
    merge,
    remove,
    text,
)
from inkline.dom.cursors import Cursor, cursor

__all__ = [
    "Node",
    "NodeType",
    "comment",
    "document",
    "element",
    "fragment",
    "insert",
    "is_editing_host",
    "merge",
    "remove",
    "text",
    "Cursor",
    "cursor",
]
