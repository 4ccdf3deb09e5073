"""Document tree nodes and mutation primitives.

A minimal, browser-like document model: elements, text runs, comments,
documents and document fragments linked through parent and child
pointers. The rendering core only reads this tree and asks for mutation
through ``insert``, ``remove`` and ``merge``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from inkline.exceptions import TreeError


class NodeType(Enum):
    """Kinds of nodes in the document tree."""

    ELEMENT = 1
    TEXT = 3
    COMMENT = 8
    DOCUMENT = 9
    DOCUMENT_FRAGMENT = 11


_NODE_NAMES = {
    NodeType.TEXT: "#text",
    NodeType.COMMENT: "#comment",
    NodeType.DOCUMENT: "#document",
    NodeType.DOCUMENT_FRAGMENT: "#document-fragment",
}


@dataclass(eq=False)
class Node:
    """A node in the document tree.

    Nodes compare by identity. Sibling links are derived from the parent's
    child list so they can never go stale after a mutation.

    Attributes:
        kind: The node type
        name: Upper-case tag name for elements, ``#text`` etc. otherwise
        data: Character data of text and comment nodes
        attributes: Element attributes (``style``, ``contenteditable``, ...)
        parent: The parent node, None for a root
        children: Child nodes in document order
    """

    kind: NodeType
    name: str = ""
    data: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    parent: Optional["Node"] = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.kind is NodeType.ELEMENT:
            self.name = self.name.upper()
        else:
            self.name = _NODE_NAMES[self.kind]

    @property
    def first_child(self) -> Optional["Node"]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional["Node"]:
        return self.children[-1] if self.children else None

    @property
    def index(self) -> int:
        """Position of this node in its parent's child list, -1 for roots."""
        if self.parent is None:
            return -1
        for i, child in enumerate(self.parent.children):
            if child is self:
                return i
        return -1

    @property
    def previous_sibling(self) -> Optional["Node"]:
        i = self.index
        if i <= 0:
            return None
        return self.parent.children[i - 1]

    @property
    def next_sibling(self) -> Optional["Node"]:
        i = self.index
        if i < 0 or i + 1 >= len(self.parent.children):
            return None
        return self.parent.children[i + 1]

    @property
    def length(self) -> int:
        """Character count for text/comment nodes, child count otherwise."""
        if self.kind in (NodeType.TEXT, NodeType.COMMENT):
            return len(self.data)
        return len(self.children)

    @property
    def root(self) -> "Node":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_attached(self) -> bool:
        """Whether the node lives inside a document (and so can be styled)."""
        return self.root.kind is NodeType.DOCUMENT

    @property
    def text_content(self) -> str:
        if self.kind is NodeType.TEXT:
            return self.data
        if self.kind is NodeType.COMMENT:
            return ""
        return "".join(child.text_content for child in self.children)

    def is_container(self) -> bool:
        return self.kind in (
            NodeType.ELEMENT,
            NodeType.DOCUMENT,
            NodeType.DOCUMENT_FRAGMENT,
        )

    def contains(self, other: Optional["Node"]) -> bool:
        """True if ``other`` is this node or one of its descendants."""
        while other is not None:
            if other is self:
                return True
            other = other.parent
        return False

    def append_child(self, child: "Node") -> "Node":
        """Append a child node and return it for chaining."""
        insert(child, self, True)
        return child

    def __repr__(self) -> str:
        if self.kind is NodeType.ELEMENT:
            return f"<{self.name}>"
        if self.kind in (NodeType.TEXT, NodeType.COMMENT):
            return f"{self.name} {self.data!r}"
        return self.name


ChildSpec = Union[Node, str]


def _adopt(parent: Node, children: tuple[ChildSpec, ...]) -> Node:
    for child in children:
        if isinstance(child, str):
            child = text(child)
        parent.append_child(child)
    return parent


# =============================================================================
# Builders
# =============================================================================

def document(*children: ChildSpec) -> Node:
    """Create a document node, the root of an attached tree."""
    return _adopt(Node(NodeType.DOCUMENT), children)


def fragment(*children: ChildSpec) -> Node:
    """Create a detached document fragment."""
    return _adopt(Node(NodeType.DOCUMENT_FRAGMENT), children)


def element(tag: str, *children: ChildSpec, **attributes: str) -> Node:
    """Create an element; plain string children become text nodes.

    Attribute names use ``_`` for ``-`` so ``data_x="1"`` sets ``data-x``.
    """
    attrs = {key.replace("_", "-"): value for key, value in attributes.items()}
    return _adopt(Node(NodeType.ELEMENT, name=tag, attributes=attrs), children)


def text(data: str) -> Node:
    return Node(NodeType.TEXT, data=data)


def comment(data: str) -> Node:
    return Node(NodeType.COMMENT, data=data)


# =============================================================================
# Node predicates
# =============================================================================

def is_text_node(node: Optional[Node]) -> bool:
    return node is not None and node.kind is NodeType.TEXT


def is_element_node(node: Optional[Node]) -> bool:
    return node is not None and node.kind is NodeType.ELEMENT


def _is_editable(node: Optional[Node]) -> bool:
    while node is not None:
        value = node.attributes.get("contenteditable")
        if value == "true":
            return True
        if value == "false":
            return False
        node = node.parent
    return False


def is_editing_host(node: Optional[Node]) -> bool:
    """True for an editable element whose parent is not editable.

    Editing hosts are the top-level editable roots; traversal used for
    merging lines never crosses above one.
    """
    if not is_element_node(node):
        return False
    return (
        node.attributes.get("contenteditable") == "true"
        and not _is_editable(node.parent)
    )


# =============================================================================
# Mutation
# =============================================================================

def remove(node: Node) -> None:
    """Detach a node from its parent. Detached nodes are left alone."""
    parent = node.parent
    if parent is None:
        return
    del parent.children[node.index]
    node.parent = None


def insert(node: Node, ref: Node, at_end: bool) -> None:
    """Move ``node`` into the tree relative to ``ref``.

    Args:
        node: The node to insert; it is detached from its old parent first
        ref: Reference node
        at_end: True to append ``node`` as the last child of ``ref``,
            False to insert it before ``ref`` as its previous sibling

    Raises:
        TreeError: If the insertion would create a cycle or target a node
            that cannot hold children
    """
    if node is ref:
        return
    parent = ref if at_end else ref.parent
    if parent is None:
        raise TreeError(f"Cannot insert before root node {ref!r}")
    if not parent.is_container():
        raise TreeError(f"Node {parent!r} cannot have children")
    if node.contains(parent):
        raise TreeError(f"Cannot insert {node!r} into its own subtree")
    remove(node)
    if at_end:
        parent.children.append(node)
    else:
        parent.children.insert(ref.index, node)
    node.parent = parent


def merge(left: Optional[Node], right: Optional[Node]) -> bool:
    """Merge ``right`` into ``left`` if they are of the same kind.

    Two text nodes are joined into ``left``. Two elements with the same
    tag name get ``right``'s children spliced onto the end of ``left``.
    In both cases ``right`` is removed from the tree.

    Returns:
        True if the nodes were merged, False if they were left untouched
    """
    if left is None or right is None or left is right:
        return False
    if left.kind is NodeType.TEXT and right.kind is NodeType.TEXT:
        left.data += right.data
        remove(right)
        return True
    if (
        left.kind is NodeType.ELEMENT
        and right.kind is NodeType.ELEMENT
        and left.name == right.name
        and not right.contains(left)
    ):
        for child in list(right.children):
            insert(child, left, True)
        remove(right)
        return True
    return False
