"""Exact renderability tests.

``is_unrendered_whitespace_no_block_check`` may report whitespace as
unrendered that is actually significant because of where it sits. The
tests here resolve those cases by looking at siblings and walking to the
edges of the line with ``inkline.html.boundaries``.
"""

from typing import Optional

from inkline.dom.cursors import cursor
from inkline.dom.nodes import Node, NodeType
from inkline.dom.traversing import previous_non_ancestor
from inkline.html.boundaries import (
    skip_unrendered_to_end_of_line,
    skip_unrendered_to_start_of_line,
)
from inkline.html.classify import has_block_style, is_block_type
from inkline.html.whitespace import is_unrendered_whitespace_no_block_check


def _line_is_empty_around(node: Node) -> bool:
    return (
        skip_unrendered_to_end_of_line(cursor(node))
        or skip_unrendered_to_start_of_line(cursor(node))
    )


def is_unrendered_whitespace(node: Optional[Node]) -> bool:
    """Check whether the node is whitespace that will not be rendered."""
    if not is_unrendered_whitespace_no_block_check(node):
        return False
    return _line_is_empty_around(node)


def is_terminal_sibling(node: Node) -> bool:
    """Check whether the node is the first or last child of its parent."""
    parent = node.parent
    if parent is None:
        return False
    return node is parent.first_child or node is parent.last_child


def is_adjacent_to_block(node: Node) -> bool:
    """Check whether the node is next to a block-level element."""
    return is_block_type(node.previous_sibling) or is_block_type(node.next_sibling)


def _is_trailing_break(node: Node) -> bool:
    parent = node.parent
    return (
        node.kind is NodeType.ELEMENT
        and node.name == "BR"
        and parent is not None
        and node is parent.last_child
        and has_block_style(parent)
    )


def is_unrendered_node(node: Optional[Node]) -> bool:
    """Check whether the node is visually unrendered.

    An absent node is unrendered. A br that is the last child of a block
    is never rendered. Collapsible whitespace is unrendered when it sits at
    either end of its parent, next to a block, or on a line with nothing
    else rendered on one side of it.

    Args:
        node: The node to check, may be None

    Returns:
        True if the node contributes nothing visible
    """
    if node is None:
        return True
    # The no-block check gives false positives but never false negatives;
    # what follows makes certain.
    if not is_unrendered_whitespace_no_block_check(node):
        return _is_trailing_break(node)
    return (
        is_terminal_sibling(node)
        or is_adjacent_to_block(node)
        or _line_is_empty_around(node)
    )


def is_rendered(node: Optional[Node]) -> bool:
    return not is_unrendered_node(node)


def is_visually_adjacent(left: Node, right: Node) -> bool:
    """Determine whether ``left`` is visually adjacent to ``right``.

    Only unrendered nodes may sit between the end of ``left`` and the start
    of ``right``; container boundaries do not count. In
    ``<p>...<i>left</i></p><u>right</u>`` the ``p``, the ``i`` and the text
    "left" are all visually adjacent to the ``u`` and to "right".

    Args:
        left: The node on the left (above)
        right: The node on the right (below)

    Returns:
        True if nothing rendered separates the two nodes
    """
    node = previous_non_ancestor(right)
    while node is not None:
        if node is left:
            return True
        if is_unrendered_node(node):
            node = previous_non_ancestor(node)
            continue
        node = node.last_child
    return False


def is_empty(elem: Node) -> bool:
    """Check whether the element is rendered empty.

    Only element and text children count; comments are ignored.
    """
    for child in elem.children:
        if child.kind not in (NodeType.ELEMENT, NodeType.TEXT):
            continue
        if not is_unrendered_whitespace(child):
            return False
    return True
