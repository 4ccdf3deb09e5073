"""Removing the visual line break between two adjacent lines.

Content on the line below is moved, node by node, to the end of the line
above: into the closest container that may legally receive it. Like
containers are merged instead of nested, and containers left empty on
the line below are removed afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from inkline.dom.content import allows_nesting
from inkline.dom.nodes import Node, insert, is_editing_host, merge, remove
from inkline.dom.traversing import (
    Walk,
    climb_until,
    find_forward,
    next_non_ancestor,
    next_while,
    walk_until,
)
from inkline.html.classify import (
    is_inline_type,
    is_line_breaking_void_type,
    is_linebreaking_node,
    is_list_container,
    is_text_level_semantic_type,
    is_void_type,
)
from inkline.html.oracle import is_rendered, is_unrendered_node, is_visually_adjacent

logger = logging.getLogger(__name__)

Mover = Callable[[Node], Walk]


@dataclass
class TransferPivot:
    """Where content from the line below goes.

    Attributes:
        start: First rendered node after the line above, None if there is none
        destination: The node content is moved into (or before)
        at_end: True to append into ``destination``, False to insert before it
        move: Moves one node to the destination
    """

    start: Optional[Node]
    destination: Node
    at_end: bool
    move: Mover


def has_rendered_children(node: Node) -> bool:
    return is_rendered(next_while(node.first_child, is_unrendered_node))


def next_visible(node: Optional[Node]) -> Optional[Node]:
    return find_forward(node, is_rendered)


def suitable_transfer_target(node: Node) -> bool:
    """Check whether the node may receive nodes moved from the line below.

    Void elements may not contain anything. Text-level semantic elements
    would change the semantic styling of whatever is moved into them. Text
    nodes hold no children at all.
    """
    return (
        node.is_container()
        and not is_void_type(node)
        and not is_text_level_semantic_type(node)
    )


def is_transferable(node: Node) -> bool:
    """No blocks are moved when merging lines, except list containers."""
    return is_inline_type(node) or is_list_container(node)


def _enclosing_list(node: Optional[Node]) -> Optional[Node]:
    while node is not None and not is_editing_host(node):
        if is_list_container(node):
            return node
        node = node.parent
    return None


def create_insert_function(ref: Node, at_end: bool) -> Mover:
    """Create a function that moves a node relative to ``ref`` if that is valid.

    Args:
        ref: Reference node for insertion
        at_end: True to append moved nodes as last children of ``ref``,
            False to insert them before ``ref``

    Returns:
        A mover answering ``Walk.CONTINUE`` when the node was moved (or
        merged) and ``Walk.REJECT`` when it was left alone
    """
    container = ref if at_end else ref.parent
    enclosing_list = _enclosing_list(container)

    def move(node: Node) -> Walk:
        if node is ref or container is None:
            return Walk.REJECT
        if at_end and ref.name == node.name:
            merge(ref, node)
            return Walk.CONTINUE
        if enclosing_list is not None and enclosing_list.name == node.name:
            # a list below joins the list above instead of nesting in its item
            merge(enclosing_list, node)
            return Walk.CONTINUE
        if not allows_nesting(container.name, node.name):
            logger.debug("%r may not contain %r, stopping", container, node)
            return Walk.REJECT
        insert(node, ref, at_end)
        merge(node.previous_sibling, node)
        return Walk.CONTINUE

    return move


def create_transfer_pivot(node: Node) -> Optional[TransferPivot]:
    """Find where content right of ``node`` should be moved to.

    Climbs from ``node`` towards the editing host and picks the first
    suitable transfer target, to be appended into. If there is none below
    the editing host, content goes in front of the node that follows the
    outermost ancestor climbed through.

    Args:
        node: The node on the left side of the join

    Returns:
        The transfer pivot, or None if nothing follows ``node`` inside its
        editing host
    """
    prev = node
    current: Optional[Node] = node
    while current is not None and not is_editing_host(current):
        if suitable_transfer_target(current):
            return TransferPivot(
                start=next_visible(next_non_ancestor(current, is_editing_host)),
                destination=current,
                at_end=True,
                move=create_insert_function(current, True),
            )
        prev = current
        current = current.parent
    following = next_non_ancestor(prev, is_editing_host)
    if following is None:
        return None
    return TransferPivot(
        start=next_visible(following),
        destination=following,
        at_end=False,
        move=create_insert_function(following, False),
    )


def _is_line_end(node: Node) -> bool:
    return is_linebreaking_node(node) or is_editing_host(node)


def _first_content(node: Optional[Node]) -> Optional[Node]:
    # Blocks opening the line below are entered rather than ending it.
    while (
        node is not None
        and not is_transferable(node)
        and not is_editing_host(node)
    ):
        first = next_while(node.first_child, is_unrendered_node)
        if first is None or is_line_breaking_void_type(first):
            break
        node = first
    return node


def next_transferable(node: Optional[Node]) -> Optional[Node]:
    """Find the first node of the line starting at ``node`` that may be moved.

    Block containers that open before the first content of the line are
    descended into. Any other line-breaking node ends the search.
    """
    return find_forward(_first_content(node), is_transferable, _is_line_end)


def _trailing_break(pivot: TransferPivot) -> Optional[Node]:
    if not pivot.at_end:
        return None
    last = pivot.destination.last_child
    if last is not None and last.name == "BR" and is_unrendered_node(last):
        return last
    return None


def _remove_break(br: Node) -> None:
    # The br stops being invisible once content follows it.
    logger.debug("Removing trailing break %r of %r", br, br.parent)
    left, right = br.previous_sibling, br.next_sibling
    remove(br)
    merge(left, right)


def remove_visual_break(above: Node, below: Node) -> None:
    """Remove the visual line break between ``above`` and ``below``.

    Nodes from the line starting at ``below`` are moved to the end of the
    line ending at ``above``. Nothing happens unless the two nodes are
    visually adjacent or when there is nothing on the line below that may
    be moved. When no node can be moved the tree is left untouched.

    Args:
        above: Node at the end of the upper line
        below: Node at the start of the lower line
    """
    if not is_visually_adjacent(above, below):
        logger.debug("%r and %r are not visually adjacent", above, below)
        return
    pivot = create_transfer_pivot(above)
    if pivot is None:
        logger.debug("Nothing follows %r", above)
        return
    node = next_transferable(pivot.start)
    if node is None:
        logger.debug("Nothing to transfer after %r", above)
        return
    parent = node.parent
    trailing = _trailing_break(pivot)
    moved = []

    def move(moving: Node) -> Walk:
        result = pivot.move(moving)
        if result is not Walk.REJECT:
            moved.append(moving)
        return result

    stopped_at = walk_until(node, move, lambda n: not is_transferable(n))
    if not moved:
        logger.debug("Nothing on the line after %r may move into %r", above, pivot.destination)
        return
    if trailing is not None and trailing.parent is pivot.destination:
        _remove_break(trailing)
    logger.debug("Moved line into %r, stopped at %r", pivot.destination, stopped_at)
    climb_until(parent, remove, has_rendered_children)
