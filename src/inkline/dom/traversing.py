"""Tree traversal primitives.

All functions treat running off the tree as a normal outcome and return
None (or stop) instead of raising.
"""

from enum import Enum
from typing import Callable, Optional

from inkline.dom.nodes import Node, is_editing_host

Predicate = Callable[[Node], bool]


class Walk(Enum):
    """What a ``walk_until`` visitor did with the node it was given."""

    CONTINUE = "continue"  # node consumed, go on with the next sibling
    STOP = "stop"  # node consumed, stop walking
    REJECT = "reject"  # node left untouched, stop walking


def next_non_ancestor(node: Optional[Node], until: Optional[Predicate] = None) -> Optional[Node]:
    """Get the first node after ``node`` in document order that is not its ancestor.

    Args:
        node: Starting node
        until: Optional predicate; climbing stops (returning None) at the
            first ancestor for which it holds

    Returns:
        The next sibling of ``node`` or of its closest ancestor that has one
    """
    while node is not None:
        sibling = node.next_sibling
        if sibling is not None:
            return sibling
        node = node.parent
        if node is not None and until is not None and until(node):
            return None
    return None


def previous_non_ancestor(node: Optional[Node], until: Optional[Predicate] = None) -> Optional[Node]:
    """Get the closest node before ``node`` in document order that is not its ancestor."""
    while node is not None:
        sibling = node.previous_sibling
        if sibling is not None:
            return sibling
        node = node.parent
        if node is not None and until is not None and until(node):
            return None
    return None


def forward(node: Node, until: Optional[Predicate] = None) -> Optional[Node]:
    """Get the next node in depth-first pre-order."""
    first = node.first_child
    if first is not None:
        return first
    return next_non_ancestor(node, until)


def find_forward(
    node: Optional[Node],
    match: Predicate,
    until: Optional[Predicate] = None,
) -> Optional[Node]:
    """Find the first node at or after ``node`` (pre-order) for which ``match`` holds.

    The starting node is only tested against ``match``. Every node reached
    after it, including ancestors climbed out of, is first tested against
    ``until`` and ends the search when it holds.

    Args:
        node: Where to start searching
        match: Predicate selecting the node to return
        until: Optional predicate bounding the search

    Returns:
        The matching node, or None if the search was bounded or ran off the tree
    """
    if node is None:
        return None
    if match(node):
        return node
    node = forward(node, until)
    while node is not None:
        if until is not None and until(node):
            return None
        if match(node):
            return node
        node = forward(node, until)
    return None


def next_while(node: Optional[Node], cond: Predicate) -> Optional[Node]:
    """Get the first sibling, starting at ``node``, for which ``cond`` fails."""
    while node is not None and cond(node):
        node = node.next_sibling
    return node


def walk_until(
    node: Optional[Node],
    visit: Callable[[Node], Walk],
    until: Predicate,
) -> Optional[Node]:
    """Visit ``node`` and its following siblings until ``until`` holds.

    The next sibling is looked up before each visit, so the visitor may
    move or remove the node it is given.

    Returns:
        The first node that was not consumed, or None if the walk ran out
        of siblings
    """
    while node is not None and not until(node):
        next_node = node.next_sibling
        result = visit(node)
        if result is Walk.REJECT:
            return node
        if result is Walk.STOP:
            return next_node
        node = next_node
    return node


def climb_until(
    node: Optional[Node],
    action: Callable[[Node], None],
    until: Predicate,
) -> Optional[Node]:
    """Apply ``action`` to ``node`` and its ancestors until ``until`` holds.

    Never applies ``action`` to an editing host or a root node.

    Returns:
        The ancestor the climb stopped at
    """
    while (
        node is not None
        and node.parent is not None
        and not is_editing_host(node)
        and not until(node)
    ):
        parent = node.parent
        action(node)
        node = parent
    return node
