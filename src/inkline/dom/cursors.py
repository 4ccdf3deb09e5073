"""Cursors: positions between nodes in the document tree.

A cursor is a ``(node, at_end)`` pair. With ``at_end`` False it sits
immediately before ``node``; with ``at_end`` True it sits inside ``node``
after its last child. Text nodes and void elements are atomic, so a cursor
is never inside them.

Exploratory walks work on a ``clone()`` and only ``set_from()`` the
caller's cursor once they succeed.
"""

from dataclasses import dataclass
from typing import Callable

from inkline.dom.nodes import Node, NodeType
from inkline.html.tables import is_void_tag


def _enterable(node: Node) -> bool:
    if node.kind is NodeType.ELEMENT:
        return not is_void_tag(node.name)
    return node.kind in (NodeType.DOCUMENT, NodeType.DOCUMENT_FRAGMENT)


@dataclass
class Cursor:
    """A position in the document tree.

    Attributes:
        node: The node the cursor is anchored to
        at_end: True if the cursor is inside ``node`` after its last child
    """

    node: Node
    at_end: bool = False

    def clone(self) -> "Cursor":
        return Cursor(self.node, self.at_end)

    def set_from(self, other: "Cursor") -> None:
        """Move this cursor to the position of ``other``."""
        self.node = other.node
        self.at_end = other.at_end

    def _leave(self) -> bool:
        next_node = self.node.next_sibling
        if next_node is not None:
            self.node = next_node
            self.at_end = False
            return True
        parent = self.node.parent
        if parent is None:
            return False
        self.node = parent
        self.at_end = True
        return True

    def next(self) -> bool:
        """Step forward one position, descending into containers.

        Returns:
            False if the cursor is at the end of the tree and did not move
        """
        if self.at_end or not _enterable(self.node):
            return self._leave()
        first = self.node.first_child
        if first is not None:
            self.node = first
        else:
            self.at_end = True
        return True

    def prev(self) -> bool:
        """Step backward one position, descending into containers.

        Returns:
            False if the cursor is at the start of the tree and did not move
        """
        if self.at_end:
            last = self.node.last_child
            if last is not None:
                self.node = last
                self.at_end = _enterable(last)
            else:
                self.at_end = False
            return True
        previous = self.node.previous_sibling
        if previous is not None:
            self.node = previous
            self.at_end = _enterable(previous)
            return True
        parent = self.node.parent
        if parent is None:
            return False
        self.node = parent
        return True

    def next_while(self, cond: Callable[["Cursor"], bool]) -> bool:
        """Step forward while ``cond`` holds for the cursor.

        Returns:
            False if the walk ran off the end of the tree
        """
        while cond(self):
            if not self.next():
                return False
        return True

    def prev_while(self, cond: Callable[["Cursor"], bool]) -> bool:
        """Step backward while ``cond`` holds for the cursor.

        Returns:
            False if the walk ran off the start of the tree
        """
        while cond(self):
            if not self.prev():
                return False
        return True

    def skip_next(self) -> bool:
        """Step past the current node without entering it."""
        return self._leave()

    def skip_prev(self) -> bool:
        """Step before the previous node without entering it."""
        previous = self.node.last_child if self.at_end else self.node.previous_sibling
        if previous is not None:
            self.node = previous
            self.at_end = False
            return True
        return self.prev()


def cursor(node: Node, at_end: bool = False) -> Cursor:
    """Create a cursor before ``node``, or inside it at the end."""
    return Cursor(node, at_end)
