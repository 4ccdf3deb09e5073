"""Locating the start and end of visual lines.

Every function here walks a clone of the given cursor and only commits it
back onto the caller's cursor when the walk succeeds. On failure the
caller's cursor is left exactly where it was.
"""

from inkline.dom.cursors import Cursor
from inkline.html.classify import is_linebreaking_node
from inkline.html.whitespace import is_unrendered_at_point


def _is_br(point: Cursor) -> bool:
    return point.node.name == "BR"


def skip_unrendered_to_end_of_line(point: Cursor) -> bool:
    """Move ``point`` to the end of its line.

    Stops to the left of a br or block node, skipping any unrendered nodes
    on the way.

    Args:
        point: The cursor to move

    Returns:
        True if the cursor was moved to the end of the line, False if
        rendered content was encountered first (``point`` is unchanged)
    """
    cursor = point.clone()
    cursor.next_while(is_unrendered_at_point)
    if not is_linebreaking_node(cursor.node):
        return False
    point.set_from(cursor)
    return True


def skip_unrendered_to_start_of_line(point: Cursor) -> bool:
    """Move ``point`` to the start of its line.

    Stops to the right of a br or block node, skipping any unrendered
    nodes on the way. A br at the very end of a block does not start a new
    line, so a point behind such a br belongs to the line before it.

    Args:
        point: The cursor to move

    Returns:
        True if the cursor was moved to the start of the line, False if
        rendered content was encountered first (``point`` is unchanged)
    """
    cursor = point.clone()
    cursor.prev()
    cursor.prev_while(is_unrendered_at_point)
    if not is_linebreaking_node(cursor.node):
        return False
    is_br = _is_br(cursor)
    cursor.next()  # after/out of the linebreaking node
    if is_br:
        end_of_block = point.clone()
        if skip_unrendered_to_end_of_line(end_of_block) and end_of_block.at_end:
            cursor.skip_prev()  # before the br
            cursor.prev()
            cursor.prev_while(is_unrendered_at_point)
            if not is_linebreaking_node(cursor.node):
                return False
            cursor.next()
    point.set_from(cursor)
    return True


def normalize_boundary(point: Cursor) -> bool:
    """Move ``point`` to the canonical position of its visual line.

    Tries the start of the line first. Failing that, moves to the end of
    the line, past the br if there is one. On the last line of a block any
    unrendered whitespace after the last br does not form a line of its
    own, so the point is moved to the very end of the block.

    If the boundaries of a selection inside a block that contains a single
    empty line are both normalized, the selection collapses to the start
    of the block.

    Args:
        point: The cursor to move

    Returns:
        True if ``point`` is on a normalized position
    """
    if skip_unrendered_to_start_of_line(point):
        return True
    if not skip_unrendered_to_end_of_line(point):
        return False
    if _is_br(point) and not point.at_end:
        point.skip_next()
        end_of_block = point.clone()
        if skip_unrendered_to_end_of_line(end_of_block) and end_of_block.at_end:
            point.set_from(end_of_block)
    return True
