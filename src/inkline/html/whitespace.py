"""Single-node whitespace tests.

These look at one node (or string) in isolation. Whether a whitespace run
is really collapsed also depends on its neighbours; see
``inkline.html.oracle`` for the exact tests.
"""

import logging
import re
from typing import Optional, Union

from inkline.dom.cursors import Cursor
from inkline.dom.nodes import Node, NodeType
from inkline.dom.style import computed_style
from inkline.exceptions import StyleUnavailableError
from inkline.html.classify import has_inline_style, is_line_breaking_void_type
from inkline.html.tables import (
    COLLAPSIBLE_CHARACTERS,
    WHITE_SPACE_CHARACTERS,
    ZERO_WIDTH_CHARACTERS,
    is_whitespace_preserve_style,
)

logger = logging.getLogger(__name__)

NON_COLLAPSIBLE_PATTERN = re.compile(f"[^{re.escape(COLLAPSIBLE_CHARACTERS)}]")
LINE_TERMINATOR_PATTERN = re.compile(r"[\r\n]")

WHITESPACES_PATTERN = re.compile(f"^[{re.escape(WHITE_SPACE_CHARACTERS)}]+$")
ZERO_WIDTH_PATTERN = re.compile(f"^[{re.escape(ZERO_WIDTH_CHARACTERS)}]+$")
WHITESPACE_OR_ZERO_WIDTH_PATTERN = re.compile(
    f"^[{re.escape(WHITE_SPACE_CHARACTERS + ZERO_WIDTH_CHARACTERS)}]+$"
)

TextLike = Union[Node, str]


def _data(value: TextLike) -> str:
    return value if isinstance(value, str) else value.data


def is_whitespaces(value: TextLike) -> bool:
    """Check whether a text node consists only of white space characters."""
    return bool(WHITESPACES_PATTERN.match(_data(value)))


def is_zero_width_characters(value: TextLike) -> bool:
    """Check whether a text node consists only of zero-width characters."""
    return bool(ZERO_WIDTH_PATTERN.match(_data(value)))


def is_whitespace_or_zero_width_characters(value: TextLike) -> bool:
    """Check whether a text node consists only of white space or zero-width characters."""
    return bool(WHITESPACE_OR_ZERO_WIDTH_PATTERN.match(_data(value)))


def _parent_white_space(node: Node) -> Optional[str]:
    parent = node.parent
    if parent is None:
        return None
    try:
        return computed_style(parent, "white-space")
    except StyleUnavailableError:
        logger.debug("No computed white-space for %r, assuming collapsible", parent)
        return None


def is_unrendered_whitespace_no_block_check(node: Optional[Node]) -> bool:
    """Check whether a text node is unrendered whitespace, looking only at the node.

    There are no false negatives but there may be false positives:
    whitespace before or after a line-breaking node is not examined here.

    Args:
        node: The node to check

    Returns:
        True if the node is a text node whose whitespace would be collapsed
    """
    if node is None or node.kind is not NodeType.TEXT:
        return False
    if not node.data:
        return True
    if NON_COLLAPSIBLE_PATTERN.search(node.data):
        return False
    white_space = _parent_white_space(node)
    if is_whitespace_preserve_style(white_space):
        return False
    if white_space == "pre-line" and LINE_TERMINATOR_PATTERN.search(node.data):
        return False
    return True


def is_unrendered_at_point(point: Cursor) -> bool:
    """Whether the node at ``point`` can be stepped over when walking a line.

    True for collapsible whitespace and for inline elements other than the
    line-breaking voids (br, hr, img). Siblings are not examined.
    """
    node = point.node
    if is_unrendered_whitespace_no_block_check(node):
        return True
    return (
        node.kind is NodeType.ELEMENT
        and has_inline_style(node)
        and not is_line_breaking_void_type(node)
    )
