"""Classification predicates for nodes and characters.

``is_*_type`` functions look only at a node's tag name and work for
attached as well as detached nodes. ``has_*_style`` functions consult the
computed style and fall back to the tag tables when no style is available.
"""

import logging
import re
from typing import Optional

from inkline.dom.nodes import Node, NodeType
from inkline.dom.style import computed_style
from inkline.exceptions import StyleUnavailableError
from inkline.html import tables
from inkline.html.tables import is_style_inherited

logger = logging.getLogger(__name__)

CONTROL_CHARACTER_PATTERN = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def _tag(node: Optional[Node]) -> Optional[str]:
    if node is None or node.kind is not NodeType.ELEMENT:
        return None
    return node.name


def is_block_type(node: Optional[Node]) -> bool:
    """Check whether the node is a block-level element type.

    Similar to ``has_block_style`` except it relies on the tag name only,
    regardless of how the node is rendered.
    """
    tag = _tag(node)
    return tag is not None and tables.is_block_level_tag(tag)


def is_inline_type(node: Optional[Node]) -> bool:
    """Check whether the node is an inline type, regardless of rendering."""
    return not is_block_type(node)


def is_void_type(node: Optional[Node]) -> bool:
    """Check whether the node is a void element type."""
    tag = _tag(node)
    return tag is not None and tables.is_void_tag(tag)


def is_text_level_semantic_type(node: Optional[Node]) -> bool:
    """Check whether the node is a text-level semantic element type."""
    tag = _tag(node)
    return tag is not None and tables.is_text_level_semantic_tag(tag)


def is_line_breaking_void_type(node: Optional[Node]) -> bool:
    tag = _tag(node)
    return tag is not None and tables.is_line_breaking_void_tag(tag)


def is_list_container(node: Optional[Node]) -> bool:
    tag = _tag(node)
    return tag is not None and tables.is_list_container_tag(tag)


def has_block_style(node: Optional[Node]) -> bool:
    """Check whether the node is rendered with block style.

    A block node is either an element whose ``display`` does not resolve
    to ``inline``, ``inline-block``, ``inline-table`` or ``none``, or a
    document, or a document fragment.

    Style resolution only works for nodes attached to a document; for
    detached elements the static block-level table is used instead.

    Args:
        node: The node to check, may be None

    Returns:
        True if the node is rendered with block style
    """
    if node is None:
        return False
    if node.kind in (NodeType.DOCUMENT, NodeType.DOCUMENT_FRAGMENT):
        return True
    if node.kind is not NodeType.ELEMENT:
        return False
    try:
        display = computed_style(node, "display")
    except StyleUnavailableError:
        logger.debug("No computed display for %r, using tag tables", node)
        display = None
    if display:
        return not tables.is_non_block_display(display)
    return is_block_type(node)


def has_inline_style(node: Optional[Node]) -> bool:
    """Check whether the node is rendered with inline style."""
    return not has_block_style(node)


def is_linebreaking_node(node: Optional[Node]) -> bool:
    """True for nodes that introduce a line break (br, hr, img, blocks)."""
    return is_line_breaking_void_type(node) or has_block_style(node)


def is_control_character(char: str) -> bool:
    """Check whether the character is a C0 or C1 control character.

    Control characters are usually not rendered when inserted into the
    tree. False for space 0x20 (which may or may not be rendered) and
    non-breaking space 0xa0, true for tab 0x09 and line feeds 0x0a, 0x0d.
    DEL 0x7f counts as a control character as well.
    """
    return bool(CONTROL_CHARACTER_PATTERN.search(char))
