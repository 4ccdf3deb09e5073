"""Inkline - visual rendering model for rich-text editing.

Decides which nodes of a document tree are actually rendered, where the
visual lines of a block start and end, and how two adjacent visual lines
are merged by moving content across a line break.
"""

__version__ = "0.1.0"

from inkline.html.classify import (
    has_block_style,
    has_inline_style,
    is_block_type,
    is_control_character,
    is_inline_type,
    is_linebreaking_node,
    is_list_container,
    is_style_inherited,
    is_text_level_semantic_type,
    is_void_type,
)
from inkline.html.whitespace import (
    is_unrendered_at_point,
    is_unrendered_whitespace_no_block_check,
    is_whitespace_or_zero_width_characters,
    is_whitespaces,
    is_zero_width_characters,
)
from inkline.html.boundaries import (
    normalize_boundary,
    skip_unrendered_to_end_of_line,
    skip_unrendered_to_start_of_line,
)
from inkline.html.oracle import (
    is_empty,
    is_unrendered_node,
    is_unrendered_whitespace,
    is_visually_adjacent,
)
from inkline.html.merge import remove_visual_break

__all__ = [
    "__version__",
    "has_block_style",
    "has_inline_style",
    "is_block_type",
    "is_control_character",
    "is_inline_type",
    "is_linebreaking_node",
    "is_list_container",
    "is_style_inherited",
    "is_text_level_semantic_type",
    "is_void_type",
    "is_unrendered_at_point",
    "is_unrendered_whitespace_no_block_check",
    "is_whitespace_or_zero_width_characters",
    "is_whitespaces",
    "is_zero_width_characters",
    "normalize_boundary",
    "skip_unrendered_to_end_of_line",
    "skip_unrendered_to_start_of_line",
    "is_empty",
    "is_unrendered_node",
    "is_unrendered_whitespace",
    "is_visually_adjacent",
    "remove_visual_break",
]
