"""Static classification of HTML tag names and characters.

The sets below are process-wide constants. Other modules go through the
lookup functions at the bottom rather than the raw sets.
"""

from typing import Optional

from inkline.config import get_settings

# NB: "block-level" is not technically defined for elements that are new
# in HTML5.
_BLOCK_LEVEL_ELEMENTS = frozenset({
    "ADDRESS",
    "ARTICLE",  # HTML5
    "ASIDE",  # HTML5
    "AUDIO",  # HTML5
    "BLOCKQUOTE",
    "CANVAS",  # HTML5
    "DD",
    "DIV",
    "DL",
    "FIELDSET",
    "FIGCAPTION",
    "FIGURE",
    "FOOTER",
    "FORM",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "HEADER",
    "HGROUP",
    "HR",
    "NOSCRIPT",
    "OL",
    "OUTPUT",
    "P",
    "PRE",
    "SECTION",  # HTML5
    "TABLE",
    "TFOOT",
    "UL",
    "VIDEO",  # HTML5
})

# Elements which are not permitted to contain content.
_VOID_ELEMENTS = frozenset({
    "AREA",
    "BASE",
    "BR",
    "COL",
    "COMMAND",
    "EMBED",
    "HR",
    "IMG",
    "INPUT",
    "KEYGEN",  # HTML5
    "LINK",
    "META",
    "PARAM",
    "SOURCE",
    "TRACK",
    "WBR",
})

_TEXT_LEVEL_SEMANTIC_ELEMENTS = frozenset({
    "A",
    "ABBR",
    "B",
    "BDI",  # HTML5
    "BDO",
    "BR",
    "CITE",
    "CODE",
    "DATA",  # HTML5
    "DFN",
    "EM",
    "I",
    "KBD",
    "MARK",  # HTML5
    "Q",
    "RP",  # HTML5
    "RT",  # HTML5
    "RUBY",  # HTML5
    "S",
    "SAMP",
    "SMALL",
    "SPAN",
    "STRONG",
    "SUB",
    "SUP",
    "TIME",  # HTML5
    "U",
    "VAR",
    "WBR",  # HTML5
})

# Non-block-level elements which are nevertheless line breaking.
_LINE_BREAKING_VOID_ELEMENTS = frozenset({"BR", "HR", "IMG"})

_LIST_CONTAINERS = frozenset({"OL", "UL"})

# display values that do not make an element a block
_NON_BLOCK_DISPLAY_VALUES = frozenset({"inline", "inline-block", "inline-table", "none"})

ZERO_WIDTH_CHARACTERS = (
    "\u200b"  # ZWSP
    "\u200c"
    "\u200d"
    "\ufeff"  # ZERO WIDTH NO-BREAK SPACE
)

# Characters with the Unicode White_Space property (PropList.txt)
WHITE_SPACE_CHARACTERS = (
    "\u0009"
    "\u000a"
    "\u000b"
    "\u000c"
    "\u000d"
    " "
    "\u0085"
    "\u00a0"  # NO-BREAK SPACE (&nbsp;)
    "\u1680"
    "\u180e"
    "\u2000"
    "\u2001"
    "\u2002"
    "\u2003"
    "\u2004"
    "\u2005"
    "\u2006"
    "\u2007"
    "\u2008"
    "\u2009"
    "\u200a"
    "\u2028"
    "\u2029"
    "\u202f"
    "\u205f"
    "\u3000"
)

# A text node made only of these is a candidate for being unrendered.
COLLAPSIBLE_CHARACTERS = WHITE_SPACE_CHARACTERS + "\u200b"


def is_block_level_tag(tag: str) -> bool:
    return tag.upper() in _BLOCK_LEVEL_ELEMENTS


def is_void_tag(tag: str) -> bool:
    return tag.upper() in _VOID_ELEMENTS


def is_text_level_semantic_tag(tag: str) -> bool:
    return tag.upper() in _TEXT_LEVEL_SEMANTIC_ELEMENTS


def is_line_breaking_void_tag(tag: str) -> bool:
    return tag.upper() in _LINE_BREAKING_VOID_ELEMENTS


def is_list_container_tag(tag: str) -> bool:
    return tag.upper() in _LIST_CONTAINERS


def is_non_block_display(value: str) -> bool:
    return value in _NON_BLOCK_DISPLAY_VALUES


def is_whitespace_preserve_style(value: Optional[str]) -> bool:
    """Whether a white-space value keeps whitespace runs as they are."""
    return value in get_settings().whitespace_preserve_values


def is_style_inherited(name: str) -> bool:
    """Whether a style property is inherited from the parent element.

    The non-inherited table comes from settings and is known to be
    incomplete; it is not meant to be CSS-accurate.
    """
    return name not in get_settings().non_inherited_styles
