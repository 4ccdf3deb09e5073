"""Content model: which elements may contain which.

A coarse rendition of the HTML content categories, good enough to keep
moved content from producing structurally illegal trees (lists inside
paragraphs, paragraphs inside bold, anything inside a ``br``).
"""

from inkline.html.tables import is_block_level_tag, is_text_level_semantic_tag, is_void_tag

# Elements whose content must be phrasing content only
PHRASING_ONLY_CONTAINERS = frozenset({
    "P",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "PRE",
    "ADDRESS",
    "DT",
    "LEGEND",
    "CAPTION",
    "LABEL",
    "BUTTON",
    "OUTPUT",
})

# Elements that only accept specific children
STRUCTURED_CONTAINERS: dict[str, frozenset[str]] = {
    "UL": frozenset({"LI", "SCRIPT", "TEMPLATE"}),
    "OL": frozenset({"LI", "SCRIPT", "TEMPLATE"}),
    "DL": frozenset({"DT", "DD", "DIV", "SCRIPT", "TEMPLATE"}),
    "TABLE": frozenset({"CAPTION", "COLGROUP", "THEAD", "TBODY", "TFOOT", "TR"}),
    "THEAD": frozenset({"TR"}),
    "TBODY": frozenset({"TR"}),
    "TFOOT": frozenset({"TR"}),
    "TR": frozenset({"TD", "TH"}),
    "COLGROUP": frozenset({"COL"}),
}

# Flow content that phrasing-only containers reject, beyond the block table
FLOW_ONLY_ELEMENTS = frozenset({
    "LI",
    "DT",
    "DD",
    "MAIN",
    "NAV",
    "DETAILS",
    "TR",
    "TD",
    "TH",
    "TBODY",
    "THEAD",
    "CAPTION",
})


def _is_flow_only(tag: str) -> bool:
    return is_block_level_tag(tag) or tag in FLOW_ONLY_ELEMENTS


def allows_nesting(parent_tag: str, child_tag: str) -> bool:
    """Check whether an element ``parent_tag`` may contain a ``child_tag``.

    Args:
        parent_tag: Tag name of the prospective parent, or a ``#``-name for
            documents and fragments (which accept anything)
        child_tag: Tag name of the prospective child, ``#text`` for text

    Returns:
        True if the nesting is valid
    """
    parent = parent_tag.upper() if not parent_tag.startswith("#") else parent_tag
    child = child_tag.upper() if not child_tag.startswith("#") else child_tag

    if parent.startswith("#"):
        return True
    if is_void_tag(parent):
        return False
    if child == "#comment":
        return True
    if parent in STRUCTURED_CONTAINERS:
        return child in STRUCTURED_CONTAINERS[parent]
    if child == "#text":
        return True
    if parent == "A" and child == "A":
        return False
    if parent in PHRASING_ONLY_CONTAINERS or is_text_level_semantic_tag(parent):
        return not _is_flow_only(child)
    return True
