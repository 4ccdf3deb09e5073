"""Computed style resolution for attached elements.

A small user-agent cascade: inline ``style`` declarations win over the
default style of the tag, inherited properties fall back to the parent's
computed value, everything else to its initial value.
"""

import re
from typing import Optional

from inkline.dom.nodes import Node, NodeType
from inkline.exceptions import StyleUnavailableError
from inkline.html.tables import is_block_level_tag, is_style_inherited

DECLARATION_PATTERN = re.compile(r"\s*([-\w]+)\s*:\s*([^;]+?)\s*(?:;|$)")

INITIAL_VALUES: dict[str, str] = {
    "display": "inline",
    "white-space": "normal",
}

# Default display/white-space of the user-agent stylesheet, beyond the
# block-level table which all default to display: block.
USER_AGENT_STYLES: dict[str, dict[str, str]] = {
    "LI": {"display": "list-item"},
    "TABLE": {"display": "table"},
    "CAPTION": {"display": "table-caption"},
    "THEAD": {"display": "table-header-group"},
    "TBODY": {"display": "table-row-group"},
    "TFOOT": {"display": "table-footer-group"},
    "TR": {"display": "table-row"},
    "TD": {"display": "table-cell"},
    "TH": {"display": "table-cell"},
    "COL": {"display": "table-column"},
    "COLGROUP": {"display": "table-column-group"},
    "HTML": {"display": "block"},
    "BODY": {"display": "block"},
    "MAIN": {"display": "block"},
    "NAV": {"display": "block"},
    "DT": {"display": "block"},
    "DETAILS": {"display": "block"},
    "SUMMARY": {"display": "block"},
    "HEAD": {"display": "none"},
    "SCRIPT": {"display": "none"},
    "STYLE": {"display": "none"},
    "TEMPLATE": {"display": "none"},
    "TITLE": {"display": "none"},
    "PRE": {"display": "block", "white-space": "pre"},
    "LISTING": {"display": "block", "white-space": "pre"},
    "XMP": {"display": "block", "white-space": "pre"},
    "TEXTAREA": {"display": "inline-block", "white-space": "pre-wrap"},
    "NOBR": {"white-space": "nowrap"},
    "IMG": {"display": "inline"},
}


def parse_declarations(style: str) -> dict[str, str]:
    """Parse an inline ``style`` attribute into property/value pairs."""
    return {
        match.group(1).lower(): match.group(2).strip().lower()
        for match in DECLARATION_PATTERN.finditer(style or "")
    }


def _user_agent_value(tag: str, name: str) -> Optional[str]:
    value = USER_AGENT_STYLES.get(tag, {}).get(name)
    if value is None and name == "display":
        return "block" if is_block_level_tag(tag) else "inline"
    return value


def _resolve(node: Node, name: str) -> Optional[str]:
    declared = parse_declarations(node.attributes.get("style", ""))
    value = declared.get(name)
    if value is not None and value != "inherit":
        return value
    if value is None:
        value = _user_agent_value(node.name, name)
        if value is not None:
            return value
    if value == "inherit" or is_style_inherited(name):
        parent = node.parent
        if parent is not None and parent.kind is NodeType.ELEMENT:
            return _resolve(parent, name)
    return INITIAL_VALUES.get(name)


def computed_style(node: Node, name: str) -> Optional[str]:
    """Get the computed value of a style property.

    Args:
        node: An element attached to a document
        name: CSS property name (e.g. ``display``, ``white-space``)

    Returns:
        The resolved value, or None when the property has no initial value

    Raises:
        StyleUnavailableError: If the node is not an attached element
    """
    if node.kind is not NodeType.ELEMENT or not node.is_attached:
        raise StyleUnavailableError(node.name, name)
    return _resolve(node, name.lower())
