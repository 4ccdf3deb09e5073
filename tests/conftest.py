"""Pytest fixtures for Inkline tests."""

from typing import Callable, Optional

import pytest
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from inkline.config import load_settings
from inkline.dom.nodes import Node, NodeType, comment, document, fragment, text
from inkline.html.tables import is_void_tag


def _convert(soup_node) -> Optional[Node]:
    """Convert a BeautifulSoup node into an Inkline node."""
    if isinstance(soup_node, Comment):
        return comment(str(soup_node))
    if isinstance(soup_node, NavigableString):
        if type(soup_node) is not NavigableString:
            return None  # doctype, CDATA, processing instructions
        return text(str(soup_node))
    if isinstance(soup_node, Tag):
        attributes = {
            key: " ".join(value) if isinstance(value, list) else value
            for key, value in soup_node.attrs.items()
        }
        node = Node(NodeType.ELEMENT, name=soup_node.name, attributes=attributes)
        for child in soup_node.children:
            converted = _convert(child)
            if converted is not None:
                node.append_child(converted)
        return node
    return None


def _serialize(node: Node) -> str:
    if node.kind is NodeType.TEXT:
        return node.data
    if node.kind is NodeType.COMMENT:
        return f"<!--{node.data}-->"
    inner = "".join(_serialize(child) for child in node.children)
    if node.kind is not NodeType.ELEMENT:
        return inner
    tag = node.name.lower()
    attrs = "".join(f' {key}="{value}"' for key, value in node.attributes.items())
    if is_void_tag(node.name):
        return f"<{tag}{attrs}>"
    return f"<{tag}{attrs}>{inner}</{tag}>"


@pytest.fixture(autouse=True)
def default_settings():
    """Reset global settings so environment tweaks do not leak between tests."""
    yield load_settings()
    load_settings()


@pytest.fixture
def parse_html() -> Callable[..., Node]:
    """Build an Inkline tree from an HTML snippet.

    The returned root is a document (attached, styles resolve) unless
    ``attached=False`` is passed, in which case it is a detached fragment.
    """

    def build(markup: str, attached: bool = True) -> Node:
        soup = BeautifulSoup(markup, "html.parser")
        root = document() if attached else fragment()
        for child in list(soup.children):
            converted = _convert(child)
            if converted is not None:
                root.append_child(converted)
        return root

    return build


@pytest.fixture
def serialize() -> Callable[[Node], str]:
    """Render a tree back to HTML for compact assertions."""
    return _serialize


@pytest.fixture
def find_text() -> Callable[[Node, str], Node]:
    """Find the first text node with exactly the given data."""

    def find(root: Node, data: str) -> Node:
        stack = [root]
        while stack:
            node = stack.pop(0)
            if node.kind is NodeType.TEXT and node.data == data:
                return node
            stack[0:0] = node.children
        raise LookupError(f"No text node {data!r}")

    return find


@pytest.fixture
def find_tag() -> Callable[..., Node]:
    """Find the n-th element with the given tag name in document order."""

    def find(root: Node, tag: str, index: int = 0) -> Node:
        matches = []
        stack = [root]
        while stack:
            node = stack.pop(0)
            if node.kind is NodeType.ELEMENT and node.name == tag.upper():
                matches.append(node)
            stack[0:0] = node.children
        return matches[index]

    return find
