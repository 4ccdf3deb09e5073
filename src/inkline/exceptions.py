"""Exceptions raised by the Inkline collaborators.

The rendering predicates themselves never raise; these errors come from the
reference document tree and style resolution and are caught at the seams
where a fallback is defined.
"""


class InklineError(Exception):
    """Base exception for all Inkline errors."""

    pass


class StyleUnavailableError(InklineError):
    """Raised when a computed style cannot be resolved for a node.

    This happens for nodes that are not attached to a document and for
    nodes that carry no style at all (text, comments).
    """

    def __init__(self, node_name: str, property_name: str) -> None:
        self.node_name = node_name
        self.property_name = property_name
        super().__init__(
            f"Cannot resolve '{property_name}' for detached or unstyled node {node_name}"
        )


class TreeError(InklineError):
    """Raised when a document tree mutation would corrupt the tree."""

    pass
