"""Removal of parser location metadata from documents."""

from graphql.language import DocumentNode, Node

from gqltag.core.exceptions import DocumentCycleError


def strip_locations(document: DocumentNode) -> DocumentNode:
    """Strip location info from a document, in place.

    Every node below the document's definitions loses its ``loc``. The
    document keeps its own location, so its source text stays
    available for composition, but drops the start and end tokens.

    Args:
        document: A freshly parsed document.

    Returns:
        The same document.

    Raises:
        DocumentCycleError: If a node is reachable from itself.
    """
    for definition in document.definitions:
        _strip_node(definition, set())

    location = document.loc
    if location is not None:
        location.start_token = None  # type: ignore[assignment]
        location.end_token = None  # type: ignore[assignment]

    return document


def _strip_node(node: Node, ancestors: set[int]) -> None:
    node_id = id(node)
    if node_id in ancestors:
        raise DocumentCycleError(
            f"Parsed document contains a cycle through a {node.kind} node."
        )
    ancestors.add(node_id)

    node.loc = None
    for key in node.keys:
        if key == "loc":
            continue
        value = getattr(node, key, None)
        if isinstance(value, Node):
            _strip_node(value, ancestors)
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, Node):
                    _strip_node(item, ancestors)

    ancestors.discard(node_id)
