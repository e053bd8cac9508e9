"""Tests for location stripping."""

from typing import Any

import pytest
from graphql import parse
from graphql.language import (
    DocumentNode,
    FieldNode,
    NameNode,
    Node,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    Visitor,
    visit,
)

from gqltag.core.exceptions import DocumentCycleError, ParseError
from gqltag.core.services.location_stripper import strip_locations


class NodeCollector(Visitor):
    """Collects every node below a document."""

    def __init__(self) -> None:
        super().__init__()
        self.nodes: list[Node] = []

    def enter(self, node: Node, *_args: Any) -> None:
        self.nodes.append(node)


def collect_definition_nodes(document: DocumentNode) -> list[Node]:
    collector = NodeCollector()
    for definition in document.definitions:
        visit(definition, collector)
    return collector.nodes


class TestStripLocations:
    """Tests for strip_locations()."""

    SOURCE = """
        query GetUser($id: ID!) @live {
          user(id: $id) {
            ...UserFields
            friends(first: 10, filter: {active: true}) { id }
          }
        }

        fragment UserFields on User {
          id
          name
        }
    """

    def test_strips_every_definition_node(self) -> None:
        """Test no node inside the definitions keeps a location."""
        document = strip_locations(parse(self.SOURCE))

        nodes = collect_definition_nodes(document)

        assert len(nodes) > 20
        assert all(node.loc is None for node in nodes)

    def test_returns_same_document(self) -> None:
        """Test stripping happens in place."""
        document = parse(self.SOURCE)

        assert strip_locations(document) is document

    def test_document_keeps_source(self) -> None:
        """Test the document's own location keeps its source text."""
        document = strip_locations(parse(self.SOURCE))

        assert document.loc is not None
        assert document.loc.source.body == self.SOURCE
        assert document.loc.start == 0

    def test_document_drops_tokens(self) -> None:
        """Test the document's start and end tokens are cleared."""
        document = strip_locations(parse(self.SOURCE))

        assert document.loc.start_token is None
        assert document.loc.end_token is None

    def test_document_without_location(self) -> None:
        """Test documents parsed without locations are accepted."""
        document = strip_locations(parse(self.SOURCE, no_location=True))

        assert document.loc is None

    def test_shared_node_is_not_a_cycle(self) -> None:
        """Test a node reachable twice, but not from itself, is fine."""
        name = NameNode(value="a")
        selection_set = SelectionSetNode(
            selections=(FieldNode(name=name), FieldNode(alias=name, name=name))
        )
        document = DocumentNode(
            definitions=(
                OperationDefinitionNode(
                    operation=OperationType.QUERY, selection_set=selection_set
                ),
            )
        )

        strip_locations(document)

    def test_cycle_is_fatal(self) -> None:
        """Test a node reachable from itself raises."""
        field = FieldNode(name=NameNode(value="a"))
        selection_set = SelectionSetNode(selections=(field,))
        field.selection_set = selection_set
        document = DocumentNode(
            definitions=(
                OperationDefinitionNode(
                    operation=OperationType.QUERY, selection_set=selection_set
                ),
            )
        )

        with pytest.raises(DocumentCycleError, match="cycle"):
            strip_locations(document)

    def test_cycle_error_is_parse_error(self) -> None:
        """Test cycles surface through the ParseError hierarchy."""
        assert issubclass(DocumentCycleError, ParseError)
