"""Unit tests for the DialogGraph arena."""

import pytest

from sendero.core.errors import GraphConfigurationError
from sendero.graph import DialogGraph
from tests.factories import make_node


class TestDialogGraph:
    """Tests for node lookup and root handling."""

    def test_lookup_by_id(self):
        """
        GIVEN a graph with two nodes
        WHEN looking nodes up by id
        THEN known ids resolve and unknown ids return None
        """
        # Arrange
        graph = DialogGraph([make_node("a"), make_node("b")], root_id="a")

        # Act & Assert
        assert graph.get_node_by_id("b").id == "b"
        assert graph.get_node_by_id("zzz") is None
        assert graph.root.id == "a"
        assert graph.root_id == "a"

    def test_graph_without_root(self):
        graph = DialogGraph([make_node("a")])

        assert graph.root is None
        assert len(graph) == 1

    def test_duplicate_ids_rejected(self):
        """
        GIVEN two nodes sharing an id
        WHEN building the arena
        THEN GraphConfigurationError is raised
        """
        with pytest.raises(GraphConfigurationError, match="Duplicate node id 'a'"):
            DialogGraph([make_node("a"), make_node("a")])

    def test_unknown_root_rejected(self):
        with pytest.raises(GraphConfigurationError, match="Root node 'x'"):
            DialogGraph([make_node("a")], root_id="x")

    def test_container_protocol(self):
        graph = DialogGraph([make_node("a"), make_node("b", parent_id="a")], root_id="a")

        assert "a" in graph
        assert "c" not in graph
        assert [node.id for node in graph] == ["a", "b"]
        assert [node.id for node in graph.children_of("a")] == ["b"]

    def test_validate_returns_self(self):
        graph = DialogGraph([make_node("a")], root_id="a")

        assert graph.validate() is graph

    def test_nodes_are_immutable(self):
        node = make_node("a")

        with pytest.raises(AttributeError):
            node.next_id = "b"

    def test_empty_node_id_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            make_node("")
