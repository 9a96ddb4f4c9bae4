"""In-memory arena of dialog nodes addressed by id."""

import logging
from collections.abc import Iterable, Iterator

from sendero.core.errors import GraphConfigurationError
from sendero.core.types import Node

logger = logging.getLogger(__name__)


class DialogGraph:
    """Immutable dialog graph backed by an id -> node mapping.

    Implements IDialogGraphProvider. Once built the graph is shared read-only
    across conversations.
    """

    def __init__(self, nodes: Iterable[Node], root_id: str | None = None) -> None:
        """Initialize the arena.

        Args:
            nodes: Nodes of the graph, each with a unique id
            root_id: Id of the root node, or None for a graph without root

        Raises:
            GraphConfigurationError: On duplicate ids or an unknown root id
        """
        self._nodes: dict[str, Node] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise GraphConfigurationError(f"Duplicate node id '{node.id}'")
            self._nodes[node.id] = node

        if root_id is not None and root_id not in self._nodes:
            raise GraphConfigurationError(f"Root node '{root_id}' is not part of the graph")
        self._root_id = root_id

        logger.debug(f"DialogGraph created with {len(self._nodes)} nodes, root={root_id}")

    @property
    def root(self) -> Node | None:
        """Root node of the graph."""
        if self._root_id is None:
            return None
        return self._nodes[self._root_id]

    @property
    def root_id(self) -> str | None:
        return self._root_id

    def get_node_by_id(self, node_id: str) -> Node | None:
        """Resolve a node id, returning None when unknown."""
        return self._nodes.get(node_id)

    def children_of(self, node_id: str) -> list[Node]:
        """Nodes whose parent reference points at node_id."""
        return [node for node in self._nodes.values() if node.parent_id == node_id]

    def validate(self) -> "DialogGraph":
        """Validate structure, raising GraphConfigurationError on problems.

        Returns:
            self, so construction and validation can be chained
        """
        from sendero.graph.validation import validate_graph

        validate_graph(self)
        return self

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)
