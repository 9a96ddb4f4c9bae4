"""Fluent construction of dialog graphs.

GraphBuilder keeps mutable drafts while the graph is being assembled and
freezes them into Node instances on build(). Steps added through the builder
get their parent reference wired automatically.

Usage:
    graph = (
        GraphBuilder()
        .add_node("root")
        .add_step("root", "greet")
        .add_step("root", "ask_age")
        .add_scenario("ask_age", "age >= 18", steps=["adult"])
        .add_node("adult")
        .build()
    )
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from sendero.core.errors import GraphConfigurationError
from sendero.core.types import Node, Scenario
from sendero.graph.arena import DialogGraph

logger = logging.getLogger(__name__)


@dataclass
class _NodeDraft:
    """Mutable node representation used while building."""

    id: str
    steps: list[str] = field(default_factory=list)
    scenarios: list[Scenario] = field(default_factory=list)
    next_id: str | None = None
    parent_id: str | None = None
    type: str | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def freeze(self) -> Node:
        return Node(
            id=self.id,
            steps=tuple(self.steps),
            scenarios=tuple(self.scenarios),
            next_id=self.next_id,
            parent_id=self.parent_id,
            type=self.type,
            data=dict(self.data),
        )


class GraphBuilder:
    """Builds a DialogGraph node by node."""

    def __init__(self) -> None:
        self._drafts: dict[str, _NodeDraft] = {}
        self._root_id: str | None = None

    def add_node(
        self,
        node_id: str,
        *,
        next_id: str | None = None,
        parent_id: str | None = None,
        type: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> "GraphBuilder":
        """Add a node.

        Raises:
            GraphConfigurationError: If node_id is already defined
        """
        if not node_id:
            raise GraphConfigurationError("Node id cannot be empty")
        if node_id in self._drafts:
            raise GraphConfigurationError(f"Duplicate node id '{node_id}'")

        self._drafts[node_id] = _NodeDraft(
            id=node_id,
            next_id=next_id,
            parent_id=parent_id,
            type=type,
            data=dict(data or {}),
        )
        return self

    def add_step(
        self,
        parent_id: str,
        step_id: str,
        *,
        next_id: str | None = None,
        type: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> "GraphBuilder":
        """Add a new node as the last step of parent_id."""
        parent = self._draft(parent_id)
        self.add_node(step_id, next_id=next_id, parent_id=parent_id, type=type, data=data)
        parent.steps.append(step_id)
        return self

    def add_scenario(
        self,
        node_id: str,
        condition: str,
        *,
        target: str | None = None,
        steps: list[str] | None = None,
    ) -> "GraphBuilder":
        """Attach a scenario to node_id.

        Scenario steps not yet defined are created as children of node_id.
        The target node is only referenced and must be added separately.
        """
        owner = self._draft(node_id)
        step_ids = list(steps or [])
        for step_id in step_ids:
            if step_id not in self._drafts:
                self.add_node(step_id, parent_id=node_id)

        owner.scenarios.append(Scenario(condition=condition, node_id=target, steps=tuple(step_ids)))
        return self

    def set_next(self, node_id: str, next_id: str | None) -> "GraphBuilder":
        self._draft(node_id).next_id = next_id
        return self

    def set_root(self, node_id: str) -> "GraphBuilder":
        self._draft(node_id)
        self._root_id = node_id
        return self

    def build(self, validate: bool = True) -> DialogGraph:
        """Freeze the drafts into a DialogGraph.

        The root defaults to the first added node without a parent.

        Args:
            validate: Run structural validation on the result

        Raises:
            GraphConfigurationError: If validation fails
        """
        root_id = self._root_id
        if root_id is None:
            root_id = next(
                (draft.id for draft in self._drafts.values() if draft.parent_id is None),
                None,
            )

        graph = DialogGraph((draft.freeze() for draft in self._drafts.values()), root_id=root_id)
        logger.debug(f"Built graph with {len(graph)} nodes, root={root_id}")

        if validate:
            graph.validate()
        return graph

    def _draft(self, node_id: str) -> _NodeDraft:
        try:
            return self._drafts[node_id]
        except KeyError:
            raise GraphConfigurationError(f"Unknown node '{node_id}'") from None
