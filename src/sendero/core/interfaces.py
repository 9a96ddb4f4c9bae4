"""Core interfaces (Protocols) consumed by the Navigator."""

from collections.abc import Mapping
from typing import Any, Protocol

from sendero.core.types import Node


class IDialogGraphProvider(Protocol):
    """Interface for dialog graph lookup."""

    @property
    def root(self) -> Node | None:
        """Root node of the graph, or None for an empty graph."""
        ...

    def get_node_by_id(self, node_id: str) -> Node | None:
        """Resolve a node id to its node.

        Args:
            node_id: Identifier of the node

        Returns:
            The node, or None if no node has that id
        """
        ...


class IConditionEvaluator(Protocol):
    """Interface for scenario condition evaluation.

    Implementations are expected to be pure: no side effects on `data`.
    """

    def evaluate(self, data: Mapping[str, Any], expression: str) -> bool:
        """Evaluate a condition expression against conversation data."""
        ...


class IStateStore(Protocol):
    """Interface for a per-conversation key-value store."""

    def get(self, key: str) -> Any:
        """Return the value stored under key, or None."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...


class IConversation(Protocol):
    """Interface for the conversation handle passed on every call."""

    state: IStateStore
    data: Mapping[str, Any] | None
