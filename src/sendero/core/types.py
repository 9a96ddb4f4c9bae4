"""Dialog graph data model.

Nodes live in an arena keyed by id. Forward collections (`steps`,
`scenarios`) are owned by the node; `next_id` and `parent_id` are plain id
references resolved through the graph provider.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Scenario:
    """Conditional branch attached to a node.

    When `condition` holds, navigation goes to `node_id` if set, otherwise to
    the first entry of `steps`.
    """

    condition: str
    node_id: str | None = None
    steps: tuple[str, ...] = ()

    @property
    def target_id(self) -> str | None:
        """Id of the node this scenario leads to, if any."""
        if self.node_id:
            return self.node_id
        if self.steps:
            return self.steps[0]
        return None


@dataclass(frozen=True)
class Node:
    """A vertex of the dialog graph."""

    id: str
    steps: tuple[str, ...] = ()
    scenarios: tuple[Scenario, ...] = ()
    next_id: str | None = None
    parent_id: str | None = None
    # Opaque to navigation; carried for the host
    type: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Validate node structure."""
        if not self.id:
            raise ValueError("Node id cannot be empty")
        # Read-only copy, nodes are shared across conversations
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @property
    def first_step_id(self) -> str | None:
        """Id of the first step, or None for a node without steps."""
        return self.steps[0] if self.steps else None

    @property
    def is_leaf(self) -> bool:
        """True when the node has neither steps nor scenarios."""
        return not self.steps and not self.scenarios
