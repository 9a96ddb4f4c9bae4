"""Dialog graph navigation.

The Navigator resolves a conversation's position in the dialog graph and
computes the node to visit next. It keeps no per-conversation state of its
own: the current node id lives in the conversation's state store.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sendero.config.settings import NavigatorSettings
from sendero.core.errors import (
    ConditionEvaluationError,
    GraphConfigurationError,
    NodeResolutionError,
)
from sendero.core.interfaces import IConditionEvaluator, IConversation, IDialogGraphProvider
from sendero.core.types import Node, Scenario
from sendero.observability.logging import ContextLogger

logger = logging.getLogger(__name__)
context_logger = ContextLogger(__name__)


class Navigator:
    """Walks a dialog graph on behalf of conversations.

    Next-node selection, in priority order:
    1. The last scenario of the current node whose condition is true.
    2. The first step of the current node.
    3. The `next` of the current node, or of the closest ancestor that has one.

    When none applies the graph is exhausted and the stored position is cleared.
    """

    def __init__(
        self,
        graph: IDialogGraphProvider,
        evaluator: IConditionEvaluator,
        settings: NavigatorSettings | None = None,
    ) -> None:
        """Initialize the navigator.

        Args:
            graph: Provider resolving node ids and exposing the root
            evaluator: Evaluator for scenario conditions
            settings: Navigator settings (defaults if omitted)
        """
        self.graph = graph
        self.evaluator = evaluator
        self.settings = settings or NavigatorSettings()

    def get_current_node(self, conversation: IConversation) -> Node:
        """Return the node the conversation is positioned at.

        A conversation without a stored position starts at the graph root,
        and the root id is persisted.

        Raises:
            GraphConfigurationError: If the position is unset and the graph has no root
            NodeResolutionError: If the stored id no longer resolves
        """
        key = self.settings.state_key
        current_id = conversation.state.get(key)

        if not current_id:
            root = self.graph.root
            if root is None:
                raise GraphConfigurationError("Dialog graph has no root node")
            conversation.state.set(key, root.id)
            logger.debug(f"Conversation positioned at root '{root.id}'")
            return root

        return self._resolve(current_id)

    def get_next_node(self, conversation: IConversation) -> Node | None:
        """Advance the conversation to its next node.

        The stored position is always overwritten with the result, or cleared
        when the graph is exhausted.

        Returns:
            The next node, or None when there is nowhere left to go

        Raises:
            NodeResolutionError: If there is no resolvable current node, or the
                computed next id does not resolve
            ConditionEvaluationError: If a scenario condition fails to evaluate
            GraphConfigurationError: If the ancestor walk loops or runs too deep
        """
        key = self.settings.state_key
        current_id = conversation.state.get(key)
        if not current_id:
            raise NodeResolutionError(
                "Conversation has no current node; call get_current_node first"
            )

        current = self._resolve(current_id)
        log = context_logger.with_context(node_id=current.id)
        data: Mapping[str, Any] = conversation.data if conversation.data is not None else {}

        next_id = self._select_scenario_target(current, data)
        if next_id is None:
            next_id = current.first_step_id
        if next_id is None:
            next_id = self._find_ancestor_next(current)

        next_node = self._resolve(next_id) if next_id else None

        if next_node is None:
            conversation.state.delete(key)
            log.info(f"Dialog graph exhausted after node '{current.id}'")
        else:
            conversation.state.set(key, next_node.id)

        log.debug(f"get_next_node: [current: {current.id}, next: {next_id}]")
        return next_node

    def reset(self, conversation: IConversation) -> None:
        """Clear the stored position so the next turn starts from the root."""
        conversation.state.delete(self.settings.state_key)
        logger.debug("Conversation position reset")

    def _select_scenario_target(self, node: Node, data: Mapping[str, Any]) -> str | None:
        """Evaluate every scenario; the last true one decides the target."""
        target_id: str | None = None
        for scenario in node.scenarios:
            if self._evaluate(node, scenario, data):
                # No short circuit: a later true scenario overrides earlier ones
                target_id = scenario.target_id
        return target_id

    def _evaluate(self, node: Node, scenario: Scenario, data: Mapping[str, Any]) -> bool:
        try:
            return bool(self.evaluator.evaluate(data, scenario.condition))
        except Exception as e:
            raise ConditionEvaluationError(
                f"Failed to evaluate condition '{scenario.condition}' on node '{node.id}': {e}",
                expression=scenario.condition,
                node_id=node.id,
            ) from e

    def _find_ancestor_next(self, node: Node) -> str | None:
        """Walk up the parent chain until a node with a `next` reference is found."""
        visited: set[str] = set()
        hops = 0
        current: Node | None = node

        while current is not None:
            if current.next_id:
                return current.next_id

            if current.id in visited:
                raise GraphConfigurationError(f"Parent cycle detected at node '{current.id}'")
            visited.add(current.id)

            if not current.parent_id:
                return None

            hops += 1
            if hops > self.settings.max_ancestor_depth:
                raise GraphConfigurationError(
                    f"Ancestor walk from '{node.id}' exceeded "
                    f"{self.settings.max_ancestor_depth} levels"
                )
            current = self._resolve(current.parent_id)

        return None

    def _resolve(self, node_id: str) -> Node:
        node = self.graph.get_node_by_id(node_id)
        if node is None:
            raise NodeResolutionError(
                f"Node '{node_id}' not found in dialog graph", node_id=node_id
            )
        return node
