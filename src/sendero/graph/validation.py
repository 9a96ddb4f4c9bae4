"""Structural validation for dialog graphs.

Checks performed:
- every step, scenario target, next and parent reference resolves
- every scenario leads somewhere (target node or at least one step)
- steps point back at the node that owns them
- parent chains terminate (no cycles)
"""

import logging

from sendero.core.errors import GraphConfigurationError
from sendero.graph.arena import DialogGraph

logger = logging.getLogger(__name__)


def find_graph_issues(graph: DialogGraph) -> list[str]:
    """Collect human-readable structural problems in the graph.

    Args:
        graph: Graph to inspect

    Returns:
        List of issue descriptions, empty for a well-formed graph
    """
    issues: list[str] = []

    for node in graph:
        for step_id in node.steps:
            step = graph.get_node_by_id(step_id)
            if step is None:
                issues.append(f"Node '{node.id}' has unknown step '{step_id}'")
            elif step.parent_id != node.id:
                issues.append(
                    f"Step '{step_id}' of node '{node.id}' has parent '{step.parent_id}'"
                )

        for idx, scenario in enumerate(node.scenarios):
            label = f"Scenario {idx} of node '{node.id}'"
            if scenario.target_id is None:
                issues.append(f"{label} has neither a target node nor steps")
            if scenario.node_id and scenario.node_id not in graph:
                issues.append(f"{label} targets unknown node '{scenario.node_id}'")
            for step_id in scenario.steps:
                if step_id not in graph:
                    issues.append(f"{label} has unknown step '{step_id}'")

        if node.next_id and node.next_id not in graph:
            issues.append(f"Node '{node.id}' has unknown next '{node.next_id}'")
        if node.parent_id and node.parent_id not in graph:
            issues.append(f"Node '{node.id}' has unknown parent '{node.parent_id}'")

    issues.extend(_find_parent_cycles(graph))
    return issues


def _find_parent_cycles(graph: DialogGraph) -> list[str]:
    """Report each parent cycle once, starting from its smallest id."""
    cycles: set[tuple[str, ...]] = set()

    for node in graph:
        chain: list[str] = []
        current = node
        while current is not None and current.id not in chain:
            chain.append(current.id)
            current = graph.get_node_by_id(current.parent_id) if current.parent_id else None

        if current is None:
            continue

        loop = chain[chain.index(current.id) :]
        start = loop.index(min(loop))
        cycles.add(tuple(loop[start:] + loop[:start]))

    return [f"Parent cycle: {' -> '.join(loop + (loop[0],))}" for loop in sorted(cycles)]


def validate_graph(graph: DialogGraph) -> None:
    """Raise GraphConfigurationError if the graph has structural problems.

    Raises:
        GraphConfigurationError: Listing every issue found
    """
    issues = find_graph_issues(graph)
    if issues:
        for issue in issues:
            logger.error(issue)
        raise GraphConfigurationError(
            f"Invalid dialog graph ({len(issues)} issue(s)): " + "; ".join(issues)
        )
    logger.debug(f"Dialog graph validated: {len(graph)} nodes")
