"""Dialog graph arena, builder and validation."""

from sendero.graph.arena import DialogGraph
from sendero.graph.builder import GraphBuilder
from sendero.graph.validation import find_graph_issues, validate_graph

__all__ = ["DialogGraph", "GraphBuilder", "find_graph_issues", "validate_graph"]
