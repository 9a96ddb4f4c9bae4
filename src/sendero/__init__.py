"""Sendero - dialog graph navigation.

Sendero tracks a conversation's position in a graph of dialog nodes and
computes the next node to visit, branching into scenarios whose condition
holds against the conversation data.

Quick start:
    from sendero import Conversation, GraphBuilder, MappingConditionEvaluator, Navigator

    graph = GraphBuilder().add_node("root").add_step("root", "greet").build()
    navigator = Navigator(graph, MappingConditionEvaluator({}))

    conversation = Conversation()
    navigator.get_current_node(conversation)  # root
    navigator.get_next_node(conversation)  # greet
"""

from sendero.__version__ import __version__
from sendero.conditions import CallableConditionEvaluator, MappingConditionEvaluator
from sendero.config import NavigatorSettings, SenderoConfig
from sendero.core.errors import (
    ConditionEvaluationError,
    ConfigError,
    GraphConfigurationError,
    NavigationError,
    NodeResolutionError,
    SenderoError,
)
from sendero.core.types import Node, Scenario
from sendero.graph import DialogGraph, GraphBuilder
from sendero.navigator import Navigator
from sendero.state import Conversation, DictStateStore, InMemoryStateStore

__all__ = [
    "__version__",
    # Navigation
    "Navigator",
    "NavigatorSettings",
    "SenderoConfig",
    # Graph
    "Node",
    "Scenario",
    "DialogGraph",
    "GraphBuilder",
    # Collaborators
    "CallableConditionEvaluator",
    "MappingConditionEvaluator",
    "Conversation",
    "DictStateStore",
    "InMemoryStateStore",
    # Errors
    "SenderoError",
    "ConfigError",
    "GraphConfigurationError",
    "NavigationError",
    "NodeResolutionError",
    "ConditionEvaluationError",
]
