"""Core types, interfaces and errors."""

from sendero.core.errors import (
    ConditionEvaluationError,
    ConfigError,
    GraphConfigurationError,
    NavigationError,
    NodeResolutionError,
    SenderoError,
)
from sendero.core.types import Node, Scenario

__all__ = [
    "Node",
    "Scenario",
    "SenderoError",
    "ConfigError",
    "GraphConfigurationError",
    "NavigationError",
    "NodeResolutionError",
    "ConditionEvaluationError",
]
