"""Unit tests for error hierarchy."""

from sendero.core.errors import (
    ConditionEvaluationError,
    ConfigError,
    GraphConfigurationError,
    NavigationError,
    NodeResolutionError,
    SenderoError,
)


def test_sendero_error_is_base_exception():
    """
    GIVEN SenderoError
    WHEN verified
    THEN it is a subclass of Exception
    """
    assert issubclass(SenderoError, Exception)


def test_error_hierarchy():
    """
    GIVEN specific errors
    WHEN verified
    THEN they inherit from correct parents
    """
    assert issubclass(ConfigError, SenderoError)
    assert issubclass(GraphConfigurationError, SenderoError)
    assert issubclass(NavigationError, SenderoError)
    assert issubclass(NodeResolutionError, NavigationError)
    assert issubclass(ConditionEvaluationError, NavigationError)


def test_errors_carry_context():
    """
    GIVEN navigation errors created with context
    WHEN inspected
    THEN message and context attributes are kept
    """
    resolution = NodeResolutionError("Node 'x' not found", node_id="x")
    condition = ConditionEvaluationError("boom", expression="a > 1", node_id="n1")

    assert str(resolution) == "Node 'x' not found"
    assert resolution.node_id == "x"
    assert condition.expression == "a > 1"
    assert condition.node_id == "n1"
