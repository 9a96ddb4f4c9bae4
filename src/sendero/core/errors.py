"""Core navigation errors."""


class SenderoError(Exception):
    """Base class for all Sendero errors."""

    pass


class ConfigError(SenderoError):
    """Raised when configuration is invalid."""


class GraphConfigurationError(SenderoError):
    """Raised when the dialog graph is structurally unusable.

    Covers a graph without a root at first access, as well as arena
    validation failures (duplicate ids, dangling references, parent cycles).
    """

    pass


class NavigationError(SenderoError):
    """Raised when graph traversal fails."""

    pass


class NodeResolutionError(NavigationError):
    """A node id could not be resolved by the graph provider."""

    def __init__(self, message: str, node_id: str | None = None) -> None:
        super().__init__(message)
        self.node_id = node_id


class ConditionEvaluationError(NavigationError):
    """A scenario condition could not be evaluated."""

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        node_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expression = expression
        self.node_id = node_id
