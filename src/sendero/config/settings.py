"""Settings configuration models.

Global settings for navigation and logging.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from sendero.core.constants import DEFAULT_MAX_ANCESTOR_DEPTH, DEFAULT_STATE_KEY

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class NavigatorSettings(BaseModel):
    """Navigator configuration."""

    state_key: str = Field(
        default=DEFAULT_STATE_KEY,
        min_length=1,
        description="State store slot holding the current node id",
    )
    max_ancestor_depth: int = Field(
        default=DEFAULT_MAX_ANCESTOR_DEPTH,
        ge=1,
        description="Maximum parent hops when falling back to an ancestor's next node",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Log level for the sendero logger")
    json_file: str | None = Field(
        default=None, description="Optional path of a rotating JSON log file"
    )


class SenderoConfig(BaseModel):
    """Root configuration model."""

    version: str = "1.0"
    navigator: NavigatorSettings = Field(default_factory=NavigatorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "SenderoConfig":
        """Load configuration from YAML file."""
        from sendero.config.loader import ConfigLoader

        return ConfigLoader.load(path)
