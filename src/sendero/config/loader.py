"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sendero.config.settings import SenderoConfig
from sendero.core.errors import ConfigError


class ConfigLoader:
    """Load SenderoConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> SenderoConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to a sendero.yaml file, or a directory containing one

        Returns:
            Parsed SenderoConfig instance

        Raises:
            FileNotFoundError: If no config file exists at path
            ConfigError: If the file content is not a valid configuration
        """
        config_path = Path(path)
        if config_path.is_dir():
            config_path = config_path / "sendero.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        try:
            return SenderoConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
