"""Structured logging configuration for Sendero."""

import logging
import logging.config
from typing import Any

from sendero.config.settings import LoggingSettings


def setup_logging(level: str = "INFO", json_file: str | None = None) -> None:
    """
    Configure structured logging for Sendero.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_file: Optional path of a rotating JSON log file
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "sendero": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if json_file:
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "fmt": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": json_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["sendero"]["handlers"].append("file")

    logging.config.dictConfig(config)


def setup_logging_from_settings(settings: LoggingSettings) -> None:
    """Configure logging from a LoggingSettings section."""
    setup_logging(level=settings.level, json_file=settings.json_file)


class ContextLogger:
    """Named logger that hands out adapters tagged with navigation context.

    Extra fields (e.g. node_id) end up as attributes on every log record,
    so the JSON file handler writes them as separate keys.
    """

    def __init__(self, name: str) -> None:
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> logging.LoggerAdapter:
        """Return an adapter that adds context to every record it emits."""
        return logging.LoggerAdapter(self.logger, context)
