"""Observability module for Sendero."""

from sendero.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
