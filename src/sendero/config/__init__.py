"""Configuration module for Sendero."""

from sendero.config.loader import ConfigLoader
from sendero.config.settings import LoggingSettings, NavigatorSettings, SenderoConfig

__all__ = ["ConfigLoader", "LoggingSettings", "NavigatorSettings", "SenderoConfig"]
