"""Version information for Sendero.

The version is read from the installed package metadata to keep
pyproject.toml the single source of truth.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sendero")
except PackageNotFoundError:
    # Package not installed, fallback for development
    __version__ = "0.0.0-dev"
