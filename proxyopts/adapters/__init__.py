"""Adapters — configuration sources backed by external tools.

Public re-exports for convenient access.
"""

from proxyopts.adapters.base import ConfigSource
from proxyopts.adapters.mock import MockConfigSource

__all__ = [
    "ConfigSource",
    "MockConfigSource",
]
