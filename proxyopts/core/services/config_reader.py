"""
Config reader — memoized access to one project's package manager config.

A ConfigReader is bound to a working directory and a manager kind. Its
ConfigCache remembers every answer, including "no value" and failed
queries, so each key reaches the configuration source at most once.
"""

from __future__ import annotations

import logging
from pathlib import Path

from proxyopts.adapters.base import ConfigSource
from proxyopts.core.models.options import ConfigValue, PackageManagerKind

logger = logging.getLogger(__name__)


class ConfigCache:
    """Key → ConfigValue memo.

    Entries are never invalidated. Configuration is assumed not to
    change while a cache is alive.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ConfigValue] = {}

    def get(self, key: str) -> ConfigValue | None:
        return self._entries.get(key)

    def put(self, result: ConfigValue) -> None:
        self._entries[result.key] = result


class ConfigReader:
    """Read configuration keys through a source, caching every result.

    Args:
        source: Where values come from.
        cwd: Working directory the manager is queried in.
        kind: Which manager to query.
        cache: Optional shared cache. Sharing is only sound between
            readers with the same ``cwd`` and ``kind``.
    """

    def __init__(
        self,
        source: ConfigSource,
        cwd: Path,
        kind: PackageManagerKind,
        cache: ConfigCache | None = None,
    ):
        self.source = source
        self.cwd = Path(cwd)
        self.kind = kind
        self.cache = cache if cache is not None else ConfigCache()

    def lookup(self, key: str) -> ConfigValue:
        """Return the full ConfigValue for ``key``, querying at most once."""
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Config cache hit: %s", key)
            return cached

        result = self.source.read(key, self.cwd, self.kind)
        if not result.ok:
            logger.debug("Treating %s as unset: %s", key, result.error)
        self.cache.put(result)
        return result

    def read(self, key: str) -> str | None:
        """Return the value of ``key``, or None if unset or unavailable."""
        result = self.lookup(key)
        return result.value if result.present else None

    def read_first(self, *keys: str) -> str | None:
        """Return the first non-empty value among ``keys``.

        Later keys are not queried once an earlier one has a value.
        """
        for key in keys:
            value = self.read(key)
            if value:
                return value
        return None
