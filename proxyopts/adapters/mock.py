"""
Mock config source — test double for the package manager's CLI.

Holds the raw text each key would print from `config get` and runs it
through the same normalization as the real source, so sentinel and
quoting behavior can be exercised without a subprocess.
"""

from __future__ import annotations

from pathlib import Path

from proxyopts.adapters.base import DEFAULT_SENTINELS, ConfigSource, normalize_output
from proxyopts.core.models.options import ConfigValue, PackageManagerKind


class MockConfigSource(ConfigSource):
    """In-memory configuration source for testing.

    Keys without a configured output answer "undefined", the way npm
    does for unknown keys. Keys marked as failing answer 'unavailable'.
    """

    def __init__(
        self,
        outputs: dict[str, str] | None = None,
        available: bool = True,
        sentinels: tuple[str, ...] = DEFAULT_SENTINELS,
    ):
        self._outputs: dict[str, str] = dict(outputs or {})
        self._failures: dict[str, str] = {}
        self._available = available
        self._sentinels = sentinels
        self._call_log: list[tuple[str, Path, PackageManagerKind]] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[tuple[str, Path, PackageManagerKind]]:
        """Every (key, cwd, kind) this mock has been asked for."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls_for(self, key: str) -> int:
        """Number of times ``key`` was queried."""
        return sum(1 for k, _, _ in self._call_log if k == key)

    def set_output(self, key: str, raw: str) -> None:
        """Set the raw text `config get <key>` prints."""
        self._outputs[key] = raw
        self._failures.pop(key, None)

    def set_failure(self, key: str, error: str = "Mock failure") -> None:
        """Configure a key whose query fails."""
        self._failures[key] = error

    def read(self, key: str, cwd: Path, kind: PackageManagerKind) -> ConfigValue:
        self._call_log.append((key, cwd, kind))

        if not self._available:
            return ConfigValue.unavailable(key, f"{kind.cli}: command not found")
        if key in self._failures:
            return ConfigValue.unavailable(key, self._failures[key])

        raw = self._outputs.get(key, "undefined")
        return normalize_output(key, raw, kind, self._sentinels)

    def reset(self) -> None:
        """Clear call log, outputs and failures."""
        self._call_log.clear()
        self._outputs.clear()
        self._failures.clear()
