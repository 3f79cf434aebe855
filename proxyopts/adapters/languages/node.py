"""
Node.js package manager source — reads npm / yarn configuration.

Runs `<manager> config get <key>` in the project directory and
normalizes what it prints. This is the only place the resolver
touches a subprocess.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from proxyopts.adapters.base import DEFAULT_SENTINELS, ConfigSource, normalize_output
from proxyopts.adapters.shell.command import DEFAULT_TIMEOUT, run_command
from proxyopts.core.models.options import ConfigValue, PackageManagerKind

logger = logging.getLogger(__name__)


class PackageManagerConfigSource(ConfigSource):
    """Configuration source backed by the npm or yarn CLI.

    Args:
        timeout: Seconds to wait for each `config get` call.
        sentinels: Printed values that mean "no value".
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        sentinels: tuple[str, ...] = DEFAULT_SENTINELS,
    ):
        self._timeout = timeout
        self._sentinels = sentinels
        self._executables: dict[PackageManagerKind, str | None] = {}

    @property
    def name(self) -> str:
        return "package-manager"

    def executable(self, kind: PackageManagerKind) -> str | None:
        """Full path of the manager's CLI, or None if it is not on PATH.

        shutil.which applies PATHEXT, so npm.cmd / yarn.cmd are found on Windows.
        """
        if kind not in self._executables:
            self._executables[kind] = shutil.which(kind.cli)
        return self._executables[kind]

    def command_for(self, key: str, executable: str) -> list[str]:
        """Argument vector that queries ``key``."""
        return [executable, "config", "get", key]

    def read(self, key: str, cwd: Path, kind: PackageManagerKind) -> ConfigValue:
        executable = self.executable(kind)
        if executable is None:
            logger.debug("%s not found on PATH", kind.cli)
            return ConfigValue.unavailable(key, f"{kind.cli}: command not found")

        result = run_command(self.command_for(key, executable), cwd=cwd, timeout=self._timeout)
        if not result.ok:
            logger.debug("%s config get %s unavailable: %s", kind.cli, key, result.error)
            return ConfigValue.unavailable(key, result.error or "unknown error")
        return normalize_output(key, result.stdout, kind, self._sentinels)
