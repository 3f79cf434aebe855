"""
Config source base — the contract between the resolver and a config store.

The resolver only talks to a package manager's configuration through
this protocol, never directly to the manager's CLI. That keeps the
subprocess out of the resolver and lets tests substitute a fake.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path

from proxyopts.core.models.options import ConfigValue, PackageManagerKind

# Values `config get` prints for keys that have no value.
DEFAULT_SENTINELS: tuple[str, ...] = ("undefined", "null")

_QUOTED = re.compile(r'^"(.*)"$')


def normalize_output(
    key: str,
    raw: str,
    kind: PackageManagerKind,
    sentinels: tuple[str, ...] = DEFAULT_SENTINELS,
) -> ConfigValue:
    """Turn raw `config get` output into a ConfigValue.

    Trims whitespace, strips the double quotes yarn puts around string
    values, and maps the manager's "no value" sentinels to 'unset'.
    npm does not quote, so a quoted npm value is returned as-is.
    """
    value = raw.strip()
    if kind.quotes_strings:
        value = _QUOTED.sub(r"\1", value)
    if value in sentinels:
        return ConfigValue.unset(key)
    return ConfigValue.set_(key, value)


class ConfigSource(ABC):
    """Abstract base class for configuration sources.

    Sources answer one question: what does the package manager say
    about this key? They NEVER raise. A query that cannot be answered
    comes back as ConfigValue.unavailable(...).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The source identifier (e.g., 'package-manager', 'mock')."""

    @abstractmethod
    def read(self, key: str, cwd: Path, kind: PackageManagerKind) -> ConfigValue:
        """Query one configuration key, scoped to ``cwd``.

        MUST never raise exceptions.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
