"""
Option models — the resolver's input and output contract.

Configuration sources hand back ConfigValues. The resolver folds them
into a single ResolvedOptions that the caller owns. Sources never raise:
a query that could not run is a ConfigValue with status 'unavailable'.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class PackageManagerKind(StrEnum):
    """Which package manager owns the configuration store."""

    DEFAULT = "npm"
    ALTERNATE = "yarn"

    @property
    def cli(self) -> str:
        """Executable used to query this manager's configuration."""
        return self.value

    @property
    def quotes_strings(self) -> bool:
        """Whether `config get` wraps string values in double quotes."""
        return self is PackageManagerKind.ALTERNATE


class ConfigValue(BaseModel):
    """Result of one configuration query.

    'set' carries a normalized value, 'unset' means the manager reported
    no value, 'unavailable' means the query itself could not be answered
    (manager missing, non-zero exit, timeout).
    """

    key: str
    status: Literal["set", "unset", "unavailable"] = "unset"
    value: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the source answered the query."""
        return self.status != "unavailable"

    @property
    def present(self) -> bool:
        """Whether the key holds a usable value."""
        return self.status == "set" and self.value is not None

    @classmethod
    def set_(cls, key: str, value: str) -> ConfigValue:
        """Create a result holding a value."""
        return cls(key=key, status="set", value=value)

    @classmethod
    def unset(cls, key: str) -> ConfigValue:
        """Create a result for a key with no configured value."""
        return cls(key=key, status="unset")

    @classmethod
    def unavailable(cls, key: str, error: str) -> ConfigValue:
        """Create a result for a query that could not be answered."""
        return cls(key=key, status="unavailable", error=error)


class ResolvedOptions(BaseModel):
    """Proxy and TLS-trust settings for an outbound HTTP fetch layer.

    Immutable once built. ``ca`` is None rather than an empty list when
    no certificate authority was configured.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    proxy: str | None = None
    no_proxy: list[str] = Field(default_factory=list, alias="noProxy")
    strict_ssl: bool = Field(default=False, alias="strictSSL")
    cert: str | None = None
    ca: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase names fetch layers expect."""
        return self.model_dump(mode="json", by_alias=True)

    def to_env(self) -> dict[str, str]:
        """Render the proxy fields as conventional environment variables."""
        env: dict[str, str] = {}
        if self.proxy:
            env["HTTPS_PROXY"] = self.proxy
            env["HTTP_PROXY"] = self.proxy
        if self.no_proxy:
            env["NO_PROXY"] = ",".join(self.no_proxy)
        return env
