"""
Domain models — Pydantic types for the resolver.

All models are re-exported here for convenient access:

    from proxyopts.core.models import ConfigValue, PackageManagerKind, ResolvedOptions
"""

from proxyopts.core.models.options import (
    ConfigValue,
    PackageManagerKind,
    ResolvedOptions,
)

__all__ = [
    "ConfigValue",
    "PackageManagerKind",
    "ResolvedOptions",
]
