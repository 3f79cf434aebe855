"""
Proxy options service — assemble ResolvedOptions for a project directory.

Detects the package manager, reads the proxy and TLS keys through a
memoizing ConfigReader, and folds in any CA bundle. Fail-open
throughout: a key that cannot be read is treated as not configured,
and this function always returns.
"""

from __future__ import annotations

import logging
from pathlib import Path

from proxyopts.adapters.base import ConfigSource
from proxyopts.adapters.languages.node import PackageManagerConfigSource
from proxyopts.core.config.loader import ResolverSettings
from proxyopts.core.models.options import PackageManagerKind, ResolvedOptions
from proxyopts.core.services.ca_bundle import load_ca_bundle
from proxyopts.core.services.config_reader import ConfigCache, ConfigReader
from proxyopts.core.services.detection import detect_package_manager

logger = logging.getLogger(__name__)


def build_reader(
    cwd: Path,
    source: ConfigSource | None = None,
    settings: ResolverSettings | None = None,
    cache: ConfigCache | None = None,
    kind: PackageManagerKind | None = None,
) -> ConfigReader:
    """Detect the manager for ``cwd`` and return a reader bound to it."""
    settings = settings or ResolverSettings()
    if kind is None:
        kind = detect_package_manager(cwd, settings.alternate_markers)
    if source is None:
        source = PackageManagerConfigSource(
            timeout=settings.command_timeout,
            sentinels=tuple(settings.sentinel_values),
        )
    return ConfigReader(source, cwd, kind, cache=cache)


def assemble_options(reader: ConfigReader) -> ResolvedOptions:
    """Read every recognized key and apply the per-field rules."""
    proxy = reader.read_first("https-proxy", "proxy")

    no_proxy_raw = reader.read_first("noproxy", "no-proxy")
    no_proxy = no_proxy_raw.split(",") if no_proxy_raw else []

    strict_ssl = reader.read("strict-ssl") == "true"

    cert = reader.read("cert")

    ca_value = reader.read("ca")
    ca = [ca_value] if ca_value else []

    cafile = reader.read("cafile")
    if cafile is not None:
        ca.extend(load_ca_bundle(cafile))

    return ResolvedOptions(
        proxy=proxy,
        no_proxy=no_proxy,
        strict_ssl=strict_ssl,
        cert=cert,
        ca=ca or None,
    )


def resolve_proxy_options(
    cwd: Path | str,
    source: ConfigSource | None = None,
    settings: ResolverSettings | None = None,
    cache: ConfigCache | None = None,
) -> ResolvedOptions:
    """Derive proxy and TLS-trust options from the project's package manager.

    Args:
        cwd: Project directory; the manager is detected from here and
            queried here.
        source: Configuration source (default: the npm / yarn CLI).
        settings: Resolver tunables (default: built-in defaults).
        cache: Optional cache to share with an earlier call for the same
            directory. A fresh one is used when omitted.

    Returns:
        ResolvedOptions. Never raises for configuration problems.
    """
    reader = build_reader(Path(cwd), source=source, settings=settings, cache=cache)
    logger.debug("Resolving proxy options via %s in %s", reader.kind.cli, reader.cwd)
    return assemble_options(reader)
