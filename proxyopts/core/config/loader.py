"""
Settings loader — reads proxyopts.yml into ResolverSettings.

Settings tune the resolver itself (marker files, command timeout,
sentinel values). They are optional: with no file, defaults apply.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from proxyopts.adapters.base import DEFAULT_SENTINELS
from proxyopts.adapters.shell.command import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "proxyopts.yml"

# Files and directories whose presence means yarn owns the project
DEFAULT_ALTERNATE_MARKERS = [".yarnrc.yml", ".yarn", ".pnp.cjs"]

TIMEOUT_ENV_VAR = "PROXYOPTS_COMMAND_TIMEOUT"


class SettingsError(Exception):
    """Raised when the settings file is invalid or unreadable."""


class ResolverSettings(BaseModel):
    """Tunables for detection and configuration reads."""

    alternate_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALTERNATE_MARKERS)
    )
    command_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    sentinel_values: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SENTINELS)
    )


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for proxyopts.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to proxyopts.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def load_settings(
    path: Path | None = None,
    start_dir: Path | None = None,
) -> ResolverSettings:
    """Load and validate resolver settings.

    Args:
        path: Explicit path to a settings file. If None, searches upward
            from ``start_dir``.
        start_dir: Where the upward search begins (default: cwd).

    Returns:
        Validated ResolverSettings, with environment overrides applied.

    Raises:
        SettingsError: If an explicit file is missing, or any file found
            is unreadable or invalid.
    """
    if path is None:
        path = find_settings_file(start_dir)
    elif not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")

    data: dict = {}
    if path is not None:
        logger.debug("Loading settings from %s", path)
        data = _read_yaml(path)

    data = _apply_env_overrides(data)

    try:
        return ResolverSettings.model_validate(data)
    except ValidationError as e:
        where = path or "environment"
        raise SettingsError(f"Invalid settings in {where}: {e}") from e


def _read_yaml(path: Path) -> dict:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may nest everything under a "proxyopts" key or be flat
    nested = data.get("proxyopts")
    if isinstance(nested, dict):
        return dict(nested)
    return data


def _apply_env_overrides(data: dict) -> dict:
    timeout = os.environ.get(TIMEOUT_ENV_VAR)
    if timeout:
        data = {**data, "command_timeout": timeout}
    return data
