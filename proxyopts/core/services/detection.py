"""
Detection service — decide which package manager owns a directory.

Package managers cannot be asked from the outside which one is in
charge, so this sniffs for marker files. The walk covers every ancestor
so a marker at a monorepo root applies to all of its workspaces.

Pure logic — read-only probing, no persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from proxyopts.adapters.shell.filesystem import path_exists
from proxyopts.core.config.loader import DEFAULT_ALTERNATE_MARKERS
from proxyopts.core.models.options import PackageManagerKind

logger = logging.getLogger(__name__)


def find_up(filenames: Iterable[str], start_dir: Path) -> Path | None:
    """Return the nearest directory, walking up, holding any of ``filenames``.

    Starts at ``start_dir`` itself and stops after checking the
    filesystem root. Unreadable candidates count as absent.
    """
    names = list(filenames)
    try:
        current = Path(start_dir).resolve()
    except (OSError, RuntimeError) as e:
        # symlink loops raise here on Python 3.11
        logger.debug("Cannot resolve %s: %s", start_dir, e)
        current = Path(start_dir).absolute()

    while True:
        for name in names:
            if path_exists(current / name):
                return current
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def detect_package_manager(
    start_dir: Path,
    markers: Iterable[str] | None = None,
) -> PackageManagerKind:
    """Classify ``start_dir`` as owned by the default or alternate manager.

    Args:
        start_dir: Directory to start probing from.
        markers: Alternate-manager marker names (default: yarn's).

    Returns:
        ALTERNATE if any marker exists at any level, otherwise DEFAULT.
    """
    root = find_up(DEFAULT_ALTERNATE_MARKERS if markers is None else markers, start_dir)
    if root is None:
        return PackageManagerKind.DEFAULT

    logger.debug("Found %s marker in %s", PackageManagerKind.ALTERNATE.cli, root)
    return PackageManagerKind.ALTERNATE
