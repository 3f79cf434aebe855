"""
Filesystem helpers — best-effort probes and reads.

Probing and reading never raise: an inaccessible path is reported the
same way as a missing one.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """Whether ``path`` exists. Permission or I/O errors count as absent."""
    try:
        return path.exists()
    except (OSError, ValueError) as e:
        logger.debug("Cannot probe %s: %s", path, e)
        return False


def read_text_file(path: Path | str) -> str | None:
    """Read a UTF-8 text file, or return None if it cannot be read."""
    target = Path(path)
    try:
        return target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.info("Cannot read %s: %s", target, e)
        return None
