"""
CA bundle ingestion — split a PEM bundle into single-line certificates.

A bundle is a concatenation of PEM blocks. Consumers expect one list
entry per certificate, each on a single line with line breaks written
as the two characters backslash and n.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from proxyopts.adapters.shell.filesystem import read_text_file

logger = logging.getLogger(__name__)

END_MARKER = "-----END CERTIFICATE-----"

_NEWLINE_PLACEHOLDER = "NEW_LINE_PLACEHOLDER_xIsPsK23svt"
_LINE_BREAK = re.compile(r"\r?\n")
_SPLIT = re.compile(f"({re.escape(END_MARKER)})")


def _flatten(block: str) -> str:
    text = _LINE_BREAK.sub(_NEWLINE_PLACEHOLDER, block)
    text = text.removeprefix(_NEWLINE_PLACEHOLDER)
    return text.replace(_NEWLINE_PLACEHOLDER, "\\n")


def split_ca_bundle(content: str) -> list[str]:
    """Split bundle text into escaped, single-line certificate blocks.

    Each block keeps its END marker. Text after the last marker is not
    a complete certificate and is dropped.
    """
    tokens = _SPLIT.split(content)
    # re.split with a capture group alternates body, marker, body, ...,
    # ending with the text after the last marker.
    pairs = zip(tokens[0::2], tokens[1::2])
    return [_flatten(body + marker) for body, marker in pairs]


def load_ca_bundle(path: Path | str) -> list[str]:
    """Read and split a CA bundle file. Unreadable files yield []."""
    content = read_text_file(path)
    if content is None:
        logger.info("Ignoring unreadable CA bundle: %s", path)
        return []

    certs = split_ca_bundle(content)
    logger.debug("Loaded %d certificate(s) from %s", len(certs), path)
    return certs
