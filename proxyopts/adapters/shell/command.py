"""
Shell command runner — execute a command and capture its output.

The most fundamental building block: every configuration query goes
through here. Failures of any kind are captured in the result, never
raised.
"""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


@dataclass
class CommandResult:
    """Outcome of a single command invocation."""

    command: list[str]
    return_code: int | None = None
    stdout: str = ""
    stderr: str = ""
    error: str | None = None
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        """Whether the command ran and exited with status 0."""
        return self.error is None and self.return_code == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


def run_command(
    cmd: list[str],
    cwd: Path | str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> CommandResult:
    """Run ``cmd`` synchronously and capture stdout as text.

    Args:
        cmd: Argument vector; the first element is the executable.
        cwd: Working directory for the command.
        timeout: Seconds before the command is abandoned.

    Returns:
        CommandResult. ``error`` is set when the command could not be
        started, timed out, or exited non-zero.
    """
    result = CommandResult(command=list(cmd))
    logger.debug("Executing: %s (cwd=%s)", result.command_line, cwd)
    start = time.monotonic()

    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        result.error = f"Command timed out after {timeout}s"
    except FileNotFoundError:
        result.error = f"Command not found: {cmd[0]}"
    except Exception as e:
        result.error = f"Command execution error: {e}"
    else:
        result.return_code = proc.returncode
        result.stdout = proc.stdout or ""
        result.stderr = (proc.stderr or "").strip()
        if proc.returncode != 0:
            result.error = result.stderr or f"Command exited with code {proc.returncode}"

    result.duration_ms = int((time.monotonic() - start) * 1000)
    if result.error:
        logger.debug(
            "Command failed after %dms: %s: %s",
            result.duration_ms, result.command_line, result.error,
        )
    else:
        logger.debug("Command finished in %dms: %s", result.duration_ms, result.command_line)
    return result
