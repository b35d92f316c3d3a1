"""Blocking external command execution.

This module wraps subprocess calls to git and gh. Every call runs to
completion; there is no retry or timeout beyond the tool's own.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import subprocess
from typing import Sequence

from core.errors import CollaboratorCommandError


@dataclass(frozen=True)
class CommandResult:
    """Completed external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def run_command(args: Sequence[str], cwd: Path, check: bool = True) -> CommandResult:
    """Run an external command and capture its output.

    Args:
        args: Command and arguments.
        cwd: Working directory.
        check: Raise when the command exits non-zero.

    Returns:
        Captured command result.

    Raises:
        CollaboratorCommandError: If the executable is missing or cannot be
            started, or if the command fails while ``check`` is set.
    """
    command = tuple(args)
    try:
        completed = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as error:
        raise CollaboratorCommandError(
            f"Command '{command[0]}' is not installed or not on PATH. "
            "Install it and retry the pipeline."
        ) from error
    except OSError as error:
        raise CollaboratorCommandError(
            f"Command '{command[0]}' could not be started: {error}. "
            "Check that it is executable and retry the pipeline."
        ) from error
    result = CommandResult(
        args=command,
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
    if check and not result.succeeded:
        raise CollaboratorCommandError(
            f"Command '{' '.join(command)}' failed with exit code {result.returncode}: "
            f"{result.stderr.strip() or result.stdout.strip()}"
        )
    return result
