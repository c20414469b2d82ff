"""Process execution for git commands.

Every git invocation made by RepoDesk goes through GitRunner so that
argument construction, logging, and failure reporting live in one place.
The exit code is the only signal inspected; output is display text.

Execution Context:
    Library module - imported by initializer, operations, and CLI commands

Dependencies:
    - subprocess: Process execution

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from repodesk_core.models import CommandResult

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


GIT_EXECUTABLE_ENV = "REPODESK_GIT"
DEFAULT_GIT_EXECUTABLE = "git"


# ---- Runner Class -------------------------------------------------------------------------------------------


class GitRunner:
    """Runs git sub-commands and reports their outcome.

    A process that cannot be launched or that times out is reported as
    a CommandResult with returncode -1 instead of raising.

    Attributes:
        executable: git executable name or path.
        timeout: Optional per-command timeout in seconds.
    """

    def __init__(
            self,
            executable: str | None = None,
            timeout: float | None = None,
    ) -> None:
        self.executable = executable or os.getenv(GIT_EXECUTABLE_ENV) or DEFAULT_GIT_EXECUTABLE
        self.timeout = timeout

    def run(
            self,
            args: list[str],
            cwd: Path | str | None = None,
    ) -> CommandResult:
        """Run `git <args>` in cwd and capture its output.

        Args:
            args: git sub-command and its arguments.
            cwd: Working directory (the active repository).

        Returns:
            CommandResult for the invocation.
        """
        cmd = [self.executable, *args]
        logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")

        try:
            completed = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return CommandResult(args=cmd, returncode=-1, stderr=f"Command timed out after {self.timeout}s")
        except FileNotFoundError:
            return CommandResult(args=cmd, returncode=-1, stderr=f"Executable not found: {self.executable}")
        except OSError as run_error:
            return CommandResult(args=cmd, returncode=-1, stderr=str(run_error))

        result = CommandResult(
            args=cmd,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if not result.ok:
            logger.debug("%s exited with %d: %s", " ".join(cmd), result.returncode, result.stderr.strip())
        return result
