"""Data models for RepoDesk.

Defines the closed menu choices, session states, and the record
describing a single git invocation.

Execution Context:
    Library module - imported by other repodesk_core modules

Dependencies:
    - dataclasses: Data class decorators
    - enum: Closed choice sets

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum


# ---- Menu Choices -------------------------------------------------------------------------------------------


class Operation(Enum):
    """Maintenance operations offered for a selected repository.

    Member order is menu order.
    """

    SIMPLE_COMMIT = "Simple commit (stage all, commit, push)"
    FORCE_RESOLVE = "Force resolver (abort, hard reset, force push)"
    CHECK_STATUS = "Check status"
    PUSH_EXISTING = "Push existing repository to a new remote"

    @property
    def label(
            self,
    ) -> str:
        """Menu label for this operation."""
        return self.value


class RepoSource(Enum):
    """Ways of picking the repository to work on."""

    SCAN = "Scan repositories root"
    MANUAL = "Enter a repository path"
    CURRENT = "Use current directory"
    INIT_NEW = "Create a new repository"

    @property
    def label(
            self,
    ) -> str:
        """Menu label for this source."""
        return self.value


class RootRecovery(Enum):
    """Recovery choices offered when the repositories root is missing."""

    CREATE = "Create the directory"
    RESET = "Reset configuration"
    EXIT = "Exit"

    @property
    def label(
            self,
    ) -> str:
        """Menu label for this recovery choice."""
        return self.value


class SessionState(Enum):
    """States of the interactive session loop."""

    CONFIG_LOADING = "config_loading"
    ROOT_VALIDATING = "root_validating"
    REPO_SELECTING = "repo_selecting"
    INIT_NEW_REPO = "init_new_repo"
    OPERATION_DISPATCH = "operation_dispatch"
    CONTINUE_PROMPT = "continue_prompt"
    TERMINATE = "terminate"


# ---- Command Results ----------------------------------------------------------------------------------------


@dataclass
class CommandResult:
    """Outcome of one git invocation.

    Attributes:
        args: Full argument vector, executable included.
        returncode: Process exit code (-1 when the process never ran).
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    args: list[str] = field(default_factory=list)
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(
            self,
    ) -> bool:
        """Whether the command exited with status 0."""
        return self.returncode == 0

    @property
    def output(
            self,
    ) -> str:
        """Combined stdout and stderr, stripped."""
        parts = [part.strip() for part in (self.stdout, self.stderr) if part and part.strip()]
        return "\n".join(parts)
