"""RepoDesk Core Library.

Menu-driven orchestration of everyday git workflows: repositories-root
configuration, repository discovery and bootstrap, and maintenance
operations run through the git binary.

Execution Context:
    Library package - imported by the CLI

Dependencies:
    - rich: Console prompts and output

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from repodesk_core.config import ConfigError
from repodesk_core.config import ConfigStore
from repodesk_core.models import CommandResult
from repodesk_core.models import Operation
from repodesk_core.models import RepoSource
from repodesk_core.models import RootRecovery
from repodesk_core.models import SessionState
from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner
from repodesk_core.session import Session

__version__ = "0.1.0"

__all__ = [
    "CommandResult",
    "ConfigError",
    "ConfigStore",
    "GitRunner",
    "Operation",
    "Prompter",
    "RepoSource",
    "RootRecovery",
    "Session",
    "SessionState",
    "__version__",
]
