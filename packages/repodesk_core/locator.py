"""Repository discovery under the repositories root.

Validates that the configured root exists (offering recovery when it
does not) and finds the immediate subdirectories that are git working
copies.

Execution Context:
    Library module - imported by session, operations, and CLI commands

Dependencies:
    - repodesk_core.config: Configuration reset during recovery
    - repodesk_core.prompts: Recovery and selection menus

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import logging
from pathlib import Path

from repodesk_core.config import ConfigStore
from repodesk_core.models import RootRecovery
from repodesk_core.prompts import Prompter

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


MARKER = ".git"


# ---- Module Functions ---------------------------------------------------------------------------------------


def is_repository(
        path: Path | str,
) -> bool:
    """Whether path contains the git metadata directory."""
    return (Path(path) / MARKER).is_dir()


def find_repositories(
        root: Path | str,
) -> list[Path]:
    """Find git working copies directly under root.

    Args:
        root: Repositories root to scan.

    Returns:
        Absolute paths of marker-bearing subdirectories, sorted by name.
    """
    base_dir = Path(root).expanduser().resolve()
    if not base_dir.is_dir():
        return []

    repos = [item for item in base_dir.iterdir() if item.is_dir() and is_repository(item)]
    return sorted(repos, key=lambda item: item.name)


def validate_root(
        root: Path | str,
        prompter: Prompter,
        store: ConfigStore,
) -> bool:
    """Make sure the repositories root exists, offering recovery if not.

    Args:
        root: Configured repositories root.
        prompter: Console interaction.
        store: Configuration store (deleted on reset).

    Returns:
        True when the root exists or was created; False when the session
        should stop (configuration reset, exit, or creation failure).
    """
    root_path = Path(root).expanduser()
    if root_path.is_dir():
        return True

    prompter.error(f"Repositories root does not exist: {root_path}")
    options = list(RootRecovery)
    choice = prompter.choose("How do you want to proceed?", [option.label for option in options])
    recovery = options[choice - 1] if choice else RootRecovery.EXIT

    if recovery is RootRecovery.CREATE:
        try:
            root_path.mkdir(parents=True, exist_ok=True)
        except OSError as mkdir_error:
            prompter.error(f"Could not create {root_path}: {mkdir_error}")
            return False
        prompter.success(f"Created {root_path}")
        return True

    if recovery is RootRecovery.RESET:
        store.reset()
        prompter.warning("Configuration reset. Restart RepoDesk to set up a new repositories root.")
        return False

    prompter.info("Exiting.")
    return False


def scan(
        root: Path | str,
        prompter: Prompter,
) -> Path | None:
    """List repositories under root and let the user pick one.

    Returns:
        Absolute path of the chosen repository, or None when nothing was
        found or the choice was invalid.
    """
    repos = find_repositories(root)
    if not repos:
        prompter.warning(f"No git repositories found in {root}")
        return None

    logger.debug("Found %d repositories under %s", len(repos), root)
    choice = prompter.choose("Select a repository", [repo.name for repo in repos])
    if choice is None:
        return None
    return repos[choice - 1]
