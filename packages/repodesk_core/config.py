"""Repositories-root configuration store.

Persists the single configured repositories root as the only line of a
text file, and runs the first-time setup prompt when the file is absent.

Execution Context:
    Library module - imported by session and CLI commands

Dependencies:
    - repodesk_core.prompts: First-run setup menu

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import getpass
import logging
import sys
from pathlib import Path

from repodesk_core.prompts import Prompter

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


CONFIG_FILENAME = ".repodesk_config"


# ---- Exceptions ---------------------------------------------------------------------------------------------


class ConfigError(RuntimeError):
    """Raised when no usable repositories root can be configured."""


# ---- Module Functions ---------------------------------------------------------------------------------------


def default_config_path() -> Path:
    """Path of the configuration file in the user's home directory."""
    return Path.home() / CONFIG_FILENAME


def default_repos_root(
        user: str | None = None,
        platform: str | None = None,
) -> Path:
    """Suggested repositories root for the current OS user.

    Args:
        user: User name (defaults to the login name).
        platform: sys.platform value to compute the path for.

    Returns:
        Conventional GitHub working directory for that user.
    """
    user = user or getpass.getuser()
    platform = platform or sys.platform

    if platform.startswith("win"):
        return Path(f"C:/Users/{user}/Documents/GitHub")
    if platform == "darwin":
        return Path(f"/Users/{user}/GitHub")
    return Path(f"/home/{user}/GitHub")


# ---- Config Store Class -------------------------------------------------------------------------------------


class ConfigStore:
    """Reads and writes the repositories-root configuration file.

    Attributes:
        path: Location of the configuration file.
    """

    def __init__(
            self,
            path: Path | str | None = None,
    ) -> None:
        self.path = Path(path).expanduser() if path else default_config_path()

    def exists(
            self,
    ) -> bool:
        """Whether the configuration file is present."""
        return self.path.is_file()

    def load(
            self,
    ) -> str | None:
        """Return the configured root, or None when unset or blank."""
        if not self.exists():
            return None
        lines = self.path.read_text(encoding="utf-8").splitlines()
        root = lines[0].strip() if lines else ""
        return root or None

    def save(
            self,
            root: Path | str,
    ) -> None:
        """Overwrite the file with root as its sole line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{root}\n", encoding="utf-8")
        logger.debug("Saved repositories root %s to %s", root, self.path)

    def reset(
            self,
    ) -> bool:
        """Delete the configuration file.

        Returns:
            True if a file was removed.
        """
        if not self.exists():
            return False
        self.path.unlink()
        logger.debug("Removed configuration file %s", self.path)
        return True

    def load_or_init(
            self,
            prompter: Prompter,
    ) -> str:
        """Return the configured root, running first-time setup if needed.

        An existing configuration is returned without writing. Otherwise
        the user accepts the computed default or enters a custom path,
        which is then persisted.

        Raises:
            ConfigError: If the chosen path is empty or the menu answer
                is invalid.
        """
        root = self.load()
        if root:
            return root

        suggested = default_repos_root()
        prompter.info("No configuration found. Let's set up your repositories root.")
        choice = prompter.choose(
            "Repositories root",
            [f"Use default ({suggested})", "Enter a custom path"],
        )
        if choice is None:
            raise ConfigError("Setup cancelled: invalid choice")

        if choice == 1:
            root = str(suggested)
        else:
            custom = prompter.ask("Repositories root path")
            root = str(Path(custom).expanduser().resolve()) if custom else ""

        if not root:
            raise ConfigError("Repositories root path cannot be empty")

        self.save(root)
        prompter.success(f"Configuration saved to {self.path}")
        return root
