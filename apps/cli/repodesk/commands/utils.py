"""Utility functions for RepoDesk CLI commands.

Execution Context:
    CLI command utilities - imported by main.py and command modules

Dependencies:
    - python-dotenv: Load environment variables from .env file
    - rich: Logging handler

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from repodesk_core.config import ConfigStore
from repodesk_core.config import default_config_path


# ---- Constants ----------------------------------------------------------------------------------------------


CONFIG_ENV_VAR = "REPODESK_CONFIG"


# ---- Environment --------------------------------------------------------------------------------------------


def load_env_file(
        env_path: Path | None = None,
) -> None:
    """Load environment variables from a .env file.

    Searches for .env file in:
    1. Specified path (if provided)
    2. Current working directory
    3. Parent directories (up to 3 levels)

    Args:
        env_path: Explicit path to .env file (optional).
    """
    if env_path:
        if env_path.exists():
            load_dotenv(env_path, override=False)
        return

    current = Path.cwd()
    for _ in range(4):
        candidate = current / ".env"
        if candidate.exists():
            load_dotenv(candidate, override=False)
            return
        current = current.parent


def get_config_path(
        config_file: str | None = None,
) -> Path:
    """Get the configuration file path.

    Precedence: explicit option, then REPODESK_CONFIG environment
    variable, then ~/.repodesk_config.

    Args:
        config_file: Optional path from the --config-file option.

    Returns:
        Configuration file path.
    """
    if config_file:
        return Path(config_file).expanduser()

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    return default_config_path()


def get_config_store(
        ctx: click.Context,
) -> ConfigStore:
    """Build the ConfigStore for the current invocation."""
    obj = ctx.find_root().obj or {}
    return ConfigStore(get_config_path(obj.get("config_file")))


# ---- Logging ------------------------------------------------------------------------------------------------


def configure_logging(
        verbose: bool = False,
) -> None:
    """Route log records to stderr through rich."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
