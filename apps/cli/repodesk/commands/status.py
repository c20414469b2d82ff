"""RepoDesk status command.

Shows the current branch, recent commits, and working tree status of a
repository.

Execution Context:
    CLI command - invoked via `repodesk status`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - repodesk_core: Status operation

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from repodesk_core.locator import is_repository
from repodesk_core.operations import check_status
from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner

console = Console()


# ---- Status Command -----------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "path",
    type=click.Path(),
    default=".",
    required=False,
)
def status(
        path: str,
) -> None:
    """Show branch, recent log, and working tree status for PATH.

    Example:
        repodesk status
        repodesk status ~/code/project
    """
    repo_path = Path(path).expanduser().resolve()
    if not is_repository(repo_path):
        raise click.ClickException(f"Not a git repository: {repo_path}")

    console.print(Panel(
        f"[bold]Repository:[/bold] [cyan]{escape(str(repo_path))}[/cyan]",
        title="RepoDesk Status",
        border_style="blue",
    ))

    if not check_status(repo_path, Prompter(console), GitRunner()):
        raise click.ClickException("git status failed")
