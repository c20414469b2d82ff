"""RepoDesk scan command.

Lists the git repositories directly under the repositories root without
entering the interactive menu.

Execution Context:
    CLI command - invoked via `repodesk scan`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - repodesk_core: Repository discovery

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from repodesk_core.locator import find_repositories
from repodesk_core.runner import GitRunner

from .utils import get_config_store

console = Console()


# ---- Scan Command -------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "root",
    type=click.Path(),
    required=False,
)
@click.pass_context
def scan(
        ctx: click.Context,
        root: str | None,
) -> None:
    """List git repositories under ROOT.

    ROOT defaults to the configured repositories root.

    Examples:
        repodesk scan
        repodesk scan ~/code
    """
    try:
        if not root:
            root = get_config_store(ctx).load()
            if not root:
                raise click.ClickException("No repositories root configured. Run 'repodesk config --set PATH'.")

        base_dir = Path(root).expanduser().resolve()
        if not base_dir.is_dir():
            raise click.ClickException(f"Directory not found: {base_dir}")

        repos = find_repositories(base_dir)
        if not repos:
            console.print(f"[yellow]No git repositories found in {escape(str(base_dir))}[/yellow]")
            return

        runner = GitRunner()
        table = Table(title=f"Repositories in {escape(str(base_dir))}")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Branch", style="green")
        table.add_column("Path", style="dim")

        for index, repo in enumerate(repos, 1):
            branch = runner.run(["branch", "--show-current"], cwd=repo).stdout.strip()
            table.add_row(str(index), escape(repo.name), escape(branch or "-"), escape(str(repo)))

        console.print(table)

    except click.ClickException:
        raise
    except Exception as scan_error:
        msg = f"Scan failed: {scan_error}"
        raise click.ClickException(msg) from scan_error
