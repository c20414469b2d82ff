"""RepoDesk config command.

Shows, sets, or resets the configured repositories root.

Execution Context:
    CLI command - invoked via `repodesk config`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - repodesk_core: Configuration store

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .utils import get_config_store

console = Console()


# ---- Config Command -----------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--set",
    "-s",
    "new_root",
    default="",
    help="Set the repositories root path.",
)
@click.option(
    "--reset",
    is_flag=True,
    help="Delete the configuration file (setup runs again on next start).",
)
@click.pass_context
def config(
        ctx: click.Context,
        new_root: str,
        reset: bool,
) -> None:
    """Manage the repositories root configuration.

    Examples:
        repodesk config
        repodesk config --set ~/code
        repodesk config --reset
    """
    try:
        store = get_config_store(ctx)

        if new_root and reset:
            raise click.UsageError("Use either --set or --reset, not both")

        if reset:
            if store.reset():
                console.print(f"[green]Configuration removed: {escape(str(store.path))}[/green]")
            else:
                console.print(f"[yellow]No configuration file at {escape(str(store.path))}[/yellow]")
            return

        if new_root:
            root = Path(new_root).expanduser().resolve()
            store.save(root)
            console.print(f"[green]Repositories root set to {escape(str(root))}[/green]")
            if not root.is_dir():
                console.print("[dim]Directory does not exist yet; you will be offered to create it.[/dim]")
            return

        console.print("[bold]RepoDesk Configuration:[/bold]")
        console.print()
        console.print(f"  [bold]Config file:[/bold] {escape(str(store.path))}")
        root = store.load()
        if root:
            console.print(f"  [bold]Repositories root:[/bold] {escape(root)}")
        else:
            console.print("  [bold]Repositories root:[/bold] [dim](not set)[/dim]")
        console.print()

    except click.ClickException:
        raise
    except Exception as config_error:
        msg = f"Config operation failed: {config_error}"
        raise click.ClickException(msg) from config_error
