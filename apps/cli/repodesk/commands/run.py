"""RepoDesk run command.

Starts the interactive session: pick or create a repository, then run
maintenance operations on it until you choose to stop.

Execution Context:
    CLI command - invoked via `repodesk run` or plain `repodesk`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - repodesk_core: Session loop

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import click
from rich.console import Console

from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner
from repodesk_core.session import Session

from .utils import get_config_store

console = Console()


# ---- Run Command --------------------------------------------------------------------------------------------


@click.command()
@click.pass_context
def run(
        ctx: click.Context,
) -> None:
    """Start the interactive repository menu.

    Example:
        repodesk run
    """
    session = Session(
        store=get_config_store(ctx),
        prompter=Prompter(console),
        runner=GitRunner(),
    )
    ctx.exit(session.run())
