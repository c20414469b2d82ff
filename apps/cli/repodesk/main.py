"""RepoDesk CLI entry point.

Orchestrator for the RepoDesk command-line interface. Registers all
command modules and provides the main entry point. Running `repodesk`
without a sub-command starts the interactive menu.

Execution Context:
    CLI application - run via `python main.py` or `repodesk` command

Dependencies:
    - click: CLI framework
    - repodesk_core: Core library

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import sys

import click

from repodesk_cli import __version__
from repodesk_cli.commands.config import config
from repodesk_cli.commands.run import run
from repodesk_cli.commands.scan import scan
from repodesk_cli.commands.status import status
from repodesk_cli.commands.utils import configure_logging
from repodesk_cli.commands.utils import load_env_file


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="repodesk")
@click.option(
    "--config-file",
    "-c",
    default="",
    help="Configuration file (or use REPODESK_CONFIG env var).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log every git command.",
)
@click.pass_context
def cli(
        ctx: click.Context,
        config_file: str,
        verbose: bool,
) -> None:
    """RepoDesk - Menu-driven git workflows.

    Pick a repository under your repositories root (or create one), then
    commit, force-resolve, check status, or push it.
    """
    load_env_file()
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file or None

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(run)
cli.add_command(config)
cli.add_command(scan)
cli.add_command(status)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for RepoDesk CLI.

    Returns:
        Exit code (0 for success, 130 when interrupted, non-zero for
        errors).
    """
    try:
        result = cli.main(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Interrupted", err=True)
        return 130
    except click.ClickException as click_error:
        click_error.show()
        return click_error.exit_code
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())
