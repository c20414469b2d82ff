"""Maintenance operations for a selected repository.

Each operation takes the active repository path explicitly and runs a
fixed sequence of git commands in it. Only push-existing checks that the
directory is a repository before doing anything.

Execution Context:
    Library module - imported by session and CLI commands

Dependencies:
    - repodesk_core.runner: git invocation
    - repodesk_core.prompts: Console interaction

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from rich.markup import escape

from repodesk_core.initializer import PRIMARY_BRANCH
from repodesk_core.initializer import REMOTE_NAME
from repodesk_core.initializer import TIMESTAMP_FORMAT
from repodesk_core.locator import is_repository
from repodesk_core.models import Operation
from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


AUTO_COMMIT_PREFIX = "Auto commit "
STATUS_LOG_LIMIT = 5


# ---- Operations ---------------------------------------------------------------------------------------------


def simple_commit(
        repo: Path,
        prompter: Prompter,
        runner: GitRunner,
        now: Callable[[], datetime] = datetime.now,
) -> bool:
    """Stage everything, commit, and push.

    A blank message becomes "Auto commit <timestamp>". Commands run in
    sequence regardless of earlier exit codes.

    Returns:
        True if the push succeeded.
    """
    prompter.show(runner.run(["status", "--short"], cwd=repo).output)

    message = prompter.ask("Commit message (blank for auto message)")
    if not message:
        message = AUTO_COMMIT_PREFIX + now().strftime(TIMESTAMP_FORMAT)

    runner.run(["add", "-A"], cwd=repo)
    prompter.show(runner.run(["commit", "-m", message], cwd=repo).output)

    push_result = runner.run(["push"], cwd=repo)
    prompter.show(push_result.output)
    if push_result.ok:
        prompter.success(f"Committed and pushed: {message}")
    else:
        prompter.error("Push failed")
    return push_result.ok


def force_resolve(
        repo: Path,
        prompter: Prompter,
        runner: GitRunner,
) -> bool:
    """Discard conflict state, reset to HEAD, and force-push.

    Destructive: local uncommitted changes are lost and the remote is
    overwritten with local history.

    Returns:
        True if the force-push succeeded.
    """
    for abort_args in (["rebase", "--abort"], ["merge", "--abort"]):
        abort_result = runner.run(abort_args, cwd=repo)
        if not abort_result.ok:
            logger.debug("Ignoring failed %s: %s", " ".join(abort_args), abort_result.output)

    prompter.show(runner.run(["reset", "--hard", "HEAD"], cwd=repo).output)

    push_result = runner.run(["push", "--force"], cwd=repo)
    prompter.show(push_result.output)
    if push_result.ok:
        prompter.success("Local history force-pushed to remote")
    else:
        prompter.error("Force push failed")
    return push_result.ok


def check_status(
        repo: Path,
        prompter: Prompter,
        runner: GitRunner,
) -> bool:
    """Show current branch, recent log, and working-tree status."""
    branch_result = runner.run(["branch", "--show-current"], cwd=repo)
    branch = branch_result.stdout.strip() or "(detached HEAD)"
    prompter.console.print(f"[bold]On branch:[/bold] [cyan]{escape(branch)}[/cyan]")

    prompter.console.print(f"[bold]Last {STATUS_LOG_LIMIT} commits:[/bold]")
    prompter.show(runner.run(["log", "--oneline", f"-{STATUS_LOG_LIMIT}"], cwd=repo).output)

    status_result = runner.run(["status"], cwd=repo)
    prompter.console.print("[bold]Working tree:[/bold]")
    prompter.show(status_result.output)
    return branch_result.ok and status_result.ok


def push_existing(
        repo: Path,
        prompter: Prompter,
        runner: GitRunner,
) -> bool:
    """Link an existing repository to a remote and push the primary branch.

    Returns:
        True if the push succeeded.
    """
    if not is_repository(repo):
        prompter.error(f"Not a git repository: {repo}")
        return False

    remote_url = prompter.ask("Remote URL")
    if not remote_url:
        prompter.error("Remote URL cannot be empty")
        return False

    runner.run(["remote", "add", REMOTE_NAME, remote_url], cwd=repo)
    runner.run(["branch", "-M", PRIMARY_BRANCH], cwd=repo)

    push_result = runner.run(["push", "-u", REMOTE_NAME, PRIMARY_BRANCH], cwd=repo)
    prompter.show(push_result.output)
    if push_result.ok:
        prompter.success(f"Pushed '{PRIMARY_BRANCH}' to {remote_url}")
    else:
        prompter.error("Push failed")
    return push_result.ok


# ---- Dispatch -----------------------------------------------------------------------------------------------


def choose_operation(
        prompter: Prompter,
) -> Operation | None:
    """Show the operations menu and return the selected operation."""
    operations = list(Operation)
    choice = prompter.choose("Select an operation", [operation.label for operation in operations])
    return operations[choice - 1] if choice else None


def dispatch(
        operation: Operation,
        repo: Path | str,
        prompter: Prompter,
        runner: GitRunner,
        now: Callable[[], datetime] = datetime.now,
) -> bool:
    """Run operation against repo.

    Returns:
        The operation's success flag.
    """
    repo_path = Path(repo)
    prompter.info(f"{operation.label} in {repo_path}")

    match operation:
        case Operation.SIMPLE_COMMIT:
            return simple_commit(repo_path, prompter, runner, now=now)
        case Operation.FORCE_RESOLVE:
            return force_resolve(repo_path, prompter, runner)
        case Operation.CHECK_STATUS:
            return check_status(repo_path, prompter, runner)
        case Operation.PUSH_EXISTING:
            return push_existing(repo_path, prompter, runner)
