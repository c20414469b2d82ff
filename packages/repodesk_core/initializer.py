"""New repository bootstrap.

Creates a project directory under the repositories root, makes the
first commit with a generated README, standardizes the primary branch,
and optionally links and pushes to a GitHub remote.

Execution Context:
    Library module - imported by session

Dependencies:
    - repodesk_core.runner: git invocation
    - repodesk_core.prompts: Console interaction

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner


# ---- Constants ----------------------------------------------------------------------------------------------


PRIMARY_BRANCH = "main"
REMOTE_NAME = "origin"
README_FILE = "README.md"
INITIAL_COMMIT_MESSAGE = "Initial commit"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


# ---- Module Functions ---------------------------------------------------------------------------------------


def github_remote_url(
        username: str,
        name: str,
) -> str:
    """HTTPS clone URL for a GitHub repository."""
    return f"https://github.com/{username}/{name}.git"


def render_readme(
        name: str,
        created: datetime,
) -> str:
    """Generated README content for a new repository."""
    return f"# {name}\n\nCreated on {created.strftime(TIMESTAMP_FORMAT)}\n"


def init_new_repository(
        root: Path | str,
        prompter: Prompter,
        runner: GitRunner,
        now: Callable[[], datetime] = datetime.now,
) -> bool:
    """Create and bootstrap a new repository under root.

    Args:
        root: Repositories root used for the default location.
        prompter: Console interaction.
        runner: git runner.
        now: Clock used for the README timestamp.

    Returns:
        True if the repository was created (and pushed, when a remote was
        requested).
    """
    name = prompter.ask("New repository name")
    if not name:
        prompter.error("Repository name cannot be empty")
        return False

    default_path = Path(root).expanduser() / name
    custom_path = prompter.ask(f"Repository path (blank for {default_path})")
    repo_path = Path(custom_path).expanduser() if custom_path else default_path

    try:
        repo_path.mkdir(parents=True, exist_ok=True)
    except OSError as mkdir_error:
        prompter.error(f"Could not create {repo_path}: {mkdir_error}")
        return False
    prompter.info(f"Working in {repo_path}")

    init_result = runner.run(["init"], cwd=repo_path)
    if not init_result.ok:
        prompter.error(f"git init failed: {init_result.output}")
        return False

    (repo_path / README_FILE).write_text(render_readme(name, now()), encoding="utf-8")
    runner.run(["add", README_FILE], cwd=repo_path)

    commit_result = runner.run(["commit", "-m", INITIAL_COMMIT_MESSAGE], cwd=repo_path)
    if not commit_result.ok:
        prompter.error(f"Initial commit failed: {commit_result.output}")
        return False

    runner.run(["branch", "-M", PRIMARY_BRANCH], cwd=repo_path)
    prompter.success(f"Initialized repository '{name}' on branch '{PRIMARY_BRANCH}'")

    username = prompter.ask("GitHub username (blank to skip remote setup)")
    if not username:
        prompter.info("Skipping remote setup")
        return True

    remote_url = github_remote_url(username, name)
    prompter.warning(f"Create an empty repository named '{name}' on GitHub before continuing.")
    prompter.info(f"Remote URL: {remote_url}")
    prompter.pause("Press Enter once the remote repository exists...")

    runner.run(["remote", "add", REMOTE_NAME, remote_url], cwd=repo_path)
    push_result = runner.run(["push", "-u", REMOTE_NAME, PRIMARY_BRANCH], cwd=repo_path)
    if not push_result.ok:
        prompter.error(f"Push failed: {push_result.output}")
        return False

    prompter.success(f"Pushed '{PRIMARY_BRANCH}' to {remote_url}")
    return True
