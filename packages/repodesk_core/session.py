"""Interactive session loop.

Repeats configuration loading, root validation, repository selection,
and operation dispatch until the user declines to continue.

Execution Context:
    Library module - driven by the CLI `run` command

Dependencies:
    - repodesk_core.config, locator, initializer, operations

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from repodesk_core.config import ConfigError
from repodesk_core.config import ConfigStore
from repodesk_core.initializer import init_new_repository
from repodesk_core.locator import scan
from repodesk_core.locator import validate_root
from repodesk_core.models import RepoSource
from repodesk_core.models import SessionState
from repodesk_core.operations import choose_operation
from repodesk_core.operations import dispatch
from repodesk_core.prompts import Prompter
from repodesk_core.runner import GitRunner

logger = logging.getLogger(__name__)


# ---- Session Class ------------------------------------------------------------------------------------------


class Session:
    """State machine behind the interactive menu.

    Attributes:
        store: Configuration store.
        prompter: Console interaction.
        runner: git runner.
        state: Current SessionState.
        root: Repositories root loaded this iteration.
        repo: Repository selected this iteration.
        exit_code: Process exit code once terminated.
    """

    def __init__(
            self,
            store: ConfigStore,
            prompter: Prompter,
            runner: GitRunner,
            now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.prompter = prompter
        self.runner = runner
        self.now = now
        self.state = SessionState.CONFIG_LOADING
        self.root: str | None = None
        self.repo: Path | None = None
        self.exit_code = 0

    def run(
            self,
    ) -> int:
        """Drive the session until it terminates.

        Returns:
            Exit code (0 on normal exit, 1 when configuration or the
            repositories root is unusable).
        """
        self.prompter.console.rule("[bold]RepoDesk[/bold]")
        while self.state is not SessionState.TERMINATE:
            logger.debug("Session state: %s", self.state.value)
            self.state = self.step()
        return self.exit_code

    def step(
            self,
    ) -> SessionState:
        """Execute the current state and return the next one."""
        match self.state:
            case SessionState.CONFIG_LOADING:
                return self._load_config()
            case SessionState.ROOT_VALIDATING:
                return self._validate_root()
            case SessionState.REPO_SELECTING:
                return self._select_repository()
            case SessionState.INIT_NEW_REPO:
                init_new_repository(self.root, self.prompter, self.runner, now=self.now)
                return SessionState.CONTINUE_PROMPT
            case SessionState.OPERATION_DISPATCH:
                return self._dispatch()
            case SessionState.CONTINUE_PROMPT:
                if self.prompter.confirm("Do you want to perform another operation?", default=False):
                    return SessionState.CONFIG_LOADING
                self.prompter.info("Goodbye!")
                return SessionState.TERMINATE
        return SessionState.TERMINATE

    # ---- States ---------------------------------------------------------------------------------------------

    def _load_config(
            self,
    ) -> SessionState:
        self.repo = None
        try:
            self.root = self.store.load_or_init(self.prompter)
        except ConfigError as config_error:
            self.prompter.error(str(config_error))
            self.exit_code = 1
            return SessionState.TERMINATE
        self.prompter.info(f"Repositories root: {self.root}")
        return SessionState.ROOT_VALIDATING

    def _validate_root(
            self,
    ) -> SessionState:
        if validate_root(self.root, self.prompter, self.store):
            return SessionState.REPO_SELECTING
        # A reset asks for a restart; anything else is a failure.
        self.exit_code = 0 if not self.store.exists() else 1
        return SessionState.TERMINATE

    def _select_repository(
            self,
    ) -> SessionState:
        sources = list(RepoSource)
        choice = self.prompter.choose("Choose a repository", [source.label for source in sources])
        if choice is None:
            return SessionState.CONTINUE_PROMPT

        match sources[choice - 1]:
            case RepoSource.SCAN:
                self.repo = scan(self.root, self.prompter)
            case RepoSource.MANUAL:
                self.repo = self._manual_path()
            case RepoSource.CURRENT:
                self.repo = Path.cwd()
            case RepoSource.INIT_NEW:
                return SessionState.INIT_NEW_REPO

        if self.repo is None:
            return SessionState.CONTINUE_PROMPT
        return SessionState.OPERATION_DISPATCH

    def _manual_path(
            self,
    ) -> Path | None:
        answer = self.prompter.ask("Repository path")
        if not answer:
            self.prompter.error("Path cannot be empty")
            return None
        path = Path(answer).expanduser().resolve()
        if not path.is_dir():
            self.prompter.error(f"Directory not found: {path}")
            return None
        return path

    def _dispatch(
            self,
    ) -> SessionState:
        self.prompter.info(f"Selected repository: {self.repo}")
        operation = choose_operation(self.prompter)
        if operation is not None:
            dispatch(operation, self.repo, self.prompter, self.runner, now=self.now)
        return SessionState.CONTINUE_PROMPT
