"""Shared test configuration and fixtures for repodesk_core tests.

Provides:
- A recording console so printed output can be asserted on.
- ``make_prompter``: a Prompter fed scripted answers, one per line.
- ``FakeRunner``: a GitRunner double that records every git invocation
  and returns canned results instead of spawning processes.
"""
from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path

import pytest
from rich.console import Console

from repodesk_core.models import CommandResult
from repodesk_core.prompts import Prompter


FIXED_NOW = datetime(2026, 1, 30, 12, 0, 0)


# ---- Doubles ------------------------------------------------------------------------------------------------


class FakeRunner:
    """Records git calls; returns canned results keyed by argument prefix.

    ``failures`` maps an argument tuple prefix (e.g. ``("push",)``) to the
    CommandResult to return. Everything else succeeds with empty output.
    """

    def __init__(
            self,
            failures: dict[tuple[str, ...], CommandResult] | None = None,
            outputs: dict[tuple[str, ...], str] | None = None,
    ) -> None:
        self.failures = failures or {}
        self.outputs = outputs or {}
        self.calls: list[tuple[list[str], Path | None]] = []

    def run(
            self,
            args: list[str],
            cwd: Path | str | None = None,
    ) -> CommandResult:
        self.calls.append((list(args), Path(cwd) if cwd is not None else None))
        for prefix, result in self.failures.items():
            if tuple(args[:len(prefix)]) == prefix:
                return result
        for prefix, stdout in self.outputs.items():
            if tuple(args[:len(prefix)]) == prefix:
                return CommandResult(args=["git", *args], returncode=0, stdout=stdout)
        return CommandResult(args=["git", *args], returncode=0)

    @property
    def commands(
            self,
    ) -> list[list[str]]:
        """Argument lists of every recorded call, in order."""
        return [args for args, _ in self.calls]


def failed(stderr: str = "fatal: error") -> CommandResult:
    """A non-zero git result."""
    return CommandResult(args=["git"], returncode=128, stderr=stderr)


# ---- Fixtures -----------------------------------------------------------------------------------------------


@pytest.fixture
def console() -> Console:
    """Console writing to memory with markup rendered to plain text."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def make_prompter(console: Console):
    """Factory building a Prompter that answers from the given lines."""
    def _make(*answers: str) -> Prompter:
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return Prompter(console, stream=stream)
    return _make


@pytest.fixture
def output(console: Console):
    """Callable returning everything printed to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner where every git command succeeds."""
    return FakeRunner()


@pytest.fixture
def repos_root(tmp_path: Path) -> Path:
    """Repositories root with A (repo), B (plain dir), C (repo), and a file."""
    root = tmp_path / "repos"
    for name in ("A", "B", "C"):
        (root / name).mkdir(parents=True)
    (root / "A" / ".git").mkdir()
    (root / "C" / ".git").mkdir()
    (root / "notes.txt").write_text("not a repo")
    return root
