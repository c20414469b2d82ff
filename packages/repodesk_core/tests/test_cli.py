"""Tests for the RepoDesk click application.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - click.testing: CLI runner
    - repodesk_cli: Module under test
"""
from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from conftest import FakeRunner

from repodesk_cli.commands.utils import get_config_path
from repodesk_cli.commands.utils import load_env_file
from repodesk_cli.main import cli
from repodesk_cli.main import main


# ---- Fixtures -----------------------------------------------------------------------------------------------


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path, repos_root: Path) -> Path:
    """Config file pointing at the test repositories root."""
    path = tmp_path / ".repodesk_config"
    path.write_text(f"{repos_root}\n", encoding="utf-8")
    return path


# ---- Utils Tests --------------------------------------------------------------------------------------------


class TestConfigPath:
    """Tests for config path resolution."""

    def test_option_wins(self, monkeypatch, tmp_path: Path) -> None:
        """Explicit option beats the environment."""
        monkeypatch.setenv("REPODESK_CONFIG", str(tmp_path / "env"))
        assert get_config_path(str(tmp_path / "opt")) == tmp_path / "opt"

    def test_environment(self, monkeypatch, tmp_path: Path) -> None:
        """REPODESK_CONFIG is used when no option is given."""
        monkeypatch.setenv("REPODESK_CONFIG", str(tmp_path / "env"))
        assert get_config_path() == tmp_path / "env"

    def test_default(self, monkeypatch) -> None:
        """Falls back to the home directory file."""
        monkeypatch.delenv("REPODESK_CONFIG", raising=False)
        assert get_config_path() == Path.home() / ".repodesk_config"

    def test_env_file_loaded(self, monkeypatch, tmp_path: Path) -> None:
        """A .env file in the working directory is loaded."""
        monkeypatch.delenv("REPODESK_CONFIG", raising=False)
        (tmp_path / ".env").write_text(f"REPODESK_CONFIG={tmp_path / 'from-env'}\n")
        monkeypatch.chdir(tmp_path)

        load_env_file()

        assert get_config_path() == tmp_path / "from-env"
        monkeypatch.delenv("REPODESK_CONFIG", raising=False)


# ---- Config Command Tests -----------------------------------------------------------------------------------


class TestConfigCommand:
    """Tests for `repodesk config`."""

    def test_show(self, runner: CliRunner, config_file: Path, repos_root: Path) -> None:
        """Shows the configured root."""
        result = runner.invoke(cli, ["--config-file", str(config_file), "config"])

        assert result.exit_code == 0
        assert "Repositories root" in result.output
        assert repos_root.name in result.output

    def test_show_unset(self, runner: CliRunner, tmp_path: Path) -> None:
        """Shows '(not set)' without a config file."""
        result = runner.invoke(cli, ["--config-file", str(tmp_path / "none"), "config"])

        assert result.exit_code == 0
        assert "(not set)" in result.output

    def test_set(self, runner: CliRunner, tmp_path: Path) -> None:
        """--set overwrites the configured root."""
        config_path = tmp_path / "cfg"
        new_root = tmp_path / "code"
        new_root.mkdir()

        result = runner.invoke(cli, ["-c", str(config_path), "config", "--set", str(new_root)])

        assert result.exit_code == 0
        assert config_path.read_text(encoding="utf-8").strip() == str(new_root.resolve())

    def test_reset(self, runner: CliRunner, config_file: Path) -> None:
        """--reset deletes the config file."""
        result = runner.invoke(cli, ["-c", str(config_file), "config", "--reset"])

        assert result.exit_code == 0
        assert not config_file.exists()

    def test_set_and_reset_conflict(self, runner: CliRunner, config_file: Path) -> None:
        """--set and --reset are mutually exclusive."""
        result = runner.invoke(cli, ["-c", str(config_file), "config", "--set", "/x", "--reset"])

        assert result.exit_code != 0
        assert config_file.exists()


# ---- Scan and Status Command Tests --------------------------------------------------------------------------


class TestScanCommand:
    """Tests for `repodesk scan`."""

    def test_scan_configured_root(self, runner: CliRunner, config_file: Path) -> None:
        """Lists repositories under the configured root."""
        with patch("repodesk_cli.commands.scan.GitRunner", return_value=FakeRunner(outputs={("branch",): "main\n"})):
            result = runner.invoke(cli, ["-c", str(config_file), "scan"])

        assert result.exit_code == 0
        assert "A" in result.output
        assert "C" in result.output
        assert "main" in result.output

    def test_scan_missing_root(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing directory is an error."""
        result = runner.invoke(cli, ["scan", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Directory not found" in result.output

    def test_scan_without_config(self, runner: CliRunner, tmp_path: Path) -> None:
        """No argument and no config is an error."""
        result = runner.invoke(cli, ["-c", str(tmp_path / "none"), "scan"])

        assert result.exit_code == 1
        assert "No repositories root configured" in result.output

    def test_scan_bracketed_repository_name(self, runner: CliRunner, tmp_path: Path) -> None:
        """Names and branches with brackets appear literally in the table."""
        (tmp_path / "proj[bold]" / ".git").mkdir(parents=True)
        fake = FakeRunner(outputs={("branch",): "wip/[x]\n"})

        with patch("repodesk_cli.commands.scan.GitRunner", return_value=fake):
            result = runner.invoke(cli, ["scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "proj[bold]" in result.output
        assert "wip/[x]" in result.output



class TestStatusCommand:
    """Tests for `repodesk status`."""

    def test_not_a_repository(self, runner: CliRunner, tmp_path: Path) -> None:
        """A plain directory is rejected."""
        result = runner.invoke(cli, ["status", str(tmp_path)])

        assert result.exit_code == 1
        assert "Not a git repository" in result.output

    def test_status(self, runner: CliRunner, repos_root: Path) -> None:
        """Shows the status report for a repository."""
        fake = FakeRunner(outputs={("branch",): "main\n"})
        with patch("repodesk_cli.commands.status.GitRunner", return_value=fake):
            result = runner.invoke(cli, ["status", str(repos_root / "A")])

        assert result.exit_code == 0
        assert "main" in result.output
        assert ["status"] in fake.commands


# ---- Run Command Tests --------------------------------------------------------------------------------------


class TestRunCommand:
    """Tests for the interactive session entry points."""

    def test_default_invokes_session(self, runner: CliRunner, config_file: Path) -> None:
        """Running without a sub-command starts the session."""
        fake = FakeRunner()
        with patch("repodesk_cli.commands.run.GitRunner", return_value=fake):
            result = runner.invoke(cli, ["-c", str(config_file)], input="1\n1\n3\nn\n")

        assert result.exit_code == 0
        assert ["log", "--oneline", "-5"] in fake.commands

    def test_run_exit_code(self, runner: CliRunner, tmp_path: Path) -> None:
        """A failed setup yields a non-zero exit code."""
        with patch("repodesk_cli.commands.run.GitRunner", return_value=FakeRunner()):
            result = runner.invoke(cli, ["-c", str(tmp_path / "cfg"), "run"], input="2\n\n")

        assert result.exit_code == 1


# ---- main() Tests -------------------------------------------------------------------------------------------


class TestMain:
    """Tests for the console script entry point."""

    def test_interrupt_returns_130(self) -> None:
        """Ctrl+C maps to exit code 130."""
        with patch.object(cli, "main", side_effect=click.exceptions.Abort()):
            assert main() == 130

    def test_click_error_exit_code(self) -> None:
        """Click errors keep their exit code."""
        with patch.object(cli, "main", side_effect=click.ClickException("boom")):
            assert main() == 1

    def test_unexpected_error(self) -> None:
        """Unexpected exceptions return 1."""
        with patch.object(cli, "main", side_effect=RuntimeError("boom")):
            assert main() == 1

    def test_success(self) -> None:
        """Commands returning None map to 0."""
        with patch.object(cli, "main", return_value=None):
            assert main() == 0
