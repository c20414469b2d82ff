"""Console prompts and numbered menus.

Renders 1-indexed option lists and reads line input through rich. Menu
input is validated once; an invalid answer is reported and returned as
None so the caller decides whether to re-prompt or abort.

Execution Context:
    Library module - imported by config, locator, initializer, operations,
    and session

Dependencies:
    - rich: Console output and line prompts

Metadata:
    Version: 0.1.0
    Author: RepoDesk Team
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.prompt import Prompt


# ---- Menu Functions -----------------------------------------------------------------------------------------


def render_menu(
        console: Console,
        title: str,
        options: Sequence[str],
) -> None:
    """Print a title followed by options numbered from 1.

    Args:
        console: Console to print to.
        title: Menu heading.
        options: Option labels in display order.
    """
    console.print()
    console.print(f"[bold cyan]{escape(title)}[/bold cyan]")
    for index, label in enumerate(options, 1):
        console.print(f"  [bold]{index})[/bold] {escape(label)}")


def parse_choice(
        raw: str | None,
        default: int,
        maximum: int,
) -> int | None:
    """Validate a menu answer.

    Args:
        raw: Text typed by the user.
        default: Value returned for blank input.
        maximum: Highest valid option number.

    Returns:
        The chosen option in [1, maximum], the default for blank input,
        or None when the input is not a number in range.
    """
    text = (raw or "").strip()
    if not text:
        return default
    try:
        choice = int(text)
    except ValueError:
        return None
    if choice < 1 or choice > maximum:
        return None
    return choice


# ---- Prompter Class -----------------------------------------------------------------------------------------


class Prompter:
    """Line-oriented console interaction.

    Messages, questions, and menu labels are plain text: brackets in
    them are printed literally, never read as rich markup.

    Attributes:
        console: Rich console used for all output.
        stream: Optional input stream (stdin when None).
    """

    def __init__(
            self,
            console: Console | None = None,
            stream: TextIO | None = None,
    ) -> None:
        self.console = console or Console()
        self.stream = stream

    # ---- Input ----------------------------------------------------------------------------------------------

    def choose(
            self,
            title: str,
            options: Sequence[str],
            default: int = 1,
    ) -> int | None:
        """Show a numbered menu and read one choice.

        Returns:
            Chosen option number, or None after reporting invalid input.
        """
        render_menu(self.console, title, options)
        raw = Prompt.ask(
            f"Choose [1-{len(options)}]",
            console=self.console,
            default=str(default),
            stream=self.stream,
        )
        choice = parse_choice(raw, default, len(options))
        if choice is None:
            self.warning(f"Invalid choice '{raw.strip()}'. Enter a number between 1 and {len(options)}.")
        return choice

    def ask(
            self,
            question: str,
            default: str = "",
    ) -> str:
        """Read one line of text; blank input yields the default."""
        if default:
            answer = Prompt.ask(escape(question), console=self.console, default=default, stream=self.stream)
        else:
            answer = Prompt.ask(escape(question), console=self.console, stream=self.stream)
        return (answer or "").strip() or default

    def confirm(
            self,
            question: str,
            default: bool = False,
    ) -> bool:
        """Ask a yes/no question."""
        return Confirm.ask(escape(question), console=self.console, default=default, stream=self.stream)

    def pause(
            self,
            message: str,
    ) -> None:
        """Wait for the user to press Enter."""
        self.console.input(f"[dim]{escape(message)}[/dim] ", stream=self.stream)

    # ---- Status Lines ---------------------------------------------------------------------------------------

    def info(
            self,
            message: str,
    ) -> None:
        """Print an informational status line."""
        self.console.print(f"[blue][INFO][/blue] {escape(message)}")

    def success(
            self,
            message: str,
    ) -> None:
        """Print a success status line."""
        self.console.print(f"[green][OK][/green] {escape(message)}")

    def warning(
            self,
            message: str,
    ) -> None:
        """Print a warning status line."""
        self.console.print(f"[yellow][WARN][/yellow] {escape(message)}")

    def error(
            self,
            message: str,
    ) -> None:
        """Print an error status line."""
        self.console.print(f"[red][ERROR][/red] {escape(message)}")

    def show(
            self,
            text: str,
    ) -> None:
        """Print command output verbatim (no markup)."""
        if text:
            self.console.print(text, markup=False, highlight=False)
