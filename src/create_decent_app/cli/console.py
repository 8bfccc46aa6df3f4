"""Rich-based console output for the create command."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from create_decent_app.core.orchestrator import PHASE_CLONE, PHASE_REPLACE, PHASE_STRIP_HISTORY


class RichScaffoldProgress:
    """Prints one line per phase and one ``Updated:`` line per rewritten file."""

    _PHASE_MESSAGES: ClassVar[dict[str, str]] = {
        PHASE_CLONE: "Cloning template repository...",
        PHASE_STRIP_HISTORY: "Removing .git folders...",
        PHASE_REPLACE: "Replacing placeholder text in project files with your provided text...",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def phase_start(self, phase: str) -> None:
        self._console.print(escape(self._PHASE_MESSAGES.get(phase, f"{phase}...")))

    def phase_done(self, phase: str) -> None:
        pass

    def file_updated(self, path: Path) -> None:
        self._console.print(f"  Updated: {escape(str(path))}", highlight=False)


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_separator(console: Console) -> None:
    console.rule(style="dim")
