"""Create command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from create_decent_app.contracts.exceptions import InvalidInputError


def prompt_for_input(question: str, default: str) -> str:
    """Ask *question* with *default*; a blank answer falls back to the default."""
    import questionary

    answer = questionary.text(f"{question}:", default=default).ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer.strip() or default.strip()


def run_create(args: argparse.Namespace, *, console: Console | None = None) -> int:
    """Gather names, run the scaffold and print next steps.

    Errors propagate to :func:`create_decent_app.cli.app.main` for exit-code mapping.
    """
    import create_decent_app.cli as cli

    console = console or Console()
    try:
        config = cli.ScaffoldConfig().with_overrides(template_url=args.template)
    except ValidationError as exc:
        raise InvalidInputError("Template repository URL must not be empty.") from exc

    cli.check_python_version(config.min_python)
    console.print(f"Decent App Creator v{cli.package_version()}", highlight=False)

    cli.print_separator(console)
    console.print("You and me are gonna make a new decent app! A few questions...")
    default_name = args.project_name or config.default_project_name
    if args.defaults:
        project_name = default_name
    else:
        project_name = cli.prompt_for_input("Create project in a new subfolder named", default_name)
    project_name = cli.validate_project_name(project_name)

    default_display = args.display_name or project_name
    if args.defaults:
        display_name = default_display
    else:
        display_name = cli.prompt_for_input("App display name shown on web pages", default_display)
    display_name = cli.validate_display_name(display_name)
    cli.print_separator(console)

    console.print(f"Source from {escape(config.template_url)} repository used for clone below.", highlight=False)
    result = cli.create_project(
        project_name,
        display_name,
        config=config,
        source=cli.GitTemplateSource(),
        base_dir=Path.cwd(),
        progress=cli.RichScaffoldProgress(console),
    )

    console.print(
        f"[bold green]Success![/bold green] Project created in {escape(result.project_name)}.", highlight=False
    )
    console.print("\nTo build and run your new decent app:")
    console.print(f"  cd {escape(result.project_name)}", highlight=False)
    console.print("  npm install")
    console.print("  npm run dev")
    return 0


__all__ = ["prompt_for_input", "run_create"]
