"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from create_decent_app.core.runtime import DISTRIBUTION_NAME


def _package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-decent-app",
        description="Create a new decent app project from the template repository.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the new subfolder (also used as the package name)",
    )
    parser.add_argument("--display-name", default=None, help="App display name shown on web pages")
    parser.add_argument("--template", default=None, help="Override the template repository URL")
    parser.add_argument("--defaults", action="store_true", help="Use defaults without prompting")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
