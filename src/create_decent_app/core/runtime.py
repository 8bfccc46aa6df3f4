"""Interpreter and package version preflight."""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version

from create_decent_app.contracts.exceptions import RuntimeVersionError

DISTRIBUTION_NAME = "create-decent-app"


def check_python_version(minimum: tuple[int, int], current: tuple[int, ...] | None = None) -> None:
    current = tuple(current or sys.version_info[:3])
    if current[:2] < minimum:
        required = ".".join(str(part) for part in minimum)
        running = ".".join(str(part) for part in current)
        raise RuntimeVersionError(
            f"This script requires Python version {required} or greater. You are using version {running}."
        )


def package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError as exc:
        raise RuntimeVersionError(
            "I couldn't read the version of this package. It looks like maybe the package metadata is missing "
            "or corrupt."
        ) from exc


__all__ = ["DISTRIBUTION_NAME", "check_python_version", "package_version"]
