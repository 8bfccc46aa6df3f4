"""Pre-flight checks on user-supplied names.

These guard against common mistakes (installing somewhere unexpected,
overwriting an existing folder) and against a display name carrying markup
into the generated pages. They are not meant to stop a user from attacking
themselves.
"""

from __future__ import annotations

import os
from pathlib import Path

from create_decent_app.contracts.exceptions import InjectionRiskError, InvalidInputError, TargetExistsError

_PATH_CHARACTERS = ("/", "\\")
_MARKUP_CHARACTERS = ("<", ">")


def contains_path_characters(text: str) -> bool:
    return any(ch in text for ch in _PATH_CHARACTERS)


def contains_markup_characters(text: str) -> bool:
    return any(ch in text for ch in _MARKUP_CHARACTERS)


def validate_project_name(name: str, *, base_dir: Path | None = None) -> str:
    """Validate a project folder name and return it trimmed.

    Raises:
        InvalidInputError: The name is empty or contains a path separator.
        TargetExistsError: Something already exists at ``base_dir / name``.
    """
    candidate = name.strip()
    if not candidate:
        raise InvalidInputError("Project name is required.")
    if contains_path_characters(candidate):
        raise InvalidInputError(
            "Project name cannot contain path characters. If you're trying to install to a specific location, "
            "change your working directory to the location where the project will be installed before running."
        )
    target = (base_dir or Path.cwd()) / candidate
    # lexists so a dangling symlink still counts as taken
    if os.path.lexists(target):
        raise TargetExistsError(
            f"Folder named {candidate} already exists. Please choose a different folder name or delete existing folder.",
            path=str(target),
        )
    return candidate


def validate_display_name(name: str) -> str:
    """Validate the app display name and return it trimmed."""
    candidate = name.strip()
    if not candidate:
        raise InvalidInputError("App display name is required.")
    if contains_markup_characters(candidate):
        raise InjectionRiskError(
            "App display name seems like it might contain an injection attack. "
            "Consider using a different name, even if you replace it in the created project later."
        )
    return candidate


__all__ = [
    "contains_markup_characters",
    "contains_path_characters",
    "validate_display_name",
    "validate_project_name",
]
