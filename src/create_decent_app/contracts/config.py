"""Configuration contracts for a scaffolding run.

:class:`ScaffoldConfig` is built once at startup (defaults plus any CLI
overrides) and passed into the orchestrator. It is frozen so a run can never
mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TEMPLATE_URL = "https://github.com/erikh2000/decentapp-template"
PROJECT_PLACEHOLDER = "decentapp-template"
DISPLAY_PLACEHOLDER = "Decent App"


@dataclass(frozen=True)
class Substitution:
    """A literal search/replace pair."""

    search: str
    replace: str


class FileTarget(BaseModel):
    """A single file, relative to the project root, that gets one placeholder replaced."""

    model_config = ConfigDict(frozen=True)

    path: Path
    placeholder: Literal["project", "display"]


class ScaffoldConfig(BaseModel):
    """Top-level configuration for a ``create-decent-app`` run.

    Attributes:
        template_url: Git URL of the template repository.
        min_python: Minimum supported interpreter version as ``(major, minor)``.
        history_dir: Version-control folder removed after cloning.
        project_placeholder: Text replaced with the project name.
        display_placeholder: Text replaced with the app display name.
        file_targets: Files replaced directly by name, in order.
        extensions: File extensions covered by the directory-wide pass.
        default_project_name: Prompt default when no name is given.
    """

    model_config = ConfigDict(frozen=True)

    template_url: str = TEMPLATE_URL
    min_python: tuple[int, int] = (3, 11)
    history_dir: str = ".git"
    project_placeholder: str = PROJECT_PLACEHOLDER
    display_placeholder: str = DISPLAY_PLACEHOLDER
    file_targets: tuple[FileTarget, ...] = Field(
        default=(
            FileTarget(path=Path("package.json"), placeholder="project"),
            FileTarget(path=Path("README.md"), placeholder="display"),
            FileTarget(path=Path("public/manifest.json"), placeholder="display"),
        )
    )
    extensions: tuple[str, ...] = ("ts", "tsx", "html")
    default_project_name: str = "my-new-project"

    @field_validator("template_url")
    @classmethod
    def _template_url_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("template_url must not be empty")
        return value

    @field_validator("extensions")
    @classmethod
    def _strip_leading_dots(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(ext.lstrip(".") for ext in value)

    def with_overrides(self, *, template_url: str | None = None) -> ScaffoldConfig:
        """Return a copy with CLI overrides applied (``None`` keeps the current value)."""
        if template_url is None:
            return self
        return ScaffoldConfig.model_validate({**self.model_dump(), "template_url": template_url})

    def substitution_for(self, target: FileTarget, *, project_name: str, display_name: str) -> Substitution:
        if target.placeholder == "project":
            return Substitution(self.project_placeholder, project_name)
        return Substitution(self.display_placeholder, display_name)
