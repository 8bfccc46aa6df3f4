"""End-to-end project creation sequence.

:func:`create_project` validates both names, clones the template, removes
its history and substitutes placeholders. Every failure aborts the rest of
the sequence and nothing already on disk is rolled back; the user is
expected to delete the folder and re-run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from create_decent_app.contracts.config import ScaffoldConfig, Substitution
from create_decent_app.contracts.progress import NullScaffoldProgress, ScaffoldProgress
from create_decent_app.core.replacer import replace_in_file
from create_decent_app.core.template import GitTemplateSource, TemplateSource, strip_history
from create_decent_app.core.validation import validate_display_name, validate_project_name
from create_decent_app.core.walker import replace_placeholders_in_dir

logger = logging.getLogger(__name__)

PHASE_CLONE = "Clone"
PHASE_STRIP_HISTORY = "Strip history"
PHASE_REPLACE = "Replace placeholders"


class ScaffoldResult(BaseModel):
    """Outcome of a successful run."""

    project_name: str
    display_name: str
    project_dir: Path
    updated_files: list[Path] = []


def create_project(
    project_name: str,
    display_name: str,
    *,
    config: ScaffoldConfig | None = None,
    source: TemplateSource | None = None,
    base_dir: Path | None = None,
    progress: ScaffoldProgress | None = None,
) -> ScaffoldResult:
    """Create a new project folder from the template.

    Args:
        project_name: Folder name, also substituted for the project placeholder.
        display_name: Substituted for the display placeholder.
        config: Run configuration (defaults to :class:`ScaffoldConfig`).
        source: Clone collaborator (defaults to :class:`GitTemplateSource`).
        base_dir: Directory the project folder is created in (defaults to cwd).
        progress: Optional progress sink.

    Raises:
        ScaffoldError: Any validation, clone or file I/O failure.
    """
    config = config or ScaffoldConfig()
    source = source or GitTemplateSource()
    progress = progress or NullScaffoldProgress()

    project_name = validate_project_name(project_name, base_dir=base_dir)
    display_name = validate_display_name(display_name)
    project_dir = (base_dir or Path.cwd()) / project_name

    progress.phase_start(PHASE_CLONE)
    source.clone(config.template_url, project_dir)
    progress.phase_done(PHASE_CLONE)

    progress.phase_start(PHASE_STRIP_HISTORY)
    strip_history(project_dir, config.history_dir)
    progress.phase_done(PHASE_STRIP_HISTORY)

    progress.phase_start(PHASE_REPLACE)
    updated: list[Path] = []
    for target in config.file_targets:
        substitution = config.substitution_for(target, project_name=project_name, display_name=display_name)
        if replace_in_file(project_dir / target.path, substitution, progress=progress):
            updated.append(project_dir / target.path)
    updated.extend(
        replace_placeholders_in_dir(
            project_dir,
            config.extensions,
            Substitution(config.display_placeholder, display_name),
            progress=progress,
        )
    )
    progress.phase_done(PHASE_REPLACE)

    logger.debug("Updated %d file(s) in %s", len(updated), project_dir)
    return ScaffoldResult(
        project_name=project_name,
        display_name=display_name,
        project_dir=project_dir,
        updated_files=updated,
    )


__all__ = ["PHASE_CLONE", "PHASE_REPLACE", "PHASE_STRIP_HISTORY", "ScaffoldResult", "create_project"]
