"""Template acquisition: cloning the template repository and dropping its history."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from create_decent_app.contracts.exceptions import CloneError

logger = logging.getLogger(__name__)


class TemplateSource(ABC):
    @abstractmethod
    def clone(self, url: str, dest: Path) -> None:
        """Materialize a full working tree of *url* at *dest*.

        Raises:
            CloneError: The tree could not be materialized.
        """


@dataclass(frozen=True)
class GitTemplateSource(TemplateSource):
    """Clone with the ``git`` executable, streaming its output to the terminal."""

    executable: str = "git"

    def clone(self, url: str, dest: Path) -> None:
        cmd = [self.executable, "clone", url, str(dest)]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as exc:
            raise CloneError(f"Failed to execute {self.executable}: {exc}") from exc
        if result.returncode != 0:
            raise CloneError("Failed to clone repository.")


def strip_history(project_dir: Path, history_dir: str = ".git") -> bool:
    """Remove the version-control entry from a fresh clone.

    Worktrees and submodules use a plain ``.git`` file instead of a folder;
    files and symlinks are unlinked, folders removed recursively.

    Returns:
        True if something was removed, False if there was nothing.
    """
    history = project_dir / history_dir
    if history.is_dir() and not history.is_symlink():
        shutil.rmtree(history)
        return True
    if os.path.lexists(history):
        history.unlink()
        return True
    logger.debug("No %s in %s", history_dir, project_dir)
    return False


__all__ = ["GitTemplateSource", "TemplateSource", "strip_history"]
