"""Literal placeholder replacement within a single file."""

from __future__ import annotations

import logging
from pathlib import Path

from create_decent_app.contracts.config import Substitution
from create_decent_app.contracts.exceptions import FileIOError
from create_decent_app.contracts.progress import NullScaffoldProgress, ScaffoldProgress

logger = logging.getLogger(__name__)


def replace_in_file(path: Path, substitution: Substitution, *, progress: ScaffoldProgress | None = None) -> bool:
    """Replace every occurrence of ``substitution.search`` in *path*.

    The search text is matched literally and line endings are kept as they
    are on disk. Files that do not contain it are never written, so their
    modification time is left alone.

    Returns:
        True if the file was rewritten.

    Raises:
        FileIOError: The file could not be read, decoded or written.
    """
    progress = progress or NullScaffoldProgress()
    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileIOError(f"Failed to read {path}: {exc}", path=str(path)) from exc

    if substitution.search not in content:
        logger.debug("No placeholder in %s", path)
        return False

    updated = content.replace(substitution.search, substitution.replace)
    try:
        path.write_text(updated, encoding="utf-8", newline="")
    except OSError as exc:
        raise FileIOError(f"Failed to write {path}: {exc}", path=str(path)) from exc

    logger.info("Updated: %s", path)
    progress.file_updated(path)
    return True


__all__ = ["replace_in_file"]
