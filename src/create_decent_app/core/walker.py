"""Recursive directory walk feeding the placeholder replacer."""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from create_decent_app.contracts.config import Substitution
from create_decent_app.contracts.progress import ScaffoldProgress
from create_decent_app.core.replacer import replace_in_file

logger = logging.getLogger(__name__)


def file_has_extension(filename: str, extensions: Iterable[str]) -> bool:
    """Check the text after the last dot against *extensions*.

    A name with no dot is compared as a whole, so ``Makefile`` only matches an
    extension literally named ``Makefile``.
    """
    return filename.rsplit(".", 1)[-1] in set(extensions)


def iter_matching_files(root: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield files under *root* whose extension is in *extensions*.

    Depth-first, in directory-listing order. Directories are always descended
    into. Entries whose metadata cannot be read (broken symlinks, permission
    errors) are logged and skipped; the walk carries on with their siblings.
    """
    wanted = frozenset(extensions)
    yield from _walk(root, wanted)


def _walk(directory: Path, wanted: frozenset[str]) -> Iterator[Path]:
    for entry in directory.iterdir():
        try:
            mode = entry.stat().st_mode
        except OSError as exc:
            logger.warning("Non-fatal error reading %s: %s", entry, exc)
            continue

        if stat.S_ISDIR(mode):
            try:
                yield from _walk(entry, wanted)
            except OSError as exc:
                logger.warning("Non-fatal error reading %s: %s", entry, exc)
            continue

        if file_has_extension(entry.name, wanted):
            yield entry


def replace_placeholders_in_dir(
    root: Path,
    extensions: Iterable[str],
    substitution: Substitution,
    *,
    progress: ScaffoldProgress | None = None,
) -> list[Path]:
    """Run :func:`replace_in_file` over every matching file under *root*.

    Returns:
        Paths that were rewritten, in traversal order.
    """
    updated: list[Path] = []
    for path in iter_matching_files(root, extensions):
        if replace_in_file(path, substitution, progress=progress):
            updated.append(path)
    return updated


__all__ = ["file_has_extension", "iter_matching_files", "replace_placeholders_in_dir"]
