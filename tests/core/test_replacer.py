from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from create_decent_app.contracts.config import Substitution
from create_decent_app.contracts.exceptions import ErrorKind, FileIOError
from create_decent_app.core.replacer import replace_in_file


class _RecordingProgress:
    def __init__(self) -> None:
        self.updated: list[Path] = []

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def file_updated(self, path: Path) -> None:
        self.updated.append(path)


def test_replaces_placeholder(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text("Decent App Example", encoding="utf-8")

    changed = replace_in_file(path, Substitution("Decent App", "My Cool App"))

    assert changed is True
    assert path.read_text(encoding="utf-8") == "My Cool App Example"


def test_replaces_every_occurrence(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("<title>Decent App</title><h1>Decent App</h1>", encoding="utf-8")

    replace_in_file(path, Substitution("Decent App", "Demo"))

    assert path.read_text(encoding="utf-8") == "<title>Demo</title><h1>Demo</h1>"


def test_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_text("const a = 'Decent App'; // Decent App\n", encoding="utf-8")
    substitution = Substitution("Decent App", "My Cool App")

    replace_in_file(path, substitution)
    once = path.read_text(encoding="utf-8")
    second = replace_in_file(path, substitution)

    assert second is False
    assert path.read_text(encoding="utf-8") == once


def test_leaves_file_without_placeholder_untouched(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_bytes(b"export const x = 1;\r\n")
    os.utime(path, ns=(1_000_000_000_000_000_000, 1_000_000_000_000_000_000))
    digest = hashlib.sha256(path.read_bytes()).hexdigest()
    progress = _RecordingProgress()

    changed = replace_in_file(path, Substitution("Decent App", "Demo"), progress=progress)

    assert changed is False
    assert path.stat().st_mtime_ns == 1_000_000_000_000_000_000
    assert hashlib.sha256(path.read_bytes()).hexdigest() == digest
    assert progress.updated == []


def test_search_text_is_literal(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_text("a.b axb a.b", encoding="utf-8")

    replace_in_file(path, Substitution("a.b", "z"))

    assert path.read_text(encoding="utf-8") == "z axb z"


def test_reports_updated_path(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_text("Decent App", encoding="utf-8")
    progress = _RecordingProgress()

    replace_in_file(path, Substitution("Decent App", "Demo"), progress=progress)

    assert progress.updated == [path]


def test_missing_file_raises_file_io_error(tmp_path: Path) -> None:
    path = tmp_path / "missing.json"

    with pytest.raises(FileIOError, match="Failed to read") as exc_info:
        replace_in_file(path, Substitution("x", "y"))

    assert exc_info.value.kind is ErrorKind.INTERNAL
    assert exc_info.value.path == str(path)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_undecodable_file_raises_file_io_error(tmp_path: Path) -> None:
    path = tmp_path / "logo.ts"
    path.write_bytes(b"\xff\xfe\x00binary")

    with pytest.raises(FileIOError):
        replace_in_file(path, Substitution("x", "y"))


def test_write_failure_raises_file_io_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "a.ts"
    path.write_text("Decent App", encoding="utf-8")

    def _fail_write(self: Path, *args: object, **kwargs: object) -> int:
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "write_text", _fail_write)

    with pytest.raises(FileIOError, match="Failed to write"):
        replace_in_file(path, Substitution("Decent App", "Demo"))


def test_preserves_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_bytes(b"<title>Decent App</title>\r\n<p>x</p>\r\n")

    replace_in_file(path, Substitution("Decent App", "Demo"))

    assert path.read_bytes() == b"<title>Demo</title>\r\n<p>x</p>\r\n"


def test_preserves_mixed_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "a.ts"
    path.write_bytes(b"// Decent App\r\nconst a = 1;\rconst b = 2;\n")

    replace_in_file(path, Substitution("Decent App", "Demo"))

    assert path.read_bytes() == b"// Demo\r\nconst a = 1;\rconst b = 2;\n"
