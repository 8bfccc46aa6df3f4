"""Shared test fixtures for create-decent-app tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A stub template tree shaped like the real template repository."""
    root = tmp_path / "template"
    (root / ".git" / "objects").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    (root / "public").mkdir()
    (root / "src" / "components").mkdir(parents=True)

    (root / "package.json").write_text('{\n  "name": "decentapp-template"\n}\n', encoding="utf-8")
    (root / "README.md").write_text("# Decent App\n\nA Decent App template.\n", encoding="utf-8")
    (root / "public" / "manifest.json").write_text('{"name": "Decent App"}\n', encoding="utf-8")
    (root / "index.html").write_text("<title>Decent App</title>\n", encoding="utf-8")
    (root / "src" / "App.tsx").write_text("const title = 'Decent App';\n", encoding="utf-8")
    (root / "src" / "components" / "Header.ts").write_text("export const NAME = 'Decent App';\n", encoding="utf-8")
    (root / "src" / "styles.css").write_text("/* Decent App */\n", encoding="utf-8")
    return root


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory new projects are created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path
