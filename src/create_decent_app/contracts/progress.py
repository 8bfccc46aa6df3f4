"""Contracts for scaffolding progress reporting."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ScaffoldProgress(Protocol):
    def phase_start(self, phase: str) -> None: ...

    def phase_done(self, phase: str) -> None: ...

    def file_updated(self, path: Path) -> None: ...


class NullScaffoldProgress:
    """Progress sink that discards every event."""

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def file_updated(self, path: Path) -> None:
        pass
