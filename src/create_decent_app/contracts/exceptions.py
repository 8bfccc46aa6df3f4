"""Exception hierarchy for create-decent-app."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EXPECTED = "expected"
    INTERNAL = "internal"


class ScaffoldError(Exception):
    """Base exception for all create-decent-app errors.

    ``kind`` tells the CLI whether the message alone is enough for the user
    (:attr:`ErrorKind.EXPECTED`) or whether a full traceback should be shown
    (:attr:`ErrorKind.INTERNAL`).
    """

    kind: ErrorKind = ErrorKind.EXPECTED


class InvalidInputError(ScaffoldError):
    """Empty or malformed user input."""


class TargetExistsError(ScaffoldError):
    """Target project folder already exists."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class InjectionRiskError(ScaffoldError):
    """Display name contains markup characters."""


class CloneError(ScaffoldError):
    """Template repository could not be cloned."""


class RuntimeVersionError(ScaffoldError):
    """Interpreter or package version precondition failure."""


class FileIOError(ScaffoldError):
    """A substitution target could not be read or written."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path
