"""Public contracts shared by the core and the CLI."""

from create_decent_app.contracts.config import FileTarget, ScaffoldConfig, Substitution
from create_decent_app.contracts.exceptions import (
    CloneError,
    ErrorKind,
    FileIOError,
    InjectionRiskError,
    InvalidInputError,
    RuntimeVersionError,
    ScaffoldError,
    TargetExistsError,
)
from create_decent_app.contracts.progress import NullScaffoldProgress, ScaffoldProgress

__all__ = [
    "CloneError",
    "ErrorKind",
    "FileIOError",
    "FileTarget",
    "InjectionRiskError",
    "InvalidInputError",
    "NullScaffoldProgress",
    "RuntimeVersionError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldProgress",
    "Substitution",
    "TargetExistsError",
]
