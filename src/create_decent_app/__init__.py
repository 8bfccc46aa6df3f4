"""Public API surface for create-decent-app."""

__version__ = "1.2.0"

from create_decent_app.contracts import (
    CloneError,
    ErrorKind,
    FileIOError,
    FileTarget,
    InjectionRiskError,
    InvalidInputError,
    NullScaffoldProgress,
    RuntimeVersionError,
    ScaffoldConfig,
    ScaffoldError,
    ScaffoldProgress,
    Substitution,
    TargetExistsError,
)
from create_decent_app.core import (
    GitTemplateSource,
    ScaffoldResult,
    TemplateSource,
    create_project,
    iter_matching_files,
    replace_in_file,
    replace_placeholders_in_dir,
    strip_history,
    validate_display_name,
    validate_project_name,
)

__all__ = [
    "CloneError",
    "ErrorKind",
    "FileIOError",
    "FileTarget",
    "GitTemplateSource",
    "InjectionRiskError",
    "InvalidInputError",
    "NullScaffoldProgress",
    "RuntimeVersionError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldProgress",
    "ScaffoldResult",
    "Substitution",
    "TargetExistsError",
    "TemplateSource",
    "__version__",
    "create_project",
    "iter_matching_files",
    "replace_in_file",
    "replace_placeholders_in_dir",
    "strip_history",
    "validate_display_name",
    "validate_project_name",
]
