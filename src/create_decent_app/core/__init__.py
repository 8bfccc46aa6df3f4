"""Core scaffolding logic, independent of the terminal."""

from create_decent_app.core.orchestrator import ScaffoldResult, create_project
from create_decent_app.core.replacer import replace_in_file
from create_decent_app.core.runtime import check_python_version, package_version
from create_decent_app.core.template import GitTemplateSource, TemplateSource, strip_history
from create_decent_app.core.validation import validate_display_name, validate_project_name
from create_decent_app.core.walker import file_has_extension, iter_matching_files, replace_placeholders_in_dir

__all__ = [
    "GitTemplateSource",
    "ScaffoldResult",
    "TemplateSource",
    "check_python_version",
    "create_project",
    "file_has_extension",
    "iter_matching_files",
    "package_version",
    "replace_in_file",
    "replace_placeholders_in_dir",
    "strip_history",
    "validate_display_name",
    "validate_project_name",
]
