"""Command-line interface for create-decent-app."""

from __future__ import annotations

import logging as logging
import sys as sys

from create_decent_app import ScaffoldConfig as ScaffoldConfig
from create_decent_app import create_project as create_project
from create_decent_app import validate_display_name as validate_display_name
from create_decent_app import validate_project_name as validate_project_name
from create_decent_app.cli.app import main as main
from create_decent_app.cli.commands import create as create_command
from create_decent_app.cli.console import RichScaffoldProgress as RichScaffoldProgress
from create_decent_app.cli.console import print_error as print_error
from create_decent_app.cli.console import print_separator as print_separator
from create_decent_app.cli.parser import build_parser as build_parser
from create_decent_app.core.runtime import check_python_version as check_python_version
from create_decent_app.core.runtime import package_version as package_version
from create_decent_app.core.template import GitTemplateSource as GitTemplateSource

prompt_for_input = create_command.prompt_for_input
_run_create = create_command.run_create
