"""Command-line interface for gh-project-helper."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from gh_project_helper import ProjectHelper as ProjectHelper
from gh_project_helper import load_config as load_config
from gh_project_helper import load_plan as load_plan
from gh_project_helper.cli.app import main as main
from gh_project_helper.cli.commands import apply as apply_command
from gh_project_helper.cli.commands import validate as validate_command
from gh_project_helper.cli.commands import whoami as whoami_command
from gh_project_helper.cli.common import print_numbered as _print_numbered
from gh_project_helper.cli.parser import _package_version as _parser_package_version
from gh_project_helper.cli.parser import build_parser as build_parser

_format_summary = apply_command.format_apply_summary
_run_apply = apply_command.run_apply
_run_validate = validate_command.run_validate
_run_whoami = whoami_command.run_whoami

__all__ = ["build_parser", "main"]
