"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from gh_project_helper import __version__


def _package_version() -> str:
    try:
        return version("gh-project-helper")
    except PackageNotFoundError:
        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-project-helper",
        description="Convert plans into GitHub project milestones and issues.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "--config",
        default=None,
        help="Config file (default is $HOME/.gh-project-helper.yaml)",
    )
    parser.add_argument("--token", default=None, help="GitHub personal access token")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Apply a project plan from a YAML file")
    apply_parser.add_argument("--file", "-f", required=True, help="The plan file to apply")
    apply_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview what would be created without making changes",
    )
    apply_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    validate_parser = subparsers.add_parser("validate", help="Validate a plan file without making any changes")
    validate_parser.add_argument("--file", "-f", required=True, help="The plan file to validate")

    subparsers.add_parser("whoami", help="Display information about the authenticated GitHub user")
    subparsers.add_parser("version", help="Print the version number of gh-project-helper")

    return parser


__all__ = ["build_parser"]
