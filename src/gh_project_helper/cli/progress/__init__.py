"""CLI progress displays."""

from gh_project_helper.cli.progress.rich import RichApplyProgress

__all__ = ["RichApplyProgress"]
