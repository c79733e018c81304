"""Provider implementations and factory."""

from gh_project_helper.providers.factory import create_provider
from gh_project_helper.providers.github import GitHubProvider

__all__ = ["GitHubProvider", "create_provider"]
