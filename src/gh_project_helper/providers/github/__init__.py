"""GitHub provider package."""

from gh_project_helper.providers.github.provider import GitHubProvider

__all__ = ["GitHubProvider"]
