"""Factory for creating provider instances."""

from __future__ import annotations

from gh_project_helper.contracts.config import HelperConfig
from gh_project_helper.contracts.provider import Provider
from gh_project_helper.providers.github import GitHubProvider


def create_provider(config: HelperConfig, token: str) -> Provider:
    """Create an unopened provider for *config*.

    The returned provider is an async context manager::

        async with create_provider(config, token) as provider:
            report = await apply_plan(provider, plan)
    """
    return GitHubProvider(token=token, api_url=config.api_url, timeout=config.timeout)
