"""Map configured auth modes to token resolvers."""

from __future__ import annotations

from gh_project_helper.auth.base import TokenResolver
from gh_project_helper.auth.resolvers import (
    EnvTokenResolver,
    FallbackTokenResolver,
    GhCliTokenResolver,
    StaticTokenResolver,
)
from gh_project_helper.contracts.config import HelperConfig
from gh_project_helper.contracts.exceptions import ConfigError


def create_token_resolver(config: HelperConfig) -> TokenResolver:
    """``auto`` prefers a configured token, then the environment, then gh."""
    token = (config.token or "").strip()
    if config.auth == "token" or (config.auth == "auto" and token):
        return StaticTokenResolver(token)
    if config.auth == "env":
        return EnvTokenResolver()
    if config.auth == "gh-cli":
        return GhCliTokenResolver(config.hostname)
    if config.auth == "auto":
        return FallbackTokenResolver([EnvTokenResolver(), GhCliTokenResolver(config.hostname)])
    raise ConfigError(f"unknown auth mode: {config.auth}")
