"""Token resolution."""

from gh_project_helper.auth.base import TokenResolver
from gh_project_helper.auth.factory import create_token_resolver
from gh_project_helper.auth.resolvers import (
    EnvTokenResolver,
    FallbackTokenResolver,
    GhCliTokenResolver,
    StaticTokenResolver,
)

__all__ = [
    "EnvTokenResolver",
    "FallbackTokenResolver",
    "GhCliTokenResolver",
    "StaticTokenResolver",
    "TokenResolver",
    "create_token_resolver",
]
