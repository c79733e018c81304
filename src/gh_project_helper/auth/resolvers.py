"""Token resolvers: a static value, environment variables, the gh CLI."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence

from gh_project_helper.auth.base import TokenResolver
from gh_project_helper.contracts.config import DEFAULT_HOSTNAME
from gh_project_helper.contracts.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)

TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


class StaticTokenResolver(TokenResolver):
    def __init__(self, token: str) -> None:
        self._token = token.strip()

    async def resolve(self) -> str:
        if not self._token:
            raise AuthenticationError("configured token is empty")
        return self._token


class EnvTokenResolver(TokenResolver):
    """First non-blank value among *names* in the environment."""

    def __init__(self, names: Sequence[str] = TOKEN_ENV_VARS, environ: Mapping[str, str] | None = None) -> None:
        self._names = tuple(names)
        self._environ = environ

    async def resolve(self) -> str:
        environ = os.environ if self._environ is None else self._environ
        for name in self._names:
            token = environ.get(name, "").strip()
            if token:
                _LOG.debug("Using token from $%s", name)
                return token
        raise AuthenticationError(f"none of {', '.join(self._names)} is set")


class GhCliTokenResolver(TokenResolver):
    """Ask an authenticated ``gh`` CLI for its token."""

    def __init__(self, hostname: str = DEFAULT_HOSTNAME) -> None:
        self.hostname = hostname

    def command(self) -> tuple[str, ...]:
        if self.hostname == DEFAULT_HOSTNAME:
            return ("gh", "auth", "token")
        return ("gh", "auth", "token", "--hostname", self.hostname)

    async def resolve(self) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command(),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise AuthenticationError(f"could not run gh CLI: {exc}") from exc

        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            reason = stderr.decode(errors="replace").strip() or f"exit status {process.returncode}"
            raise AuthenticationError(f"`gh auth token` failed for {self.hostname}: {reason}")

        token = stdout.decode(errors="replace").strip()
        if not token:
            raise AuthenticationError(f"`gh auth token` printed no token for {self.hostname}")
        _LOG.debug("Using token from gh CLI for %s", self.hostname)
        return token


class FallbackTokenResolver(TokenResolver):
    """Return the first token any of *resolvers* produces."""

    def __init__(self, resolvers: Sequence[TokenResolver]) -> None:
        if not resolvers:
            raise ValueError("FallbackTokenResolver requires at least one resolver")
        self._resolvers = tuple(resolvers)

    async def resolve(self) -> str:
        failures: list[str] = []
        for resolver in self._resolvers:
            try:
                return await resolver.resolve()
            except AuthenticationError as exc:
                failures.append(str(exc))
        raise AuthenticationError("no GitHub token available: " + "; ".join(failures))
