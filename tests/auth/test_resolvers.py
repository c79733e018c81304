from __future__ import annotations

from typing import Any

import pytest

from gh_project_helper.auth.resolvers import (
    EnvTokenResolver,
    FallbackTokenResolver,
    GhCliTokenResolver,
    StaticTokenResolver,
)
from gh_project_helper.contracts.exceptions import AuthenticationError


class _MockProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


@pytest.mark.asyncio
async def test_static_resolver_strips_token() -> None:
    assert await StaticTokenResolver("  tok \n").resolve() == "tok"


@pytest.mark.asyncio
async def test_static_resolver_rejects_blank_token() -> None:
    with pytest.raises(AuthenticationError, match="configured token is empty"):
        await StaticTokenResolver(" ").resolve()


@pytest.mark.asyncio
async def test_env_resolver_prefers_github_token() -> None:
    resolver = EnvTokenResolver(environ={"GITHUB_TOKEN": "primary", "GH_TOKEN": "secondary"})

    assert await resolver.resolve() == "primary"


@pytest.mark.asyncio
async def test_env_resolver_falls_through_blank_values() -> None:
    resolver = EnvTokenResolver(environ={"GITHUB_TOKEN": "  ", "GH_TOKEN": "secondary"})

    assert await resolver.resolve() == "secondary"


@pytest.mark.asyncio
async def test_env_resolver_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")

    assert await EnvTokenResolver().resolve() == "from-env"


@pytest.mark.asyncio
async def test_env_resolver_raises_when_unset() -> None:
    with pytest.raises(AuthenticationError, match="none of GITHUB_TOKEN, GH_TOKEN is set"):
        await EnvTokenResolver(environ={}).resolve()


def test_gh_cli_command_adds_hostname_only_for_enterprise() -> None:
    assert GhCliTokenResolver().command() == ("gh", "auth", "token")
    assert GhCliTokenResolver("ghe.local").command() == ("gh", "auth", "token", "--hostname", "ghe.local")


@pytest.mark.asyncio
async def test_gh_cli_resolver_returns_token(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        assert args == ("gh", "auth", "token")
        return _MockProcess(returncode=0, stdout=b"tok_123\n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GhCliTokenResolver().resolve() == "tok_123"


@pytest.mark.asyncio
async def test_gh_cli_resolver_reports_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=1, stderr=b"not logged in")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="failed for github.com: not logged in"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_reports_exit_status_without_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=4)

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="exit status 4"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_handles_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise OSError("gh missing")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="could not run gh CLI"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_resolver_rejects_empty_output(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=0, stdout=b"  \n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="printed no token"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_fallback_returns_first_success() -> None:
    resolver = FallbackTokenResolver([EnvTokenResolver(environ={}), StaticTokenResolver("fallback")])

    assert await resolver.resolve() == "fallback"


@pytest.mark.asyncio
async def test_fallback_collects_failures() -> None:
    resolver = FallbackTokenResolver([EnvTokenResolver(environ={}), StaticTokenResolver("")])

    with pytest.raises(AuthenticationError, match="no GitHub token available: none of .*; configured token is empty"):
        await resolver.resolve()


def test_fallback_requires_resolvers() -> None:
    with pytest.raises(ValueError):
        FallbackTokenResolver([])
