"""SDK composition root for gh-project-helper."""

from __future__ import annotations

from pathlib import Path

from gh_project_helper.auth import create_token_resolver
from gh_project_helper.contracts.config import HelperConfig
from gh_project_helper.contracts.plan import Plan
from gh_project_helper.contracts.provider import Provider, Viewer
from gh_project_helper.contracts.report import Report
from gh_project_helper.engine import ApplyEngine
from gh_project_helper.engine.progress import ApplyProgress
from gh_project_helper.plan import PlanLoader, PlanValidator
from gh_project_helper.providers.factory import create_provider


def load_plan(path: str | Path, *, validate: bool = True) -> Plan:
    """Load a plan file and, unless told otherwise, validate it."""
    plan = PlanLoader().load(Path(path))
    if validate:
        PlanValidator().validate(plan)
    return plan


class ProjectHelper:
    """gh-project-helper SDK public API."""

    def __init__(
        self,
        *,
        provider: Provider | None,
        config: HelperConfig,
        progress: ApplyProgress | None = None,
    ) -> None:
        self._provider = provider
        self._config = config
        self._progress = progress

    @classmethod
    async def from_config(
        cls,
        config: HelperConfig,
        *,
        progress: ApplyProgress | None = None,
    ) -> ProjectHelper:
        return cls(provider=None, config=config, progress=progress)

    async def apply(self, plan: Plan, *, dry_run: bool = False) -> Report:
        PlanValidator().validate(plan)
        provider = await self._resolve_provider()
        async with provider:
            return await ApplyEngine(provider, dry_run=dry_run, progress=self._progress).apply(plan)

    async def whoami(self) -> Viewer:
        provider = await self._resolve_provider()
        async with provider:
            return await provider.viewer()

    async def _resolve_provider(self) -> Provider:
        if self._provider is not None:
            return self._provider

        token = await create_token_resolver(self._config).resolve()
        return create_provider(self._config, token)
