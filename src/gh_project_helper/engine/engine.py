"""Core apply pipeline engine."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TypeVar

from gh_project_helper.contracts.exceptions import ApplyError, ProviderError
from gh_project_helper.contracts.plan import Epic, Issue, Plan
from gh_project_helper.contracts.provider import CreatedIssue, CreateIssueInput, IssueRef, Provider, StatusField
from gh_project_helper.contracts.report import Report
from gh_project_helper.engine.progress import ApplyProgress, NullApplyProgress
from gh_project_helper.engine.utils import compose_epic_body, split_repository, tasklist_line

T = TypeVar("T")

_LOG = logging.getLogger(__name__)


@dataclass
class _RunContext:
    """Remote identifiers resolved once per run."""

    owner: str
    repo: str
    repository_id: str = ""
    board_id: str = ""
    status_field: StatusField = field(default_factory=lambda: StatusField(field_id=""))
    milestone_ids: dict[str, str] = field(default_factory=dict)

    def status_option(self, status: str | None) -> str | None:
        if not status:
            return None
        return self.status_field.options.get(status)


class ApplyEngine:
    """Converge a plan onto a repository and project board.

    Milestones are synced first, then each epic in plan order with its
    children created before the epic itself, since the epic body embeds the
    children's issue numbers. Items are matched to existing issues by exact
    title, so re-running an unchanged plan creates nothing new.

    The first provider failure aborts the run with :class:`ApplyError`.
    Mutations already made are left in place.
    """

    def __init__(
        self,
        provider: Provider,
        *,
        dry_run: bool = False,
        progress: ApplyProgress | None = None,
    ) -> None:
        self._provider = provider
        self._dry_run = dry_run
        self._progress: ApplyProgress = progress or NullApplyProgress()
        self._report = Report(dry_run=dry_run)

    async def apply(self, plan: Plan) -> Report:
        self._report = Report(dry_run=self._dry_run)
        owner, repo = split_repository(plan.repository)
        ctx = _RunContext(owner=owner, repo=repo)

        if self._dry_run:
            self._plan_action("Validating plan...")
            self._plan_action(f"Repository: {owner}/{repo}")
            self._plan_action(f"Project: {plan.project}")

        await self._resolve_context(plan, ctx)
        await self._sync_milestones(plan, ctx)
        await self._sync_epics(plan, ctx)
        return self._report

    async def _resolve_context(self, plan: Plan, ctx: _RunContext) -> None:
        with self._phase("Resolve", total=3):
            ctx.repository_id = await self._guarded(
                "failed to get repository id",
                self._provider.resolve_repository(ctx.owner, ctx.repo),
            )
            self._progress.item_done("Resolve")
            ctx.board_id = await self._guarded(
                "failed to get project id",
                self._provider.resolve_board(ctx.owner, plan.project),
            )
            self._progress.item_done("Resolve")
            ctx.status_field = await self._guarded(
                "failed to get project status field options",
                self._provider.resolve_status_options(ctx.board_id),
            )
            self._progress.item_done("Resolve")

    async def _sync_milestones(self, plan: Plan, ctx: _RunContext) -> None:
        with self._phase("Milestones", total=len(plan.milestones)):
            for milestone in plan.milestones:
                if self._dry_run:
                    self._plan_action(
                        f"Would create/sync milestone: {milestone.title} (due: {milestone.due_on or ''})"
                    )
                else:
                    ctx.milestone_ids[milestone.title] = await self._guarded(
                        f"failed to get or create milestone {milestone.title!r}",
                        self._provider.get_or_create_milestone(
                            ctx.owner,
                            ctx.repo,
                            milestone.title,
                            milestone.description,
                            milestone.due_on,
                        ),
                    )
                    # Counts processed milestones, including ones that already existed.
                    self._report.milestones_created += 1
                self._progress.item_done("Milestones")

    async def _sync_epics(self, plan: Plan, ctx: _RunContext) -> None:
        with self._phase("Epics", total=len(plan.epics)):
            for epic in plan.epics:
                if self._dry_run:
                    self._preview_epic(epic, ctx)
                else:
                    await self._sync_epic(epic, ctx)
                self._progress.item_done("Epics")

    async def _sync_epic(self, epic: Epic, ctx: _RunContext) -> None:
        option_id = ctx.status_option(epic.status)

        tasklist: list[str] = []
        for child in epic.children:
            number = await self._sync_child(child, option_id, ctx)
            tasklist.append(tasklist_line(number))

        existing = await self._guarded(
            f"failed to check for existing epic {epic.title!r}",
            self._provider.find_issue_by_title(ctx.owner, ctx.repo, epic.title),
        )
        if existing is not None:
            # The freshly built tasklist is not attached to an epic that already exists.
            _LOG.info("Skipping epic (already exists): #%d %s", existing.number, epic.title)
            self._report.epics_skipped += 1
            await self._link_existing(existing, epic.title, "epic", option_id, ctx)
            return

        milestone_id = ctx.milestone_ids.get(epic.milestone) if epic.milestone else None
        label_ids = await self._resolve_labels(epic.labels, ctx)
        assignee_ids: list[str] = []
        for login in epic.assignees:
            assignee_ids.append(
                await self._guarded(f"failed to get user id for {login}", self._provider.resolve_user(login))
            )

        issue = await self._guarded(
            "failed to create epic issue",
            self._provider.create_issue(
                CreateIssueInput(
                    repository_id=ctx.repository_id,
                    title=epic.title,
                    body=compose_epic_body(epic.body, tasklist),
                    milestone_id=milestone_id,
                    label_ids=label_ids,
                    assignee_ids=assignee_ids,
                )
            ),
        )
        await self._link_created(issue, "epic", option_id, ctx)

        self._report.epics_created += 1
        self._report.epic_urls.append(issue.url)
        _LOG.info("Created epic: %s (%s)", epic.title, issue.url)

    async def _sync_child(self, child: Issue, option_id: str | None, ctx: _RunContext) -> int:
        existing = await self._guarded(
            f"failed to check for existing issue {child.title!r}",
            self._provider.find_issue_by_title(ctx.owner, ctx.repo, child.title),
        )
        if existing is not None:
            _LOG.info("Skipping child issue (already exists): #%d %s", existing.number, child.title)
            self._report.issues_skipped += 1
            await self._link_existing(existing, child.title, "child issue", option_id, ctx)
            return existing.number

        label_ids = await self._resolve_labels(child.labels, ctx)
        issue = await self._guarded(
            "failed to create child issue",
            self._provider.create_issue(
                CreateIssueInput(
                    repository_id=ctx.repository_id,
                    title=child.title,
                    body=child.body,
                    label_ids=label_ids,
                )
            ),
        )
        self._report.issues_created += 1
        _LOG.info("Created child issue: #%d %s", issue.number, child.title)
        await self._link_created(issue, "child issue", option_id, ctx)
        return issue.number

    async def _resolve_labels(self, labels: list[str], ctx: _RunContext) -> list[str]:
        label_ids: list[str] = []
        for name in labels:
            label_ids.append(
                await self._guarded(
                    f"failed to get or create label {name}",
                    self._provider.get_or_create_label(ctx.owner, ctx.repo, name),
                )
            )
        return label_ids

    async def _link_created(self, issue: CreatedIssue, kind: str, option_id: str | None, ctx: _RunContext) -> None:
        item_id = await self._guarded(
            f"failed to add {kind} to project",
            self._provider.add_to_board(ctx.board_id, issue.id),
        )
        if option_id is None:
            return
        await self._guarded(
            f"failed to update status for {kind}",
            self._provider.set_status(ctx.board_id, item_id, ctx.status_field.field_id, option_id),
        )

    async def _link_existing(
        self,
        existing: IssueRef,
        title: str,
        kind: str,
        option_id: str | None,
        ctx: _RunContext,
    ) -> None:
        item_id = await self._guarded(
            f"failed to add existing {kind} to project",
            self._provider.add_to_board(ctx.board_id, existing.id),
        )
        if option_id is None:
            return
        try:
            await self._provider.set_status(ctx.board_id, item_id, ctx.status_field.field_id, option_id)
        except ProviderError as exc:
            message = f"failed to update status for existing {kind} #{existing.number} {title!r}: {exc}"
            _LOG.warning("%s", message)
            self._report.warnings.append(message)

    def _preview_epic(self, epic: Epic, ctx: _RunContext) -> None:
        self._plan_action(f"Would create epic: {epic.title}")
        if epic.milestone:
            self._plan_action(f"  Milestone: {epic.milestone}")
        if epic.status:
            if ctx.status_option(epic.status) is None:
                self._plan_action(f"  WARNING: Status {epic.status!r} not found in project")
            else:
                self._plan_action(f"  Status: {epic.status}")
        for label in epic.labels:
            self._plan_action(f"  Label: {label}")
        for child in epic.children:
            self._plan_action(f"  Would create child issue: {child.title}")
            for label in child.labels:
                self._plan_action(f"    Label: {label}")

    def _plan_action(self, line: str) -> None:
        _LOG.info("[dry-run] %s", line)
        self._report.planned_actions.append(line)

    async def _guarded(self, action: str, op: Awaitable[T]) -> T:
        try:
            return await op
        except ProviderError as exc:
            raise ApplyError(f"{action}: {exc}", partial_report=self._report.model_copy(deep=True)) from exc

    @contextmanager
    def _phase(self, phase: str, *, total: int | None = None) -> Iterator[None]:
        self._progress.phase_start(phase, total=total)
        try:
            yield
        except BaseException as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)


async def apply_plan(
    provider: Provider,
    plan: Plan,
    *,
    dry_run: bool = False,
    progress: ApplyProgress | None = None,
) -> Report:
    """Apply *plan* through *provider* and return the accumulated report."""
    return await ApplyEngine(provider, dry_run=dry_run, progress=progress).apply(plan)
