"""Plan structural and referential validation."""

from __future__ import annotations

from gh_project_helper.contracts.exceptions import PlanValidationError
from gh_project_helper.contracts.plan import Epic, Plan
from gh_project_helper.engine.utils import parse_due_on


class PlanValidator:
    """Validate a loaded Plan, collecting every problem before failing."""

    def validate(self, plan: Plan) -> None:
        errors = self.collect_errors(plan)
        if errors:
            raise PlanValidationError(
                f"plan validation failed with {len(errors)} error(s)",
                errors=errors,
            )

    def collect_errors(self, plan: Plan) -> list[str]:
        errors: list[str] = []
        self._validate_header(plan, errors)
        milestone_titles = self._validate_milestones(plan, errors)

        epic_titles: set[str] = set()
        for index, epic in enumerate(plan.epics):
            if not epic.title:
                errors.append(f"epics[{index}]: title is required")
                continue
            if epic.title in epic_titles:
                errors.append(f"epics[{index}]: duplicate title {epic.title!r}")
            epic_titles.add(epic.title)

            if epic.milestone and epic.milestone not in milestone_titles:
                errors.append(
                    f"epics[{index}] {epic.title!r}: milestone {epic.milestone!r} "
                    "is not defined in milestones section"
                )
            self._validate_children(index, epic, errors)
        return errors

    @staticmethod
    def _validate_header(plan: Plan, errors: list[str]) -> None:
        if not plan.repository:
            errors.append("repository is required")
        else:
            owner, sep, name = plan.repository.partition("/")
            if not sep or not owner or not name or "/" in name:
                errors.append(f"repository {plan.repository!r} must be in owner/repo format")
        if not plan.project:
            errors.append("project is required")

    @staticmethod
    def _validate_milestones(plan: Plan, errors: list[str]) -> set[str]:
        titles: set[str] = set()
        for index, milestone in enumerate(plan.milestones):
            if not milestone.title:
                errors.append(f"milestones[{index}]: title is required")
                continue
            if milestone.title in titles:
                errors.append(f"milestones[{index}]: duplicate title {milestone.title!r}")
            titles.add(milestone.title)
            if milestone.due_on:
                try:
                    parse_due_on(milestone.due_on)
                except PlanValidationError:
                    errors.append(f"milestones[{index}]: due_on {milestone.due_on!r} must be YYYY-MM-DD")
        return titles

    @staticmethod
    def _validate_children(index: int, epic: Epic, errors: list[str]) -> None:
        titles: set[str] = set()
        for child_index, child in enumerate(epic.children):
            if not child.title:
                errors.append(f"epics[{index}].children[{child_index}]: title is required")
                continue
            if child.title in titles:
                errors.append(f"epics[{index}].children[{child_index}]: duplicate title {child.title!r}")
            titles.add(child.title)
