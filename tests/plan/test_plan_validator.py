from __future__ import annotations

import pytest

from gh_project_helper.contracts.exceptions import PlanValidationError
from gh_project_helper.contracts.plan import Epic, Issue, Milestone, Plan
from gh_project_helper.plan import PlanValidator


def test_valid_plan_passes(sample_plan: Plan) -> None:
    PlanValidator().validate(sample_plan)

    assert PlanValidator().collect_errors(sample_plan) == []


def test_missing_header_fields() -> None:
    errors = PlanValidator().collect_errors(Plan())

    assert errors == ["repository is required", "project is required"]


@pytest.mark.parametrize("repository", ["invalid-no-slash", "/repo", "owner/", "a/b/c"])
def test_repository_must_be_owner_repo(repository: str) -> None:
    errors = PlanValidator().collect_errors(Plan(project="p", repository=repository))

    assert errors == [f"repository {repository!r} must be in owner/repo format"]


def test_milestone_rules() -> None:
    plan = Plan(
        project="p",
        repository="o/r",
        milestones=[
            Milestone(title="M1"),
            Milestone(title=""),
            Milestone(title="M1"),
            Milestone(title="M2", due_on="March"),
        ],
    )

    assert PlanValidator().collect_errors(plan) == [
        "milestones[1]: title is required",
        "milestones[2]: duplicate title 'M1'",
        "milestones[3]: due_on 'March' must be YYYY-MM-DD",
    ]


def test_epic_and_child_rules() -> None:
    plan = Plan(
        project="p",
        repository="o/r",
        milestones=[Milestone(title="M1")],
        epics=[
            Epic(title="E1", milestone="M9", children=[Issue(title="C"), Issue(title=""), Issue(title="C")]),
            Epic(title=""),
            Epic(title="E1"),
        ],
    )

    assert PlanValidator().collect_errors(plan) == [
        "epics[0] 'E1': milestone 'M9' is not defined in milestones section",
        "epics[0].children[1]: title is required",
        "epics[0].children[2]: duplicate title 'C'",
        "epics[1]: title is required",
        "epics[2]: duplicate title 'E1'",
    ]


def test_same_child_title_allowed_across_epics() -> None:
    plan = Plan(
        project="p",
        repository="o/r",
        epics=[Epic(title="E1", children=[Issue(title="C")]), Epic(title="E2", children=[Issue(title="C")])],
    )

    assert PlanValidator().collect_errors(plan) == []


def test_validate_raises_with_all_errors() -> None:
    with pytest.raises(PlanValidationError, match=r"plan validation failed with 2 error\(s\)") as exc_info:
        PlanValidator().validate(Plan())

    assert exc_info.value.errors == ["repository is required", "project is required"]
