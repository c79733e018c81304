from __future__ import annotations

from datetime import date

import pytest

from gh_project_helper.contracts.exceptions import PlanValidationError
from gh_project_helper.engine.utils import compose_epic_body, parse_due_on, split_repository, tasklist_line


def test_split_repository_returns_owner_and_name() -> None:
    assert split_repository("acme/widgets") == ("acme", "widgets")


@pytest.mark.parametrize("value", ["invalid-no-slash", "a/b/c", ""])
def test_split_repository_rejects_other_shapes(value: str) -> None:
    with pytest.raises(PlanValidationError, match="invalid repository format"):
        split_repository(value)


def test_parse_due_on_accepts_iso_date() -> None:
    assert parse_due_on("2026-03-31") == date(2026, 3, 31)


@pytest.mark.parametrize("value", ["31/03/2026", "2026-13-01", "2026-03-31T00:00:00Z"])
def test_parse_due_on_rejects_other_formats(value: str) -> None:
    with pytest.raises(PlanValidationError, match="expected YYYY-MM-DD"):
        parse_due_on(value)


def test_tasklist_line_references_issue_number() -> None:
    assert tasklist_line(17) == "- [ ] #17"


def test_compose_epic_body_appends_tasklist_after_blank_line() -> None:
    assert compose_epic_body("Intro", ["- [ ] #1", "- [ ] #2"]) == "Intro\n\n- [ ] #1\n- [ ] #2"


def test_compose_epic_body_without_children_keeps_separator() -> None:
    assert compose_epic_body("Intro", []) == "Intro\n\n"
