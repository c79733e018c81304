"""Engine utility helpers."""

from __future__ import annotations

from datetime import date, datetime

from gh_project_helper.contracts.exceptions import PlanValidationError

DUE_DATE_FORMAT = "%Y-%m-%d"


def split_repository(repository: str) -> tuple[str, str]:
    """Split ``owner/name`` into its two parts."""
    parts = repository.split("/")
    if len(parts) != 2:
        raise PlanValidationError(f"invalid repository format: {repository}")
    return parts[0], parts[1]


def parse_due_on(value: str) -> date:
    try:
        return datetime.strptime(value, DUE_DATE_FORMAT).date()
    except ValueError as exc:
        raise PlanValidationError(f"invalid due date {value!r}: expected YYYY-MM-DD") from exc


def tasklist_line(number: int) -> str:
    return f"- [ ] #{number}"


def compose_epic_body(body: str, tasklist: list[str]) -> str:
    """Append the child tasklist to an epic's declared body."""
    return body + "\n\n" + "\n".join(tasklist)
