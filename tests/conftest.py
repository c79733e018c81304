"""Shared test fixtures for gh-project-helper tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gh_project_helper.contracts.plan import Epic, Issue, Milestone, Plan

SAMPLE_PLAN_YAML = """\
project: "Roadmap"
repository: "acme/widgets"
milestones:
  - title: "Phase 1"
    due_on: "2026-03-31"
    description: "First cut"
epics:
  - title: "Epic 1"
    body: "Epic body"
    milestone: "Phase 1"
    status: "Todo"
    labels: ["backend"]
    children:
      - title: "Child 1"
        body: "First child"
      - title: "Child 2"
"""


@pytest.fixture
def sample_plan() -> Plan:
    """One milestone and one epic with two label-free children."""
    return Plan(
        project="Roadmap",
        repository="acme/widgets",
        milestones=[Milestone(title="Phase 1", due_on="2026-03-31", description="First cut")],
        epics=[
            Epic(
                title="Epic 1",
                body="Epic body",
                milestone="Phase 1",
                status="Todo",
                labels=["backend"],
                children=[Issue(title="Child 1", body="First child"), Issue(title="Child 2")],
            )
        ],
    )


@pytest.fixture
def plan_yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "plan.yaml"
    path.write_text(SAMPLE_PLAN_YAML, encoding="utf-8")
    return path
