from __future__ import annotations

import json
from pathlib import Path

import pytest

from gh_project_helper.contracts.exceptions import PlanLoadError
from gh_project_helper.plan import PlanLoader


def test_load_yaml_plan(plan_yaml_file: Path) -> None:
    plan = PlanLoader().load(plan_yaml_file)

    assert plan.project == "Roadmap"
    assert plan.repository == "acme/widgets"
    assert plan.milestones[0].due_on == "2026-03-31"
    epic = plan.epics[0]
    assert epic.milestone == "Phase 1"
    assert epic.labels == ["backend"]
    assert [child.title for child in epic.children] == ["Child 1", "Child 2"]
    assert epic.children[1].body == ""


def test_load_json_plan(tmp_path: Path) -> None:
    path = tmp_path / "plan.json"
    path.write_text(
        json.dumps({"project": "Roadmap", "repository": "acme/widgets", "epics": [{"title": "E"}]}),
        encoding="utf-8",
    )

    plan = PlanLoader().load(path)

    assert plan.epics[0].title == "E"
    assert plan.milestones == []


def test_unquoted_yaml_date_is_kept_as_text(tmp_path: Path) -> None:
    path = tmp_path / "plan.yml"
    path.write_text("project: p\nrepository: o/r\nmilestones:\n  - title: M\n    due_on: 2026-03-31\n", encoding="utf-8")

    plan = PlanLoader().load(path)

    assert plan.milestones[0].due_on == "2026-03-31"


def test_schema_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "plan.yaml"
    path.write_text("project: p\nrepository: o/r\nepics: nope\n", encoding="utf-8")

    with pytest.raises(PlanLoadError, match="plan schema mismatch"):
        PlanLoader().load(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PlanLoadError, match="plan file not found"):
        PlanLoader().load(tmp_path / "missing.yaml")


def test_directory_is_not_a_plan(tmp_path: Path) -> None:
    with pytest.raises(PlanLoadError, match="plan path is not a file"):
        PlanLoader().load(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "plan.yaml"
    path.write_text("project: [unclosed\n", encoding="utf-8")

    with pytest.raises(PlanLoadError, match="invalid YAML"):
        PlanLoader().load(path)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "plan.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(PlanLoadError, match="invalid JSON"):
        PlanLoader().load(path)


def test_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "plan.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(PlanLoadError, match="plan root must be a mapping"):
        PlanLoader().load(path)


def test_load_payload_accepts_parsed_mapping() -> None:
    plan = PlanLoader().load_payload({"project": "Roadmap", "repository": "acme/widgets"})

    assert plan.project == "Roadmap"
    assert plan.epics == []
