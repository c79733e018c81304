from __future__ import annotations

from gh_project_helper.contracts.report import Report


def test_summary_formats_counts() -> None:
    report = Report(milestones_created=2, epics_created=1, epics_skipped=3, issues_created=4, issues_skipped=5)

    assert report.summary() == "Summary: 2 milestones synced, 1 epics created (3 skipped), 4 issues created (5 skipped)"
    assert str(report) == report.summary()


def test_report_defaults_are_empty() -> None:
    report = Report()

    assert report.epic_urls == []
    assert report.warnings == []
    assert report.planned_actions == []
    assert report.dry_run is False


def test_report_serializes_to_json() -> None:
    report = Report(epics_created=1, epic_urls=["https://github.com/acme/widgets/issues/3"])

    payload = report.model_dump(mode="json")

    assert payload["epics_created"] == 1
    assert payload["epic_urls"] == ["https://github.com/acme/widgets/issues/3"]
