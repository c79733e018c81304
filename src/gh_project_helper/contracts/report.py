"""Apply report contract."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Report(BaseModel):
    """Counts and identifiers accumulated while applying a plan."""

    milestones_created: int = 0
    epics_created: int = 0
    epics_skipped: int = 0
    issues_created: int = 0
    issues_skipped: int = 0
    epic_urls: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    dry_run: bool = False
    planned_actions: list[str] = Field(default_factory=list)

    def summary(self) -> str:
        return (
            f"Summary: {self.milestones_created} milestones synced, "
            f"{self.epics_created} epics created ({self.epics_skipped} skipped), "
            f"{self.issues_created} issues created ({self.issues_skipped} skipped)"
        )

    def __str__(self) -> str:
        return self.summary()
