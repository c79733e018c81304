"""Plan contracts."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _PlanModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Empty YAML keys (``body:``) load as None; fall back to field defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Milestone(_PlanModel):
    title: str = ""
    due_on: str | None = None
    description: str = ""

    @field_validator("due_on", mode="before")
    @classmethod
    def _date_to_text(cls, value: Any) -> Any:
        # YAML loads unquoted 2024-01-31 as a date.
        if isinstance(value, date):
            return value.isoformat()
        return value


class Issue(_PlanModel):
    title: str = ""
    body: str = ""
    labels: list[str] = Field(default_factory=list)


class Epic(_PlanModel):
    title: str = ""
    body: str = ""
    milestone: str | None = None
    status: str | None = None
    labels: list[str] = Field(default_factory=list)
    assignees: list[str] = Field(default_factory=list)
    children: list[Issue] = Field(default_factory=list)


class Plan(_PlanModel):
    project: str = ""
    repository: str = ""
    milestones: list[Milestone] = Field(default_factory=list)
    epics: list[Epic] = Field(default_factory=list)
