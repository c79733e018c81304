"""Public contracts for gh-project-helper."""

from gh_project_helper.contracts.config import HelperConfig
from gh_project_helper.contracts.exceptions import (
    ApplyError,
    AuthenticationError,
    ConfigError,
    NotFoundError,
    PlanLoadError,
    PlanValidationError,
    ProjectHelperError,
    ProviderError,
)
from gh_project_helper.contracts.plan import Epic, Issue, Milestone, Plan
from gh_project_helper.contracts.provider import (
    CreatedIssue,
    CreateIssueInput,
    IssueRef,
    Provider,
    StatusField,
    Viewer,
)
from gh_project_helper.contracts.report import Report

__all__ = [
    "ApplyError",
    "AuthenticationError",
    "ConfigError",
    "CreateIssueInput",
    "CreatedIssue",
    "Epic",
    "HelperConfig",
    "Issue",
    "IssueRef",
    "Milestone",
    "NotFoundError",
    "Plan",
    "PlanLoadError",
    "PlanValidationError",
    "ProjectHelperError",
    "Provider",
    "ProviderError",
    "Report",
    "StatusField",
    "Viewer",
]
