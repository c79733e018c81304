"""Exception hierarchy for gh-project-helper."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gh_project_helper.contracts.report import Report


class ProjectHelperError(Exception):
    """Base exception for all gh-project-helper errors."""


class ConfigError(ProjectHelperError):
    """Configuration loading or validation failure."""


class PlanLoadError(ProjectHelperError):
    """Plan file loading/parsing failure."""


class PlanValidationError(ProjectHelperError):
    """Plan semantic validation or input format failure."""

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors) if errors is not None else [message]


class ProviderError(ProjectHelperError):
    """Base remote provider operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class NotFoundError(ProviderError):
    """A remote object (repository, board, field, user, label) does not exist."""


class ApplyError(ProjectHelperError):
    """Engine-level failure that aborted a plan application.

    Remote mutations performed before the failure are not rolled back;
    *partial_report* is a snapshot of what had been applied at that point.
    """

    def __init__(self, message: str, *, partial_report: Report | None = None) -> None:
        super().__init__(message)
        self.partial_report = partial_report
