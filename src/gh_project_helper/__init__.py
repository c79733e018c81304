"""Public API surface for gh-project-helper."""

__version__ = "0.1.0"

from gh_project_helper.config import load_config
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
from gh_project_helper.contracts.provider import Provider, Viewer
from gh_project_helper.contracts.report import Report
from gh_project_helper.engine import ApplyEngine, apply_plan
from gh_project_helper.engine.progress import ApplyProgress
from gh_project_helper.plan import PlanLoader, PlanValidator
from gh_project_helper.providers import create_provider
from gh_project_helper.sdk import ProjectHelper, load_plan

__all__ = [
    "ApplyEngine",
    "ApplyError",
    "ApplyProgress",
    "AuthenticationError",
    "ConfigError",
    "Epic",
    "HelperConfig",
    "Issue",
    "Milestone",
    "NotFoundError",
    "Plan",
    "PlanLoadError",
    "PlanLoader",
    "PlanValidationError",
    "PlanValidator",
    "ProjectHelper",
    "ProjectHelperError",
    "Provider",
    "ProviderError",
    "Report",
    "Viewer",
    "__version__",
    "apply_plan",
    "create_provider",
    "load_config",
    "load_plan",
]
