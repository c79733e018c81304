"""Plan module entrypoints."""

from gh_project_helper.plan.loader import PlanLoader
from gh_project_helper.plan.validator import PlanValidator

__all__ = ["PlanLoader", "PlanValidator"]
