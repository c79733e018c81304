"""Apply engine entrypoints."""

from gh_project_helper.engine.engine import ApplyEngine, apply_plan
from gh_project_helper.engine.progress import ApplyProgress, NullApplyProgress

__all__ = ["ApplyEngine", "ApplyProgress", "NullApplyProgress", "apply_plan"]
