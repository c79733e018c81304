"""Validate command."""

from __future__ import annotations

import argparse
import sys

from gh_project_helper import PlanValidator
from gh_project_helper.cli.common import print_numbered


def run_validate(args: argparse.Namespace) -> int:
    import gh_project_helper.cli as cli

    plan = cli.load_plan(args.file, validate=False)
    errors = PlanValidator().collect_errors(plan)
    if errors:
        print(f"Validation failed with {len(errors)} error(s):", file=sys.stderr)
        print_numbered(errors)
        return 3

    print("Plan is valid.")
    return 0


__all__ = ["run_validate"]
