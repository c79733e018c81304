"""Apply command formatting."""

from __future__ import annotations

import argparse

from gh_project_helper import Report
from gh_project_helper.cli.progress.rich import RichApplyProgress


def format_apply_summary(report: Report) -> str:
    lines: list[str] = []
    if report.dry_run:
        lines.extend(f"[dry-run] {action}" for action in report.planned_actions)
        lines.append("[dry-run] No changes were made")
        return "\n".join(lines)

    lines.append(report.summary())
    if report.epic_urls:
        lines.append("")
        lines.append("Created epics:")
        lines.extend(f"  {url}" for url in report.epic_urls)
    if report.warnings:
        lines.append("")
        lines.append("Warnings:")
        lines.extend(f"  {warning}" for warning in report.warnings)
    return "\n".join(lines)


async def run_apply(args: argparse.Namespace) -> Report:
    import gh_project_helper.cli as cli

    config = cli.load_config(args.config, token=args.token)
    plan = cli.load_plan(args.file)

    if not args.verbose and not args.json:
        with RichApplyProgress() as progress:
            helper = await cli.ProjectHelper.from_config(config, progress=progress)
            report = await helper.apply(plan, dry_run=args.dry_run)
    else:
        helper = await cli.ProjectHelper.from_config(config)
        report = await helper.apply(plan, dry_run=args.dry_run)

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(cli._format_summary(report))
    return report


__all__ = ["format_apply_summary", "run_apply"]
