"""Whoami command."""

from __future__ import annotations

import argparse

from gh_project_helper import Viewer


def format_viewer(viewer: Viewer) -> str:
    lines = [f"Logged in as: {viewer.login}"]
    if viewer.name:
        lines.append(f"Name: {viewer.name}")
    if viewer.email:
        lines.append(f"Email: {viewer.email}")
    return "\n".join(lines)


async def run_whoami(args: argparse.Namespace) -> Viewer:
    import gh_project_helper.cli as cli

    config = cli.load_config(args.config, token=args.token)
    helper = await cli.ProjectHelper.from_config(config)
    viewer = await helper.whoami()
    print(format_viewer(viewer))
    return viewer


__all__ = ["format_viewer", "run_whoami"]
