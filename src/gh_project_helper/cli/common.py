"""Shared CLI formatting helpers."""

from __future__ import annotations

import sys


def print_numbered(lines: list[str]) -> None:
    for index, line in enumerate(lines, start=1):
        print(f"  {index}. {line}", file=sys.stderr)
