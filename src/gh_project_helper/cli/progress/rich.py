"""Rich live display for apply phases."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from gh_project_helper.engine.progress import PHASES, ApplyProgress

_PACKAGE_LOGGER = "gh_project_helper"


class RichApplyProgress(ApplyProgress):
    """One progress row per apply phase, rendered on stderr.

    Must be entered before the engine runs. While live, warnings logged by the
    package are printed above the bars instead of through them::

        with RichApplyProgress() as progress:
            report = await helper.apply(plan)
    """

    _STYLES: ClassVar[dict[str, str]] = dict(zip(PHASES, ("cyan", "blue", "green"), strict=True))

    def __init__(self, console: Console | None = None) -> None:
        self._display = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>16}"),
            BarColumn(bar_width=28),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._rows: dict[str, TaskID] = {}
        self._log_handler = RichHandler(
            console=self._display.console,
            level=logging.WARNING,
            show_time=False,
            show_path=False,
        )

    def __enter__(self) -> RichApplyProgress:
        self._display.start()
        logging.getLogger(_PACKAGE_LOGGER).addHandler(self._log_handler)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        logging.getLogger(_PACKAGE_LOGGER).removeHandler(self._log_handler)
        self._display.stop()

    @property
    def tasks(self) -> list[Task]:
        return list(self._display.tasks)

    def _label(self, phase: str) -> str:
        style = self._STYLES.get(phase)
        return f"[{style}]{phase}[/]" if style else phase

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._rows[phase] = self._display.add_task(self._label(phase), total=total)

    def item_done(self, phase: str) -> None:
        if phase in self._rows:
            self._display.advance(self._rows[phase])

    def phase_done(self, phase: str) -> None:
        row = self._rows.get(phase)
        if row is None:
            return
        total = self._display.tasks[row].total
        if total is None:
            self._display.update(row, total=1, completed=1)
        else:
            self._display.update(row, completed=total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        row = self._rows.get(phase)
        if row is not None:
            self._display.update(row, description=f"[red]✗ {phase}[/red]")
