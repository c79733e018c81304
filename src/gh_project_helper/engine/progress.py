"""Phase events emitted while a plan is applied.

The engine walks three phases in order: ``Resolve`` (repository, board and
status lookups), ``Milestones`` and ``Epics``. Displays subclass
``ApplyProgress``; the engine itself never renders anything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

PHASES = ("Resolve", "Milestones", "Epics")


class ApplyProgress(ABC):
    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """Begin *phase*; *total* is the number of steps, if known."""

    @abstractmethod
    def item_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """*phase* stopped early because of *error*."""


class NullApplyProgress(ApplyProgress):
    """Discards every event."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        return None

    def item_done(self, phase: str) -> None:
        return None

    def phase_done(self, phase: str) -> None:
        return None

    def phase_error(self, phase: str, error: BaseException) -> None:
        return None
