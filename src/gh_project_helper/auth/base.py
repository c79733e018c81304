"""Token resolver contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    """Produce a GitHub token or raise ``AuthenticationError``."""

    @abstractmethod
    async def resolve(self) -> str: ...  # pragma: no cover
