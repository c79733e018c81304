"""Remote capability contract consumed by the apply engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from pydantic import BaseModel, Field


class StatusField(BaseModel):
    field_id: str
    options: dict[str, str] = Field(default_factory=dict)


class IssueRef(BaseModel):
    """An existing issue located by title."""

    number: int
    id: str


class CreateIssueInput(BaseModel):
    repository_id: str
    title: str
    body: str
    milestone_id: str | None = None
    label_ids: list[str] = Field(default_factory=list)
    assignee_ids: list[str] = Field(default_factory=list)


class CreatedIssue(BaseModel):
    id: str
    number: int
    url: str


class Viewer(BaseModel):
    login: str
    name: str | None = None
    email: str | None = None


class Provider(ABC):
    """Issue tracker and project board operations needed to apply a plan.

    Lookups that find nothing return ``None`` where absence is an expected
    outcome (``find_issue_by_title``) and raise ``NotFoundError`` where it is
    fatal (repository, board, status field, user).
    """

    @abstractmethod
    async def __aenter__(self) -> Provider: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def resolve_repository(self, owner: str, name: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def resolve_board(self, owner: str, title: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def resolve_status_options(self, board_id: str) -> StatusField: ...  # pragma: no cover

    @abstractmethod
    async def get_or_create_milestone(
        self,
        owner: str,
        repo: str,
        title: str,
        description: str,
        due_on: str | None,
    ) -> str: ...  # pragma: no cover

    @abstractmethod
    async def find_issue_by_title(self, owner: str, repo: str, title: str) -> IssueRef | None: ...  # pragma: no cover

    @abstractmethod
    async def get_or_create_label(self, owner: str, repo: str, name: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def resolve_user(self, login: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def create_issue(self, input: CreateIssueInput) -> CreatedIssue: ...  # pragma: no cover

    @abstractmethod
    async def add_to_board(self, board_id: str, content_id: str) -> str: ...  # pragma: no cover

    @abstractmethod
    async def set_status(self, board_id: str, item_id: str, field_id: str, option_id: str) -> None: ...  # pragma: no cover

    @abstractmethod
    async def viewer(self) -> Viewer: ...  # pragma: no cover
