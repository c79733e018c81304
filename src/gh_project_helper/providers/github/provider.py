"""GitHub provider adapter.

Repository, board, issue creation and board mutations go through the GraphQL
API. Milestones, labels, issue search and the viewer lookup use REST, where
GitHub exposes simple get-or-create semantics.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from gh_project_helper.contracts.exceptions import AuthenticationError, NotFoundError, ProviderError
from gh_project_helper.contracts.provider import (
    CreatedIssue,
    CreateIssueInput,
    IssueRef,
    Provider,
    StatusField,
    Viewer,
)
from gh_project_helper.engine.utils import parse_due_on

_LOG = logging.getLogger(__name__)

STATUS_FIELD_NAME = "Status"
_SEARCH_PAGE_SIZE = 10
_MAX_PAGES = 100


def _graphql_url(api_url: str) -> str:
    # Enterprise Server serves GraphQL at /api/graphql, beside the /api/v3 REST root.
    if api_url.endswith("/api/v3"):
        return api_url.removesuffix("v3") + "graphql"
    return f"{api_url}/graphql"


class GitHubProvider(Provider):
    def __init__(
        self,
        *,
        token: str,
        api_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._graphql_url = _graphql_url(self._api_url)
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubProvider:
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "gh-project-helper",
            },
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def resolve_repository(self, owner: str, name: str) -> str:
        query = "query($owner:String!, $name:String!){ repository(owner:$owner, name:$name){ id } }"
        data = await self._graphql(query, {"owner": owner, "name": name})
        repository = data.get("repository")
        if not isinstance(repository, dict):
            raise NotFoundError(f"repository {owner}/{name} not found")
        return self._require_str(repository, "id")

    async def resolve_board(self, owner: str, title: str) -> str:
        user_error: ProviderError | None = None
        try:
            board_id = await self._find_board_in_scope("user", owner, title)
        except ProviderError as exc:
            # Any user-scope failure falls through to the organization scope.
            _LOG.debug("User project lookup for %s failed: %s", owner, exc)
            user_error, board_id = exc, None
        if board_id is not None:
            return board_id

        try:
            board_id = await self._find_board_in_scope("organization", owner, title)
        except NotFoundError:
            _LOG.debug("No organization named %s", owner)
            board_id = None
        if board_id is not None:
            return board_id
        if user_error is not None and not isinstance(user_error, NotFoundError):
            raise user_error
        raise NotFoundError(f"project {title!r} not found for user or organization {owner!r}")

    async def _find_board_in_scope(self, scope: str, owner: str, title: str) -> str | None:
        query = (
            "query($owner:String!, $cursor:String){ "
            f"{scope}(login:$owner){{ projectsV2(first:100, after:$cursor){{ "
            "pageInfo { hasNextPage endCursor } nodes { id title } } } }"
        )
        cursor: str | None = None
        for _ in range(_MAX_PAGES):
            data = await self._graphql(query, {"owner": owner, "cursor": cursor})
            holder = data.get(scope)
            if not isinstance(holder, dict):
                raise NotFoundError(f"{scope} {owner} not found")
            projects = self._require_dict(holder, "projectsV2")
            for node in self._require_list(projects, "nodes"):
                if isinstance(node, dict) and node.get("title") == title:
                    return self._require_str(node, "id")
            page_info = self._require_dict(projects, "pageInfo")
            if not page_info.get("hasNextPage"):
                return None
            cursor = page_info.get("endCursor")
        raise ProviderError("Project listing exceeded pagination budget.")

    async def resolve_status_options(self, board_id: str) -> StatusField:
        query = (
            "query($projectId:ID!){ node(id:$projectId){ ... on ProjectV2 { "
            "fields(first:50){ nodes { ... on ProjectV2SingleSelectField { id name options { id name } } } } } } }"
        )
        data = await self._graphql(query, {"projectId": board_id})
        node = data.get("node")
        if not isinstance(node, dict):
            raise NotFoundError(f"project {board_id} not found")
        fields = self._require_list(self._require_dict(node, "fields"), "nodes")
        for field in fields:
            if not isinstance(field, dict) or field.get("name") != STATUS_FIELD_NAME:
                continue
            options: dict[str, str] = {}
            for option in field.get("options") or []:
                if isinstance(option, dict) and isinstance(option.get("name"), str):
                    options[option["name"]] = self._require_str(option, "id")
            return StatusField(field_id=self._require_str(field, "id"), options=options)
        raise NotFoundError("status field not found on project")

    async def get_or_create_milestone(
        self,
        owner: str,
        repo: str,
        title: str,
        description: str,
        due_on: str | None,
    ) -> str:
        path: str | None = f"/repos/{owner}/{repo}/milestones"
        params: dict[str, Any] | None = {"state": "all", "per_page": 100}
        pages = 0
        while path is not None:
            pages += 1
            if pages > _MAX_PAGES:
                raise ProviderError("Milestone listing exceeded pagination budget.")
            response = await self._request("GET", path, params=params)
            for milestone in self._json_list(response):
                if isinstance(milestone, dict) and milestone.get("title") == title:
                    return self._require_str(milestone, "node_id")
            # The next link already carries the query string.
            path = response.links.get("next", {}).get("url")
            params = None

        payload: dict[str, Any] = {"title": title, "description": description}
        if due_on:
            payload["due_on"] = f"{parse_due_on(due_on).isoformat()}T00:00:00Z"
        response = await self._request("POST", f"/repos/{owner}/{repo}/milestones", json=payload)
        _LOG.info("Created milestone: %s", title)
        return self._require_str(self._json_dict(response), "node_id")

    async def find_issue_by_title(self, owner: str, repo: str, title: str) -> IssueRef | None:
        escaped = title.replace("\\", "\\\\").replace('"', '\\"')
        query = f'repo:{owner}/{repo} is:issue is:open in:title "{escaped}"'
        response = await self._request("GET", "/search/issues", params={"q": query, "per_page": _SEARCH_PAGE_SIZE})
        for issue in self._require_list(self._json_dict(response), "items"):
            if isinstance(issue, dict) and issue.get("title") == title:
                return IssueRef(number=self._require_int(issue, "number"), id=self._require_str(issue, "node_id"))
        return None

    async def get_or_create_label(self, owner: str, repo: str, name: str) -> str:
        try:
            response = await self._request("GET", f"/repos/{owner}/{repo}/labels/{quote(name, safe='')}")
        except NotFoundError:
            response = await self._request("POST", f"/repos/{owner}/{repo}/labels", json={"name": name})
            _LOG.info("Created label: %s", name)
        return self._require_str(self._json_dict(response), "node_id")

    async def resolve_user(self, login: str) -> str:
        data = await self._graphql("query($login:String!){ user(login:$login){ id } }", {"login": login})
        user = data.get("user")
        if not isinstance(user, dict):
            raise NotFoundError(f"user {login} not found")
        return self._require_str(user, "id")

    async def create_issue(self, input: CreateIssueInput) -> CreatedIssue:
        mutation = "mutation($input:CreateIssueInput!){ createIssue(input:$input){ issue { id number url } } }"
        issue_input: dict[str, Any] = {
            "repositoryId": input.repository_id,
            "title": input.title,
            "body": input.body,
        }
        if input.milestone_id:
            issue_input["milestoneId"] = input.milestone_id
        if input.label_ids:
            issue_input["labelIds"] = list(input.label_ids)
        if input.assignee_ids:
            issue_input["assigneeIds"] = list(input.assignee_ids)

        data = await self._graphql(mutation, {"input": issue_input})
        issue = self._require_dict(self._require_dict(data, "createIssue"), "issue")
        return CreatedIssue(
            id=self._require_str(issue, "id"),
            number=self._require_int(issue, "number"),
            url=self._require_str(issue, "url"),
        )

    async def add_to_board(self, board_id: str, content_id: str) -> str:
        mutation = (
            "mutation($projectId:ID!, $contentId:ID!){ "
            "addProjectV2ItemById(input:{projectId:$projectId, contentId:$contentId}) { item { id } } }"
        )
        data = await self._graphql(mutation, {"projectId": board_id, "contentId": content_id})
        item = self._require_dict(self._require_dict(data, "addProjectV2ItemById"), "item")
        return self._require_str(item, "id")

    async def set_status(self, board_id: str, item_id: str, field_id: str, option_id: str) -> None:
        mutation = (
            "mutation($projectId:ID!, $itemId:ID!, $fieldId:ID!, $optionId:String!){ "
            "updateProjectV2ItemFieldValue(input:{projectId:$projectId, itemId:$itemId, "
            "fieldId:$fieldId, value:{ singleSelectOptionId:$optionId }}) "
            "{ projectV2Item { id } } }"
        )
        await self._graphql(
            mutation,
            {"projectId": board_id, "itemId": item_id, "fieldId": field_id, "optionId": option_id},
        )

    async def viewer(self) -> Viewer:
        response = await self._request("GET", "/user")
        payload = self._json_dict(response)
        return Viewer(
            login=self._require_str(payload, "login"),
            name=payload.get("name"),
            email=payload.get("email"),
        )

    async def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        response = await self._request("POST", self._graphql_url, json={"query": query, "variables": variables})
        payload = self._json_dict(response)
        errors = payload.get("errors") or []
        if errors:
            if any(isinstance(error, dict) and error.get("type") == "NOT_FOUND" for error in errors):
                raise NotFoundError(f"GraphQL returned errors: {errors}")
            raise ProviderError(f"GraphQL returned errors: {errors}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise ProviderError("GraphQL response missing data payload")
        return data

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        if self._client is None:
            raise ProviderError("Provider is not initialized. Use 'async with'.")
        _LOG.debug("GitHub %s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ProviderError(f"GitHub request failed: {method} {path}: {exc}") from exc

        status = response.status_code
        if status < 400:
            return response
        detail = self._error_detail(response)
        if status in (401, 403):
            raise AuthenticationError(f"GitHub rejected credentials ({status}): {detail}")
        if status == 404:
            raise NotFoundError(f"GitHub resource not found: {method} {path}")
        raise ProviderError(f"GitHub API error ({status}) for {method} {path}: {detail}")

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            return payload["message"]
        return response.text

    @staticmethod
    def _json_dict(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("GitHub returned a non-JSON response") from exc
        if not isinstance(payload, dict):
            raise ProviderError("GitHub returned an unexpected JSON shape")
        return payload

    @staticmethod
    def _json_list(response: httpx.Response) -> list[Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("GitHub returned a non-JSON response") from exc
        if not isinstance(payload, list):
            raise ProviderError("GitHub returned an unexpected JSON shape")
        return payload

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ProviderError(f"Missing/invalid object at key '{key}'")
        return value

    @staticmethod
    def _require_list(data: dict[str, Any], key: str) -> list[Any]:
        value = data.get(key)
        if not isinstance(value, list):
            raise ProviderError(f"Missing/invalid list at key '{key}'")
        return value

    @staticmethod
    def _require_str(data: dict[str, Any], key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            raise ProviderError(f"Missing/invalid string at key '{key}'")
        return value

    @staticmethod
    def _require_int(data: dict[str, Any], key: str) -> int:
        value = data.get(key)
        if not isinstance(value, int):
            raise ProviderError(f"Missing/invalid int at key '{key}'")
        return value
