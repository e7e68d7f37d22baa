"""High-level access to projects, repositories, branches, commits and pull requests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, TypeVar

from stashapi.client import AsyncRestClient
from stashapi.models import get, post
from stashapi.uris.resource import ResourceUriBuilder

T = TypeVar("T")

PAGE_LIMIT = 50


async def accumulate_pages(
    uri: str, fetch: Callable[[str], Awaitable[get.PagedResponse[T]]]
) -> list[T]:
    """Fetch every page of a listing and return all values in order."""
    base_uri = f"{uri}?limit={PAGE_LIMIT}"
    results: list[T] = []
    page_uri = base_uri
    while True:
        page = await fetch(page_uri)
        results.extend(page.values)
        if page.is_last_page:
            return results
        if page.next_page_start is None:
            raise ValueError("page is not the last one but has no nextPageStart")
        page_uri = f"{base_uri}&start={page.next_page_start}"


class _Resource:
    def __init__(self, client: AsyncRestClient) -> None:
        self._client = client

    def _root(self) -> ResourceUriBuilder:
        return ResourceUriBuilder().scheme(self._client.scheme).host(self._client.host)

    async def _all(self, uri: str, parse_item: Callable[[Any], T]) -> list[T]:
        parse_page = partial(get.PagedResponse.from_dict, parse_item=parse_item)

        async def fetch(page_uri: str) -> get.PagedResponse[T]:
            return await self._client.get_as(page_uri, parse_page)

        return await accumulate_pages(uri, fetch)


class BranchResource(_Resource):
    """Branches of one repository."""

    def __init__(self, client: AsyncRestClient, project: str, repository: str) -> None:
        super().__init__(client)
        self._uri = (
            self._root().projects().project(project).repos().repository(repository).branches()
        )

    async def get_all_branches(self) -> list[get.Branch]:
        return await self._all(self._uri.build(), get.Branch.from_dict)

    async def get_default_branch(self) -> get.Branch:
        return await self._client.get_as(self._uri.default().build(), get.Branch.from_dict)


class CommitResource(_Resource):
    """Commits of one repository."""

    def __init__(self, client: AsyncRestClient, project: str, repository: str) -> None:
        super().__init__(client)
        self._uri = (
            self._root().projects().project(project).repos().repository(repository).commits()
        )

    async def get_all_commits(self) -> list[get.Commit]:
        return await self._all(self._uri.build(), get.Commit.from_dict)

    async def get_commit(self, commit: str) -> get.Commit:
        return await self._client.get_as(self._uri.commit(commit).build(), get.Commit.from_dict)


class ProjectResource(_Resource):
    """Projects on the server."""

    def __init__(self, client: AsyncRestClient) -> None:
        super().__init__(client)
        self._uri = self._root().projects()

    async def get_all_projects(self) -> list[get.Project]:
        return await self._all(self._uri.build(), get.Project.from_dict)

    async def get_project(self, project: str) -> get.Project:
        return await self._client.get_as(self._uri.project(project).build(), get.Project.from_dict)

    async def get_project_avatar(self, project: str) -> bytes:
        response = await self._client.get(self._uri.project(project).avatar().build())
        return response.content

    async def create_project(self, project: post.Project) -> get.Project:
        return await self._client.post(self._uri.build(), project, get.Project.from_dict)

    async def update_project(self, project: str, payload: post.Project) -> get.Project:
        return await self._client.put(
            self._uri.project(project).build(), payload, get.Project.from_dict
        )

    async def delete_project(self, project: str) -> None:
        await self._client.delete(self._uri.project(project).build())


class PullRequestResource(_Resource):
    """Pull requests of one repository."""

    def __init__(self, client: AsyncRestClient, project: str, repository: str) -> None:
        super().__init__(client)
        self._uri = (
            self._root()
            .projects()
            .project(project)
            .repos()
            .repository(repository)
            .pull_requests()
        )

    async def get_all_pull_requests_with_state(
        self, state: get.PullRequestState
    ) -> list[get.PullRequest]:
        uri = f"{self._uri.build()}?state={state.value}"
        return await self._all(uri, get.PullRequest.from_dict)

    async def get_all_pull_requests(self) -> list[get.PullRequest]:
        return await self.get_all_pull_requests_with_state(get.PullRequestState.ALL)

    async def get_all_open_pull_requests(self) -> list[get.PullRequest]:
        return await self.get_all_pull_requests_with_state(get.PullRequestState.OPEN)

    async def get_all_merged_pull_requests(self) -> list[get.PullRequest]:
        return await self.get_all_pull_requests_with_state(get.PullRequestState.MERGED)

    async def get_all_declined_pull_requests(self) -> list[get.PullRequest]:
        return await self.get_all_pull_requests_with_state(get.PullRequestState.DECLINED)

    async def get_pull_request(self, pull_request_id: int) -> get.PullRequest:
        uri = self._uri.pull_request(pull_request_id).build()
        return await self._client.get_as(uri, get.PullRequest.from_dict)

    async def create_pull_request(self, pull_request: post.PullRequest) -> get.PullRequest:
        return await self._client.post(self._uri.build(), pull_request, get.PullRequest.from_dict)


class RepositoryResource(_Resource):
    """Repositories of one project."""

    def __init__(self, client: AsyncRestClient, project: str) -> None:
        super().__init__(client)
        self._uri = self._root().projects().project(project).repos()

    async def get_all_repositories(self) -> list[get.Repository]:
        return await self._all(self._uri.build(), get.Repository.from_dict)

    async def get_repository(self, repository: str) -> get.Repository:
        uri = self._uri.repository(repository).build()
        return await self._client.get_as(uri, get.Repository.from_dict)

    async def get_all_repository_tags(self, repository: str) -> list[get.Tag]:
        uri = self._uri.repository(repository).tags().build()
        return await self._all(uri, get.Tag.from_dict)