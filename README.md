# stashapi

An asynchronous client library for the Bitbucket Server (formerly Stash)
REST API, version 1.0. It offers:

- `stashapi.client.BitbucketClient`: an HTTP client built on `httpx` that
  adds an `Authorization` header, sends JSON payloads and turns API error
  replies into `BitbucketErrors` exceptions. It implements the abstract
  `stashapi.client.AsyncRestClient` interface.
- `stashapi.resources`: `ProjectResource`, `RepositoryResource`,
  `BranchResource`, `CommitResource` and `PullRequestResource`, with
  automatic paging through `accumulate_pages`.
- `stashapi.models.get` and `stashapi.models.post`: dataclasses for what the
  server returns and for what is sent to it.
- `stashapi.uris`: chainable builders for REST endpoint URIs.
- `stashapi.auth`: `Scheme`, `BasicAuth` and `BearerAuth`.

## Installation

```
pip install stashapi
```

## Using the client

```python
import asyncio

from stashapi.auth import BearerAuth, Scheme
from stashapi.client import BitbucketClient
from stashapi.models import post
from stashapi.resources import ProjectResource, PullRequestResource


async def main() -> None:
    async with BitbucketClient.with_auth(
        "stash.example.com", Scheme.HTTPS, BearerAuth("token")
    ) as client:
        projects = ProjectResource(client)
        for project in await projects.get_all_projects():
            print(project.key, project.name)

        created = await projects.create_project(
            post.Project(key="DEMO", name="Demo project")
        )
        print("created", created.id)

        pulls = PullRequestResource(client, "DEMO", "my-repo")
        for pr in await pulls.get_all_open_pull_requests():
            print(pr.id, pr.title)


asyncio.run(main())
```

A client can also be closed explicitly with `await client.aclose()`.
For basic authentication pass a `BasicAuth`:

```python
password = "password"
auth = BasicAuth("user", password)
```

The resources provide:

- `ProjectResource(client)`: `get_all_projects`, `get_project`,
  `get_project_avatar` (returns the raw bytes), `create_project`,
  `update_project`, `delete_project`.
- `RepositoryResource(client, project)`: `get_all_repositories`,
  `get_repository`, `get_all_repository_tags`.
- `BranchResource(client, project, repository)`: `get_all_branches`,
  `get_default_branch`.
- `CommitResource(client, project, repository)`: `get_all_commits`,
  `get_commit`.
- `PullRequestResource(client, project, repository)`:
  `get_all_pull_requests`, `get_all_open_pull_requests`,
  `get_all_merged_pull_requests`, `get_all_declined_pull_requests`,
  `get_all_pull_requests_with_state` (taking a `PullRequestState`),
  `get_pull_request`, `create_pull_request`.

Listing calls request pages of 50 items (`?limit=50`) and follow
`nextPageStart` until the server reports the last page.

## Errors

When a reply cannot be read as the expected model but is an error document,
the call raises `stashapi.models.get.BitbucketErrors`; its `errors`
attribute holds each `BitbucketError` with its `message`, `context` and
`exception_name`. A reply that is neither raises `ValueError`. A DELETE
answered with a 4xx or 5xx status raises `BitbucketErrors` decoded from the
body.

## Building endpoint URIs

The builders in `stashapi.uris` produce full endpoint addresses without
sending anything:

```python
from stashapi.auth import Scheme
from stashapi.uris.resource import ResourceUriBuilder

uri = (
    ResourceUriBuilder()
    .scheme(Scheme.HTTPS)
    .host("stash.example.com")
    .projects()
    .project("DEMO")
    .repos()
    .repository("my-repo")
    .pull_requests()
    .pull_request(1)
    .merge()
    .build()
)
# https://stash.example.com/rest/api/1.0/projects/DEMO/repos/my-repo/pull-requests/1/merge
```

Besides projects and repositories, the root builder leads to `admin()`,
`users()` and `logs()`. Calling `build()` on a chain whose root has no host
raises `stashapi.uris.base.BuildError`.

## What it does not do

This is a library only: it installs no command-line tool. The resources
cover projects, repositories, tags, branches, commits and pull requests;
the other endpoints (administration, users, logs, permissions, comments,
hooks) have URI builders but no ready-made request methods.

## Running the tests

```
pip install -e ".[test]"
pytest
```