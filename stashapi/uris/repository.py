"""URI builders for repositories and the resources that live under them."""

from __future__ import annotations

from dataclasses import dataclass

from stashapi.uris.base import (
    BrowseUriBuilder,
    DiffUriBuilder,
    FileUriBuilder,
    PermissionUriBuilder,
    TerminalUriBuilder,
    UriBuilder,
)


@dataclass(frozen=True)
class RepositoryUriBuilder(UriBuilder):
    """The ``repos`` collection of a project."""

    builder: UriBuilder

    def repository(self, repo: str) -> WithRepositoryUriBuilder:
        return WithRepositoryUriBuilder(self, repo)

    def build(self) -> str:
        return f"{self.builder.build()}/repos"


@dataclass(frozen=True)
class WithRepositoryUriBuilder(UriBuilder):
    """A single repository identified by its slug."""

    builder: RepositoryUriBuilder
    repo: str

    def forks(self) -> TerminalUriBuilder:
        return self._terminal("forks")

    def recreate(self) -> TerminalUriBuilder:
        return self._terminal("recreate")

    def related(self) -> TerminalUriBuilder:
        return self._terminal("related")

    def changes(self) -> TerminalUriBuilder:
        return self._terminal("changes")

    def tags(self) -> TerminalUriBuilder:
        return self._terminal("tags")

    def branches(self) -> BranchUriBuilder:
        return BranchUriBuilder(self)

    def commits(self) -> CommitUriBuilder:
        return CommitUriBuilder(self)

    def diff(self) -> DiffUriBuilder:
        return DiffUriBuilder(self)

    def browse(self) -> BrowseUriBuilder:
        return BrowseUriBuilder(self)

    def files(self) -> FileUriBuilder:
        return FileUriBuilder(self)

    def pull_requests(self) -> PullRequestUriBuilder:
        return PullRequestUriBuilder(self)

    def permissions(self) -> PermissionUriBuilder:
        return PermissionUriBuilder(self)

    def compare(self) -> CompareRepositoryUriBuilder:
        return CompareRepositoryUriBuilder(self)

    def settings(self) -> RepositorySettingsUriBuilder:
        return RepositorySettingsUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/{self.repo}"


@dataclass(frozen=True)
class CompareRepositoryUriBuilder(UriBuilder):
    """The ``compare`` resources of a repository."""

    builder: WithRepositoryUriBuilder

    def changes(self) -> TerminalUriBuilder:
        return self._terminal("changes")

    def commits(self) -> TerminalUriBuilder:
        return self._terminal("commits")

    def diff(self) -> DiffUriBuilder:
        return DiffUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/compare"


@dataclass(frozen=True)
class RepositorySettingsUriBuilder(UriBuilder):
    """The ``settings`` of a repository."""

    builder: WithRepositoryUriBuilder

    def hooks(self) -> RepoHookSettingsUriBuilder:
        return RepoHookSettingsUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/settings"


@dataclass(frozen=True)
class RepoHookSettingsUriBuilder(UriBuilder):
    """The hook settings of a repository."""

    builder: RepositorySettingsUriBuilder

    def hook(self, hook: str) -> WithHookUriBuilder:
        return WithHookUriBuilder(self, hook)

    def build(self) -> str:
        return f"{self.builder.build()}/hooks"


@dataclass(frozen=True)
class WithHookUriBuilder(UriBuilder):
    """A single repository hook identified by its key."""

    builder: RepoHookSettingsUriBuilder
    hook: str

    def enabled(self) -> TerminalUriBuilder:
        return self._terminal("enabled")

    def settings(self) -> TerminalUriBuilder:
        return self._terminal("settings")

    def build(self) -> str:
        return f"{self.builder.build()}/{self.hook}"


@dataclass(frozen=True)
class BranchUriBuilder(UriBuilder):
    """The ``branches`` of a repository."""

    builder: WithRepositoryUriBuilder

    def default(self) -> TerminalUriBuilder:
        return self._terminal("default")

    def build(self) -> str:
        return f"{self.builder.build()}/branches"


@dataclass(frozen=True)
class CommitUriBuilder(UriBuilder):
    """The ``commits`` of a repository."""

    builder: WithRepositoryUriBuilder

    def commit(self, commit_id: str) -> WithCommitUriBuilder:
        return WithCommitUriBuilder(self, commit_id)

    def build(self) -> str:
        return f"{self.builder.build()}/commits"


@dataclass(frozen=True)
class WithCommitUriBuilder(UriBuilder):
    """A single commit identified by its id."""

    builder: CommitUriBuilder
    commit_id: str

    def diff(self) -> DiffUriBuilder:
        return DiffUriBuilder(self)

    def comments(self) -> CommitCommentUriBuilder:
        return CommitCommentUriBuilder(self)

    def changes(self) -> TerminalUriBuilder:
        return self._terminal("changes")

    def watch(self) -> TerminalUriBuilder:
        return self._terminal("watch")

    def build(self) -> str:
        return f"{self.builder.build()}/{self.commit_id}"


@dataclass(frozen=True)
class CommitCommentUriBuilder(UriBuilder):
    """The comments on a commit."""

    builder: WithCommitUriBuilder

    def comment(self, comment_id: int) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, str(comment_id))

    def build(self) -> str:
        return f"{self.builder.build()}/comments"


@dataclass(frozen=True)
class PullRequestUriBuilder(UriBuilder):
    """The ``pull-requests`` of a repository."""

    builder: WithRepositoryUriBuilder

    def pull_request(self, pull_request_id: int) -> WithPullRequestUriBuilder:
        return WithPullRequestUriBuilder(self, pull_request_id)

    def build(self) -> str:
        return f"{self.builder.build()}/pull-requests"


@dataclass(frozen=True)
class WithPullRequestUriBuilder(UriBuilder):
    """A single pull request identified by its numeric id."""

    builder: PullRequestUriBuilder
    id: int

    def diff(self) -> DiffUriBuilder:
        return DiffUriBuilder(self)

    def comments(self) -> PullRequestCommentUriBuilder:
        return PullRequestCommentUriBuilder(self)

    def tasks(self) -> PullRequestTasksUriBuilder:
        return PullRequestTasksUriBuilder(self)

    def activities(self) -> TerminalUriBuilder:
        return self._terminal("activities")

    def decline(self) -> TerminalUriBuilder:
        return self._terminal("decline")

    def merge(self) -> TerminalUriBuilder:
        return self._terminal("merge")

    def reopen(self) -> TerminalUriBuilder:
        return self._terminal("reopen")

    def approve(self) -> TerminalUriBuilder:
        return self._terminal("approve")

    def changes(self) -> TerminalUriBuilder:
        return self._terminal("changes")

    def commits(self) -> TerminalUriBuilder:
        return self._terminal("commits")

    def participants(self) -> TerminalUriBuilder:
        return self._terminal("participants")

    def watch(self) -> TerminalUriBuilder:
        return self._terminal("watch")

    def build(self) -> str:
        return f"{self.builder.build()}/{self.id}"


@dataclass(frozen=True)
class PullRequestCommentUriBuilder(UriBuilder):
    """The comments on a pull request."""

    builder: WithPullRequestUriBuilder

    def comment(self, comment_id: int) -> WithPullRequestCommentUriBuilder:
        return WithPullRequestCommentUriBuilder(self, comment_id)

    def build(self) -> str:
        return f"{self.builder.build()}/comments"


@dataclass(frozen=True)
class WithPullRequestCommentUriBuilder(UriBuilder):
    """A single comment on a pull request."""

    builder: PullRequestCommentUriBuilder
    comment_id: int

    def build(self) -> str:
        return f"{self.builder.build()}/{self.comment_id}"


@dataclass(frozen=True)
class PullRequestTasksUriBuilder(UriBuilder):
    """The tasks attached to a pull request."""

    builder: WithPullRequestUriBuilder

    def count(self) -> TerminalUriBuilder:
        return self._terminal("count")

    def build(self) -> str:
        return f"{self.builder.build()}/tasks"