"""Payload models sent to the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Project:
    key: str
    name: str
    description: str | None = None
    avatar: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "avatar": self.avatar,
        }


@dataclass(frozen=True)
class User:
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class PullRequestMember:
    user: User

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict()}


@dataclass(frozen=True)
class PullRequestRefRepoProject:
    key: str

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key}


@dataclass(frozen=True)
class PullRequestRefRepo:
    slug: str
    project: PullRequestRefRepoProject
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"slug": self.slug, "name": self.name, "project": self.project.to_dict()}


@dataclass(frozen=True)
class PullRequestRef:
    id: str
    repository: PullRequestRefRepo

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "repository": self.repository.to_dict()}


@dataclass(frozen=True)
class PullRequest:
    title: str
    from_ref: PullRequestRef
    to_ref: PullRequestRef
    description: str | None = None
    close_source_branch: bool = False
    reviewers: list[PullRequestMember] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "fromRef": self.from_ref.to_dict(),
            "toRef": self.to_ref.to_dict(),
            "close_source_branch": self.close_source_branch,
            "reviewers": [reviewer.to_dict() for reviewer in self.reviewers],
        }