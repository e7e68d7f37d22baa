"""URI builders for projects, their avatars and permissions."""

from __future__ import annotations

from dataclasses import dataclass

from stashapi.uris.base import (
    GroupPermissionUriBuilder,
    PermissionUriBuilder,
    TerminalUriBuilder,
    UriBuilder,
    UserPermissionUriBuilder,
)
from stashapi.uris.repository import RepositoryUriBuilder


@dataclass(frozen=True)
class ProjectUriBuilder(UriBuilder):
    """The ``projects`` collection."""

    builder: UriBuilder

    def project(self, project: str) -> WithProjectUriBuilder:
        return WithProjectUriBuilder(self, project)

    def build(self) -> str:
        return f"{self.builder.build()}/projects"


@dataclass(frozen=True)
class WithProjectUriBuilder(UriBuilder):
    """A single project identified by its key."""

    builder: ProjectUriBuilder
    project: str

    def avatar(self) -> ProjectAvatarUriBuilder:
        return ProjectAvatarUriBuilder(self)

    def repos(self) -> RepositoryUriBuilder:
        return RepositoryUriBuilder(self)

    def permissions(self) -> ProjectPermissionsUriBuilder:
        return ProjectPermissionsUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/{self.project}"


@dataclass(frozen=True)
class ProjectAvatarUriBuilder(UriBuilder):
    """The avatar image of a project."""

    builder: WithProjectUriBuilder

    def build(self) -> str:
        return f"{self.builder.build()}/avatar.png"


@dataclass(frozen=True)
class ProjectPermissionsUriBuilder(UriBuilder):
    """The permissions of a project."""

    builder: WithProjectUriBuilder

    @property
    def _permissions(self) -> PermissionUriBuilder:
        return PermissionUriBuilder(self.builder)

    def groups(self) -> GroupPermissionUriBuilder:
        return self._permissions.groups()

    def users(self) -> UserPermissionUriBuilder:
        return self._permissions.users()

    def permission(self, perm: str) -> WithProjectPermissionUriBuilder:
        return WithProjectPermissionUriBuilder(self, perm)

    def build(self) -> str:
        return self._permissions.build()


@dataclass(frozen=True)
class WithProjectPermissionUriBuilder(UriBuilder):
    """A single named permission of a project."""

    builder: ProjectPermissionsUriBuilder
    permission: str

    def all(self) -> TerminalUriBuilder:
        return self._terminal("all")

    def build(self) -> str:
        return f"{self.builder.build()}/{self.permission}"