"""Building blocks for composing REST API URIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

REST_API_URI = "rest/api/1.0"


class BuildError(Exception):
    """Raised when a URI cannot be formed."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class UriBuilder(ABC):
    """A node in a URI path that renders the full URI up to itself."""

    @abstractmethod
    def build(self) -> str:
        """Return the URI, raising BuildError if it cannot be formed."""

    def _terminal(self, name: str) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, name.replace("_", "-"))


@dataclass(frozen=True)
class TerminalUriBuilder(UriBuilder):
    """A final path segment appended to another builder."""

    builder: UriBuilder
    resource: str

    def build(self) -> str:
        return f"{self.builder.build()}/{self.resource}"


@dataclass(frozen=True)
class PathUriBuilder(UriBuilder):
    """A fixed segment that may be followed by an arbitrary path."""

    builder: UriBuilder
    segment: str

    def path(self, path: str) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, path)

    def build(self) -> str:
        return f"{self.builder.build()}/{self.segment}"


class BrowseUriBuilder(PathUriBuilder):
    """The ``browse`` segment."""

    def __init__(self, builder: UriBuilder) -> None:
        super().__init__(builder, "browse")


class DiffUriBuilder(PathUriBuilder):
    """The ``diff`` segment."""

    def __init__(self, builder: UriBuilder) -> None:
        super().__init__(builder, "diff")


class FileUriBuilder(PathUriBuilder):
    """The ``files`` segment."""

    def __init__(self, builder: UriBuilder) -> None:
        super().__init__(builder, "files")


@dataclass(frozen=True)
class PermissionUriBuilder(UriBuilder):
    builder: UriBuilder

    def groups(self) -> GroupPermissionUriBuilder:
        return GroupPermissionUriBuilder(self)

    def users(self) -> UserPermissionUriBuilder:
        return UserPermissionUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/permissions"


@dataclass(frozen=True)
class GroupPermissionUriBuilder(UriBuilder):
    builder: PermissionUriBuilder

    def none(self) -> TerminalUriBuilder:
        return self._terminal("none")

    def build(self) -> str:
        return f"{self.builder.build()}/groups"


@dataclass(frozen=True)
class UserPermissionUriBuilder(UriBuilder):
    builder: PermissionUriBuilder

    def none(self) -> TerminalUriBuilder:
        return self._terminal("none")

    def build(self) -> str:
        return f"{self.builder.build()}/users"