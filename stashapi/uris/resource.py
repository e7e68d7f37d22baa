"""The root of every REST API URI: scheme, host and API prefix."""

from __future__ import annotations

from stashapi.auth import Scheme
from stashapi.uris.admin import AdminUriBuilder
from stashapi.uris.base import REST_API_URI, BuildError, UriBuilder
from stashapi.uris.logs import LogUriBuilder
from stashapi.uris.project import ProjectUriBuilder
from stashapi.uris.users import UserUriBuilder


class ResourceUriBuilder(UriBuilder):
    """Start of a URI chain; ``scheme`` and ``host`` return updated copies."""

    __slots__ = ("_scheme", "_host")

    def __init__(self, scheme: Scheme = Scheme.HTTP, host: str | None = None) -> None:
        self._scheme = scheme
        self._host = host

    def scheme(self, scheme: Scheme) -> ResourceUriBuilder:
        return ResourceUriBuilder(scheme, self._host)

    def host(self, host: str) -> ResourceUriBuilder:
        return ResourceUriBuilder(self._scheme, host)

    def admin(self) -> AdminUriBuilder:
        return AdminUriBuilder(self)

    def projects(self) -> ProjectUriBuilder:
        return ProjectUriBuilder(self)

    def users(self) -> UserUriBuilder:
        return UserUriBuilder(self)

    def logs(self) -> LogUriBuilder:
        return LogUriBuilder(self)

    def build(self) -> str:
        if self._host is None:
            raise BuildError("host must be initialized")
        return f"{self._scheme.value}://{self._host}/{REST_API_URI}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceUriBuilder):
            return NotImplemented
        return (self._scheme, self._host) == (other._scheme, other._host)

    def __hash__(self) -> int:
        return hash((self._scheme, self._host))

    def __repr__(self) -> str:
        return f"ResourceUriBuilder(scheme={self._scheme!r}, host={self._host!r})"