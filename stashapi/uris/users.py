"""URI builders for users."""

from __future__ import annotations

from dataclasses import dataclass

from stashapi.uris.base import TerminalUriBuilder, UriBuilder


@dataclass(frozen=True)
class UserUriBuilder(UriBuilder):
    """The ``users`` collection."""

    builder: UriBuilder

    def user(self, user: str) -> WithUserUriBuilder:
        return WithUserUriBuilder(self, user)

    def credentials(self) -> TerminalUriBuilder:
        return self._terminal("credentials")

    def build(self) -> str:
        return f"{self.builder.build()}/users"


@dataclass(frozen=True)
class WithUserUriBuilder(UriBuilder):
    """A single user identified by slug."""

    builder: UserUriBuilder
    user: str

    def avatar(self) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, "avatar.png")

    def settings(self) -> TerminalUriBuilder:
        return self._terminal("settings")

    def build(self) -> str:
        return f"{self.builder.build()}/{self.user}"