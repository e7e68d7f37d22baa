"""URI builders for the administration resources."""

from __future__ import annotations

from dataclasses import dataclass

from stashapi.uris.base import PermissionUriBuilder, TerminalUriBuilder, UriBuilder


@dataclass(frozen=True)
class AdminUriBuilder(UriBuilder):
    """The ``admin`` section."""

    builder: UriBuilder

    def groups(self) -> AdminGroupUriBuilder:
        return AdminGroupUriBuilder(self)

    def users(self) -> AdminUserUriBuilder:
        return AdminUserUriBuilder(self)

    def permissions(self) -> PermissionUriBuilder:
        return PermissionUriBuilder(self)

    def mail_server(self) -> AdminMailServerUriBuilder:
        return AdminMailServerUriBuilder(self)

    def cluster(self) -> TerminalUriBuilder:
        return self._terminal("cluster")

    def licence(self) -> TerminalUriBuilder:
        return self._terminal("licence")

    def build(self) -> str:
        return f"{self.builder.build()}/admin"


@dataclass(frozen=True)
class AdminGroupUriBuilder(UriBuilder):
    """Group administration."""

    builder: AdminUriBuilder

    def add_user(self) -> TerminalUriBuilder:
        return self._terminal("add_user")

    def add_users(self) -> TerminalUriBuilder:
        return self._terminal("add_users")

    def more_members(self) -> TerminalUriBuilder:
        return self._terminal("more_members")

    def more_non_members(self) -> TerminalUriBuilder:
        return self._terminal("more_non_members")

    def remove_user(self) -> TerminalUriBuilder:
        return self._terminal("remove_user")

    def build(self) -> str:
        return f"{self.builder.build()}/groups"


@dataclass(frozen=True)
class AdminUserUriBuilder(UriBuilder):
    """User administration."""

    builder: AdminUriBuilder

    def add_group(self) -> TerminalUriBuilder:
        return self._terminal("add_group")

    def add_groups(self) -> TerminalUriBuilder:
        return self._terminal("add_groups")

    def captcha(self) -> TerminalUriBuilder:
        return self._terminal("captcha")

    def credentials(self) -> TerminalUriBuilder:
        return self._terminal("credentials")

    def more_members(self) -> TerminalUriBuilder:
        return self._terminal("more_members")

    def more_non_members(self) -> TerminalUriBuilder:
        return self._terminal("more_non_members")

    def remove_group(self) -> TerminalUriBuilder:
        return self._terminal("remove_group")

    def rename(self) -> TerminalUriBuilder:
        return self._terminal("rename")

    def build(self) -> str:
        return f"{self.builder.build()}/users"


@dataclass(frozen=True)
class AdminMailServerUriBuilder(UriBuilder):
    """Mail server configuration."""

    builder: AdminUriBuilder

    def sender_address(self) -> TerminalUriBuilder:
        return self._terminal("sender_address")

    def build(self) -> str:
        return f"{self.builder.build()}/mail-server"