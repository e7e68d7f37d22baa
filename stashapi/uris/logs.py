"""URI builders for logger configuration."""

from __future__ import annotations

from dataclasses import dataclass

from stashapi.uris.base import TerminalUriBuilder, UriBuilder


@dataclass(frozen=True)
class LogUriBuilder(UriBuilder):
    """The ``logs`` section."""

    builder: UriBuilder

    def logger(self, logger: str) -> WithLoggerUriBuilder:
        return WithLoggerUriBuilder(self, logger)

    def root_logger(self) -> RootLoggerUriBuilder:
        return RootLoggerUriBuilder(self)

    def build(self) -> str:
        return f"{self.builder.build()}/logs"


@dataclass(frozen=True)
class WithLoggerUriBuilder(UriBuilder):
    """A named logger."""

    builder: LogUriBuilder
    logger: str

    def level(self, level: str) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, level)

    def build(self) -> str:
        return f"{self.builder.build()}/logger/{self.logger}"


@dataclass(frozen=True)
class RootLoggerUriBuilder(UriBuilder):
    """The root logger."""

    builder: LogUriBuilder

    def level(self, level: str) -> TerminalUriBuilder:
        return TerminalUriBuilder(self, level)

    def build(self) -> str:
        return f"{self.builder.build()}/rootLogger"