"""Authentication schemes and transport settings for the API client."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import Enum


class Scheme(Enum):
    """URI scheme used to reach the server."""

    HTTP = "http"
    HTTPS = "https"


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic authentication with a user name and password."""

    username: str
    password: str = field(repr=False)

    def header(self) -> str:
        """Return the value for the ``Authorization`` request header."""
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class BearerAuth:
    """Bearer token authentication."""

    token: str = field(repr=False)

    def header(self) -> str:
        """Return the value for the ``Authorization`` request header."""
        return f"Bearer {self.token}"


Authorization = BasicAuth | BearerAuth