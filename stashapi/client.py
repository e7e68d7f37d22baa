"""Asynchronous HTTP client for the REST API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from stashapi.auth import Authorization, Scheme
from stashapi.models.get import BitbucketErrors

T = TypeVar("T")

Parser = Callable[[Any], T]


def parse_api_result(data: Any, parse: Callable[[Any], T]) -> T:
    """Decode ``data`` with ``parse``, or raise the server's error list.

    The value is first read as the expected model. If that fails and it
    is an error list, that list is raised as :class:`BitbucketErrors`;
    if it is neither, :class:`ValueError` is raised.
    """
    try:
        return parse(data)
    except (ValueError, TypeError, KeyError) as parse_error:
        try:
            errors = BitbucketErrors.from_dict(data)
        except ValueError:
            raise ValueError(
                "response matched neither the expected model nor an error list"
            ) from parse_error
    raise errors


def _json_body(payload: Any) -> Any:
    to_dict = getattr(payload, "to_dict", None)
    return to_dict() if callable(to_dict) else payload


class AsyncRestClient(ABC):
    """The operations the resource classes need from an HTTP client."""

    @property
    @abstractmethod
    def host(self) -> str:
        """Host name, optionally with port, of the server."""

    @property
    @abstractmethod
    def scheme(self) -> Scheme:
        """Scheme used to reach the server."""

    @abstractmethod
    async def get(self, uri: str) -> httpx.Response:
        """Send a GET request and return the raw response."""

    @abstractmethod
    async def get_as(self, uri: str, parse: Callable[[Any], T]) -> T:
        """Send a GET request and decode the JSON body with ``parse``."""

    @abstractmethod
    async def post(self, uri: str, payload: Any, parse: Callable[[Any], T]) -> T:
        """Send a POST request with an optional JSON payload."""

    @abstractmethod
    async def put(self, uri: str, payload: Any, parse: Callable[[Any], T]) -> T:
        """Send a PUT request with an optional JSON payload."""

    @abstractmethod
    async def delete(self, uri: str) -> None:
        """Send a DELETE request, raising if the server reports an error."""


class BitbucketClient(AsyncRestClient):
    """HTTP client that talks to the server over ``httpx``."""

    def __init__(
        self,
        host: str = "",
        scheme: Scheme = Scheme.HTTP,
        auth: Authorization | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._host = host
        self._scheme = scheme
        self._auth = auth
        self._http = http_client if http_client is not None else httpx.AsyncClient()

    @classmethod
    def with_auth(cls, host: str, scheme: Scheme, auth: Authorization) -> BitbucketClient:
        """Create a client that authenticates every request."""
        return cls(host, scheme, auth)

    @property
    def host(self) -> str:
        return self._host

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    @property
    def auth(self) -> Authorization | None:
        return self._auth

    async def _send(self, method: str, uri: str, payload: Any = None) -> httpx.Response:
        headers = {}
        if self._auth is not None:
            headers["Authorization"] = self._auth.header()
        if payload is None:
            return await self._http.request(method, uri, headers=headers)
        return await self._http.request(method, uri, headers=headers, json=_json_body(payload))

    async def _send_as(
        self, method: str, uri: str, parse: Callable[[Any], T], payload: Any = None
    ) -> T:
        response = await self._send(method, uri, payload)
        return parse_api_result(response.json(), parse)

    async def get(self, uri: str) -> httpx.Response:
        return await self._send("GET", uri)

    async def get_as(self, uri: str, parse: Callable[[Any], T]) -> T:
        return await self._send_as("GET", uri, parse)

    async def post(self, uri: str, payload: Any, parse: Callable[[Any], T]) -> T:
        return await self._send_as("POST", uri, parse, payload)

    async def put(self, uri: str, payload: Any, parse: Callable[[Any], T]) -> T:
        return await self._send_as("PUT", uri, parse, payload)

    async def delete(self, uri: str) -> None:
        response = await self._send("DELETE", uri)
        if response.is_error:
            raise BitbucketErrors.from_dict(response.json())

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> BitbucketClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()