import json

import httpx
import pytest

from stashapi.auth import BasicAuth, BearerAuth, Scheme
from stashapi.client import BitbucketClient, parse_api_result
from stashapi.models.get import BitbucketError, BitbucketErrors, LinkPart
from stashapi.models.post import User

URI = "http://stash.test.com/rest/api/1.0/projects"

ERRORS = {
    "errors": [
        {
            "context": None,
            "message": "Project non_existent was not found",
            "exceptionName": None,
        }
    ]
}


class _Recorder:
    def __init__(self, status=200, body=None, content=None):
        self.status = status
        self.body = body
        self.content = content
        self.requests = []

    def handle(self, request):
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)


def _client(recorder, auth=None):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder.handle))
    return BitbucketClient("stash.test.com", Scheme.HTTP, auth, http_client=http_client)


def test_parse_api_result_returns_model():
    data = {"href": "http://stash.test.com/projects/test_project"}
    assert parse_api_result(data, LinkPart.from_dict) == LinkPart(data["href"])


def test_parse_api_result_raises_error_list():
    with pytest.raises(BitbucketErrors) as raised:
        parse_api_result(ERRORS, LinkPart.from_dict)
    assert raised.value.errors == [BitbucketError("Project non_existent was not found")]


def test_parse_api_result_rejects_unknown_shape():
    with pytest.raises(ValueError):
        parse_api_result({"something": 1}, LinkPart.from_dict)


@pytest.mark.asyncio
async def test_get_as_sends_bearer_header_and_parses():
    recorder = _Recorder(body={"href": "link"})
    client = _client(recorder, BearerAuth("token"))
    result = await client.get_as(URI, LinkPart.from_dict)
    assert result == LinkPart("link")
    (request,) = recorder.requests
    assert request.method == "GET"
    assert str(request.url) == URI
    assert request.headers["Authorization"] == "Bearer token"


@pytest.mark.asyncio
async def test_basic_auth_header_is_sent():
    password = "password"
    auth = BasicAuth("user", password)
    recorder = _Recorder(body={"href": "link"})
    client = _client(recorder, auth)
    await client.get_as(URI, LinkPart.from_dict)
    assert recorder.requests[0].headers["Authorization"] == auth.header()


@pytest.mark.asyncio
async def test_no_auth_sends_no_authorization_header():
    recorder = _Recorder(body={"href": "link"})
    client = _client(recorder)
    await client.get_as(URI, LinkPart.from_dict)
    assert "Authorization" not in recorder.requests[0].headers


@pytest.mark.asyncio
async def test_get_returns_raw_response():
    recorder = _Recorder(content=b"raw-bytes")
    client = _client(recorder)
    response = await client.get(URI)
    assert response.content == b"raw-bytes"


@pytest.mark.asyncio
async def test_get_as_raises_server_errors():
    recorder = _Recorder(status=404, body=ERRORS)
    client = _client(recorder)
    with pytest.raises(BitbucketErrors) as raised:
        await client.get_as(URI, LinkPart.from_dict)
    assert raised.value == BitbucketErrors.from_dict(ERRORS)


@pytest.mark.asyncio
async def test_post_sends_payload_as_json():
    recorder = _Recorder(status=201, body={"href": "created"})
    client = _client(recorder)
    payload = User(name="jane")
    result = await client.post(URI, payload, LinkPart.from_dict)
    assert result == LinkPart("created")
    (request,) = recorder.requests
    assert request.method == "POST"
    assert json.loads(request.content) == payload.to_dict()


@pytest.mark.asyncio
async def test_post_without_payload_sends_no_body():
    recorder = _Recorder(body={"href": "created"})
    client = _client(recorder)
    await client.post(URI, None, LinkPart.from_dict)
    assert recorder.requests[0].content == b""


@pytest.mark.asyncio
async def test_put_sends_mapping_payload():
    recorder = _Recorder(body={"href": "updated"})
    client = _client(recorder)
    payload = {"key": "EPN"}
    result = await client.put(URI, payload, LinkPart.from_dict)
    assert result == LinkPart("updated")
    assert recorder.requests[0].method == "PUT"
    assert json.loads(recorder.requests[0].content) == payload


@pytest.mark.asyncio
async def test_delete_success_returns_none():
    recorder = _Recorder(status=204)
    client = _client(recorder)
    assert await client.delete(URI) is None
    assert recorder.requests[0].method == "DELETE"


@pytest.mark.asyncio
async def test_delete_error_status_raises_errors():
    recorder = _Recorder(status=401, body=ERRORS)
    client = _client(recorder)
    with pytest.raises(BitbucketErrors) as raised:
        await client.delete(URI)
    assert raised.value == BitbucketErrors.from_dict(ERRORS)


@pytest.mark.asyncio
async def test_delete_ignores_body_on_success():
    recorder = _Recorder(status=200, body=ERRORS)
    client = _client(recorder)
    assert await client.delete(URI) is None


def test_with_auth_keeps_settings():
    auth = BearerAuth("token")
    client = BitbucketClient.with_auth("stash.test.com", Scheme.HTTPS, auth)
    assert (client.host, client.scheme, client.auth) == ("stash.test.com", Scheme.HTTPS, auth)


def test_default_client_has_no_auth():
    client = BitbucketClient("stash.test.com", Scheme.HTTP)
    assert client.auth is None
    assert client.scheme is Scheme.HTTP


@pytest.mark.asyncio
async def test_context_manager_closes_http_client():
    http_client = httpx.AsyncClient()
    async with BitbucketClient("stash.test.com", http_client=http_client):
        assert not http_client.is_closed
    assert http_client.is_closed