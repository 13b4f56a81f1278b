"""Unit tests for status code handling of the contents API client."""

from unittest.mock import AsyncMock

import pytest

from domain.encoding import encode_transport
from infrastructure.errors import (
    AuthError,
    ConflictError,
    RemoteError,
    TransientError,
)
from infrastructure.github_client import GitHubContentsClient
from infrastructure.http_client import HTTPResponse, NetworkError


@pytest.fixture
def http_client():
    return AsyncMock()


@pytest.fixture
def client(http_client):
    return GitHubContentsClient(http_client, api_url="https://api.example.com/")


def test_build_url(client, settings):
    url = client.build_url(settings, "practice/leetcode/easy/Two Sum/solution.cpp")
    assert url == (
        "https://api.example.com/repos/alice/dsa-archive/contents/"
        "practice/leetcode/easy/Two%20Sum/solution.cpp"
    )


@pytest.mark.asyncio
async def test_get_file_found(client, http_client, settings):
    http_client.request.return_value = HTTPResponse(
        200, '{"sha": "abc123", "content": "aGk=\\n"}'
    )

    remote = await client.get_file(settings, "a.txt")

    assert remote.sha == "abc123"
    assert remote.content == "aGk=\n"
    method, url = http_client.request.call_args.args
    headers = http_client.request.call_args.kwargs["headers"]
    assert method == "GET"
    assert url.endswith("/repos/alice/dsa-archive/contents/a.txt")
    assert headers["Authorization"] == "Bearer ghp_secret"
    assert headers["Accept"] == "application/vnd.github.v3+json"


@pytest.mark.asyncio
async def test_get_file_missing(client, http_client, settings):
    http_client.request.return_value = HTTPResponse(404, '{"message": "Not Found"}')

    assert await client.get_file(settings, "a.txt") is None


@pytest.mark.parametrize(
    "status, error_type",
    [
        (401, AuthError),
        (403, AuthError),
        (409, ConflictError),
        (422, RemoteError),
        (500, TransientError),
        (503, TransientError),
    ],
)
@pytest.mark.asyncio
async def test_error_status_mapping(client, http_client, settings, status, error_type):
    http_client.request.return_value = HTTPResponse(status, '{"message": "nope"}')

    with pytest.raises(error_type) as exc_info:
        await client.put_file(settings, "a.txt", encode_transport("x"), "msg")

    assert exc_info.value.status_code == status
    assert "nope" in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_error_is_transient(client, http_client, settings):
    http_client.request.side_effect = NetworkError("connection reset")

    with pytest.raises(TransientError):
        await client.get_file(settings, "a.txt")


@pytest.mark.asyncio
async def test_put_file_body(client, http_client, settings):
    http_client.request.return_value = HTTPResponse(201, '{"content": {"sha": "new"}}')

    await client.put_file(settings, "a.txt", "eA==", "Add a.txt", sha="old")

    method, _ = http_client.request.call_args.args
    assert method == "PUT"
    assert http_client.request.call_args.kwargs["json_body"] == {
        "message": "Add a.txt",
        "content": "eA==",
        "sha": "old",
    }


@pytest.mark.asyncio
async def test_put_file_without_sha_omits_it(client, http_client, settings):
    http_client.request.return_value = HTTPResponse(201, "{}")

    await client.put_file(settings, "a.txt", "eA==", "Add a.txt")

    assert "sha" not in http_client.request.call_args.kwargs["json_body"]


@pytest.mark.asyncio
async def test_error_without_json_body_uses_text(client, http_client, settings):
    http_client.request.return_value = HTTPResponse(502, "Bad Gateway")

    with pytest.raises(TransientError) as exc_info:
        await client.get_file(settings, "a.txt")

    assert str(exc_info.value) == "GitHub Error 502: Bad Gateway"
