import json

import httpx
import pytest

from allbranding.core.github import (
    DecodeError,
    ReleaseFeedClient,
    TransportError,
    parse_releases,
)
from allbranding.models.release import Asset, Release

URL = "https://api.github.com/repos/acme/app/releases"


def client_for(handler) -> ReleaseFeedClient:
    return ReleaseFeedClient(transport=httpx.MockTransport(handler))


def test_fetch_returns_body():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["accept"] = request.headers["accept"]
        return httpx.Response(200, content=b"[]")

    with client_for(handler) as client:
        assert client.fetch(URL) == b"[]"

    assert seen["url"] == URL
    assert seen["accept"] == "application/vnd.github+json"


@pytest.mark.parametrize(
    "status,message",
    [
        (404, "not found"),
        (403, "rate limit"),
        (500, "HTTP 500"),
    ],
)
def test_fetch_http_errors(status, message):
    with client_for(lambda request: httpx.Response(status)) as client:
        with pytest.raises(TransportError, match=message):
            client.fetch(URL)


def test_fetch_connection_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with client_for(handler) as client:
        with pytest.raises(TransportError, match="connection refused"):
            client.fetch(URL)


def test_parse_releases():
    payload = json.dumps(
        [
            {
                "tag_name": "v1.0.0",
                "name": "First",
                "assets": [
                    {"name": "a.tar.gz", "browser_download_url": "https://x/v1.0.0/a.tar.gz"},
                ],
            },
            {"tag_name": "v0.9.0"},
        ]
    ).encode()

    assert parse_releases(payload) == [
        Release("v1.0.0", (Asset("https://x/v1.0.0/a.tar.gz"),)),
        Release("v0.9.0", ()),
    ]


def test_parse_releases_empty():
    assert parse_releases(b"[]") == []


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b"\xff\xfe",
        b'{"message": "Not Found"}',
        b"[1, 2]",
        b'[{"tag_name": 3}]',
        b'[{"tag_name": "v1", "assets": "nope"}]',
        b'[{"tag_name": "v1.0.0", "assets": [{"browser_download_url": 5}]}]',
        b'[{"tag_name": 0}]',
    ],
)
def test_parse_releases_invalid(payload):
    with pytest.raises(DecodeError):
        parse_releases(payload)


def test_parse_releases_null_fields_default_to_empty():
    payload = b'[{"tag_name": null, "assets": [{"browser_download_url": null}]}]'
    assert parse_releases(payload) == [Release("", (Asset(""),))]
