import json

import httpx
import pytest

_NETWORK_BLOCK_MSG = "Network access is blocked during tests. Use httpx.MockTransport."


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    """Prevent real HTTP requests; MockTransport-backed clients still work."""

    def _block(*_args, **_kwargs):
        raise RuntimeError(_NETWORK_BLOCK_MSG)

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", _block)


def make_feed(*releases) -> bytes:
    """Build a release feed payload from (tag, [asset names]) pairs."""
    data = [
        {
            "tag_name": tag,
            "assets": [
                {
                    "name": name,
                    "browser_download_url": f"https://github.com/acme/app/releases/download/{tag}/{name}",
                }
                for name in names
            ],
        }
        for tag, names in releases
    ]
    return json.dumps(data).encode()


def asset_url(tag: str, name: str) -> str:
    return f"https://github.com/acme/app/releases/download/{tag}/{name}"


class FakeFetcher:
    """Fetch callable recording the URLs it was asked for."""

    def __init__(self, payload: bytes):
        self.payload = payload
        self.calls: list[str] = []

    def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        return self.payload
