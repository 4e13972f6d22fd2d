"""GitHub releases feed client."""

import json

import httpx

from allbranding import __version__
from allbranding.models.release import Release


class TransportError(Exception):
    """Release feed could not be fetched."""

    pass


class DecodeError(Exception):
    """Release feed payload is not a valid list of releases."""

    pass


class ReleaseFeedClient:
    """Client for fetching raw release feeds."""

    def __init__(self, transport: httpx.BaseTransport | None = None):
        self.client = httpx.Client(
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": f"allbranding/{__version__}",
            },
            timeout=30.0,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def fetch(self, url: str) -> bytes:
        """Fetch the raw release feed from URL."""
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch releases from {url}: {e}") from e

        if response.status_code == 404:
            raise TransportError(f"Releases not found at {url}")
        if response.status_code == 403:
            raise TransportError("GitHub API rate limit exceeded")
        if not response.is_success:
            raise TransportError(
                f"Failed to fetch releases from {url}: HTTP {response.status_code}"
            )

        return response.content


def parse_releases(payload: bytes) -> list[Release]:
    """Decode a release feed payload."""
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Failed to decode releases JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError("Failed to decode releases JSON: expected a list of releases")

    releases = []
    for item in data:
        if not isinstance(item, dict):
            raise DecodeError(f"Failed to decode releases JSON: unexpected entry {item!r}")
        tag_name = item.get("tag_name")
        if tag_name is not None and not isinstance(tag_name, str):
            raise DecodeError(f"Failed to decode releases JSON: bad tag_name {tag_name!r}")
        assets = item.get("assets") or []
        if not isinstance(assets, list) or not all(isinstance(a, dict) for a in assets):
            raise DecodeError(
                f"Failed to decode releases JSON: bad assets for {tag_name!r}"
            )
        for asset in assets:
            url = asset.get("browser_download_url")
            if url is not None and not isinstance(url, str):
                raise DecodeError(
                    f"Failed to decode releases JSON: bad browser_download_url {url!r} for {tag_name!r}"
                )
        releases.append(Release.from_api_response(item))

    return releases
