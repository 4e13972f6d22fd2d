"""GitHub release data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Asset:
    """Represents a GitHub release asset."""

    download_url: str

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(download_url=data.get("browser_download_url") or "")

    @property
    def name(self) -> str:
        """File name of the asset (last path segment of its download URL)."""
        return self.download_url.rstrip("/").split("/")[-1]


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    tag_name: str
    assets: tuple[Asset, ...] = ()

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = tuple(
            Asset.from_api_response(a) for a in data.get("assets") or []
        )
        return cls(tag_name=data.get("tag_name") or "", assets=assets)
