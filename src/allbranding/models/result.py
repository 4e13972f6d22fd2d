"""Selection result model."""

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionResult:
    """The selected release version and asset URL.

    Both fields are empty when nothing matched.
    """

    version: str = ""
    browser_download_url: str = ""

    @property
    def found(self) -> bool:
        return bool(self.version)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "version": self.version,
            "browser_download_url": self.browser_download_url,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
