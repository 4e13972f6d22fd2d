"""Asset matching."""

import re

from allbranding.core.config import ConfigError
from allbranding.models.release import Asset, Release


def compile_asset_pattern(pattern: str) -> re.Pattern:
    """Compile the asset pattern."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigError(f"Invalid asset regex {pattern!r}: {e}") from e


def matches(asset_name: str, pattern: re.Pattern) -> bool:
    """Check if the pattern matches somewhere in the asset file name."""
    return pattern.search(asset_name) is not None


def find_matching_asset(release: Release, pattern: re.Pattern) -> Asset | None:
    """Find the first asset of a release whose file name matches."""
    for asset in release.assets:
        if matches(asset.name, pattern):
            return asset
    return None
