"""Release selection: the latest release with a matching asset."""

import logging
from datetime import datetime, timezone
from typing import Callable

from allbranding.core import cache
from allbranding.core.assets import compile_asset_pattern, find_matching_asset
from allbranding.core.config import QueryConfig
from allbranding.core.filters import compile_patterns, filter_releases
from allbranding.core.github import parse_releases
from allbranding.core.versioning import sort_releases
from allbranding.models.result import SelectionResult

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReleaseSelector:
    """Selects the newest release whose assets contain a matching file.

    Patterns are compiled on construction, so an invalid regex raises
    ConfigError before the feed or the cache is touched.
    """

    def __init__(
        self,
        config: QueryConfig,
        fetch: Callable[[str], bytes],
        store: cache.CacheStore,
        now: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.fetch = fetch
        self.store = store
        self.now = now
        self.asset_pattern = compile_asset_pattern(config.asset_regex)
        self.ignore_patterns = compile_patterns(config.ignore)

    def load_payload(self) -> bytes:
        """Get the raw feed, from the cache when fresh, otherwise fetched."""
        key = cache.key_for(self.config.releases_url)
        logger.debug("cache key for %s: %s", self.config.releases_url, key)

        if self.config.caching_enabled:
            stored_at = self.store.stored_at(key)
            if stored_at is not None and cache.is_valid(
                stored_at, self.now(), self.config.cache_ttl
            ):
                logger.debug("using cached releases (stored %s)", stored_at.isoformat())
                return self.store.read(key)
            logger.debug("no fresh cache entry, fetching %s", self.config.releases_url)

        payload = self.fetch(self.config.releases_url)

        if cache.should_persist(self.config.caching_enabled):
            self.store.write(key, payload, self.now())

        return payload

    def select(self) -> SelectionResult:
        """Run the query and return the selected version and asset URL."""
        releases = parse_releases(self.load_payload())
        releases = filter_releases(releases, self.ignore_patterns)
        releases = sort_releases(releases, lenient=self.config.parse_harder)

        for release in releases:
            asset = find_matching_asset(release, self.asset_pattern)
            if asset is not None:
                logger.debug("selected %s from %s", asset.name, release.tag_name)
                return SelectionResult(
                    version=release.tag_name,
                    browser_download_url=asset.download_url,
                )

        logger.info("no release has an asset matching %r", self.config.asset_regex)
        return SelectionResult()
