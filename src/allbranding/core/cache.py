"""Release feed caching.

The policy (key derivation, freshness, whether to persist) is kept separate
from storage so it can be exercised without touching the file system.
"""

import hashlib
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Protocol

from allbranding.core.config import DEFAULT_CACHE_TTL
from allbranding.core.github import TransportError

logger = logging.getLogger(__name__)


class CacheError(TransportError):
    """Cache file could not be read or written."""

    pass


@dataclass(frozen=True)
class CacheEntry:
    """A cached feed payload."""

    key: str
    payload: bytes
    stored_at: datetime


def key_for(source: str) -> str:
    """Derive a cache key (SHA256 hex digest) from a feed URL."""
    return hashlib.sha256(source.encode("utf-8")).hexdigest()


def cache_file_name(key: str) -> str:
    return f"releases_{key}.json"


def is_valid(stored_at: datetime, now: datetime, ttl: timedelta = DEFAULT_CACHE_TTL) -> bool:
    """Check if an entry stored at ``stored_at`` is still fresh at ``now``."""
    return now - stored_at < ttl


def should_persist(caching_enabled: bool) -> bool:
    return caching_enabled


class CacheStore(Protocol):
    """Key/value storage for feed payloads."""

    def stored_at(self, key: str) -> datetime | None: ...

    def read(self, key: str) -> bytes: ...

    def write(self, key: str, payload: bytes, stored_at: datetime) -> None: ...


class MemoryCacheStore:
    """In-memory cache store."""

    def __init__(self):
        self._entries: dict[str, CacheEntry] = {}

    def stored_at(self, key: str) -> datetime | None:
        entry = self._entries.get(key)
        return entry.stored_at if entry else None

    def read(self, key: str) -> bytes:
        entry = self._entries.get(key)
        if entry is None:
            raise CacheError(f"No cache entry for {key}")
        return entry.payload

    def write(self, key: str, payload: bytes, stored_at: datetime) -> None:
        self._entries[key] = CacheEntry(key=key, payload=payload, stored_at=stored_at)

    def __contains__(self, key: str) -> bool:
        return key in self._entries


class FileCacheStore:
    """Cache store keeping one file per key in a directory.

    The file's modification time is the entry's storage time.
    """

    def __init__(self, directory: Path):
        self.directory = directory

    def path_for(self, key: str) -> Path:
        return self.directory / cache_file_name(key)

    def stored_at(self, key: str) -> datetime | None:
        path = self.path_for(key)
        try:
            mtime = path.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheError(f"Failed to get file info for {path}: {e}") from e
        return datetime.fromtimestamp(mtime, tz=timezone.utc)

    def read(self, key: str) -> bytes:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except OSError as e:
            raise CacheError(f"Failed to read cache file {path}: {e}") from e

    def write(self, key: str, payload: bytes, stored_at: datetime) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
            timestamp = stored_at.timestamp()
            os.utime(path, (timestamp, timestamp))
        except OSError as e:
            raise CacheError(f"Failed to write cache file {path}: {e}") from e
        logger.debug("wrote cache file %s", path)
