"""Configuration for allbranding queries."""

from pathlib import Path
from dataclasses import dataclass
from datetime import timedelta
import os
import tempfile

import yaml


DEFAULT_RELEASES_URL = "https://api.github.com/repos/gnprice/toml-cli/releases"
DEFAULT_ASSET_REGEX = r"toml-v\d+\.\d+\.\d+-x86_64-linux\.tar\.gz$"
DEFAULT_CACHE_TTL = timedelta(hours=1)
DEFAULT_CONFIG_PATH = Path.home() / ".allbranding.yaml"

# Config file keys, named like the CLI flags
CONFIG_KEYS = ("releases-url", "asset-regex", "no-cache", "parse-harder", "ignore", "cache-dir")


class ConfigError(Exception):
    """Invalid configuration (bad pattern or config file)."""

    pass


def default_cache_dir() -> Path:
    """Directory holding cached release feeds."""
    env_dir = os.environ.get("ALLBRANDING_CACHE_DIR")
    if env_dir:
        return Path(env_dir)
    return Path(tempfile.gettempdir()) / "allbranding"


@dataclass(frozen=True)
class QueryConfig:
    """Immutable settings for a single release query."""

    releases_url: str = DEFAULT_RELEASES_URL
    asset_regex: str = DEFAULT_ASSET_REGEX
    no_cache: bool = False
    parse_harder: bool = False  # strip non-numeric characters from tags
    ignore: tuple[str, ...] = ()
    cache_dir: Path | None = None
    cache_ttl: timedelta = DEFAULT_CACHE_TTL

    @property
    def caching_enabled(self) -> bool:
        return not self.no_cache

    def resolved_cache_dir(self) -> Path:
        return self.cache_dir or default_cache_dir()


def load_config_file(path: Path) -> dict:
    """Load command defaults from a YAML config file.

    Keys use the CLI flag names (e.g. ``asset-regex``) and are returned with
    underscores so they can be used as click defaults. A missing file yields
    an empty dict.
    """
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    defaults = {key.replace("-", "_"): value for key, value in data.items()}
    if isinstance(defaults.get("ignore"), str):
        defaults["ignore"] = [defaults["ignore"]]
    return defaults
