"""Query command implementation."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from allbranding.core.cache import FileCacheStore
from allbranding.core.config import (
    DEFAULT_ASSET_REGEX,
    DEFAULT_RELEASES_URL,
    ConfigError,
    QueryConfig,
)
from allbranding.core.github import DecodeError, ReleaseFeedClient, TransportError
from allbranding.core.selector import ReleaseSelector

console = Console(stderr=True)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--releases-url",
    default=DEFAULT_RELEASES_URL,
    show_default=True,
    help="URL of the GitHub releases API endpoint",
)
@click.option(
    "--asset-regex",
    default=DEFAULT_ASSET_REGEX,
    show_default=True,
    help="Regular expression to match the desired asset",
)
@click.option("--no-cache", is_flag=True, help="Disable caching of the releases data")
@click.option(
    "--parse-harder",
    is_flag=True,
    help="Remove non-numeric characters from version strings before parsing",
)
@click.option(
    "--ignore",
    multiple=True,
    help="Regex pattern of versions to ignore (can be given multiple times)",
)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for cached release data",
)
def query(
    releases_url: str,
    asset_regex: str,
    no_cache: bool,
    parse_harder: bool,
    ignore: tuple[str, ...],
    cache_dir: Path | None,
):
    """Print the latest release asset matching ASSET_REGEX as JSON.

    Output is a single line with "version" and "browser_download_url",
    both empty when no release has a matching asset.
    """
    config = QueryConfig(
        releases_url=releases_url,
        asset_regex=asset_regex,
        no_cache=no_cache,
        parse_harder=parse_harder,
        ignore=tuple(ignore),
        cache_dir=cache_dir,
    )
    store = FileCacheStore(config.resolved_cache_dir())
    logger.debug("cache path %s", store.directory)

    try:
        with ReleaseFeedClient() as client:
            selector = ReleaseSelector(config, fetch=client.fetch, store=store)
            result = selector.select()
    except (ConfigError, TransportError, DecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    click.echo(result.to_json())
