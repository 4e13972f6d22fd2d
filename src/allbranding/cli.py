"""CLI entry point for allbranding."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from allbranding import __version__
from allbranding.commands import query
from allbranding.core.config import DEFAULT_CONFIG_PATH, ConfigError, load_config_file
from allbranding.core.log import setup_logging

console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group(context_settings={"auto_envvar_prefix": "ALLBRANDING"})
@click.version_option(version=__version__, prog_name="allbranding")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="YAML file with default option values",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Level of diagnostics written to stderr",
)
@click.option("-v", "--verbose", is_flag=True, help="Shortcut for --log-level DEBUG")
@click.pass_context
def main(ctx: click.Context, config_path: Path, log_level: str, verbose: bool):
    """Allbranding - find the latest GitHub release asset matching a pattern.

    Examples:

        allbranding query

        allbranding query --releases-url https://api.github.com/repos/junegunn/fzf/releases --asset-regex 'linux_amd64\\.tar\\.gz$'

        allbranding query --ignore '-rc' --ignore 'beta' --parse-harder
    """
    setup_logging("DEBUG" if verbose else log_level.upper())

    try:
        defaults = load_config_file(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if defaults:
        ctx.default_map = {"query": defaults}


# Register commands
main.add_command(query.query)


if __name__ == "__main__":
    main()
