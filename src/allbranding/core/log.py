"""Logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr, stdout carries only the result
stderr_console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Route allbranding log records through rich on stderr."""
    logger = logging.getLogger("allbranding")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=stderr_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
