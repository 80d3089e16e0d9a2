"""Logging setup for the CLI and embedding applications.

Library modules only create loggers (``logging.getLogger(__name__)``); they
never install handlers. Applications call :func:`configure_logging` once.

Example:
    >>> from newsfeed.core.logging import configure_logging
    >>> configure_logging("WARNING", "plain")
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from newsfeed.core.exceptions import ConfigurationError

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    level: str = "INFO",
    fmt: str = "console",
    *,
    console: Console | None = None,
) -> None:
    """Install a single handler on the ``newsfeed`` logger.

    Args:
        level: Logging level name (e.g. "DEBUG").
        fmt: "console" for rich output, "plain" for one line per record.
        console: Rich console to write to (default: stderr).

    Raises:
        ConfigurationError: If the level or format is unknown.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    if fmt == "console":
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    elif fmt == "plain":
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        raise ConfigurationError(f"Unknown log format: {fmt}")

    root = logging.getLogger("newsfeed")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)
