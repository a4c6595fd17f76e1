"""Logger configuration shared by the CLI and the terminal frontend."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_LEVEL = logging.WARNING
DEFAULT_FORMAT = "%(name)s: %(message)s"


def setup_logger(
    name: str = "eightpuzzle",
    level: int = DEFAULT_LEVEL,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a single :class:`RichHandler` to the logger *name*.

    Calling it again replaces the previous handler, so the CLI can adjust the
    level without stacking duplicate output.
    """
    logger = logging.getLogger(name)
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.setLevel(level)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging configured at %s", logging.getLevelName(level))
    return logger


def get_level_from_string(level_str: str) -> int:
    """Convert a level name such as ``"info"`` to its logging constant."""
    return LOG_LEVELS.get(level_str.lower(), DEFAULT_LEVEL)
