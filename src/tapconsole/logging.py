"""Logging setup for applications embedding tapconsole.

The library only creates module loggers. Handlers are installed
by the application, via setup_logging() or its own configuration.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Route log records through rich and return the package logger.

    Args:
        level: Log level name for the tapconsole logger.
        console: Console for log output. Default: rich Console on stderr.
    """
    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger = logging.getLogger("tapconsole")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
    return logger
