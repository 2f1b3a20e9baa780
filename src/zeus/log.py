"""Logging setup: one Rich handler on stderr for the ``zeus`` logger."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {0: logging.ERROR, 1: logging.WARNING, 2: logging.INFO}


def verbosity_level(verbosity: int) -> int:
    """Map a verbosity count (``-v`` minus ``-q``) to a logging level."""
    if verbosity < 0:
        return logging.CRITICAL + 1
    return _LEVELS.get(verbosity, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    """Install the stderr handler, replacing one from an earlier call."""
    logger = logging.getLogger("zeus")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(verbosity_level(verbosity))
