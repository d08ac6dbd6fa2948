"""Logging setup for nginx-resolver."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "crit": logging.CRITICAL,
    "critical": logging.CRITICAL,
}

PACKAGE_LOGGER = "nginx_resolver"


def init_logging(level: str = "info") -> logging.Logger:
    """Configure the package logger with a rich console handler.

    Unknown level names fall back to info. Calling this again only
    updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level_number(level))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger


def level_number(level: str) -> int:
    """Translate a level name into a logging level number."""
    return _LEVELS.get(str(level).lower(), logging.INFO)
