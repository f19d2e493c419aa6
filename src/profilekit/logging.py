"""Logging setup for profilekit.

Modules get their logger with:

    from profilekit.logging import get_logger
    logger = get_logger(__name__)

Handlers and levels are configured once by the entry point through
configure_logging().
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """Install a stream handler on the root logger and set its level.

    Calling it again only updates the level; no duplicate handlers are added.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
