# wpai/logging/logger.py
"""
Unified logging setup for wpai.

All modules use:
    from wpai.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint, via configure_logging().
Library code never installs handlers.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; the handler is only added once.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
