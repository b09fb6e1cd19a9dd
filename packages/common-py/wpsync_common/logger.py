"""
Logging helpers.

Every module obtains its logger through get_logger so all output lives under
the ``wpsync`` namespace and can be configured in one place.

Usage:
    from wpsync_common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Resolved %s", package)
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVELS

ROOT_LOGGER_NAME = "wpsync"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the wpsync namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logging.Logger
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    # wpsync_sdk.dependencies.resolver -> wpsync.sdk.dependencies.resolver
    if name.startswith(f"{ROOT_LOGGER_NAME}_"):
        name = name[len(ROOT_LOGGER_NAME) + 1 :]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = DEFAULT_LOG_LEVEL, console: Optional[Console] = None) -> None:
    """
    Install a rich handler on the wpsync root logger.

    Calling it again replaces the previous handler, so the CLI can
    reconfigure per invocation.

    Args:
        level: One of LOG_LEVELS
        console: Console to log to (defaults to stderr)
    """
    level = level.lower()
    if level not in LOG_LEVELS:
        level = DEFAULT_LOG_LEVEL

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False
