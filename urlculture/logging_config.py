"""Opt-in loguru output for urlculture.

The package disables its own loguru messages on import so applications do not
get per-request resolution lines unless they ask for them.
"""

import sys

from loguru import logger

PACKAGE = "urlculture"

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def enable_logging(level: str | None = None) -> int | None:
    """Let urlculture messages reach loguru's sinks.

    With *level*, also add a stderr sink for urlculture messages at that level
    and return its id.
    """
    logger.enable(PACKAGE)
    if level is None:
        return None
    return logger.add(sys.stderr, format=_FORMAT, colorize=True, level=level, filter=PACKAGE)


def disable_logging(sink_id: int | None = None) -> None:
    """Silence urlculture messages again, removing *sink_id* if given."""
    logger.disable(PACKAGE)
    if sink_id is not None:
        logger.remove(sink_id)
