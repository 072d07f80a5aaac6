"""Logging setup.

The package logs through loguru but stays silent until :func:`configure` is
called, so embedding applications keep control of their own sinks.
"""

import sys

from loguru import logger

_PACKAGE = "smart_timer"
_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message}"


def configure(level: str = "INFO") -> None:
    """Route package logs to stderr.

    Args:
        level: Minimum level to emit (e.g. "DEBUG", "INFO").
    """
    logger.remove()
    if sys.stderr is not None:
        logger.add(sys.stderr, level=level.upper(), format=_FORMAT)
    logger.enable(_PACKAGE)
