"""
Package logger.

PySATL UQ owns an independent loguru logger so that its messages never
leak into the application's default loguru sink. Nothing is emitted until
:func:`set_log_level` attaches a sink.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from typing import Literal, get_args

from loguru._logger import Core as _Core, Logger as _Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = (
    "<fg #B0BEC5>{time:YYYY-MM-DD HH:mm:ss.SSS}</fg #B0BEC5> | "
    "<level>{level: <8}</level> | "
    "<fg #E91E63>{thread.name: <10}</fg #E91E63> | "
    "<fg #2196F3>{name}</fg #2196F3>:"
    "<fg #03A9F4>{function}</fg #03A9F4>:"
    "<fg #009688>{line}</fg #009688> - "
    "<level>{message}</level>"
)

logger = _Logger(
    core=_Core(),
    exception=None,
    depth=0,
    record=False,
    lazy=False,
    colors=False,
    raw=False,
    capture=True,
    patchers=[],
    extra={},
)

_handler_id: int | None = None


def set_log_level(level: LogLevel) -> None:
    """
    Attach (or replace) a stderr sink with the given level.

    Parameters
    ----------
    level : LogLevel
        One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL.

    Raises
    ------
    ValueError
        If an invalid log level is provided.
    """
    global _handler_id

    valid_levels = get_args(LogLevel)
    if level not in valid_levels:
        raise ValueError(f"Invalid log level '{level}'. Must be one of: {valid_levels}")

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # Sink already removed by the user
            pass

    _handler_id = logger.add(
        sink=sys.stderr,
        level=level,
        colorize=True,
        format=LOG_FORMAT,
    )
    logger.debug(f"Log level set to {level}")


def disable_logging() -> None:
    """Remove the sink attached by :func:`set_log_level`, if any."""
    global _handler_id

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass
        _handler_id = None


__all__ = [
    "logger",
    "set_log_level",
    "disable_logging",
    "LogLevel",
]
