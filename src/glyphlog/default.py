# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
The process-wide default logger.

The default logger is created from ``LoggingSettings`` the first time it is
needed and lives for the rest of the process. The module-level shortcuts
(``info``, ``error``, ...) forward to whatever logger is installed at the
time of the call, so the setters take effect immediately.

Reconfiguration is not synchronized with logging that is already in flight
on other threads; configure the default logger before starting them.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, NoReturn, TextIO

from glyphlog.config import LoggingSettings
from glyphlog.factory import create_logger
from glyphlog.formatter import (
    DEFAULT_FORMATTER,
    DEFAULT_TEMPLATE,
    DEFAULT_TIME_FORMAT,
    ColorFormatter,
    TemplateFormatter,
)
from glyphlog.level import Level
from glyphlog.logger import BaseLogger, MultiLogger, SinkLogger
from glyphlog.protocols import FormatterProtocol, SinkProtocol

_log = logging.getLogger(__name__)

_default_logger: BaseLogger | None = None
_default_lock = threading.Lock()


def get_default_logger() -> BaseLogger:
    """Return the default logger, creating it on first use."""
    global _default_logger
    if _default_logger is None:
        with _default_lock:
            if _default_logger is None:
                _default_logger = create_logger(LoggingSettings.load())
                _log.debug("Created default logger %r", _default_logger)
    return _default_logger


def set_default_logger(logger: BaseLogger) -> None:
    """Install ``logger`` as the default logger."""
    global _default_logger
    with _default_lock:
        _default_logger = logger
    _log.debug("Installed default logger %r", logger)


def reset_default_logger() -> None:
    """Drop the default logger; the next call recreates it from settings."""
    global _default_logger
    with _default_lock:
        _default_logger = None


def _current_formatter(logger: BaseLogger) -> FormatterProtocol:
    if isinstance(logger, SinkLogger):
        return logger.formatter
    if isinstance(logger, MultiLogger):
        for child in logger.loggers:
            if isinstance(child, SinkLogger):
                return child.formatter
    return DEFAULT_FORMATTER


def set_threshold(level: Level | int | str) -> None:
    """Set the minimum level emitted by the default logger."""
    get_default_logger().set_level(level)
    _log.debug("Default logger threshold set to %s", level)


def set_formatter(formatter: FormatterProtocol) -> None:
    """Render default logger output with ``formatter``.

    When the default logger fans out, every single-sink child switches to
    the new formatter.
    """
    logger = get_default_logger()
    if isinstance(logger, SinkLogger):
        logger.set_formatter(formatter)
    elif isinstance(logger, MultiLogger):
        for child in logger.loggers:
            if isinstance(child, SinkLogger):
                child.set_formatter(formatter)
    _log.debug("Default logger formatter set to %r", formatter)


def set_sink(sink: SinkProtocol) -> None:
    """Send default logger output to ``sink``.

    A fan-out default logger is replaced by a single-sink logger that keeps
    its threshold and formatter.
    """
    logger = get_default_logger()
    if isinstance(logger, SinkLogger):
        logger.set_sink(sink)
    else:
        set_default_logger(SinkLogger(logger.level, _current_formatter(logger), sink))
    _log.debug("Default logger sink set to %r", sink)


def basic_config(
    level: Level | int | str = Level.INFO,
    template: str = DEFAULT_TEMPLATE,
    file: TextIO | None = None,
    file_only: bool = False,
    time_format: str = DEFAULT_TIME_FORMAT,
    color: bool = False,
) -> MultiLogger:
    """Configure the default logger for console and/or file output in one call.

    Args:
        level: Minimum level emitted to any destination
        template: Line template shared by every destination
        file: An already opened text file that receives a copy of every line;
            it is never closed here
        file_only: Skip console output, only honored when ``file`` is given
        time_format: Reference-date time pattern
        color: Colorize console output (the file always gets plain text)

    Returns:
        The fan-out logger installed as the default
    """
    plain = TemplateFormatter(template=template, time_format=time_format)
    logger = MultiLogger(level)
    if file is None or not file_only:
        console = ColorFormatter(base=plain) if color else plain
        logger.add_logger(SinkLogger(Level.DEBUG, console, sys.stdout))
    if file is not None:
        logger.add_logger(SinkLogger(Level.DEBUG, plain, file))
    set_default_logger(logger)
    return logger


def log(level: int, message: str) -> None:
    get_default_logger().log(level, message)


def debug(msg: str, *args: Any) -> None:
    get_default_logger().debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    get_default_logger().info(msg, *args)


def print(msg: str, *args: Any) -> None:  # noqa: A001
    get_default_logger().print(msg, *args)


def warn(msg: str, *args: Any) -> None:
    get_default_logger().warn(msg, *args)


warning = warn


def error(msg: str, *args: Any) -> None:
    get_default_logger().error(msg, *args)


def fatal(msg: str, *args: Any) -> NoReturn:
    get_default_logger().fatal(msg, *args)
