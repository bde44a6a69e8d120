# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Logger implementations for glyphlog.

``SinkLogger`` gates calls on its threshold, renders them through its
formatter and writes to a single sink behind a lock. ``MultiLogger`` fans a
call out to several loggers under a threshold of its own.

All calls run synchronously on the caller's thread. ``fatal`` is the one
exception to "logging never interrupts the program": it logs, then ends the
process through ``terminate``.
"""

from __future__ import annotations

import contextlib
import functools
import os
import sys
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, NoReturn

from glyphlog.formatter import DEFAULT_FORMATTER
from glyphlog.level import Level
from glyphlog.protocols import FormatterProtocol, LoggerProtocol, SinkProtocol

FATAL_EXIT_STATUS = 1


def terminate(status: int = FATAL_EXIT_STATUS) -> NoReturn:
    """End the process immediately with ``status``.

    The standard streams are flushed first. This is deliberately not
    ``sys.exit``: no ``SystemExit`` is raised, so nothing up the stack can
    intercept it.
    """
    for stream in (sys.stdout, sys.stderr):
        if stream is not None and not getattr(stream, "closed", False):
            # a broken pipe must not keep the process alive
            with contextlib.suppress(OSError, ValueError):
                stream.flush()
    os._exit(status)


def _interpolate(msg: Any, args: tuple[Any, ...]) -> str:
    """Apply printf-style ``args`` to ``msg``.

    A mismatch between placeholders and arguments does not raise; the
    message is kept as written and the arguments are appended to it.
    """
    msg = str(msg)
    if not args:
        return msg
    try:
        return msg % args
    except (TypeError, ValueError):
        return f"{msg} {args!r}"


class BaseLogger(ABC):
    """Shared per-level convenience calls on top of ``log``."""

    level: Level

    @abstractmethod
    def log(self, level: int, message: str) -> None:
        """Log ``message`` at ``level`` if it passes the threshold."""

    def flush(self) -> None:
        """Flush buffered output, if the destination buffers at all."""

    def is_enabled_for(self, level: int) -> bool:
        return level >= self.level

    def set_level(self, level: Level | int | str) -> None:
        """Set the minimum level that is emitted.

        Args:
            level: A Level, its rank, or its name
        """
        self.level = Level.from_string(level)

    def debug(self, msg: str, *args: Any) -> None:
        self.log(Level.DEBUG, _interpolate(msg, args))

    def info(self, msg: str, *args: Any) -> None:
        self.log(Level.INFO, _interpolate(msg, args))

    def print(self, msg: str, *args: Any) -> None:
        self.log(Level.INFO, _interpolate(msg, args))

    def warn(self, msg: str, *args: Any) -> None:
        self.log(Level.WARN, _interpolate(msg, args))

    warning = warn

    def error(self, msg: str, *args: Any) -> None:
        self.log(Level.ERROR, _interpolate(msg, args))

    def fatal(self, msg: str, *args: Any) -> NoReturn:
        """Log at FATAL, then terminate the process with status 1.

        The process terminates even when writing or flushing the line fails.
        """
        try:
            self._log_fatal(_interpolate(msg, args))
            self.flush()
        finally:
            terminate(FATAL_EXIT_STATUS)

    def _log_fatal(self, message: str) -> None:
        self.log(Level.FATAL, message)


class SinkLogger(BaseLogger):
    """Logger writing to a single sink.

    The lock is held only around ``sink.write``; rendering happens before it
    is taken. Bytes reach the sink in lock-acquisition order and lines from
    concurrent callers never interleave.
    """

    def __init__(
        self,
        level: Level | int | str = Level.INFO,
        formatter: FormatterProtocol = DEFAULT_FORMATTER,
        sink: SinkProtocol | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            level: Minimum level that is emitted
            formatter: Formatter rendering each line
            sink: Destination, ``sys.stdout`` when omitted
        """
        self.level = Level.from_string(level)
        self.formatter = formatter
        self.sink = sink if sink is not None else sys.stdout
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.name}, sink={self.sink!r})"

    def log(self, level: int, message: str) -> None:
        if level < self.level:
            return
        line = self.formatter.render(level, message)
        with self._lock:
            self.sink.write(line)

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            with self._lock:
                flush()

    def set_formatter(self, formatter: FormatterProtocol) -> None:
        self.formatter = formatter

    def set_sink(self, sink: SinkProtocol) -> None:
        self.sink = sink


class MultiLogger(BaseLogger):
    """Logger dispatching every call to an ordered list of loggers.

    A call must pass this logger's own threshold first; each child then
    applies its own threshold. Children are called in registration order.
    No lock is held here, each child serializes its own writes.
    """

    def __init__(self, level: Level | int | str = Level.DEBUG, *loggers: LoggerProtocol) -> None:
        self.level = Level.from_string(level)
        self.loggers: list[LoggerProtocol] = list(loggers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.name}, loggers={self.loggers!r})"

    def add_logger(self, logger: LoggerProtocol) -> None:
        self.loggers.append(logger)

    def log(self, level: int, message: str) -> None:
        if level < self.level:
            return
        for logger in self.loggers:
            logger.log(level, message)

    def flush(self) -> None:
        flushes = (getattr(logger, "flush", None) for logger in self.loggers)
        _call_each(flush for flush in flushes if flush is not None)

    def _log_fatal(self, message: str) -> None:
        # every child gets the line, even after an earlier child failed
        if Level.FATAL < self.level:
            return
        _call_each(
            functools.partial(logger._log_fatal, message)
            if isinstance(logger, BaseLogger)
            else functools.partial(logger.log, Level.FATAL, message)
            for logger in self.loggers
        )


def _call_each(calls: Iterable[Callable[[], object]]) -> None:
    """Run every call, then re-raise the first error any of them raised."""
    first_error: Exception | None = None
    for call in calls:
        try:
            call()
        except Exception as exc:
            if first_error is None:
                first_error = exc
    if first_error is not None:
        raise first_error


def new_logger(sink: SinkProtocol | None = None) -> SinkLogger:
    """Create an INFO logger with the default formatter."""
    return SinkLogger(Level.INFO, DEFAULT_FORMATTER, sink)
