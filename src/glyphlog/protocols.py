# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog

"""
Interface definitions for glyphlog.

These protocols describe the three seams of the system: where text goes
(sinks), how a line is rendered (formatters) and who decides whether to
render it (loggers).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SinkProtocol(Protocol):
    """Append-only text destination, e.g. ``sys.stdout`` or an open file."""

    def write(self, text: str, /) -> Any: ...


@runtime_checkable
class FormatterProtocol(Protocol):
    """Turns a level and message into a complete output line."""

    def render(self, level: int, message: str) -> str:
        """Render a line, including its terminator."""
        ...


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for glyphlog loggers.

    Convenience calls accept printf-style arguments which are interpolated
    into the message before it is passed on to ``log``.
    """

    def log(self, level: int, message: str) -> None:
        """Log a message at ``level`` if it passes the threshold."""
        ...

    def debug(self, msg: str, *args: Any) -> None:
        """Log a debug message."""
        ...

    def info(self, msg: str, *args: Any) -> None:
        """Log an info message."""
        ...

    def print(self, msg: str, *args: Any) -> None:
        """Log an info message."""
        ...

    def warn(self, msg: str, *args: Any) -> None:
        """Log a warning message."""
        ...

    def warning(self, msg: str, *args: Any) -> None:
        """Log a warning message."""
        ...

    def error(self, msg: str, *args: Any) -> None:
        """Log an error message."""
        ...

    def fatal(self, msg: str, *args: Any) -> None:
        """Log a fatal message and terminate the process."""
        ...
