# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Severity levels for glyphlog.

Levels are plain integer ranks ordered DEBUG < INFO < WARN < ERROR < FATAL.
The symbol, name and color lookups accept any integer and degrade to an
empty string (or white) for ranks outside that range, so a misconfigured
rank can never crash the logger.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from glyphlog.color import Color
from glyphlog.errors import InvalidLevelError

_SYMBOLS = ("[+]", "[*]", "[~]", "[!]", "[x]")
_NAMES = ("DEBUG", "INFO", "WARN", "ERROR", "FATAL")
_COLORS = (Color.CYAN, Color.WHITE, Color.YELLOW, Color.RED, Color.BRIGHT_RED)

_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


class Level(IntEnum):
    """Standard severity levels."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def symbol(self) -> str:
        return level_symbol(self)

    @property
    def label(self) -> str:
        return level_name(self)

    @property
    def color(self) -> Color:
        return level_color(self)

    def to_stdlib_level(self) -> int:
        """Convert to standard library logging level.

        Returns:
            Standard library logging level integer
        """
        if self is Level.FATAL:
            return logging.CRITICAL
        if self is Level.WARN:
            return logging.WARNING
        return int(getattr(logging, self.name))

    @classmethod
    def from_stdlib_level(cls, levelno: int) -> Level:
        """Map a standard library level number onto the closest level.

        Numbers between two standard levels round down; anything below
        ``logging.INFO`` is DEBUG.
        """
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    @classmethod
    def from_string(cls, value: str | int | Level) -> Level:
        """Convert a string to a Level.

        Args:
            value: Level name (case-insensitive), "WARNING" and "CRITICAL"
                are accepted as aliases

        Returns:
            Level enum value

        Raises:
            InvalidLevelError: If the value doesn't match a valid level
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        if not isinstance(value, str):
            raise InvalidLevelError(value)
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise InvalidLevelError(value) from None


def _in_range(rank: int) -> bool:
    return Level.DEBUG <= rank <= Level.FATAL


def level_symbol(rank: int) -> str:
    """Return the glyph for ``rank``, or "" when out of range."""
    if not _in_range(rank):
        return ""
    return _SYMBOLS[rank]


def level_name(rank: int) -> str:
    """Return the display name for ``rank``, or "" when out of range."""
    if not _in_range(rank):
        return ""
    return _NAMES[rank]


def level_color(rank: int) -> Color:
    """Return the display color for ``rank``, white when out of range."""
    if not _in_range(rank):
        return Color.WHITE
    return _COLORS[rank]
