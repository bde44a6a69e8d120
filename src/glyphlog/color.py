# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
ANSI terminal colors used by the color formatter.
"""

from __future__ import annotations

import re
from enum import Enum

from glyphlog.errors import InvalidColorError

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class Color(str, Enum):
    """Terminal color escape codes."""

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_GREEN = "\x1b[92m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"
    BRIGHT_WHITE = "\x1b[97m"

    RESET = "\x1b[0m"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, value: str | Color) -> Color:
        """Resolve a color from its name, e.g. ``"bright_red"``.

        Raises:
            InvalidColorError: If the name is not part of the palette
        """
        if isinstance(value, Color):
            return value
        try:
            return cls[value.strip().upper().replace("-", "_").replace(" ", "_")]
        except (KeyError, AttributeError):
            pass
        try:
            return cls(value)
        except ValueError:
            raise InvalidColorError(value) from None


def colorize(color: Color | str, text: str) -> str:
    """Wrap ``text`` in ``color`` followed by a reset."""
    return str(color) + text + Color.RESET.value


def strip_ansi(text: str) -> str:
    """Remove every ANSI color escape from ``text``."""
    return _ANSI_ESCAPE.sub("", text)
