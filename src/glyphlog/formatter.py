# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Template formatters.

A template is plain text with placeholder tokens:

    $t  current time, rendered with the formatter's time pattern
    $l  level symbol, e.g. ``[*]``
    $L  level name, e.g. ``INFO``
    $m  the message
    $f  caller location as ``basename:line``
    $F  caller location as ``fullpath:line``

Any other ``$x`` sequence is left untouched. Substitution happens in a single
pass, so text produced by one token (a message containing ``$m``, say) is
never substituted again.

Time patterns are written against a reference date: ``YYYY``, ``YY``, ``MM``,
``DD``, ``hh`` (24h), ``mm``, ``ss`` and ``SSS`` (milliseconds). Everything
else in the pattern is copied literally.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from glyphlog.caller import UNKNOWN_LOCATION, find_caller
from glyphlog.color import Color, colorize
from glyphlog.level import level_color, level_name, level_symbol

DEFAULT_TEMPLATE = "$l [$t] :: $m"
DEFAULT_TIME_FORMAT = "YYYY-MM-DD hh:mm:ss"
DEFAULT_LINE_END = "\n"

_TOKEN = re.compile(r"\$[tlLmfF]")
# literal runs at even indexes, tokens at odd ones
_TOKEN_SPLIT = re.compile(r"(\$[tlLmfF])")
_TIME_TOKEN = re.compile(r"YYYY|YY|MM|DD|hh|mm|ss|SSS")

_TIME_FIELDS: dict[str, Callable[[datetime], str]] = {
    "YYYY": lambda moment: f"{moment.year:04d}",
    "YY": lambda moment: f"{moment.year % 100:02d}",
    "MM": lambda moment: f"{moment.month:02d}",
    "DD": lambda moment: f"{moment.day:02d}",
    "hh": lambda moment: f"{moment.hour:02d}",
    "mm": lambda moment: f"{moment.minute:02d}",
    "ss": lambda moment: f"{moment.second:02d}",
    "SSS": lambda moment: f"{moment.microsecond // 1000:03d}",
}

# colors for fragments that are not tinted by the level
_FIXED_COLORS = {
    "$t": Color.GREEN,
    "$f": Color.BRIGHT_BLACK,
    "$F": Color.BRIGHT_BLACK,
}


def format_time(moment: datetime, pattern: str) -> str:
    """Render ``moment`` using a reference-date pattern."""
    return _TIME_TOKEN.sub(lambda match: _TIME_FIELDS[match.group(0)](moment), pattern)


class TemplateFormatter(BaseModel):
    """Plain-text formatter.

    Renders ``template`` with every token substituted, followed by
    ``line_end``. Instances are immutable and may be shared between loggers
    and threads.
    """

    model_config = ConfigDict(frozen=True)

    template: str = DEFAULT_TEMPLATE
    time_format: str = DEFAULT_TIME_FORMAT
    line_end: str = DEFAULT_LINE_END
    clock: Callable[[], datetime] = Field(default=datetime.now, exclude=True, repr=False)

    def token_values(self, level: int, message: str) -> dict[str, str]:
        """Compute the replacement text for every token.

        Args:
            level: Level rank, out-of-range ranks yield empty symbol and name
            message: The already formatted message

        Returns:
            Mapping of token to its plain replacement text
        """
        location = UNKNOWN_LOCATION
        if "$f" in self.template or "$F" in self.template:
            location = find_caller()
        return {
            "$t": format_time(self.clock(), self.time_format),
            "$l": level_symbol(level),
            "$L": level_name(level),
            "$m": str(message),
            "$f": location.short,
            "$F": location.long,
        }

    def substitute(self, fields: dict[str, str]) -> str:
        """Replace tokens in the template with ``fields`` in one pass."""
        return _TOKEN.sub(lambda match: fields[match.group(0)], self.template)

    def render(self, level: int, message: str) -> str:
        return self.substitute(self.token_values(level, message)) + self.line_end


class ColorFormatter(BaseModel):
    """Formatter that tints each substituted fragment.

    The time is green, the caller location bright black, and the symbol,
    name and message take the level's color. Literal template text between
    fragments is rendered in ``default_color``. Every run, fragment or
    literal, is closed with its own reset, the whole line is wrapped once
    more in ``default_color``, and the line end follows the final reset so the
    terminal is back to its normal state when the line terminates.
    """

    model_config = ConfigDict(frozen=True)

    base: TemplateFormatter = Field(default_factory=TemplateFormatter)
    default_color: Color = Color.WHITE

    @field_validator("default_color", mode="before")
    @classmethod
    def validate_default_color(cls, v: Any) -> Color:
        return Color.from_name(v)

    def render(self, level: int, message: str) -> str:
        tint = level_color(level)
        values = self.base.token_values(level, message)
        runs = []
        for index, run in enumerate(_TOKEN_SPLIT.split(self.base.template)):
            if index % 2:
                runs.append(colorize(_FIXED_COLORS.get(run, tint), values[run]))
            elif run:
                runs.append(colorize(self.default_color, run))
        return colorize(self.default_color, "".join(runs)) + self.base.line_end


DEFAULT_FORMATTER = TemplateFormatter()
