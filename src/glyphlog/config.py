# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Configuration for the process-wide default logger.

Settings are read from ``GLYPHLOG_*`` environment variables through
pydantic-settings, e.g. ``GLYPHLOG_LEVEL=debug`` or ``GLYPHLOG_COLOR=true``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from glyphlog.color import Color
from glyphlog.formatter import DEFAULT_LINE_END, DEFAULT_TEMPLATE, DEFAULT_TIME_FORMAT
from glyphlog.level import Level


class LoggingSettings(BaseSettings):
    """Settings the default logger is built from.

    Each field maps to a ``GLYPHLOG_<FIELD>`` variable; names are matched
    case-insensitively and unrelated ``GLYPHLOG_*`` variables are ignored.
    """

    model_config = SettingsConfigDict(env_prefix="GLYPHLOG_", extra="ignore", case_sensitive=False)

    level: str = Field(default=Level.INFO.name, description="Minimum level emitted")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Line template")
    time_format: str = Field(
        default=DEFAULT_TIME_FORMAT, description="Reference-date time pattern"
    )
    line_end: str = Field(default=DEFAULT_LINE_END, description="Line terminator")
    color: bool = Field(default=False, description="Use the color formatter")
    default_color: str = Field(
        default="white", description="Color wrapping whole lines in color mode"
    )
    stream: Literal["stdout", "stderr"] = Field(
        default="stdout", description="Standard stream the default logger writes to"
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Validate that the level is a valid log level."""
        return Level.from_string(v).name

    @field_validator("default_color", mode="before")
    @classmethod
    def validate_default_color(cls, v: Any) -> str:
        """Validate that the color is part of the palette."""
        return Color.from_name(v).name.lower()

    @property
    def threshold(self) -> Level:
        return Level[self.level]

    @classmethod
    def load(cls) -> LoggingSettings:
        """Read the current ``GLYPHLOG_*`` environment.

        Raises:
            pydantic.ValidationError: If a level, color or stream is not recognized
        """
        return cls()
