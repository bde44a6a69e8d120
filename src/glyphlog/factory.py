# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Build formatters and loggers from ``LoggingSettings``.
"""

from __future__ import annotations

import sys

from glyphlog.config import LoggingSettings
from glyphlog.formatter import ColorFormatter, TemplateFormatter
from glyphlog.logger import SinkLogger
from glyphlog.protocols import FormatterProtocol, SinkProtocol


def create_formatter(settings: LoggingSettings | None = None) -> FormatterProtocol:
    """Create the formatter described by ``settings``.

    Args:
        settings: Settings to use, loaded from the environment if None

    Returns:
        A ``ColorFormatter`` when color is enabled, a ``TemplateFormatter``
        otherwise
    """
    settings = settings or LoggingSettings.load()
    base = TemplateFormatter(
        template=settings.template,
        time_format=settings.time_format,
        line_end=settings.line_end,
    )
    if settings.color:
        return ColorFormatter(base=base, default_color=settings.default_color)
    return base


def resolve_stream(name: str) -> SinkProtocol:
    """Return the current ``sys.stdout`` or ``sys.stderr``."""
    return sys.stderr if name == "stderr" else sys.stdout


def create_logger(
    settings: LoggingSettings | None = None,
    sink: SinkProtocol | None = None,
) -> SinkLogger:
    """Create a single-sink logger described by ``settings``.

    Args:
        settings: Settings to use, loaded from the environment if None
        sink: Overrides the stream named in the settings

    Returns:
        Configured logger instance
    """
    settings = settings or LoggingSettings.load()
    return SinkLogger(
        settings.threshold,
        create_formatter(settings),
        sink if sink is not None else resolve_stream(settings.stream),
    )
