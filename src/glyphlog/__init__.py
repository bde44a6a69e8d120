# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog

"""
Public API for glyphlog.

Leveled, template-formatted console logging:

    import glyphlog

    glyphlog.info("listening on %s:%d", host, port)

    log = glyphlog.SinkLogger(glyphlog.Level.DEBUG, glyphlog.ColorFormatter(), sys.stderr)
    log.warn("disk almost full")
"""

from __future__ import annotations

import logging

from glyphlog.caller import CallerLocation, find_caller
from glyphlog.color import Color, colorize, strip_ansi
from glyphlog.config import LoggingSettings
from glyphlog.default import (
    basic_config,
    debug,
    error,
    fatal,
    get_default_logger,
    info,
    log,
    print,
    reset_default_logger,
    set_default_logger,
    set_formatter,
    set_sink,
    set_threshold,
    warn,
    warning,
)
from glyphlog.errors import (
    InvalidColorError,
    InvalidLevelError,
    LoggingConfigurationError,
    LoggingError,
)
from glyphlog.factory import create_formatter, create_logger
from glyphlog.formatter import DEFAULT_FORMATTER, ColorFormatter, TemplateFormatter
from glyphlog.handler import GlyphlogHandler
from glyphlog.level import Level, level_color, level_name, level_symbol
from glyphlog.logger import BaseLogger, MultiLogger, SinkLogger, new_logger, terminate
from glyphlog.protocols import FormatterProtocol, LoggerProtocol, SinkProtocol

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core interfaces
    "FormatterProtocol",
    "LoggerProtocol",
    "SinkProtocol",
    # Levels and colors
    "Level",
    "level_symbol",
    "level_name",
    "level_color",
    "Color",
    "colorize",
    "strip_ansi",
    "CallerLocation",
    "find_caller",
    # Formatters
    "TemplateFormatter",
    "ColorFormatter",
    "DEFAULT_FORMATTER",
    # Loggers
    "BaseLogger",
    "SinkLogger",
    "MultiLogger",
    "new_logger",
    "terminate",
    "GlyphlogHandler",
    # Settings
    "LoggingSettings",
    "create_formatter",
    "create_logger",
    # Errors
    "LoggingError",
    "LoggingConfigurationError",
    "InvalidLevelError",
    "InvalidColorError",
    # Default logger
    "get_default_logger",
    "set_default_logger",
    "reset_default_logger",
    "set_threshold",
    "set_formatter",
    "set_sink",
    "basic_config",
    "log",
    "debug",
    "info",
    "print",
    "warn",
    "warning",
    "error",
    "fatal",
]
