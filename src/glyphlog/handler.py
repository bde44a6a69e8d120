# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Bridge from the standard ``logging`` module into glyphlog.

    import logging
    from glyphlog.handler import GlyphlogHandler

    logging.getLogger().addHandler(GlyphlogHandler())

Records are mapped onto the nearest glyphlog level and rendered by the
target logger's formatter, so third-party libraries end up in the same
output as the application's own calls.
"""

from __future__ import annotations

import logging

from glyphlog.default import get_default_logger
from glyphlog.level import Level
from glyphlog.protocols import LoggerProtocol


class GlyphlogHandler(logging.Handler):
    """Handler forwarding records to a glyphlog logger."""

    def __init__(self, logger: LoggerProtocol | None = None, level: int = logging.NOTSET) -> None:
        """Initialize the handler.

        Args:
            logger: Target logger, the default logger (looked up per record)
                when None
            level: Standard library threshold for this handler
        """
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            target = self.logger if self.logger is not None else get_default_logger()
            target.log(Level.from_stdlib_level(record.levelno), message)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
