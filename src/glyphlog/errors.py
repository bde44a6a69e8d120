# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Error types for glyphlog.

Logging itself never raises: filtered calls, unknown levels and unresolved
caller locations all degrade to harmless output. Errors only surface while
parsing configuration (level and color names).
"""

from __future__ import annotations

from typing import Any, Final

LOGGING_ERROR: Final = "LOGGING_ERROR"
LOGGING_CONFIGURATION: Final = "LOGGING_CONFIGURATION"
INVALID_LEVEL: Final = "INVALID_LEVEL"
INVALID_COLOR: Final = "INVALID_COLOR"


class LoggingError(Exception):
    """Base exception for all glyphlog errors."""

    def __init__(
        self,
        message: str,
        code: str = LOGGING_ERROR,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize a logging error.

        Args:
            message: Human-readable error message
            code: Error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "context": self.context}


class LoggingConfigurationError(LoggingError, ValueError):
    """Raised when a configuration value cannot be interpreted."""

    def __init__(
        self,
        message: str,
        code: str = LOGGING_CONFIGURATION,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


class InvalidLevelError(LoggingConfigurationError):
    """Raised for an unknown level name."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid log level: {value}",
            code=INVALID_LEVEL,
            context={"value": value},
        )


class InvalidColorError(LoggingConfigurationError):
    """Raised for an unknown color name."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid color: {value}",
            code=INVALID_COLOR,
            context={"value": value},
        )
