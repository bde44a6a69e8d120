"""Tests for settings and the factory functions built on them."""

from __future__ import annotations

import sys
from io import StringIO

import pydantic
import pytest

from glyphlog import (
    Color,
    ColorFormatter,
    Level,
    LoggingSettings,
    SinkLogger,
    TemplateFormatter,
    create_formatter,
    create_logger,
)


class TestLoggingSettings:
    """Tests for the LoggingSettings class."""

    def test_default_settings(self) -> None:
        settings = LoggingSettings()

        assert settings.level == "INFO"
        assert settings.threshold is Level.INFO
        assert settings.template == "$l [$t] :: $m"
        assert settings.time_format == "YYYY-MM-DD hh:mm:ss"
        assert settings.line_end == "\n"
        assert settings.color is False
        assert settings.default_color == "white"
        assert settings.stream == "stdout"

    def test_override_settings(self) -> None:
        settings = LoggingSettings(level="warning", color=True, default_color="BRIGHT-BLUE")

        assert settings.level == "WARN"
        assert settings.threshold is Level.WARN
        assert settings.color is True
        assert settings.default_color == "bright_blue"

    def test_load_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GLYPHLOG_LEVEL", "error")
        monkeypatch.setenv("GLYPHLOG_TEMPLATE", "$L: $m")
        monkeypatch.setenv("GLYPHLOG_TIME_FORMAT", "hh:mm")
        monkeypatch.setenv("GLYPHLOG_COLOR", "1")
        monkeypatch.setenv("GLYPHLOG_STREAM", "stderr")

        settings = LoggingSettings.load()

        assert settings.threshold is Level.ERROR
        assert settings.template == "$L: $m"
        assert settings.time_format == "hh:mm"
        assert settings.color is True
        assert settings.stream == "stderr"

    @pytest.mark.parametrize(
        "overrides",
        [{"level": "TRACE"}, {"default_color": "mauve"}, {"stream": "stdlog"}],
    )
    def test_invalid_settings(self, overrides: dict[str, str]) -> None:
        with pytest.raises(pydantic.ValidationError):
            LoggingSettings(**overrides)


class TestFactory:
    def test_plain_formatter(self) -> None:
        formatter = create_formatter(LoggingSettings(template="$m", time_format="", line_end=""))

        assert isinstance(formatter, TemplateFormatter)
        assert formatter.render(Level.INFO, "x") == "x"

    def test_color_formatter(self) -> None:
        settings = LoggingSettings(template="$m", color=True, default_color="cyan")

        formatter = create_formatter(settings)

        assert isinstance(formatter, ColorFormatter)
        assert formatter.default_color is Color.CYAN
        assert formatter.base.template == "$m"

    def test_create_logger(self) -> None:
        sink = StringIO()

        logger = create_logger(LoggingSettings(level="debug", template="$L $m"), sink=sink)
        logger.debug("x")

        assert isinstance(logger, SinkLogger)
        assert logger.level is Level.DEBUG
        assert sink.getvalue() == "DEBUG x\n"

    def test_create_logger_uses_configured_stream(self) -> None:
        assert create_logger(LoggingSettings(stream="stderr")).sink is sys.stderr
        assert create_logger(LoggingSettings()).sink is sys.stdout
