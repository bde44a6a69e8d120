"""Tests for severity levels."""

from __future__ import annotations

import logging

import pytest

from glyphlog import Color, InvalidLevelError, Level, level_color, level_name, level_symbol
from glyphlog.errors import INVALID_LEVEL


class TestLevel:
    """Tests for the Level enum."""

    def test_ordering(self) -> None:
        """Test that levels are ordered by severity."""
        assert Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR < Level.FATAL
        assert [int(level) for level in Level] == [0, 1, 2, 3, 4]

    def test_symbols(self) -> None:
        assert [level.symbol for level in Level] == ["[+]", "[*]", "[~]", "[!]", "[x]"]

    def test_names(self) -> None:
        assert [level.label for level in Level] == ["DEBUG", "INFO", "WARN", "ERROR", "FATAL"]

    def test_colors(self) -> None:
        assert [level.color for level in Level] == [
            Color.CYAN,
            Color.WHITE,
            Color.YELLOW,
            Color.RED,
            Color.BRIGHT_RED,
        ]

    @pytest.mark.parametrize("rank", [-1, 5, 99])
    def test_out_of_range_degrades(self, rank: int) -> None:
        """Test that unknown ranks render as empty text and white."""
        assert level_symbol(rank) == ""
        assert level_name(rank) == ""
        assert level_color(rank) is Color.WHITE

    def test_from_string(self) -> None:
        """Test converting strings to Level values."""
        assert Level.from_string("DEBUG") is Level.DEBUG
        assert Level.from_string("info") is Level.INFO
        assert Level.from_string("Warn") is Level.WARN
        assert Level.from_string("warning") is Level.WARN
        assert Level.from_string(" error ") is Level.ERROR
        assert Level.from_string("critical") is Level.FATAL
        assert Level.from_string(3) is Level.ERROR
        assert Level.from_string(Level.FATAL) is Level.FATAL

    @pytest.mark.parametrize("value", ["TRACE", "", 7, None])
    def test_from_string_invalid(self, value: object) -> None:
        """Test that unknown levels raise a configuration error."""
        with pytest.raises(InvalidLevelError) as excinfo:
            Level.from_string(value)  # type: ignore[arg-type]

        assert isinstance(excinfo.value, ValueError)
        assert excinfo.value.code == INVALID_LEVEL
        assert excinfo.value.to_dict()["context"] == {"value": value}

    def test_to_stdlib_level(self) -> None:
        assert Level.DEBUG.to_stdlib_level() == logging.DEBUG
        assert Level.INFO.to_stdlib_level() == logging.INFO
        assert Level.WARN.to_stdlib_level() == logging.WARNING
        assert Level.ERROR.to_stdlib_level() == logging.ERROR
        assert Level.FATAL.to_stdlib_level() == logging.CRITICAL

    def test_from_stdlib_level(self) -> None:
        """Test that in-between stdlib numbers round down."""
        assert Level.from_stdlib_level(logging.NOTSET) is Level.DEBUG
        assert Level.from_stdlib_level(5) is Level.DEBUG
        assert Level.from_stdlib_level(logging.INFO) is Level.INFO
        assert Level.from_stdlib_level(25) is Level.INFO
        assert Level.from_stdlib_level(logging.WARNING) is Level.WARN
        assert Level.from_stdlib_level(logging.ERROR) is Level.ERROR
        assert Level.from_stdlib_level(logging.CRITICAL) is Level.FATAL
        assert Level.from_stdlib_level(100) is Level.FATAL
