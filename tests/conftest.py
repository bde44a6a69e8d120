"""Top-level pytest configuration for glyphlog."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import datetime

import pytest

import glyphlog

FROZEN_TIME = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture(autouse=True)
def isolated_default_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh default logger and a clean environment."""
    for name in list(os.environ):
        if name.upper().startswith("GLYPHLOG_"):
            monkeypatch.delenv(name)
    glyphlog.reset_default_logger()
    yield
    glyphlog.reset_default_logger()


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    """Clock that always reports 2024-01-02 03:04:05."""
    return lambda: FROZEN_TIME


@pytest.fixture
def exit_calls(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Replace process termination with a recorder of exit statuses."""
    calls: list[int] = []
    monkeypatch.setattr("glyphlog.logger.terminate", lambda status=1: calls.append(status))
    return calls
