# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: glyphlog
"""
Resolve the source location of the code that issued a log call.

Instead of counting a fixed number of frames, the lookup skips every frame
that belongs to glyphlog itself (and to the standard ``logging`` package, for
records routed through the bridge handler). The first remaining frame is the
caller, however many internal layers the call went through.
"""

from __future__ import annotations

import inspect
import logging
import os
from types import FrameType
from typing import NamedTuple

_PACKAGE_DIR = os.path.normcase(os.path.dirname(os.path.abspath(__file__)))
_LOGGING_SRCFILE = os.path.normcase(os.path.abspath(logging.addLevelName.__code__.co_filename))


class CallerLocation(NamedTuple):
    filename: str
    lineno: int

    @property
    def short(self) -> str:
        """``basename:line``"""
        return f"{os.path.basename(self.filename)}:{self.lineno}"

    @property
    def long(self) -> str:
        """``fullpath:line``"""
        return f"{self.filename}:{self.lineno}"


UNKNOWN_LOCATION = CallerLocation("???", 0)


def _is_internal_frame(frame: FrameType) -> bool:
    filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
    return filename == _LOGGING_SRCFILE or os.path.dirname(filename) == _PACKAGE_DIR


def find_caller(stacklevel: int = 1) -> CallerLocation:
    """Return the location of the first frame outside glyphlog.

    Args:
        stacklevel: 1 for the immediate external caller; higher values skip
            that many external frames minus one, for helpers that wrap log
            calls on behalf of their own callers

    Returns:
        The caller's location, or ``???:0`` when the stack cannot be walked
    """
    frame = inspect.currentframe()
    remaining = max(stacklevel, 1)
    while frame is not None:
        if not _is_internal_frame(frame):
            remaining -= 1
            if remaining == 0:
                break
        frame = frame.f_back
    if frame is None:
        return UNKNOWN_LOCATION
    return CallerLocation(frame.f_code.co_filename, frame.f_lineno)
