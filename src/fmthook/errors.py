# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for the formatter hook."""

from __future__ import annotations


class FmtHookError(RuntimeError):
    """Base class for errors raised while handling a hook invocation."""

    stage = "internal"


class EventError(FmtHookError):
    """Raised when the host event cannot be parsed or names no file."""

    stage = "input"


__all__ = ["EventError", "FmtHookError"]
