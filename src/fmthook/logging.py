# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic logging on stderr with ``key=value`` highlighting.

stdout carries the JSON response, so every log record is rendered on a
stderr-bound Rich console.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER: Final[str] = "fmthook"
_KEY_VALUE_RE: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")
_CONFIGURED_FLAG: Final[str] = "_fmthook_console_configured"


class ConsoleLogHandler(logging.Handler):
    """Render log records on a Rich console, highlighting ``key=value`` pairs."""

    def __init__(self, console: Console, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = render_message(record.getMessage(), level=record.levelname.lower())
            self.console.print(text)
            if record.exc_info:
                self.console.print_exception()
        except Exception:  # noqa: BLE001 - mirrors logging.Handler.handleError contract
            self.handleError(record)


def render_message(message: str, *, level: str = "debug") -> Text:
    """Return *message* as Rich text with ``key=value`` pairs highlighted."""

    text = Text(f"[{level}] ", style="bold cyan")
    cursor = 0
    for match in _KEY_VALUE_RE.finditer(message):
        start, end = match.span()
        if start > cursor:
            text.append(message[cursor:start], style="dim")
        key, raw_value = match.group(1), match.group(2)
        text.append(key, style="bold magenta")
        text.append("=", style="dim")
        value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
        text.append(raw_value, style=value_style)
        cursor = end
    if cursor < len(message):
        text.append(message[cursor:], style="dim")
    return text


def configure_logging(*, verbose: bool, console: Console | None = None) -> logging.Logger:
    """Attach the stderr console handler to the package logger.

    Without *verbose* the package logger only passes warnings on, and nothing
    in the package logs above debug level.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not getattr(logger, _CONFIGURED_FLAG, False):
        handler = ConsoleLogHandler(console or Console(stderr=True, highlight=False, soft_wrap=True))
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, _CONFIGURED_FLAG, True)
    return logger


__all__ = ["ConsoleLogHandler", "PACKAGE_LOGGER", "configure_logging", "render_message"]
