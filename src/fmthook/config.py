# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime settings for a single hook invocation."""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_MAX_DIAGNOSTIC_CHARS, DEFAULT_TIMEOUT_SECONDS

LOGGER = logging.getLogger(__name__)


class HookSettings(BaseModel):
    """Immutable configuration threaded through the pipeline.

    ``debug`` controls whether the response carries a ``systemMessage``;
    ``verbose`` controls diagnostic logging on stderr. Neither is read from
    global state.
    """

    model_config = ConfigDict(frozen=True)

    debug: bool = False
    verbose: bool = False
    project_only: bool = False
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_diagnostic_chars: int = Field(default=DEFAULT_MAX_DIAGNOSTIC_CHARS, gt=0)

    @classmethod
    def from_cli(
        cls,
        *,
        debug: bool,
        verbose: bool,
        project_only: bool,
        timeout: str | float | None,
    ) -> HookSettings:
        """Return settings built from parsed CLI options, keeping defaults for unset values.

        *timeout* arrives as raw text from the command line or environment. A
        value that is not a positive, finite number of seconds is ignored and
        the default applies.
        """

        payload: dict[str, object] = {"debug": debug, "verbose": verbose, "project_only": project_only}
        seconds = parse_timeout(timeout)
        if seconds is not None:
            payload["timeout"] = seconds
        return cls.model_validate(payload)


def parse_timeout(raw: str | float | None) -> float | None:
    """Return *raw* as positive seconds, or ``None`` when unset or invalid."""

    if raw is None:
        return None
    try:
        seconds = float(raw)
    except ValueError:
        LOGGER.debug("timeout=%r status=invalid using=%s", raw, DEFAULT_TIMEOUT_SECONDS)
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        LOGGER.debug("timeout=%r status=out-of-range using=%s", raw, DEFAULT_TIMEOUT_SECONDS)
        return None
    return seconds


__all__ = ["HookSettings", "parse_timeout"]
