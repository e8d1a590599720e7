# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsing of the event document the host writes to stdin."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import EventError


class ToolInput(BaseModel):
    """Arguments of the host tool call that modified a file."""

    model_config = ConfigDict(extra="ignore")

    file_path: str | None = None


class HookEvent(BaseModel):
    """Subset of the host event consumed by the formatter pipeline."""

    model_config = ConfigDict(extra="ignore")

    tool_name: str | None = None
    tool_input: ToolInput = Field(default_factory=ToolInput)

    @property
    def file_path(self) -> Path | None:
        raw = self.tool_input.file_path
        if raw is None or not raw.strip():
            return None
        return Path(raw)


def parse_event(raw: str) -> HookEvent:
    """Parse *raw* JSON into a :class:`HookEvent` that names a file.

    Raises:
        EventError: If *raw* is not a valid event or carries no file path.
    """

    try:
        event = HookEvent.model_validate_json(raw)
    except ValidationError as exc:
        raise EventError("Could not parse hook input as an event") from exc
    if event.file_path is None:
        raise EventError("Could not extract file path from input")
    return event


__all__ = ["HookEvent", "ToolInput", "parse_event"]
