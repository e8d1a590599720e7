# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Outcome and response models shared by the executor, pipeline and CLI."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .languages import LanguageId


class OutcomeKind(str, Enum):
    """Classification of a single hook invocation."""

    SUCCESS = "success"
    TOOL_FAILED = "tool-failed"
    TOOL_NOT_FOUND = "tool-not-found"
    SKIPPED = "skipped"
    UNSUPPORTED = "unsupported"
    INTERNAL_ERROR = "internal-error"


class ExecutionOutcome(BaseModel):
    """Everything known about how a file was (or was not) formatted."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    language: LanguageId | None = None
    formatter: str | None = None
    source: str | None = None
    exit_code: int | None = None
    diagnostic: str = ""
    elapsed: float = 0.0
    timed_out: bool = False
    stage: str | None = None
    detail: str = ""
    considered: tuple[str, ...] = ()


class ResponseEnvelope(BaseModel):
    """JSON document returned to the host; formatting never blocks it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    continue_: Literal[True] = Field(default=True, alias="continue")
    system_message: str | None = Field(default=None, alias="systemMessage")

    def to_json(self) -> str:
        """Serialise using the host's key names, omitting absent fields."""

        return self.model_dump_json(by_alias=True, exclude_none=True)


__all__ = ["ExecutionOutcome", "OutcomeKind", "ResponseEnvelope"]
