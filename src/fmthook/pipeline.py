# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive a hook invocation from raw event text to the response envelope."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import HookSettings
from .errors import FmtHookError
from .events import parse_event
from .executor import execute
from .formatters.registry import chain_for
from .languages import ClassificationStatus, classify_path
from .models import ExecutionOutcome, OutcomeKind, ResponseEnvelope
from .resolver import resolve
from .response import build_response

LOGGER = logging.getLogger(__name__)


def run_hook(raw_event: str, settings: HookSettings) -> ResponseEnvelope:
    """Handle one host event and return the envelope to print.

    This never raises: every failure, expected or not, is turned into an
    advisory outcome so the host's workflow continues.
    """

    try:
        outcome = _handle(raw_event, settings)
    except FmtHookError as exc:
        LOGGER.debug("stage=%s status=error detail=%s", exc.stage, exc)
        outcome = ExecutionOutcome(kind=OutcomeKind.INTERNAL_ERROR, stage=exc.stage, detail=str(exc))
    except Exception as exc:  # noqa: BLE001 - every outcome resolves to a continuing response
        LOGGER.debug("stage=internal status=error detail=%s", exc, exc_info=True)
        outcome = ExecutionOutcome(
            kind=OutcomeKind.INTERNAL_ERROR,
            stage="internal",
            detail=f"{type(exc).__name__}: {exc}",
        )
    LOGGER.debug("outcome=%s formatter=%s", outcome.kind.value, outcome.formatter)
    return build_response(outcome, debug=settings.debug)


def format_file(file_path: Path, settings: HookSettings) -> ExecutionOutcome:
    """Classify, resolve and format *file_path*, returning the outcome."""

    classification = classify_path(file_path)
    LOGGER.debug("path=%s classification=%s", file_path, classification.status.value)
    if classification.status is ClassificationStatus.SKIPPED:
        return ExecutionOutcome(kind=OutcomeKind.SKIPPED, detail=classification.reason)
    if classification.status is ClassificationStatus.UNSUPPORTED or classification.language is None:
        return ExecutionOutcome(kind=OutcomeKind.UNSUPPORTED, detail=classification.reason)

    language = classification.language
    resolution = resolve(chain_for(language), file_path, project_only=settings.project_only)
    if resolution.selected is None:
        return ExecutionOutcome(
            kind=OutcomeKind.TOOL_NOT_FOUND,
            language=language,
            considered=resolution.considered,
        )
    outcome = execute(
        resolution.selected,
        file_path,
        language=language,
        timeout=settings.timeout,
        max_diagnostic_chars=settings.max_diagnostic_chars,
    )
    return outcome.model_copy(update={"considered": resolution.considered})


def _handle(raw_event: str, settings: HookSettings) -> ExecutionOutcome:
    event = parse_event(raw_event)
    file_path = event.file_path
    if file_path is None or not file_path.exists():
        return ExecutionOutcome(
            kind=OutcomeKind.INTERNAL_ERROR,
            stage="input",
            detail=f"File does not exist: {file_path}",
        )
    return format_file(file_path.absolute(), settings)


__all__ = ["format_file", "run_hook"]
