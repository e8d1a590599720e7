# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate execution outcomes into the host-facing response."""

from __future__ import annotations

from .constants import MAX_MESSAGE_CHARS, MESSAGE_PREFIX
from .executor import truncate
from .models import ExecutionOutcome, OutcomeKind, ResponseEnvelope


def build_response(outcome: ExecutionOutcome, *, debug: bool) -> ResponseEnvelope:
    """Return the envelope for *outcome*.

    The host is always told to continue. A ``systemMessage`` is attached only
    in debug mode so normal runs stay silent whatever happened.
    """

    if not debug:
        return ResponseEnvelope()
    message = truncate(f"{MESSAGE_PREFIX} {describe(outcome)}", MAX_MESSAGE_CHARS)
    return ResponseEnvelope(system_message=message)


def describe(outcome: ExecutionOutcome) -> str:
    """Return a one-line, human-readable summary of *outcome*."""

    label = outcome.language.label if outcome.language is not None else "unknown"
    kind = outcome.kind
    if kind is OutcomeKind.SUCCESS:
        return f"{label}: formatted with {outcome.formatter} ({outcome.elapsed * 1000:.0f} ms)"
    if kind is OutcomeKind.TOOL_NOT_FOUND:
        checked = "; ".join(outcome.considered) or "no candidates registered"
        return f"{label}: formatter not found ({checked})"
    if kind is OutcomeKind.TOOL_FAILED:
        if outcome.timed_out:
            return f"{label}: {outcome.formatter} {outcome.diagnostic or 'timed out'}"
        status = f"exit {outcome.exit_code}" if outcome.exit_code is not None else "could not run"
        diagnostic = outcome.diagnostic or "no diagnostic output"
        return f"{label}: {outcome.formatter} failed ({status}): {diagnostic}"
    if kind is OutcomeKind.INTERNAL_ERROR:
        return f"{outcome.stage or 'internal'} error: {outcome.detail}"
    return outcome.detail


__all__ = ["build_response", "describe"]
