# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the selected formatter against the target file."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import DEFAULT_MAX_DIAGNOSTIC_CHARS, DEFAULT_TIMEOUT_SECONDS
from .languages import LanguageId
from .models import ExecutionOutcome, OutcomeKind
from .process_utils import CommandResult, run_command
from .resolver import ResolvedFormatter

LOGGER = logging.getLogger(__name__)

TRUNCATION_MARKER = "… (truncated)"


def execute(
    resolved: ResolvedFormatter,
    file_path: Path,
    *,
    language: LanguageId | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    max_diagnostic_chars: int = DEFAULT_MAX_DIAGNOSTIC_CHARS,
) -> ExecutionOutcome:
    """Run every step of *resolved* on *file_path* exactly once.

    Steps run in order and the first failing step ends the run. There is no
    fallback to another candidate: selection already happened.

    Args:
        resolved: Formatter chosen by the resolver.
        file_path: File the formatter rewrites in place.
        language: Language reported alongside the outcome.
        timeout: Seconds each step may run before it is killed.
        max_diagnostic_chars: Upper bound on captured diagnostic text.

    Returns:
        ExecutionOutcome: ``SUCCESS`` or ``TOOL_FAILED`` with diagnostics.
    """

    elapsed = 0.0
    for step, executable in zip(resolved.candidate.steps, resolved.executables, strict=True):
        command = step.render(executable, file_path)
        LOGGER.debug("formatter=%s cmd=%s cwd=%s", resolved.name, executable, resolved.cwd)
        try:
            result = run_command(command, cwd=resolved.cwd, timeout=timeout)
        except OSError as exc:
            LOGGER.debug("formatter=%s status=spawn-failed error=%s", resolved.name, exc)
            return _outcome(
                resolved,
                language,
                kind=OutcomeKind.TOOL_FAILED,
                diagnostic=truncate(str(exc), max_diagnostic_chars),
                elapsed=elapsed,
            )
        elapsed += result.elapsed
        if not result.ok:
            LOGGER.debug(
                "formatter=%s status=failed exit=%s timed_out=%s",
                resolved.name,
                result.returncode,
                result.timed_out,
            )
            return _outcome(
                resolved,
                language,
                kind=OutcomeKind.TOOL_FAILED,
                exit_code=None if result.timed_out else result.returncode,
                diagnostic=truncate(_diagnostic_text(result, timeout), max_diagnostic_chars),
                elapsed=elapsed,
                timed_out=result.timed_out,
            )

    LOGGER.debug("formatter=%s status=ok elapsed=%.3f", resolved.name, elapsed)
    return _outcome(resolved, language, kind=OutcomeKind.SUCCESS, exit_code=0, elapsed=elapsed)


def truncate(text: str, limit: int) -> str:
    """Return *text* stripped and cut to at most *limit* characters."""

    cleaned = text.strip()
    if len(cleaned) <= limit:
        return cleaned
    keep = max(limit - len(TRUNCATION_MARKER), 0)
    return f"{cleaned[:keep]}{TRUNCATION_MARKER}"[:limit]


def _diagnostic_text(result: CommandResult, timeout: float) -> str:
    if result.timed_out:
        return f"timed out after {timeout:g}s"
    return result.stderr if result.stderr.strip() else result.stdout


def _outcome(
    resolved: ResolvedFormatter,
    language: LanguageId | None,
    *,
    kind: OutcomeKind,
    exit_code: int | None = None,
    diagnostic: str = "",
    elapsed: float = 0.0,
    timed_out: bool = False,
) -> ExecutionOutcome:
    return ExecutionOutcome(
        kind=kind,
        language=language,
        formatter=resolved.name,
        source=resolved.source,
        exit_code=exit_code,
        diagnostic=diagnostic,
        elapsed=elapsed,
        timed_out=timed_out,
        stage="execute" if kind is OutcomeKind.TOOL_FAILED else None,
    )


__all__ = ["TRUNCATION_MARKER", "execute", "truncate"]
