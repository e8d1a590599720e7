# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; the wrapper normalises arguments and
# never enables ``shell=True``.
import subprocess  # nosec B404
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

TIMEOUT_RETURNCODE = 124


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a finished (or killed) subprocess."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str
    elapsed: float
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Execute *args* with captured output after normalising the executable path.

    Stdin is always discarded so a formatter can never block waiting for input.
    When *timeout* expires the child is killed, its partial output is dropped
    and the result carries ``timed_out=True`` with return code 124.

    Raises:
        FileNotFoundError: If a bare executable name cannot be found on ``PATH``.
        OSError: If the process cannot be spawned.
    """

    normalized = _normalize_args(args)
    started = time.perf_counter()
    try:
        # Bandit: commands come from the static formatter registry and are passed
        # as argument lists without shell expansion.
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired:
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        result = CommandResult(
            args=tuple(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout="",
            stderr=timeout_msg,
            elapsed=time.perf_counter() - started,
            timed_out=True,
        )
    else:
        result = CommandResult(
            args=tuple(normalized),
            returncode=completed.returncode,
            stdout=_ensure_text(completed.stdout),
            stderr=_ensure_text(completed.stderr),
            elapsed=time.perf_counter() - started,
        )
    return result


__all__ = ["CommandResult", "TIMEOUT_RETURNCODE", "run_command"]
