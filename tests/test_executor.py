# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for running the selected formatter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from fmthook.executor import TRUNCATION_MARKER, execute, truncate
from fmthook.formatters import CommandStep, FormatterCandidate, candidate
from fmthook.languages import LanguageId
from fmthook.models import OutcomeKind
from fmthook.resolver import ResolvedFormatter

ScriptFactory = Callable[..., Path]

# Rewrites the last argument so tests can observe in-place formatting.
_REWRITE_LAST = 'for last; do :; done\nprintf "formatted\\n" > "$last"'


def _resolved(entry: FormatterCandidate, *executables: Path, root: Path | None = None) -> ResolvedFormatter:
    return ResolvedFormatter(candidate=entry, executables=executables, project_root=root, source="system")


def test_successful_formatter(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "main.go"
    target.write_text("package main\n", encoding="utf-8")
    gofmt = script(tmp_path / "bin", "gofmt", _REWRITE_LAST)

    outcome = execute(_resolved(candidate("gofmt", "gofmt", ("-w", "{file}")), gofmt), target, language=LanguageId.GO)

    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.exit_code == 0
    assert outcome.formatter == "gofmt"
    assert outcome.language is LanguageId.GO
    assert target.read_text(encoding="utf-8") == "formatted\n"


def test_nonzero_exit_is_tool_failure(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "main.rs"
    target.write_text("fn main(){}\n", encoding="utf-8")
    rustfmt = script(tmp_path / "bin", "rustfmt", 'echo "error: expected item" >&2\nexit 1')

    outcome = execute(_resolved(candidate("rustfmt", "rustfmt", ("{file}",)), rustfmt), target)

    assert outcome.kind is OutcomeKind.TOOL_FAILED
    assert outcome.exit_code == 1
    assert outcome.diagnostic == "error: expected item"
    assert outcome.stage == "execute"
    assert not outcome.timed_out


def test_stdout_used_when_stderr_is_empty(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "a.py"
    target.write_text("x=1\n", encoding="utf-8")
    black = script(tmp_path / "bin", "black", 'echo "cannot format a.py"\nexit 123')

    outcome = execute(_resolved(candidate("black", "black", ("{file}",)), black), target)

    assert outcome.exit_code == 123
    assert outcome.diagnostic == "cannot format a.py"


def test_timeout_is_tool_failure(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "a.py"
    target.write_text("x=1\n", encoding="utf-8")
    slow = script(tmp_path / "bin", "ruff", "while :; do :; done")

    outcome = execute(_resolved(candidate("ruff", "ruff", ("format", "{file}")), slow), target, timeout=0.3)

    assert outcome.kind is OutcomeKind.TOOL_FAILED
    assert outcome.timed_out
    assert outcome.exit_code is None
    assert outcome.diagnostic == "timed out after 0.3s"


def test_diagnostic_is_truncated(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "a.js"
    target.write_text("x\n", encoding="utf-8")
    noisy = script(tmp_path / "bin", "prettier", "i=0\nwhile [ $i -lt 200 ]; do echo 'syntax error here' >&2; i=$((i+1)); done\nexit 2")

    outcome = execute(
        _resolved(candidate("prettier", "prettier", ("--write", "{file}")), noisy),
        target,
        max_diagnostic_chars=100,
    )

    assert len(outcome.diagnostic) == 100
    assert outcome.diagnostic.endswith(TRUNCATION_MARKER)


def test_spawn_failure_is_tool_failure(tmp_path: Path) -> None:
    target = tmp_path / "a.py"
    target.write_text("x=1\n", encoding="utf-8")
    not_executable = tmp_path / "bin" / "yapf"
    not_executable.parent.mkdir()
    not_executable.write_text("plain text", encoding="utf-8")

    outcome = execute(_resolved(candidate("yapf", "yapf", ("-i", "{file}")), not_executable), target)

    assert outcome.kind is OutcomeKind.TOOL_FAILED
    assert outcome.exit_code is None
    assert outcome.diagnostic


def test_composite_candidate_stops_at_first_failure(tmp_path: Path, script: ScriptFactory) -> None:
    target = tmp_path / "main.go"
    target.write_text("package main\n", encoding="utf-8")
    marker = tmp_path / "second-ran"
    first = script(tmp_path / "bin", "goimports", "exit 2")
    second = script(tmp_path / "bin", "gofumpt", f'touch "{marker}"')
    entry = FormatterCandidate(
        name="goimports + gofumpt",
        steps=(
            CommandStep(executable="goimports", args=("-w", "{file}")),
            CommandStep(executable="gofumpt", args=("-w", "{file}")),
        ),
    )

    outcome = execute(_resolved(entry, first, second), target)

    assert outcome.kind is OutcomeKind.TOOL_FAILED
    assert outcome.exit_code == 2
    assert not marker.exists()


def test_formatter_runs_in_project_root_when_requested(tmp_path: Path, script: ScriptFactory) -> None:
    root = tmp_path / "crate"
    root.mkdir()
    target = root / "src" / "main.rs"
    target.parent.mkdir()
    target.write_text("fn main(){}\n", encoding="utf-8")
    cargo = script(tmp_path / "bin", "cargo", 'pwd > "$PWD/cwd.txt"')
    entry = candidate("cargo fmt", "cargo", ("fmt", "--", "{file}"), run_in_root=True)

    outcome = execute(_resolved(entry, cargo, root=root), target)

    assert outcome.kind is OutcomeKind.SUCCESS
    assert (root / "cwd.txt").exists()


def test_truncate_keeps_short_text() -> None:
    assert truncate("  short  ", 10) == "short"
    assert truncate("abcdefghijklmnopqrstuvwxyz", 20).endswith(TRUNCATION_MARKER)
