# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the end-to-end hook pipeline."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from fmthook import pipeline
from fmthook.config import HookSettings
from fmthook.models import OutcomeKind
from fmthook.pipeline import format_file, run_hook

ScriptFactory = Callable[..., Path]
EventFactory = Callable[[Path | str], str]

DEBUG = HookSettings(debug=True)
QUIET = HookSettings()


def test_go_file_formatted_with_global_gofmt(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
    event_for: EventFactory,
) -> None:
    target = tmp_path / "main.go"
    target.write_text("package main\n", encoding="utf-8")
    script(global_bin, "gofmt")

    envelope = run_hook(event_for(target), DEBUG)

    assert envelope.continue_ is True
    assert envelope.system_message is not None
    assert "gofmt" in envelope.system_message
    assert "formatted with gofmt" in envelope.system_message


def test_missing_formatter_is_silent_without_debug(tmp_path: Path, global_bin: Path, event_for: EventFactory) -> None:
    target = tmp_path / "main.py"
    target.write_text("x=1\n", encoding="utf-8")

    assert run_hook(event_for(target), QUIET).to_json() == '{"continue":true}'
    debug_message = run_hook(event_for(target), DEBUG).system_message
    assert debug_message is not None
    assert "Python: formatter not found" in debug_message


def test_failed_formatter_still_continues(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
    event_for: EventFactory,
) -> None:
    target = tmp_path / "lib.rs"
    target.write_text("fn main(){}\n", encoding="utf-8")
    script(global_bin, "rustfmt", 'echo "error: this file contains an unclosed delimiter" >&2\nexit 1')

    assert run_hook(event_for(target), QUIET).to_json() == '{"continue":true}'
    message = run_hook(event_for(target), DEBUG).system_message
    assert message is not None
    assert "rustfmt failed (exit 1)" in message
    assert "unclosed delimiter" in message


def test_timed_out_formatter_reports_timeout(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
    event_for: EventFactory,
) -> None:
    target = tmp_path / "main.go"
    target.write_text("package main\n", encoding="utf-8")
    script(global_bin, "gofmt", "while :; do :; done")

    envelope = run_hook(event_for(target), HookSettings(debug=True, timeout=0.3))

    assert envelope.system_message is not None
    assert envelope.system_message == "[fmt-hook] Go: gofmt timed out after 0.3s"


def test_package_json_is_skipped(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
    event_for: EventFactory,
) -> None:
    target = tmp_path / "package.json"
    target.write_text('{"name": "x"}', encoding="utf-8")
    ran = tmp_path / "oxfmt-ran"
    script(global_bin, "oxfmt", f': > "{ran}"')

    outcome = format_file(target, QUIET)

    assert outcome.kind is OutcomeKind.SKIPPED
    assert run_hook(event_for(target), DEBUG).system_message == "[fmt-hook] Skipped package.json"
    assert not ran.exists()


def test_unsupported_extension(tmp_path: Path, event_for: EventFactory) -> None:
    target = tmp_path / "file.xyz"
    target.write_text("content", encoding="utf-8")

    message = run_hook(event_for(target), DEBUG).system_message

    assert message == "[fmt-hook] Unsupported file extension: .xyz"


def test_nonexistent_file_reports_input_stage(event_for: EventFactory) -> None:
    message = run_hook(event_for("/nonexistent/file.rs"), DEBUG).system_message

    assert message == "[fmt-hook] input error: File does not exist: /nonexistent/file.rs"


@pytest.mark.parametrize("raw", ["not valid json", '{"tool_name": "Write", "tool_input": {}}'])
def test_bad_events_continue(raw: str) -> None:
    assert run_hook(raw, QUIET).to_json() == '{"continue":true}'
    message = run_hook(raw, DEBUG).system_message
    assert message is not None
    assert message.startswith("[fmt-hook] input error:")


def test_unexpected_exception_is_downgraded(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    event_for: EventFactory,
) -> None:
    target = tmp_path / "main.go"
    target.write_text("package main\n", encoding="utf-8")

    def explode(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("registry corrupted")

    monkeypatch.setattr(pipeline, "resolve", explode)

    assert run_hook(event_for(target), QUIET).to_json() == '{"continue":true}'
    message = run_hook(event_for(target), DEBUG).system_message
    assert message == "[fmt-hook] internal error: RuntimeError: registry corrupted"


def test_rust_crate_prefers_cargo_fmt(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
    event_for: EventFactory,
) -> None:
    crate = tmp_path / "crate"
    (crate / "src").mkdir(parents=True)
    (crate / "Cargo.toml").write_text('[package]\nname = "demo"\n', encoding="utf-8")
    target = crate / "src" / "main.rs"
    target.write_text("fn main(){}\n", encoding="utf-8")
    script(global_bin, "cargo", 'pwd > "$PWD/ran-here"')
    script(global_bin, "rustfmt")

    outcome = format_file(target, QUIET)

    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.formatter == "cargo fmt"
    assert (crate / "ran-here").exists()
    assert outcome.considered == ("cargo fmt: selected (system)",)


def test_outside_cargo_project_uses_rustfmt(tmp_path: Path, global_bin: Path, script: ScriptFactory) -> None:
    target = tmp_path / "script.rs"
    target.write_text("fn main(){}\n", encoding="utf-8")
    script(global_bin, "cargo")
    script(global_bin, "rustfmt")

    outcome = format_file(target, QUIET)

    assert outcome.formatter == "rustfmt"
    assert outcome.considered[0] == "cargo fmt: not applicable"


def test_multi_format_file_uses_project_oxfmt(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
) -> None:
    project = tmp_path / "site"
    (project / "docs").mkdir(parents=True)
    (project / ".git").mkdir()
    script(project / "node_modules" / ".bin", "oxfmt")
    target = project / "docs" / "guide.md"
    target.write_text("# Guide\n", encoding="utf-8")

    outcome = format_file(target, HookSettings(project_only=True))

    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.formatter == "oxfmt"
    assert outcome.source == "project"


def test_project_only_formats_go_module_with_global_gofmt(
    tmp_path: Path,
    global_bin: Path,
    script: ScriptFactory,
) -> None:
    module = tmp_path / "svc"
    module.mkdir()
    (module / "go.mod").write_text("module example.com/svc\n", encoding="utf-8")
    target = module / "main.go"
    target.write_text("package main\n", encoding="utf-8")
    script(global_bin, "gofmt")

    outcome = format_file(target, HookSettings(project_only=True))

    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.formatter == "gofmt"
