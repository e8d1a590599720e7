# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

ScriptFactory = Callable[..., Path]


def write_script(directory: Path, name: str, body: str = "exit 0") -> Path:
    """Create an executable ``#!/bin/sh`` script standing in for a formatter."""

    directory.mkdir(parents=True, exist_ok=True)
    script = directory / name
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(0o755)
    return script


def make_event(file_path: Path | str) -> str:
    """Return a host event document for a write to *file_path*."""

    return json.dumps({"tool_name": "Write", "tool_input": {"file_path": str(file_path)}})


@pytest.fixture
def global_bin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Replace ``PATH`` with an empty directory so only test scripts are found globally."""

    directory = tmp_path / "global-bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory


@pytest.fixture
def script() -> ScriptFactory:
    """Return the :func:`write_script` helper."""

    return write_script


@pytest.fixture
def event_for() -> Callable[[Path | str], str]:
    """Return the :func:`make_event` helper."""

    return make_event
