# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across fmthook modules."""

from __future__ import annotations

from typing import Final

PROGRAM_NAME: Final[str] = "fmt-hook"
MESSAGE_PREFIX: Final[str] = f"[{PROGRAM_NAME}]"

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_MAX_DIAGNOSTIC_CHARS: Final[int] = 500
MAX_MESSAGE_CHARS: Final[int] = 2000
TIMEOUT_ENV_VAR: Final[str] = "FMT_HOOK_TIMEOUT"

FILE_PLACEHOLDER: Final[str] = "{file}"

# Files that formatters would rewrite in ways package managers do not expect.
SKIPPED_FILENAMES: Final[frozenset[str]] = frozenset({"package.json"})

GENERIC_PROJECT_MARKERS: Final[tuple[str, ...]] = (
    "Cargo.toml",
    "package.json",
    "pyproject.toml",
    "setup.py",
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "go.mod",
    ".git",
)
NODE_PROJECT_MARKERS: Final[tuple[str, ...]] = ("package.json",)
PYTHON_PROJECT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", "setup.py", "setup.cfg")
RUST_PROJECT_MARKERS: Final[tuple[str, ...]] = ("Cargo.toml",)
GO_PROJECT_MARKERS: Final[tuple[str, ...]] = ("go.mod",)
MAVEN_PROJECT_MARKERS: Final[tuple[str, ...]] = ("pom.xml",)
GRADLE_PROJECT_MARKERS: Final[tuple[str, ...]] = ("build.gradle", "build.gradle.kts")

NODE_BIN_DIRS: Final[tuple[str, ...]] = ("node_modules/.bin",)
VIRTUALENV_BIN_DIRS: Final[tuple[str, ...]] = (
    ".venv/bin",
    "venv/bin",
    ".venv/Scripts",
    "venv/Scripts",
)

# Interpreters recognised on the shebang line of extensionless scripts.
PYTHON_INTERPRETERS: Final[frozenset[str]] = frozenset({"python", "python2", "python3", "pypy", "pypy3"})
NODE_INTERPRETERS: Final[frozenset[str]] = frozenset({"node", "nodejs", "deno", "bun", "tsx", "ts-node"})
SHEBANG_READ_BYTES: Final[int] = 256

__all__ = [
    "DEFAULT_MAX_DIAGNOSTIC_CHARS",
    "DEFAULT_TIMEOUT_SECONDS",
    "FILE_PLACEHOLDER",
    "GENERIC_PROJECT_MARKERS",
    "GO_PROJECT_MARKERS",
    "GRADLE_PROJECT_MARKERS",
    "MAVEN_PROJECT_MARKERS",
    "MAX_MESSAGE_CHARS",
    "MESSAGE_PREFIX",
    "NODE_BIN_DIRS",
    "NODE_INTERPRETERS",
    "NODE_PROJECT_MARKERS",
    "PROGRAM_NAME",
    "PYTHON_INTERPRETERS",
    "PYTHON_PROJECT_MARKERS",
    "RUST_PROJECT_MARKERS",
    "SHEBANG_READ_BYTES",
    "SKIPPED_FILENAMES",
    "TIMEOUT_ENV_VAR",
    "VIRTUALENV_BIN_DIRS",
]
