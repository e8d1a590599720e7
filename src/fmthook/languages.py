# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language classification for files reported by the host."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Final

from .constants import NODE_INTERPRETERS, PYTHON_INTERPRETERS, SHEBANG_READ_BYTES, SKIPPED_FILENAMES

LOGGER = logging.getLogger(__name__)


class LanguageId(Enum):
    """Languages with a formatter chain, labelled for user-facing messages."""

    JAVASCRIPT = "JavaScript/TypeScript"
    RUST = "Rust"
    PYTHON = "Python"
    JAVA = "Java"
    GO = "Go"
    JSON = "JSON"
    YAML = "YAML"
    TOML = "TOML"
    HTML = "HTML"
    VUE = "Vue"
    CSS = "CSS"
    SCSS = "SCSS"
    LESS = "Less"
    MARKDOWN = "Markdown"
    MDX = "MDX"
    GRAPHQL = "GraphQL"
    HANDLEBARS = "Handlebars"

    @property
    def label(self) -> str:
        """Return the display label for the language."""

        return self.value


class ClassificationStatus(Enum):
    """Result categories produced by :func:`classify_path`."""

    CLASSIFIED = "classified"
    SKIPPED = "skipped"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of classifying a single file path."""

    status: ClassificationStatus
    language: LanguageId | None = None
    reason: str = ""


_EXTENSIONS: dict[LanguageId, tuple[str, ...]] = {
    LanguageId.JAVASCRIPT: (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"),
    LanguageId.RUST: (".rs",),
    LanguageId.PYTHON: (".py", ".pyi"),
    LanguageId.JAVA: (".java",),
    LanguageId.GO: (".go",),
    LanguageId.JSON: (".json", ".jsonc", ".json5"),
    LanguageId.YAML: (".yaml", ".yml"),
    LanguageId.TOML: (".toml",),
    LanguageId.HTML: (".html", ".htm"),
    LanguageId.VUE: (".vue",),
    LanguageId.CSS: (".css",),
    LanguageId.SCSS: (".scss",),
    LanguageId.LESS: (".less",),
    LanguageId.MARKDOWN: (".md", ".markdown"),
    LanguageId.MDX: (".mdx",),
    LanguageId.GRAPHQL: (".graphql", ".gql"),
    LanguageId.HANDLEBARS: (".hbs", ".handlebars"),
}

EXTENSION_LANGUAGES: Final[MappingProxyType[str, LanguageId]] = MappingProxyType(
    {suffix: language for language, suffixes in _EXTENSIONS.items() for suffix in suffixes}
)


def classify_path(path: Path) -> Classification:
    """Classify *path* into a language, a skipped file, or an unsupported file.

    The decision is made from the file name and extension. Files without an
    extension are inspected for a shebang line; when they cannot be read the
    extension-only result (unsupported) stands.

    Args:
        path: File reported by the host.

    Returns:
        Classification: Status, language and a human-readable reason.
    """

    if path.name in SKIPPED_FILENAMES:
        return Classification(ClassificationStatus.SKIPPED, reason=f"Skipped {path.name}")

    suffix = path.suffix.lower()
    language = EXTENSION_LANGUAGES.get(suffix)
    if language is None and not suffix:
        language = _language_from_shebang(path)
    if language is None:
        return Classification(
            ClassificationStatus.UNSUPPORTED,
            reason=f"Unsupported file extension: {suffix or '<none>'}",
        )
    return Classification(ClassificationStatus.CLASSIFIED, language=language, reason=language.label)


def _language_from_shebang(path: Path) -> LanguageId | None:
    try:
        with path.open("rb") as handle:
            head = handle.read(SHEBANG_READ_BYTES)
    except OSError as exc:
        LOGGER.debug("shebang=unreadable path=%s error=%s", path, exc)
        return None
    if not head.startswith(b"#!"):
        return None
    line = head.splitlines()[0][2:].decode(errors="ignore").strip()
    interpreter = _interpreter_name(line)
    if interpreter is None:
        return None
    if interpreter in PYTHON_INTERPRETERS or interpreter.startswith("python"):
        return LanguageId.PYTHON
    if interpreter in NODE_INTERPRETERS:
        return LanguageId.JAVASCRIPT
    return None


def _interpreter_name(line: str) -> str | None:
    parts = line.split()
    if not parts:
        return None
    command = Path(parts[0]).name
    if command == "env":
        # ``#!/usr/bin/env -S node --flag`` style lines carry options before the interpreter.
        args = [part for part in parts[1:] if not part.startswith("-")]
        if not args:
            return None
        command = Path(args[0]).name
    return command


__all__ = [
    "Classification",
    "ClassificationStatus",
    "EXTENSION_LANGUAGES",
    "LanguageId",
    "classify_path",
]
