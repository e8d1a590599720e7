# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static per-language formatter priority chains."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from ..constants import (
    FILE_PLACEHOLDER,
    GENERIC_PROJECT_MARKERS,
    GO_PROJECT_MARKERS,
    GRADLE_PROJECT_MARKERS,
    MAVEN_PROJECT_MARKERS,
    NODE_PROJECT_MARKERS,
    PYTHON_PROJECT_MARKERS,
    RUST_PROJECT_MARKERS,
)
from ..languages import LanguageId
from .models import CandidateChain, CommandStep, FormatterCandidate, Requirement, SearchLocation, candidate

_FILE = FILE_PLACEHOLDER
_NODE_SEARCH = (SearchLocation.NODE_MODULES, SearchLocation.PATH)
_NODE_ONLY = (SearchLocation.NODE_MODULES,)
_VENV_SEARCH = (SearchLocation.VIRTUALENV, SearchLocation.PATH)
_SPOTLESS_GRADLE = Requirement(markers=GRADLE_PROJECT_MARKERS, contains="spotless")
_GO_MODULE: Final[dict[str, object]] = {
    "root_markers": GO_PROJECT_MARKERS,
    "run_in_root": True,
    "global_in_project": True,
}

JAVASCRIPT_CHAIN: Final[CandidateChain] = (
    candidate("oxfmt", "oxfmt", ("--write", _FILE), root_markers=NODE_PROJECT_MARKERS, search=_NODE_SEARCH),
    # biome and prettier run only from the project's node_modules.
    candidate("biome", "biome", ("format", "--write", _FILE), root_markers=NODE_PROJECT_MARKERS, search=_NODE_ONLY),
    candidate("prettier", "prettier", ("--write", _FILE), root_markers=NODE_PROJECT_MARKERS, search=_NODE_ONLY),
    candidate("dprint", "dprint", ("fmt", _FILE)),
)

RUST_CHAIN: Final[CandidateChain] = (
    candidate(
        "cargo fmt",
        "cargo",
        ("fmt", "--", _FILE),
        requires=Requirement(markers=RUST_PROJECT_MARKERS),
        run_in_root=True,
    ),
    candidate("rustfmt", "rustfmt", (_FILE,)),
)

PYTHON_CHAIN: Final[CandidateChain] = (
    candidate("ruff", "ruff", ("format", _FILE), root_markers=PYTHON_PROJECT_MARKERS, search=_VENV_SEARCH),
    candidate("black", "black", (_FILE,), root_markers=PYTHON_PROJECT_MARKERS, search=_VENV_SEARCH),
    candidate("autopep8", "autopep8", ("--in-place", _FILE), root_markers=PYTHON_PROJECT_MARKERS, search=_VENV_SEARCH),
    candidate("yapf", "yapf", ("-i", _FILE), root_markers=PYTHON_PROJECT_MARKERS, search=_VENV_SEARCH),
)

JAVA_CHAIN: Final[CandidateChain] = (
    candidate(
        "spotless (Maven)",
        "mvn",
        ("spotless:apply", f"-DspotlessFiles={_FILE}"),
        requires=Requirement(markers=MAVEN_PROJECT_MARKERS, contains="spotless"),
        run_in_root=True,
    ),
    # Gradle's spotlessApply formats the whole project; it takes no file argument.
    candidate(
        "spotless (Gradle wrapper)",
        "gradlew",
        ("spotlessApply",),
        requires=_SPOTLESS_GRADLE,
        search=(SearchLocation.PROJECT_ROOT,),
        run_in_root=True,
    ),
    candidate("spotless (Gradle)", "gradle", ("spotlessApply",), requires=_SPOTLESS_GRADLE, run_in_root=True),
    candidate("google-java-format", "google-java-format", ("--replace", _FILE)),
    candidate("palantir-java-format", "palantir-java-format", ("--replace", _FILE)),
)

GO_CHAIN: Final[CandidateChain] = (
    FormatterCandidate(
        name="goimports + gofumpt",
        steps=(
            CommandStep(executable="goimports", args=("-w", _FILE)),
            CommandStep(executable="gofumpt", args=("-w", _FILE)),
        ),
        root_markers=GO_PROJECT_MARKERS,
        run_in_root=True,
        global_in_project=True,
    ),
    candidate("gofumpt", "gofumpt", ("-w", _FILE), **_GO_MODULE),
    candidate("goimports", "goimports", ("-w", _FILE), **_GO_MODULE),
    candidate("gofmt", "gofmt", ("-w", _FILE), **_GO_MODULE),
)

# oxfmt is authoritative for every data, markup and stylesheet format.
MULTI_FORMAT_CHAIN: Final[CandidateChain] = (
    candidate("oxfmt", "oxfmt", ("--write", _FILE), root_markers=GENERIC_PROJECT_MARKERS, search=_NODE_SEARCH),
)

_MULTI_FORMAT_LANGUAGES: Final[tuple[LanguageId, ...]] = (
    LanguageId.JSON,
    LanguageId.YAML,
    LanguageId.TOML,
    LanguageId.HTML,
    LanguageId.VUE,
    LanguageId.CSS,
    LanguageId.SCSS,
    LanguageId.LESS,
    LanguageId.MARKDOWN,
    LanguageId.MDX,
    LanguageId.GRAPHQL,
    LanguageId.HANDLEBARS,
)

CANDIDATE_CHAINS: Final[MappingProxyType[LanguageId, CandidateChain]] = MappingProxyType(
    {
        LanguageId.JAVASCRIPT: JAVASCRIPT_CHAIN,
        LanguageId.RUST: RUST_CHAIN,
        LanguageId.PYTHON: PYTHON_CHAIN,
        LanguageId.JAVA: JAVA_CHAIN,
        LanguageId.GO: GO_CHAIN,
        **{language: MULTI_FORMAT_CHAIN for language in _MULTI_FORMAT_LANGUAGES},
    }
)


def chain_for(language: LanguageId) -> CandidateChain:
    """Return the priority-ordered formatter chain registered for *language*.

    Raises:
        KeyError: If no chain is registered for *language*.
    """

    return CANDIDATE_CHAINS[language]


__all__ = [
    "CANDIDATE_CHAINS",
    "GO_CHAIN",
    "JAVASCRIPT_CHAIN",
    "JAVA_CHAIN",
    "MULTI_FORMAT_CHAIN",
    "PYTHON_CHAIN",
    "RUST_CHAIN",
    "chain_for",
]
