# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declarative descriptions of formatter candidates."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import FILE_PLACEHOLDER, NODE_BIN_DIRS, VIRTUALENV_BIN_DIRS


class SearchLocation(str, Enum):
    """Places where a formatter executable may be installed."""

    NODE_MODULES = "node_modules"
    VIRTUALENV = "virtualenv"
    PROJECT_ROOT = "project-root"
    PATH = "path"

    @property
    def is_project_local(self) -> bool:
        return self is not SearchLocation.PATH

    def directories(self, root: Path) -> tuple[Path, ...]:
        """Return the directories under *root* searched for this location.

        Args:
            root: Project root the local search is anchored to.

        Returns:
            tuple[Path, ...]: Candidate directories; empty for :attr:`PATH`.
        """

        if self is SearchLocation.NODE_MODULES:
            return tuple(root / entry for entry in NODE_BIN_DIRS)
        if self is SearchLocation.VIRTUALENV:
            return tuple(root / entry for entry in VIRTUALENV_BIN_DIRS)
        if self is SearchLocation.PROJECT_ROOT:
            return (root,)
        return ()


class CommandStep(BaseModel):
    """Single command invocation operating on the target file."""

    model_config = ConfigDict(frozen=True)

    executable: str
    args: tuple[str, ...] = ()

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("executable must not be empty")
        return value

    def render(self, executable: Path, file_path: Path) -> list[str]:
        """Return the argument vector for *file_path* using the resolved *executable*."""

        target = str(file_path)
        return [str(executable), *(arg.replace(FILE_PLACEHOLDER, target) for arg in self.args)]


class Requirement(BaseModel):
    """Project structure a candidate needs before it may be used.

    The nearest ancestor holding one of ``markers`` must exist. When
    ``contains`` is set, at least one of the marker files in that directory
    must mention it (for example a build descriptor declaring a plugin).
    """

    model_config = ConfigDict(frozen=True)

    markers: tuple[str, ...]
    contains: str | None = None

    @field_validator("markers")
    @classmethod
    def _require_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("requirement needs at least one marker")
        return value


class FormatterCandidate(BaseModel):
    """One formatter option within a language's priority chain."""

    model_config = ConfigDict(frozen=True)

    name: str
    steps: tuple[CommandStep, ...] = Field(min_length=1)
    root_markers: tuple[str, ...] = ()
    search: tuple[SearchLocation, ...] = (SearchLocation.PATH,)
    requires: Requirement | None = None
    run_in_root: bool = False
    # Under project-only lookup, a global install still counts once the root marker is found.
    global_in_project: bool = False

    @field_validator("search")
    @classmethod
    def _local_before_global(cls, value: tuple[SearchLocation, ...]) -> tuple[SearchLocation, ...]:
        if not value:
            raise ValueError("candidate must declare at least one search location")
        if SearchLocation.PATH in value and value[-1] is not SearchLocation.PATH:
            raise ValueError("the PATH search location must come after project-local locations")
        return value

    @property
    def executables(self) -> tuple[str, ...]:
        return tuple(step.executable for step in self.steps)

    @property
    def project_markers(self) -> tuple[str, ...]:
        """Return markers anchoring the project root for local search and cwd."""

        if self.requires is not None:
            return self.requires.markers
        return self.root_markers


def candidate(
    name: str,
    executable: str,
    args: Sequence[str] = (),
    **fields: object,
) -> FormatterCandidate:
    """Return a single-step :class:`FormatterCandidate`."""

    return FormatterCandidate.model_validate(
        {"name": name, "steps": (CommandStep(executable=executable, args=tuple(args)),), **fields}
    )


CandidateChain = tuple[FormatterCandidate, ...]

__all__ = [
    "CandidateChain",
    "CommandStep",
    "FormatterCandidate",
    "Requirement",
    "SearchLocation",
    "candidate",
]
