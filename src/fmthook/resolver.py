# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the first applicable and locatable formatter from a chain."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .formatters.models import CandidateChain, FormatterCandidate, SearchLocation
from .project import find_marker_files, find_project_root

LOGGER = logging.getLogger(__name__)

ResolutionSource = Literal["project", "system"]


class ResolvedFormatter(BaseModel):
    """Candidate bound to concrete executables for the current file."""

    model_config = ConfigDict(frozen=True)

    candidate: FormatterCandidate
    executables: tuple[Path, ...]
    project_root: Path | None
    source: ResolutionSource

    @property
    def name(self) -> str:
        return self.candidate.name

    @property
    def cwd(self) -> Path | None:
        """Return the working directory the formatter must run in, if any."""

        return self.project_root if self.candidate.run_in_root else None


class Resolution(BaseModel):
    """Result of walking a chain: the winner plus notes on every candidate examined."""

    model_config = ConfigDict(frozen=True)

    selected: ResolvedFormatter | None = None
    considered: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.selected is not None


def resolve(chain: CandidateChain, file_path: Path, *, project_only: bool = False) -> Resolution:
    """Return the first candidate in *chain* that is applicable and locatable.

    Candidates are checked strictly in chain order and the walk stops at the
    first success, so a later candidate never wins over an earlier one and an
    earlier one is never revisited.

    Args:
        chain: Priority-ordered candidates for the file's language.
        file_path: File that will be formatted.
        project_only: Restrict lookups to project-local installations, except
            for candidates whose project descriptor was found.

    Returns:
        Resolution: The selected formatter (or ``None``) and per-candidate notes.
    """

    notes: list[str] = []
    for entry in chain:
        if not is_applicable(entry, file_path):
            LOGGER.debug("candidate=%s status=not-applicable", entry.name)
            notes.append(f"{entry.name}: not applicable")
            continue
        resolved = locate(entry, file_path, project_only=project_only)
        if resolved is None:
            LOGGER.debug("candidate=%s status=not-found", entry.name)
            notes.append(f"{entry.name}: not found")
            continue
        LOGGER.debug(
            "candidate=%s status=selected source=%s cmd=%s",
            entry.name,
            resolved.source,
            resolved.executables[0],
        )
        notes.append(f"{entry.name}: selected ({resolved.source})")
        return Resolution(selected=resolved, considered=tuple(notes))
    return Resolution(selected=None, considered=tuple(notes))


def is_applicable(entry: FormatterCandidate, file_path: Path) -> bool:
    """Return ``True`` when the project structure *entry* needs is present above *file_path*."""

    requirement = entry.requires
    if requirement is None:
        return True
    marker_files = find_marker_files(file_path, requirement.markers)
    if not marker_files:
        return False
    if requirement.contains is None:
        return True
    return any(_mentions(marker, requirement.contains) for marker in marker_files)


def locate(
    entry: FormatterCandidate,
    file_path: Path,
    *,
    project_only: bool = False,
) -> ResolvedFormatter | None:
    """Find executables for every step of *entry*, project-local locations first.

    Args:
        entry: Candidate whose executables are searched for.
        file_path: File being formatted; anchors the project root search.
        project_only: Skip the global ``PATH`` unless *entry* is tied to the
            project, either by a requirement or by a found root marker when
            ``global_in_project`` is set.

    Returns:
        ResolvedFormatter | None: Resolved command bundle, or ``None`` when any
        executable is missing from every allowed location.
    """

    root = find_project_root(file_path, entry.project_markers)
    for location in entry.search:
        if location is SearchLocation.PATH:
            if project_only and not _project_scoped(entry, root):
                continue
            found = _which_all(entry.executables, search_path=None)
        else:
            if root is None:
                continue
            directories = location.directories(root)
            found = _which_all(entry.executables, search_path=os.pathsep.join(str(d) for d in directories))
        if found is not None:
            source: ResolutionSource = "project" if location.is_project_local else "system"
            return ResolvedFormatter(candidate=entry, executables=found, project_root=root, source=source)
    return None


def _project_scoped(entry: FormatterCandidate, root: Path | None) -> bool:
    if entry.requires is not None:
        return True
    return entry.global_in_project and root is not None


def _which_all(executables: Sequence[str], *, search_path: str | None) -> tuple[Path, ...] | None:
    resolved: list[Path] = []
    for name in executables:
        match = shutil.which(name, path=search_path)
        if match is None:
            return None
        resolved.append(Path(match).absolute())
    return tuple(resolved)


def _mentions(marker: Path, needle: str) -> bool:
    try:
        return needle in marker.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        LOGGER.debug("marker=%s status=unreadable error=%s", marker, exc)
        return False


__all__ = ["Resolution", "ResolvedFormatter", "is_applicable", "locate", "resolve"]
