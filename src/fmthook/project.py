# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for locating project roots above a target file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path


def iter_ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* followed by each parent directory up to the filesystem root."""

    seen: set[Path] = set()
    current = start
    while True:
        if current in seen:
            break
        seen.add(current)
        yield current
        if current.parent == current:
            break
        current = current.parent


def find_project_root(file_path: Path, markers: Sequence[str]) -> Path | None:
    """Return the nearest directory above *file_path* that contains one of *markers*.

    The search starts in the directory holding *file_path* and stops at the
    first match, so nested packages in a monorepo shadow the outer root.
    """

    if not markers:
        return None
    for directory in iter_ancestors(_start_directory(file_path)):
        if any((directory / marker).exists() for marker in markers):
            return directory
    return None


def find_marker_files(file_path: Path, markers: Sequence[str]) -> tuple[Path, ...]:
    """Return the marker files present in the nearest matching project root."""

    root = find_project_root(file_path, markers)
    if root is None:
        return ()
    return tuple(_existing(root / marker for marker in markers))


def _existing(paths: Iterable[Path]) -> Iterator[Path]:
    return (path for path in paths if path.exists())


def _start_directory(file_path: Path) -> Path:
    absolute = file_path if file_path.is_absolute() else Path.cwd() / file_path
    return absolute.parent


__all__ = ["find_marker_files", "find_project_root", "iter_ancestors"]
