# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for fmt-hook."""

from __future__ import annotations

from .app import app, run

__all__ = ["app", "run"]
