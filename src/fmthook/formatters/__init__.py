# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatter candidate definitions and the per-language registry."""

from __future__ import annotations

from .models import CandidateChain, CommandStep, FormatterCandidate, Requirement, SearchLocation, candidate
from .registry import CANDIDATE_CHAINS, chain_for

__all__ = [
    "CANDIDATE_CHAINS",
    "CandidateChain",
    "CommandStep",
    "FormatterCandidate",
    "Requirement",
    "SearchLocation",
    "candidate",
    "chain_for",
]
