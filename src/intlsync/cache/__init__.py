# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Change detection used to skip extraction when tracked files are unchanged."""

from __future__ import annotations

from .fingerprint import (
    CacheDecision,
    ChangeDetectionCache,
    DecisionStatus,
    Fingerprint,
    fingerprint_bytes,
)

__all__ = [
    "CacheDecision",
    "ChangeDetectionCache",
    "DecisionStatus",
    "Fingerprint",
    "fingerprint_bytes",
]
