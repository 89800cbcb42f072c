# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures exchanged between extraction and reconciliation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ExtractionEntry:
    """Describe one translation declared by a tracked file.

    Attributes:
        key: Stable identifier under which the translation is stored.
        default: Declared default text, also used to detect renames.
    """

    key: str
    default: str


ExtractedSet: TypeAlias = Mapping[Path, Sequence[ExtractionEntry]]
LanguageResources: TypeAlias = dict[str, dict[str, str]]


@dataclass(slots=True)
class ResourceKeyRecord:
    """Represent the merged state of a single key across every language."""

    key: str
    default: str
    per_language: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class ReconciliationResult:
    """Capture the outcome of diffing extracted keys against persisted resources.

    Attributes:
        merged: Records for every key declared in the current pass.
        added: Keys that had no prior translation.
        removed: Keys present in the default-language resource but no longer declared.
        renamed: Mapping of old key to the new key that inherited its translations.
    """

    merged: dict[str, ResourceKeyRecord] = field(default_factory=dict)
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    renamed: dict[str, str] = field(default_factory=dict)

    @property
    def has_changes(self) -> bool:
        """Return ``True`` when any key was added, removed, or renamed."""

        return bool(self.added or self.removed or self.renamed)

    def languages(self) -> list[str]:
        """Return every language referenced by at least one merged record, sorted."""

        found: set[str] = set()
        for record in self.merged.values():
            found.update(record.per_language)
        return sorted(found)

    def by_language(self) -> LanguageResources:
        """Pivot the merged records into ``language -> key -> translation``."""

        pivot: LanguageResources = {}
        for key, record in self.merged.items():
            for language, value in record.per_language.items():
                pivot.setdefault(language, {})[key] = value
        return pivot


__all__ = [
    "ExtractedSet",
    "ExtractionEntry",
    "LanguageResources",
    "ReconciliationResult",
    "ResourceKeyRecord",
]
