# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content fingerprint cache gating the extraction pass."""

from __future__ import annotations

import hashlib
import os
from collections.abc import Collection, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeAlias

from ..interfaces import FileReader

Fingerprint: TypeAlias = str | None
FingerprintMap: TypeAlias = dict[Path, Fingerprint]


class DecisionStatus(str, Enum):
    """Enumerate the outcomes of a cache check."""

    SKIP = "skip"
    PROCEED = "proceed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CacheDecision:
    """Describe whether extraction should run for the current tracked files.

    Attributes:
        status: Outcome of the fingerprint comparison.
        inaccessible: Tracked files whose content could not be read, sorted.
    """

    status: DecisionStatus
    inaccessible: tuple[Path, ...] = ()

    @property
    def should_proceed(self) -> bool:
        """Return ``True`` when extraction should run."""

        return self.status is DecisionStatus.PROCEED


def fingerprint_bytes(data: bytes) -> str:
    """Return the SHA-512 hex digest of ``data``."""

    return hashlib.sha512(data).hexdigest()


def _read_path(path: Path) -> bytes:
    return path.read_bytes()


class ChangeDetectionCache:
    """Track content fingerprints of tracked files between passes.

    The stored fingerprints live for the lifetime of the cache object. The
    owner is responsible for serialising calls to :meth:`check_and_update`.
    """

    def __init__(self, reader: FileReader | None = None, *, jobs: int | None = None) -> None:
        """Initialise an empty cache.

        Args:
            reader: Callable returning the raw bytes of a path. Defaults to
                :meth:`pathlib.Path.read_bytes`.
            jobs: Maximum number of concurrent reads. Defaults to the CPU count.
        """

        self._reader: FileReader = reader or _read_path
        self._jobs = max(1, jobs if jobs is not None else (os.cpu_count() or 1))
        self._fingerprints: FingerprintMap = {}

    @property
    def fingerprints(self) -> Mapping[Path, Fingerprint]:
        """Return a copy of the fingerprints recorded by the last change."""

        return dict(self._fingerprints)

    def reset(self) -> None:
        """Forget every recorded fingerprint."""

        self._fingerprints = {}

    def check_and_update(self, tracked_files: Collection[Path]) -> CacheDecision:
        """Fingerprint ``tracked_files`` and decide whether extraction should run.

        Every read settles before the comparison happens. Whenever the
        fingerprints differ from the stored set they replace it, including
        passes where some files were unreadable, so the next pass compares
        against the latest observed state.

        Args:
            tracked_files: Paths whose content gates the extraction.

        Returns:
            CacheDecision: ``SKIP`` when nothing changed, ``FAILED`` with the
            unreadable files when any read failed, otherwise ``PROCEED``.
        """

        current = self._collect(tracked_files)
        if current == self._fingerprints:
            return CacheDecision(status=DecisionStatus.SKIP)
        self._fingerprints = current
        inaccessible = tuple(sorted(path for path, digest in current.items() if digest is None))
        if inaccessible:
            return CacheDecision(status=DecisionStatus.FAILED, inaccessible=inaccessible)
        return CacheDecision(status=DecisionStatus.PROCEED)

    def _collect(self, tracked_files: Collection[Path]) -> FingerprintMap:
        """Read every file concurrently and return the joined fingerprint map."""

        paths = list(dict.fromkeys(tracked_files))
        if not paths:
            return {}
        collected: FingerprintMap = {}
        with ThreadPoolExecutor(max_workers=min(self._jobs, len(paths))) as executor:
            future_map = {executor.submit(self._fingerprint, path): path for path in paths}
            for future in as_completed(future_map):
                collected[future_map[future]] = future.result()
        return collected

    def _fingerprint(self, path: Path) -> Fingerprint:
        try:
            return fingerprint_bytes(self._reader(path))
        except OSError:
            return None


__all__ = [
    "CacheDecision",
    "ChangeDetectionCache",
    "DecisionStatus",
    "Fingerprint",
    "fingerprint_bytes",
]
