# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the content fingerprint cache."""

from __future__ import annotations

import hashlib
import threading
from pathlib import Path

import pytest

from intlsync.cache import ChangeDetectionCache, DecisionStatus, fingerprint_bytes


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_fingerprint_bytes_uses_sha512() -> None:
    assert fingerprint_bytes(b"hello") == hashlib.sha512(b"hello").hexdigest()


def test_unchanged_content_skips_second_pass(tmp_path: Path) -> None:
    source = _write(tmp_path / "a.py", "x = 1\n")
    cache = ChangeDetectionCache(jobs=2)

    first = cache.check_and_update([source])
    second = cache.check_and_update([source])

    assert first.status is DecisionStatus.PROCEED
    assert first.should_proceed
    assert second.status is DecisionStatus.SKIP
    assert not second.should_proceed


def test_modified_content_proceeds(tmp_path: Path) -> None:
    source = _write(tmp_path / "a.py", "x = 1\n")
    cache = ChangeDetectionCache()
    cache.check_and_update([source])

    _write(source, "x = 2\n")

    assert cache.check_and_update([source]).status is DecisionStatus.PROCEED
    assert cache.fingerprints[source] == fingerprint_bytes(b"x = 2\n")


def test_touch_without_content_change_skips(tmp_path: Path) -> None:
    source = _write(tmp_path / "a.py", "x = 1\n")
    cache = ChangeDetectionCache()
    cache.check_and_update([source])

    _write(source, "x = 1\n")

    assert cache.check_and_update([source]).status is DecisionStatus.SKIP


def test_added_and_removed_files_proceed(tmp_path: Path) -> None:
    first = _write(tmp_path / "a.py", "a = 1\n")
    second = _write(tmp_path / "b.py", "b = 1\n")
    cache = ChangeDetectionCache()
    cache.check_and_update([first])

    assert cache.check_and_update([first, second]).status is DecisionStatus.PROCEED
    assert cache.check_and_update([second]).status is DecisionStatus.PROCEED
    assert set(cache.fingerprints) == {second}


def test_empty_tracked_set_skips_on_fresh_cache() -> None:
    cache = ChangeDetectionCache()

    assert cache.check_and_update([]).status is DecisionStatus.SKIP


def test_unreadable_file_fails_but_updates_fingerprints(tmp_path: Path) -> None:
    present = _write(tmp_path / "a.py", "a = 1\n")
    missing = tmp_path / "missing.py"
    cache = ChangeDetectionCache()

    decision = cache.check_and_update([present, missing])

    assert decision.status is DecisionStatus.FAILED
    assert decision.inaccessible == (missing,)
    assert cache.fingerprints == {present: fingerprint_bytes(b"a = 1\n"), missing: None}
    # The same unreadable state compares equal on the next pass.
    assert cache.check_and_update([present, missing]).status is DecisionStatus.SKIP


def test_inaccessible_files_are_sorted(tmp_path: Path) -> None:
    cache = ChangeDetectionCache()
    paths = [tmp_path / "z.py", tmp_path / "a.py", tmp_path / "m.py"]

    decision = cache.check_and_update(paths)

    assert decision.inaccessible == tuple(sorted(paths))


def test_reset_forgets_fingerprints(tmp_path: Path) -> None:
    source = _write(tmp_path / "a.py", "x = 1\n")
    cache = ChangeDetectionCache()
    cache.check_and_update([source])

    cache.reset()

    assert cache.fingerprints == {}
    assert cache.check_and_update([source]).status is DecisionStatus.PROCEED


def test_custom_reader_runs_reads_concurrently() -> None:
    paths = [Path(f"/virtual/{index}.py") for index in range(4)]
    barrier = threading.Barrier(len(paths), timeout=5)
    seen: list[Path] = []
    lock = threading.Lock()

    def reader(path: Path) -> bytes:
        barrier.wait()
        with lock:
            seen.append(path)
        return str(path).encode()

    cache = ChangeDetectionCache(reader, jobs=len(paths))
    decision = cache.check_and_update(paths)

    assert decision.status is DecisionStatus.PROCEED
    assert sorted(seen) == sorted(paths)


def test_reader_errors_other_than_oserror_propagate() -> None:
    def reader(path: Path) -> bytes:
        raise RuntimeError(f"boom: {path}")

    cache = ChangeDetectionCache(reader)

    with pytest.raises(RuntimeError, match="boom"):
        cache.check_and_update([Path("/virtual/a.py")])
