# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from intlsync.resources import LocalFileSystem

DECLARING_MODULE = """\
from intlsync import define_translations

MESSAGES = define_translations({entries})
"""


@dataclass
class RecordingLogger:
    """Logger double that keeps every message by level."""

    infos: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def messages(self) -> list[str]:
        return [*self.infos, *self.warnings, *self.errors]


class RecordingFileSystem(LocalFileSystem):
    """Local filesystem adapter that records every write."""

    def __init__(self) -> None:
        self.writes: list[Path] = []

    def write_text(self, path: Path, content: str) -> None:
        self.writes.append(path)
        super().write_text(path, content)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Return a fresh recording logger."""
    return RecordingLogger()


@pytest.fixture
def recording_fs() -> RecordingFileSystem:
    """Return a filesystem adapter that counts resource writes."""
    return RecordingFileSystem()


@pytest.fixture
def write_module() -> Callable[[Path, dict[str, tuple[str, str]]], Path]:
    """Return a helper that writes a module declaring ``name -> (key, default)``."""

    def _write(path: Path, declarations: dict[str, tuple[str, str]]) -> Path:
        entries = {name: {"key": key, "default": default} for name, (key, default) in declarations.items()}
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DECLARING_MODULE.format(entries=repr(entries)), encoding="utf-8")
        return path

    return _write
