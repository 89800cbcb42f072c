# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Local filesystem adapter for resource persistence."""

from __future__ import annotations

from pathlib import Path

from ..interfaces import ResourceFileSystem


class LocalFileSystem(ResourceFileSystem):
    """Read and write resource files on the local disk as UTF-8."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def mkdir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def listdir(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir())


__all__ = ["LocalFileSystem"]
