# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols shared between the cache, repository, and pipeline layers."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

FileReader: TypeAlias = Callable[[Path], bytes]


@runtime_checkable
class Logger(Protocol):
    """Define the logging surface consumed by pipeline components."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Emit an informational ``message``.

        Args:
            message: Text to display.
        """
        raise NotImplementedError

    @abstractmethod
    def warn(self, message: str) -> None:
        """Emit a warning ``message``.

        Args:
            message: Text to display.
        """
        raise NotImplementedError

    @abstractmethod
    def error(self, message: str) -> None:
        """Emit an error ``message``.

        Args:
            message: Text to display.
        """
        raise NotImplementedError


@runtime_checkable
class ResourceFileSystem(Protocol):
    """Define the synchronous filesystem operations used to persist resources.

    Implementations only need to support flat directories; the repository
    never nests resource files below the export directory.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` exists."""
        raise NotImplementedError

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the UTF-8 decoded content of ``path``."""
        raise NotImplementedError

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace the content of ``path`` with ``content``."""
        raise NotImplementedError

    @abstractmethod
    def mkdir(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
        raise NotImplementedError

    @abstractmethod
    def listdir(self, path: Path) -> list[str]:
        """Return the entry names directly below ``path``."""
        raise NotImplementedError


__all__ = ["FileReader", "Logger", "ResourceFileSystem"]
