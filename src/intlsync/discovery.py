# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate source files that declare translations."""

from __future__ import annotations

import ast
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Final

from .analysis import scan_imports
from .config import IntlConfig
from .constants import ALWAYS_EXCLUDE_DIRS, PACKAGE_NAME
from .interfaces import Logger
from .logging import ConsoleLogger

PYTHON_SUFFIX: Final[str] = ".py"
_PACKAGE_MARKER: Final[bytes] = PACKAGE_NAME.encode("ascii")


def iter_python_files(base: Path, *, excludes: frozenset[Path] = frozenset()) -> Iterator[Path]:
    """Yield Python files below ``base`` while pruning excluded directories.

    Args:
        base: Resolved directory to traverse.
        excludes: Resolved directories that must not be entered.

    Yields:
        Path: Resolved Python source files.
    """

    for dirpath, dirnames, filenames in os.walk(base):
        directory = Path(dirpath)
        dirnames[:] = sorted(
            name for name in dirnames if name not in ALWAYS_EXCLUDE_DIRS and (directory / name) not in excludes
        )
        for filename in sorted(filenames):
            if filename.endswith(PYTHON_SUFFIX):
                yield directory / filename


class TrackedFileProvider:
    """Supply the set of files whose declarations feed reconciliation."""

    def __init__(self, config: IntlConfig, *, logger: Logger | None = None) -> None:
        """Initialise the provider from discovery settings in ``config``.

        Args:
            config: Configuration providing roots, excludes, and the filter.
            logger: Destination for warnings about unparsable files.
        """

        self._roots = tuple(config.roots)
        self._excludes = tuple(config.excludes)
        self._filter = re.compile(config.filename_filter) if config.filename_filter else None
        self._logger: Logger = logger or ConsoleLogger()

    def discover(self, root: Path) -> list[Path]:
        """Return the sorted absolute paths of tracked files below ``root``.

        A file is tracked when it imports ``define_translations`` from
        ``intlsync`` and, if a filename filter is configured, its path matches
        that filter. Unreadable files, and unparsable files that mention
        ``intlsync``, are tracked as well so the pass fails on them.
        """

        root = root.resolve()
        excludes = frozenset((root / path).resolve() for path in self._excludes)
        tracked: set[Path] = set()
        for candidate in self._candidates(root, excludes):
            if self._filter is not None and not self._filter.search(candidate.as_posix()):
                continue
            if self._declares_translations(candidate):
                tracked.add(candidate)
        return sorted(tracked)

    def __call__(self, root: Path) -> list[Path]:
        return self.discover(root)

    def _candidates(self, root: Path, excludes: frozenset[Path]) -> Iterable[Path]:
        for entry in self._roots:
            base = (entry if entry.is_absolute() else root / entry).resolve()
            if base.is_file():
                if base.suffix == PYTHON_SUFFIX:
                    yield base
                continue
            if base.is_dir() and base not in excludes:
                yield from iter_python_files(base, excludes=excludes)

    def _declares_translations(self, path: Path) -> bool:
        """Return whether ``path`` must be tracked.

        Files that cannot be read stay tracked so the fingerprint cache reports
        them. Files that fail to parse stay tracked when they mention the
        package, so extraction fails the pass instead of the reconciler
        treating their keys as removed.
        """

        try:
            source = path.read_bytes()
        except OSError as exc:
            self._logger.warn(f"Tracking unreadable file {path}: {exc}")
            return True
        try:
            tree = ast.parse(source, filename=str(path))
        except (SyntaxError, ValueError) as exc:
            if _PACKAGE_MARKER in source:
                self._logger.warn(f"Tracking {path} although it does not parse: {exc}")
                return True
            self._logger.warn(f"Skipping {path}: {exc}")
            return False
        return scan_imports(tree).declares


__all__ = ["TrackedFileProvider", "iter_python_files"]
