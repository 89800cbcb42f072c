# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the extraction and reconciliation pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ReconciliationResult


class IntlError(Exception):
    """Base class for failures that abort a reconciliation pass."""


class FilesInaccessibleError(IntlError):
    """Raised when one or more tracked files could not be read."""

    def __init__(self, files: Iterable[Path]) -> None:
        """Initialise the error with the unreadable ``files``.

        Args:
            files: Tracked paths whose content could not be fingerprinted.
        """

        self.files: tuple[Path, ...] = tuple(files)
        joined = " ".join(str(path) for path in self.files)
        super().__init__(f"Could not access files {joined}")


class DuplicateTranslationError(IntlError):
    """Raised when the same translation key is declared by multiple files."""

    def __init__(self, duplicates: Mapping[str, Sequence[Path]]) -> None:
        """Initialise the error with the offending keys.

        Args:
            duplicates: Mapping of duplicated key to every file declaring it.
        """

        self.duplicates: dict[str, tuple[Path, ...]] = {key: tuple(files) for key, files in duplicates.items()}
        keys = ", ".join(sorted(self.duplicates))
        super().__init__(f"Duplicate translation keys: {keys}")


class UnexpectedChangesDetectedError(IntlError):
    """Raised in check-only mode when the resources are out of date."""

    def __init__(self, result: ReconciliationResult) -> None:
        """Initialise the error with the reconciliation result that drifted.

        Args:
            result: Result describing the added, removed, and renamed keys.
        """

        self.result = result
        super().__init__(
            "Translation resources are out of date: "
            f"{len(result.added)} added, {len(result.removed)} removed, {len(result.renamed)} renamed",
        )


class ExtractionError(IntlError):
    """Raised when declarations cannot be extracted from a tracked file."""

    def __init__(self, message: str, *, path: Path | None = None, line: int | None = None) -> None:
        """Initialise the error with an optional source location.

        Args:
            message: Description of the extraction failure.
            path: File that failed to extract, when known.
            line: 1-based line number of the offending declaration.
        """

        self.path = path
        self.line = line
        location = ""
        if path is not None:
            location = f"{path}:{line}: " if line is not None else f"{path}: "
        super().__init__(f"{location}{message}")


class ResourceFormatError(IntlError):
    """Raised when a persisted resource file is not a flat JSON object of strings."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid translation resource {path}: {reason}")


__all__ = [
    "DuplicateTranslationError",
    "ExtractionError",
    "FilesInaccessibleError",
    "IntlError",
    "ResourceFormatError",
    "UnexpectedChangesDetectedError",
]
