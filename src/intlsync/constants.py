# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for intlsync."""

from __future__ import annotations

from typing import Final

PACKAGE_NAME: Final[str] = "intlsync"
LOG_PREFIX: Final[str] = f"[{PACKAGE_NAME}]"
DEFINE_TRANSLATIONS_NAME: Final[str] = "define_translations"

DEFAULT_LANGUAGE: Final[str] = "en-US"
DEFAULT_EXPORT_PATH: Final[str] = "intl"
DEFAULT_FILENAME_TEMPLATE: Final[str] = "intl.{language}.json"
LANGUAGE_PLACEHOLDER: Final[str] = "{language}"
LANGUAGE_PATTERN: Final[str] = r"[a-zA-Z]+(?:[_-][a-zA-Z]+)?"

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
CONFIG_FILENAME: Final[str] = ".intlsync.toml"

ALWAYS_EXCLUDE_DIRS: Final[set[str]] = {
    ".git",
    "node_modules",
    ".venv",
    "venv",
    "dist",
    "build",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".tox",
    ".cache",
}

__all__ = [
    "ALWAYS_EXCLUDE_DIRS",
    "CONFIG_FILENAME",
    "DEFAULT_EXPORT_PATH",
    "DEFAULT_FILENAME_TEMPLATE",
    "DEFAULT_LANGUAGE",
    "DEFINE_TRANSLATIONS_NAME",
    "LANGUAGE_PATTERN",
    "LANGUAGE_PLACEHOLDER",
    "LOG_PREFIX",
    "PACKAGE_NAME",
    "PYPROJECT_FILENAME",
]
