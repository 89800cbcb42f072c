# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Persisted per-language resource files."""

from __future__ import annotations

from .filesystem import LocalFileSystem
from .repository import ResourceRepository, serialize_resource
from .template import FilenameTemplate, is_language_code

__all__ = [
    "FilenameTemplate",
    "LocalFileSystem",
    "ResourceRepository",
    "is_language_code",
    "serialize_resource",
]
