# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for translation extraction and reconciliation."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_EXPORT_PATH, DEFAULT_FILENAME_TEMPLATE, DEFAULT_LANGUAGE
from .resources.template import FilenameTemplate, is_language_code


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def default_parallel_jobs() -> int:
    """Return 75% of available CPU cores (minimum of 1)."""
    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


class IntlConfig(BaseModel):
    """Primary configuration container used by the pipeline and CLI."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    default_language: str = DEFAULT_LANGUAGE
    export_path: Path = Field(default_factory=lambda: Path(DEFAULT_EXPORT_PATH))
    filename_template: str = DEFAULT_FILENAME_TEMPLATE
    check_only: bool = False
    roots: list[Path] = Field(default_factory=lambda: [Path()])
    excludes: list[Path] = Field(default_factory=list)
    filename_filter: str | None = None
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)

    @field_validator("default_language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if not is_language_code(value):
            raise ValueError(f"invalid language code {value!r}")
        return value

    @field_validator("filename_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        FilenameTemplate(value)
        return value

    @field_validator("filename_filter")
    @classmethod
    def _check_filter(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid filename filter {value!r}: {exc}") from exc
        return value

    def template(self) -> FilenameTemplate:
        """Return the compiled filename template."""

        return FilenameTemplate(self.filename_template)

    def resolve_export_path(self, root: Path) -> Path:
        """Return the export directory anchored at ``root`` when relative."""

        path = self.export_path.expanduser()
        return path if path.is_absolute() else (root / path).resolve()


__all__ = ["ConfigError", "IntlConfig", "default_parallel_jobs"]
