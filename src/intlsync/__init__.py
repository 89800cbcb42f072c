# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translation extraction and per-language resource reconciliation."""

from __future__ import annotations

from importlib import metadata

from .cache import CacheDecision, ChangeDetectionCache, DecisionStatus
from .config import ConfigError, IntlConfig
from .config_loader import load_config
from .errors import (
    DuplicateTranslationError,
    ExtractionError,
    FilesInaccessibleError,
    IntlError,
    ResourceFormatError,
    UnexpectedChangesDetectedError,
)
from .extraction import TranslationExtractor
from .models import ExtractionEntry, ReconciliationResult, ResourceKeyRecord
from .pipeline import IntlPipeline, PassOutcome, PassStatus
from .reconcile import ResourceReconciler
from .resources import FilenameTemplate, ResourceRepository
from .translations import TranslatableString, define_translations, is_translatable, make_translatable

__all__ = [
    "CacheDecision",
    "ChangeDetectionCache",
    "ConfigError",
    "DecisionStatus",
    "DuplicateTranslationError",
    "ExtractionEntry",
    "ExtractionError",
    "FilenameTemplate",
    "FilesInaccessibleError",
    "IntlConfig",
    "IntlError",
    "IntlPipeline",
    "PassOutcome",
    "PassStatus",
    "ReconciliationResult",
    "ResourceFormatError",
    "ResourceKeyRecord",
    "ResourceReconciler",
    "ResourceRepository",
    "TranslatableString",
    "TranslationExtractor",
    "UnexpectedChangesDetectedError",
    "__version__",
    "define_translations",
    "is_translatable",
    "load_config",
    "make_translatable",
]

try:
    __version__ = metadata.version("intlsync")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
