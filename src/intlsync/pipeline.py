# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Orchestrate one extraction and reconciliation pass.

Each pass runs the stages in order: discover tracked files, consult the
change-detection cache, extract declarations, and reconcile them with the
persisted resources. The cache belongs to the pipeline, so repeated passes on
one pipeline skip extraction while tracked content is unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .cache import ChangeDetectionCache, DecisionStatus
from .config import IntlConfig
from .discovery import TrackedFileProvider
from .errors import FilesInaccessibleError, IntlError
from .extraction import TranslationExtractor
from .interfaces import Logger, ResourceFileSystem
from .logging import ConsoleLogger
from .models import ReconciliationResult
from .reconcile import ResourceReconciler
from .resources import ResourceRepository

TrackedFilesSource = Callable[[Path], list[Path]]


class PassStatus(str, Enum):
    """Enumerate caller-visible outcomes of a pass."""

    SKIPPED = "skipped"
    UPDATED = "updated"
    VERIFIED = "verified"
    FAILED = "failed"


@dataclass(slots=True)
class PassOutcome:
    """Describe the result of :meth:`IntlPipeline.run`.

    Attributes:
        status: Overall outcome of the pass.
        tracked: Files considered during the pass.
        result: Reconciliation result when reconciliation completed.
        error: Failure that aborted the pass, if any.
    """

    status: PassStatus
    tracked: list[Path] = field(default_factory=list)
    result: ReconciliationResult | None = None
    error: IntlError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` unless the pass failed."""

        return self.status is not PassStatus.FAILED


class IntlPipeline:
    """Run gated extraction and reconciliation passes for one project."""

    def __init__(
        self,
        config: IntlConfig,
        *,
        provider: TrackedFilesSource | None = None,
        cache: ChangeDetectionCache | None = None,
        extractor: TranslationExtractor | None = None,
        filesystem: ResourceFileSystem | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialise the pipeline and its long-lived fingerprint cache.

        Args:
            config: Effective configuration.
            provider: Callable returning tracked files for a root. Defaults to
                :class:`~intlsync.discovery.TrackedFileProvider`.
            cache: Fingerprint cache; a new one is created when omitted.
            extractor: Declaration extractor.
            filesystem: Filesystem adapter used for resource files.
            logger: Destination for progress messages.
        """

        self._config = config
        self._logger: Logger = logger or ConsoleLogger()
        self._provider: TrackedFilesSource = provider or TrackedFileProvider(config, logger=self._logger)
        self._cache = cache or ChangeDetectionCache(jobs=config.jobs)
        self._extractor = extractor or TranslationExtractor()
        self._filesystem = filesystem

    @property
    def cache(self) -> ChangeDetectionCache:
        """Return the fingerprint cache owned by this pipeline."""

        return self._cache

    def build_reconciler(self, root: Path) -> ResourceReconciler:
        """Return a reconciler bound to a fresh repository for ``root``."""

        repository = ResourceRepository(
            self._config.resolve_export_path(root),
            template=self._config.template(),
            filesystem=self._filesystem,
        )
        return ResourceReconciler(
            repository,
            default_language=self._config.default_language,
            check_only=self._config.check_only,
            logger=self._logger,
        )

    def run(self, root: Path) -> PassOutcome:
        """Execute one pass for the project rooted at ``root``.

        Errors derived from :class:`~intlsync.errors.IntlError` are logged and
        reported through the outcome; any other exception propagates.

        Args:
            root: Project root used for discovery and relative paths.

        Returns:
            PassOutcome: ``SKIPPED`` when tracked content is unchanged,
            ``VERIFIED`` when a check-only pass found no drift, ``UPDATED``
            when resources were reconciled (including passes that left every
            file as it was), or ``FAILED``.
        """

        root = root.resolve()
        tracked = self._provider(root)
        decision = self._cache.check_and_update(tracked)
        if decision.status is DecisionStatus.SKIP:
            self._logger.info("Tracked files have not changed. Skipping extraction")
            return PassOutcome(status=PassStatus.SKIPPED, tracked=tracked)
        if decision.status is DecisionStatus.FAILED:
            error = FilesInaccessibleError(decision.inaccessible)
            self._logger.error(str(error))
            return PassOutcome(status=PassStatus.FAILED, tracked=tracked, error=error)

        self._logger.info("Starting intl extraction")
        try:
            extracted = self._extractor.extract(tracked)
            result = self.build_reconciler(root).reconcile(extracted)
        except IntlError as exc:
            self._logger.error(str(exc))
            return PassOutcome(status=PassStatus.FAILED, tracked=tracked, error=exc)
        status = PassStatus.VERIFIED if self._config.check_only else PassStatus.UPDATED
        return PassOutcome(status=status, tracked=tracked, result=result)


__all__ = ["IntlPipeline", "PassOutcome", "PassStatus", "TrackedFilesSource"]
