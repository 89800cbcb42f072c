# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reconcile extracted translation declarations with persisted resources.

The default-language resource is the source of truth: a declared key that is
missing from it either inherits the translations of a uniquely matching old
key (a rename) or is seeded from its declared default (an addition). Keys left
over in the default-language resource are reported as removed. Every other
language follows the key the default language settles on.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Mapping
from pathlib import Path

from .constants import DEFAULT_LANGUAGE
from .errors import DuplicateTranslationError, UnexpectedChangesDetectedError
from .interfaces import Logger
from .logging import ConsoleLogger
from .models import ExtractedSet, LanguageResources, ReconciliationResult, ResourceKeyRecord
from .resources import ResourceRepository, is_language_code

ResourceLoader = Callable[[], Mapping[str, Mapping[str, str]]]


class ResourceReconciler:
    """Diff, merge, and persist translations for one reconciliation pass."""

    def __init__(
        self,
        repository: ResourceRepository,
        *,
        default_language: str = DEFAULT_LANGUAGE,
        check_only: bool = False,
        logger: Logger | None = None,
    ) -> None:
        """Initialise the reconciler.

        Args:
            repository: Repository providing and persisting resource files.
            default_language: Language whose resource drives rename detection.
            check_only: When ``True`` never write and fail on any drift.
            logger: Destination for progress messages.

        Raises:
            ValueError: If ``default_language`` is not a valid language code.
        """

        if not is_language_code(default_language):
            raise ValueError(f"invalid language code {default_language!r}")
        self._repository = repository
        self._default_language = default_language
        self._check_only = check_only
        self._logger: Logger = logger or ConsoleLogger()

    @property
    def default_language(self) -> str:
        """Return the language used as the rename source of truth."""

        return self._default_language

    def reconcile(
        self,
        extracted: ExtractedSet,
        load_existing: ResourceLoader | None = None,
    ) -> ReconciliationResult:
        """Reconcile ``extracted`` declarations with the persisted resources.

        Args:
            extracted: Declared entries keyed by declaring file.
            load_existing: Callable returning the persisted resources keyed by
                language. Defaults to the repository loader.

        Returns:
            ReconciliationResult: Merged records plus the detected changes.

        Raises:
            DuplicateTranslationError: If a key is declared by several files.
            UnexpectedChangesDetectedError: If running in check-only mode and
                the resources are not up to date.
        """

        self.validate(extracted)
        loader = load_existing or self._repository.load
        result = self.detect_changes(self.flatten(extracted), loader())
        self._report(result)
        if self._check_only:
            if result.has_changes:
                raise UnexpectedChangesDetectedError(result)
            return result
        written = self._repository.save(result.by_language())
        if written:
            self._logger.info(f"Saved exported translations to {self._repository.export_path}")
        return result

    def validate(self, extracted: ExtractedSet) -> None:
        """Ensure no key is declared by more than one file.

        Raises:
            DuplicateTranslationError: If duplicates exist; one error line is
            logged per offending key before raising.
        """

        declared_in: dict[str, list[Path]] = {}
        for path, entries in extracted.items():
            for key in dict.fromkeys(entry.key for entry in entries):
                declared_in.setdefault(key, []).append(path)
        duplicates = {key: files for key, files in declared_in.items() if len(files) > 1}
        if not duplicates:
            return
        for key, files in duplicates.items():
            joined = ", ".join(str(path) for path in files)
            self._logger.error(f"Translation with key {key} appears in multiple files: {joined}")
        raise DuplicateTranslationError(duplicates)

    @staticmethod
    def flatten(extracted: ExtractedSet) -> dict[str, str]:
        """Collapse ``extracted`` into ``key -> default`` in declaration order."""

        flattened: dict[str, str] = {}
        for entries in extracted.values():
            for entry in entries:
                flattened[entry.key] = entry.default
        return flattened

    def detect_changes(
        self,
        flattened: Mapping[str, str],
        existing: Mapping[str, Mapping[str, str]],
    ) -> ReconciliationResult:
        """Classify every key and merge per-language values.

        ``existing`` is copied before it is consumed, so the caller's
        resources are left untouched.

        Args:
            flattened: Declared ``key -> default`` mapping for this pass.
            existing: Persisted resources keyed by language.

        Returns:
            ReconciliationResult: Merged records and the added, removed, and
            renamed keys.
        """

        resources: LanguageResources = {language: dict(entries) for language, entries in existing.items()}
        result = ReconciliationResult()
        default_resource = resources.get(self._default_language)
        if default_resource is None:
            for key, default in flattened.items():
                result.merged[key] = ResourceKeyRecord(
                    key=key,
                    default=default,
                    per_language={self._default_language: default},
                )
                result.added.append(key)
            return result

        renames = plan_renames(flattened, default_resource)
        passengers = sorted(language for language in resources if language != self._default_language)
        for key, default in flattened.items():
            record = ResourceKeyRecord(key=key, default=default)
            if key in default_resource:
                source = key
                del default_resource[key]
                record.per_language[self._default_language] = default
            elif key in renames:
                source = renames[key]
                record.per_language[self._default_language] = default_resource.pop(source)
                result.renamed[source] = key
            else:
                source = key
                record.per_language[self._default_language] = default
                result.added.append(key)
            for language in passengers:
                translations = resources[language]
                if source in translations:
                    record.per_language[language] = translations.pop(source)
            result.merged[key] = record

        result.removed.extend(default_resource)
        return result

    def _report(self, result: ReconciliationResult) -> None:
        if result.added:
            listing = "\n".join(result.added)
            self._logger.info(
                f"We found {len(result.added)} new translations. "
                f"These translations were added to the exports:\n{listing}",
            )
        if result.removed:
            listing = "\n".join(result.removed)
            self._logger.warn(
                f"We found {len(result.removed)} unused translations. "
                f"These translations were removed from the exports:\n{listing}",
            )
        if result.renamed:
            listing = "\n".join(f"{old} => {new}" for old, new in result.renamed.items())
            self._logger.warn(f"We found {len(result.renamed)} translations which were renamed:\n{listing}")


def plan_renames(flattened: Mapping[str, str], default_resource: Mapping[str, str]) -> dict[str, str]:
    """Return ``new key -> old key`` for unambiguous renames.

    A declared key missing from ``default_resource`` is a rename when exactly
    one old key, itself no longer declared, holds a translation equal to the
    new default, and no other missing key declares that same default. The
    result does not depend on declaration order.

    Args:
        flattened: Declared ``key -> default`` mapping for this pass.
        default_resource: Persisted default-language translations.

    Returns:
        dict[str, str]: Mapping of new key to the old key it replaces.
    """

    candidates: dict[str, list[str]] = {}
    for old_key, value in default_resource.items():
        if old_key not in flattened:
            candidates.setdefault(value, []).append(old_key)
    missing = [key for key in flattened if key not in default_resource]
    claims = Counter(flattened[key] for key in missing)
    renames: dict[str, str] = {}
    for key in missing:
        value = flattened[key]
        matches = candidates.get(value, [])
        if len(matches) == 1 and claims[value] == 1:
            renames[key] = matches[0]
    return renames


__all__ = ["ResourceLoader", "ResourceReconciler", "plan_renames"]
