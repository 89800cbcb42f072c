# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load and persist per-language translation resource files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from ..errors import ResourceFormatError
from ..interfaces import ResourceFileSystem
from ..models import LanguageResources
from .filesystem import LocalFileSystem
from .template import FilenameTemplate


def serialize_resource(entries: Mapping[str, str]) -> str:
    """Return the canonical JSON document for ``entries``.

    Keys are sorted and indented by two spaces so that repeated exports
    produce byte-identical files.
    """

    return json.dumps(dict(entries), sort_keys=True, indent=2, ensure_ascii=False)


def _parse_resource(path: Path, content: str) -> dict[str, str]:
    """Decode ``content`` into a flat ``key -> translation`` mapping.

    Raises:
        ResourceFormatError: If the document is not a JSON object of strings.
    """

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ResourceFormatError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(payload, dict):
        raise ResourceFormatError(path, "expected a JSON object")
    entries: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise ResourceFormatError(path, f"value for key {key!r} must be a string")
        entries[key] = value
    return entries


class ResourceRepository:
    """Provide lazy, cached access to the resource files of one export directory."""

    def __init__(
        self,
        export_path: Path,
        *,
        template: FilenameTemplate | None = None,
        filesystem: ResourceFileSystem | None = None,
    ) -> None:
        """Initialise the repository.

        Args:
            export_path: Directory holding one resource file per language.
            template: File name template; defaults to ``intl.{language}.json``.
            filesystem: Filesystem adapter; defaults to the local disk.
        """

        self._export_path = export_path
        self._template = template or FilenameTemplate()
        self._fs: ResourceFileSystem = filesystem or LocalFileSystem()
        self._resources: LanguageResources | None = None

    @property
    def export_path(self) -> Path:
        """Return the directory holding the resource files."""

        return self._export_path

    @property
    def template(self) -> FilenameTemplate:
        """Return the file name template used by the repository."""

        return self._template

    def path_for(self, language: str) -> Path:
        """Return the resource path for ``language``."""

        return self._export_path / self._template.expand(language)

    def load(self) -> LanguageResources:
        """Return every persisted resource keyed by language.

        The directory is read once and cached until the next :meth:`save`. A
        missing or unreadable export directory yields an empty mapping.

        Returns:
            LanguageResources: Mapping of language to ``key -> translation``.

        Raises:
            ResourceFormatError: If a matching file cannot be read or holds
            malformed content.
        """

        if self._resources is None:
            self._resources = self._read_all()
        return self._resources

    def _read_all(self) -> LanguageResources:
        if not self._fs.exists(self._export_path):
            return {}
        try:
            names = self._fs.listdir(self._export_path)
        except OSError:
            return {}
        loaded: LanguageResources = {}
        for name in names:
            if not self._template.matches(name):
                continue
            path = self._export_path / name
            try:
                content = self._fs.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                raise ResourceFormatError(path, f"cannot read file ({exc})") from exc
            loaded[self._template.extract(name)] = _parse_resource(path, content)
        return loaded

    def save(self, by_language: Mapping[str, Mapping[str, str]]) -> list[Path]:
        """Write every language whose serialized content differs from disk.

        Args:
            by_language: Mapping of language to the full ``key -> translation``
                set that should be persisted.

        Returns:
            list[Path]: Paths that were actually written, in language order.
        """

        written: list[Path] = []
        if not by_language:
            return written
        self._fs.mkdir(self._export_path)
        for language in sorted(by_language):
            path = self.path_for(language)
            content = serialize_resource(by_language[language])
            if self._fs.exists(path) and self._fs.read_text(path) == content:
                continue
            self._fs.write_text(path, content)
            written.append(path)
        self._resources = None
        return written


__all__ = ["ResourceRepository", "serialize_resource"]
