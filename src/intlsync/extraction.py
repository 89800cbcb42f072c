# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract declared translations from tracked source files without executing them."""

from __future__ import annotations

import ast
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Final

from .analysis import find_declaration_calls, scan_imports
from .errors import ExtractionError
from .models import ExtractedSet, ExtractionEntry

_KEY_FIELD: Final[str] = "key"
_DEFAULT_FIELD: Final[str] = "default"
_TRANSLATIONS_KEYWORD: Final[str] = "translations"


class TranslationExtractor:
    """Read ``define_translations`` literals from source files."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def extract(self, tracked_files: Iterable[Path]) -> ExtractedSet:
        """Return the declared entries of every tracked file.

        Args:
            tracked_files: Files to read, in the order their entries should
                appear in the result.

        Returns:
            ExtractedSet: Mapping of file to its declared entries. Files that
            declare nothing map to an empty tuple.

        Raises:
            ExtractionError: If a file cannot be read or parsed, or declares
            translations with a non-literal or malformed argument.
        """

        extracted: dict[Path, tuple[ExtractionEntry, ...]] = {}
        for path in tracked_files:
            extracted[path] = self.extract_file(path)
        return extracted

    def extract_file(self, path: Path) -> tuple[ExtractionEntry, ...]:
        """Return the entries declared by ``path`` in source order."""

        try:
            source = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ExtractionError(f"cannot read file: {exc}", path=path) from exc
        return extract_source(source, path=path)


def extract_source(source: str, *, path: Path) -> tuple[ExtractionEntry, ...]:
    """Return the entries declared in ``source``.

    Args:
        source: Python source text.
        path: File the source came from, used for error locations.

    Returns:
        tuple[ExtractionEntry, ...]: Declared entries; within a file a later
        declaration of the same key replaces the earlier one.

    Raises:
        ExtractionError: If the source cannot be parsed or a declaration is
        not a literal mapping of ``{"key": str, "default": str}`` entries.
    """

    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError as exc:
        raise ExtractionError(f"syntax error: {exc.msg}", path=path, line=exc.lineno) from exc
    imports = scan_imports(tree)
    if not imports.declares:
        return ()
    entries: dict[str, ExtractionEntry] = {}
    for call in find_declaration_calls(tree, imports):
        for entry in _entries_from_call(call, path):
            entries[entry.key] = entry
    return tuple(entries.values())


def _declaration_argument(call: ast.Call, path: Path) -> ast.expr:
    if call.args:
        return call.args[0]
    for keyword in call.keywords:
        if keyword.arg == _TRANSLATIONS_KEYWORD:
            return keyword.value
    raise ExtractionError("define_translations requires a mapping argument", path=path, line=call.lineno)


def _entries_from_call(call: ast.Call, path: Path) -> list[ExtractionEntry]:
    argument = _declaration_argument(call, path)
    try:
        declared: Any = ast.literal_eval(argument)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
        raise ExtractionError(
            "define_translations argument must be a literal dict",
            path=path,
            line=call.lineno,
        ) from exc
    if not isinstance(declared, Mapping):
        raise ExtractionError("define_translations argument must be a dict", path=path, line=call.lineno)
    entries: list[ExtractionEntry] = []
    for name, declaration in declared.items():
        if not isinstance(declaration, Mapping):
            raise ExtractionError(f"translation {name!r} must be a dict", path=path, line=call.lineno)
        key = declaration.get(_KEY_FIELD)
        default = declaration.get(_DEFAULT_FIELD)
        if not isinstance(key, str) or not isinstance(default, str):
            raise ExtractionError(
                f"translation {name!r} requires string 'key' and 'default' entries",
                path=path,
                line=call.lineno,
            )
        entries.append(ExtractionEntry(key=key, default=default))
    return entries


__all__ = ["TranslationExtractor", "extract_source"]
