# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static analysis helpers locating ``define_translations`` imports and calls."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import Final

from .constants import DEFINE_TRANSLATIONS_NAME, PACKAGE_NAME

_VISIT_METHOD_NAME: Final[str] = "visit"
_PACKAGE_PREFIX: Final[str] = f"{PACKAGE_NAME}."


def _dispatch_alias(name: str) -> str:
    """Return the CamelCase dispatch name used by ``ast.NodeVisitor``.

    Args:
        name: Original snake_case visitor name (e.g. ``visit_import_from``).

    Returns:
        The camel-cased variant required for ``NodeVisitor`` dispatch
        (``visit_ImportFrom`` for the previous example).
    """

    prefix, _, remainder = name.partition("_")
    if not remainder:
        return name
    camel = "".join(part.capitalize() for part in remainder.split("_"))
    return f"{prefix}_{camel}"


class SnakeCaseVisitor(ast.NodeVisitor):
    """Node visitor accepting snake_case ``visit_*`` methods."""

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        for attr, value in list(vars(cls).items()):
            if not callable(value) or not attr.startswith("visit_") or attr == _VISIT_METHOD_NAME:
                continue
            if any(ch.isupper() for ch in attr):
                continue
            alias = _dispatch_alias(attr)
            if not hasattr(cls, alias):
                setattr(cls, alias, value)


@dataclass(frozen=True, slots=True)
class TranslationImports:
    """Names through which a module can reach ``define_translations``.

    Attributes:
        function_names: Local names bound directly to ``define_translations``.
        module_refs: Dotted module references whose ``define_translations``
            attribute is the declaration function.
    """

    function_names: frozenset[str] = field(default_factory=frozenset)
    module_refs: frozenset[str] = field(default_factory=frozenset)

    @property
    def declares(self) -> bool:
        """Return ``True`` when the module imports the declaration API at all."""

        return bool(self.function_names or self.module_refs)


def _is_package_module(name: str | None) -> bool:
    return name is not None and (name == PACKAGE_NAME or name.startswith(_PACKAGE_PREFIX))


class _ImportCollector(SnakeCaseVisitor):
    def __init__(self) -> None:
        self.function_names: set[str] = set()
        self.module_refs: set[str] = set()

    def visit_import(self, node: ast.Import) -> None:
        for alias in node.names:
            if not _is_package_module(alias.name):
                continue
            if alias.asname:
                self.module_refs.add(alias.asname)
            else:
                self.module_refs.add(alias.name)
                self.module_refs.add(PACKAGE_NAME)

    def visit_import_from(self, node: ast.ImportFrom) -> None:
        if node.level or not _is_package_module(node.module):
            return
        for alias in node.names:
            local = alias.asname or alias.name
            if alias.name == DEFINE_TRANSLATIONS_NAME:
                self.function_names.add(local)
            elif node.module == PACKAGE_NAME and alias.name == "translations":
                self.module_refs.add(local)


def scan_imports(tree: ast.AST) -> TranslationImports:
    """Collect every binding of ``define_translations`` found in ``tree``."""

    collector = _ImportCollector()
    collector.visit(tree)
    return TranslationImports(
        function_names=frozenset(collector.function_names),
        module_refs=frozenset(collector.module_refs),
    )


def dotted_name(node: ast.expr) -> str | None:
    """Return ``a.b.c`` for a chain of attribute accesses on a name, else ``None``."""

    parts: list[str] = []
    current: ast.expr = node
    while isinstance(current, ast.Attribute):
        parts.append(current.attr)
        current = current.value
    if not isinstance(current, ast.Name):
        return None
    parts.append(current.id)
    return ".".join(reversed(parts))


def is_declaration_call(node: ast.Call, imports: TranslationImports) -> bool:
    """Return ``True`` when ``node`` calls ``define_translations`` via ``imports``."""

    func = node.func
    if isinstance(func, ast.Name):
        return func.id in imports.function_names
    if isinstance(func, ast.Attribute) and func.attr == DEFINE_TRANSLATIONS_NAME:
        return dotted_name(func.value) in imports.module_refs
    return False


def find_declaration_calls(tree: ast.AST, imports: TranslationImports) -> list[ast.Call]:
    """Return declaration calls in ``tree`` ordered by source position."""

    calls = [node for node in ast.walk(tree) if isinstance(node, ast.Call) and is_declaration_call(node, imports)]
    return sorted(calls, key=lambda call: (call.lineno, call.col_offset))


__all__ = [
    "SnakeCaseVisitor",
    "TranslationImports",
    "dotted_name",
    "find_declaration_calls",
    "is_declaration_call",
    "scan_imports",
]
