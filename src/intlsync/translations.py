# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime API used by source files to declare translatable strings.

A declaring module calls :func:`define_translations` with a literal mapping::

    from intlsync import define_translations

    messages = define_translations(
        {
            "greeting": {"key": "home.greeting", "default": "Hello"},
        }
    )

At runtime the call returns :class:`TranslatableString` handles keyed by the
local names. The extractor reads the same literal statically, so no state is
shared between declaring modules.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, TypeVar

NameT = TypeVar("NameT", bound=str)

_KEY_FIELD: Final[str] = "key"
_DEFAULT_FIELD: Final[str] = "default"


class TranslatableString(str):
    """String subclass carrying a translation key and optional interpolation values."""

    is_translatable: Final[bool] = True
    values: dict[str, Any] | None

    def __new__(cls, key: str, values: Mapping[str, Any] | None = None) -> TranslatableString:
        instance = super().__new__(cls, key)
        instance.values = dict(values) if values is not None else None
        return instance

    def with_values(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> TranslatableString:
        """Return a copy of this string bound to interpolation ``values``.

        Args:
            values: Optional mapping of placeholder values.
            **kwargs: Additional placeholder values merged over ``values``.

        Returns:
            TranslatableString: New handle sharing the same key.
        """

        merged: dict[str, Any] = dict(values or {})
        merged.update(kwargs)
        return TranslatableString(str(self), merged)

    def __repr__(self) -> str:
        return f"TranslatableString({str(self)!r}, values={self.values!r})"


def make_translatable(key: str, values: Mapping[str, Any] | None = None) -> TranslatableString:
    """Wrap ``key`` in a :class:`TranslatableString`."""

    return TranslatableString(key, values)


def is_translatable(candidate: object) -> bool:
    """Return ``True`` when ``candidate`` is a translatable handle."""

    return bool(getattr(candidate, "is_translatable", False))


def define_translations(
    translations: Mapping[NameT, Mapping[str, str]],
) -> dict[NameT, TranslatableString]:
    """Declare translations and return translatable handles keyed by local name.

    Args:
        translations: Mapping of local name to ``{"key": ..., "default": ...}``.

    Returns:
        dict[NameT, TranslatableString]: Handle for each declared key.

    Raises:
        TypeError: If a declaration is not a mapping of string ``key`` and
        ``default`` entries.
    """

    handles: dict[NameT, TranslatableString] = {}
    for name, declaration in translations.items():
        if not isinstance(declaration, Mapping):
            raise TypeError(f"translation '{name}' must be a mapping with 'key' and 'default'")
        key = declaration.get(_KEY_FIELD)
        default = declaration.get(_DEFAULT_FIELD)
        if not isinstance(key, str) or not isinstance(default, str):
            raise TypeError(f"translation '{name}' requires string 'key' and 'default' entries")
        handles[name] = make_translatable(key)
    return handles


__all__ = [
    "TranslatableString",
    "define_translations",
    "is_translatable",
    "make_translatable",
]
