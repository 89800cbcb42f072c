# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filename template mapping language codes to resource file names."""

from __future__ import annotations

import re
from typing import Final

from ..constants import DEFAULT_FILENAME_TEMPLATE, LANGUAGE_PATTERN, LANGUAGE_PLACEHOLDER

_LANGUAGE_GROUP: Final[str] = "language"
_LANGUAGE_RE: Final[re.Pattern[str]] = re.compile(rf"^{LANGUAGE_PATTERN}$")


def is_language_code(value: str) -> bool:
    """Return ``True`` when ``value`` is a language code accepted by templates."""

    return bool(_LANGUAGE_RE.match(value))


class FilenameTemplate:
    """Match, extract, and expand resource file names around a language code.

    The pattern must contain exactly one ``{language}`` placeholder; every
    other character is matched literally.
    """

    def __init__(self, pattern: str = DEFAULT_FILENAME_TEMPLATE) -> None:
        """Compile ``pattern`` into a matcher.

        Args:
            pattern: File name pattern such as ``"intl.{language}.json"``.

        Raises:
            ValueError: If the placeholder is missing, repeated, or the pattern
            contains a path separator.
        """

        if pattern.count(LANGUAGE_PLACEHOLDER) != 1:
            raise ValueError(f"filename template must contain exactly one {LANGUAGE_PLACEHOLDER} placeholder")
        if "/" in pattern or "\\" in pattern:
            raise ValueError("filename template must not contain path separators")
        prefix, suffix = pattern.split(LANGUAGE_PLACEHOLDER)
        self._pattern = pattern
        self._regex = re.compile(
            rf"^{re.escape(prefix)}(?P<{_LANGUAGE_GROUP}>{LANGUAGE_PATTERN}){re.escape(suffix)}$",
        )

    @property
    def pattern(self) -> str:
        """Return the raw template pattern."""

        return self._pattern

    def matches(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a resource file name for some language."""

        return self._regex.match(name) is not None

    def extract(self, name: str) -> str:
        """Return the language code embedded in ``name``.

        Raises:
            ValueError: If ``name`` does not match the template.
        """

        match = self._regex.match(name)
        if match is None:
            raise ValueError(f"{name!r} does not match filename template {self._pattern!r}")
        return match.group(_LANGUAGE_GROUP)

    def expand(self, language: str) -> str:
        """Return the resource file name for ``language``."""

        return self._pattern.replace(LANGUAGE_PLACEHOLDER, language)

    def __repr__(self) -> str:
        return f"FilenameTemplate({self._pattern!r})"


__all__ = ["FilenameTemplate", "is_language_code"]
