# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading utilities with layered precedence.

Sources are applied in order: built-in defaults, ``[tool.intlsync]`` in
``pyproject.toml``, ``.intlsync.toml``, and finally explicit overrides such as
command-line options. Later sources win.
"""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import ConfigError, IntlConfig
from .constants import CONFIG_FILENAME, PACKAGE_NAME, PYPROJECT_FILENAME

PYPROJECT_TOOL_KEY: Final[str] = "tool"
_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        self.path = path
        self._env = env if env is not None else os.environ

    def load(self) -> dict[str, Any]:
        """Return the normalised document, or ``{}`` when the file is absent.

        Raises:
            ConfigError: If the file cannot be parsed.
        """

        if not self.path.is_file():
            return {}
        try:
            with self.path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self.path}: {exc}") from exc
        return _expand_env(_normalise_keys(self._select(data)), self._env)

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        return data

    def describe(self) -> str:
        return f"TOML configuration at {self.path}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.intlsync]`` within ``pyproject.toml``."""

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PACKAGE_NAME)
        if not isinstance(section, Mapping):
            return {}
        return section

    def describe(self) -> str:
        return f"pyproject.toml ({self.path})"


def default_sources(root: Path) -> list[TomlConfigSource]:
    """Return the configuration sources consulted for ``root`` in precedence order."""

    return [
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / CONFIG_FILENAME),
    ]


def load_config(
    root: Path,
    overrides: Mapping[str, Any] | None = None,
    *,
    sources: Sequence[TomlConfigSource] | None = None,
) -> IntlConfig:
    """Resolve the effective configuration for ``root``.

    Args:
        root: Project root holding ``pyproject.toml`` or ``.intlsync.toml``.
        overrides: Values applied after every file source. ``None`` values are
            ignored so unset CLI options keep configured values.
        sources: Optional source override, mainly for tests.

    Returns:
        IntlConfig: Validated configuration.

    Raises:
        ConfigError: If a source is malformed or the merged values are invalid.
    """

    merged: dict[str, Any] = {}
    for source in sources if sources is not None else default_sources(root):
        merged.update(source.load())
    if overrides:
        merged.update({key: value for key, value in _normalise_keys(overrides).items() if value is not None})
    try:
        return IntlConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid intlsync configuration: {exc}") from exc


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def _expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    return {key: _expand_env_value(value, env) for key, value in data.items()}


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda match: env.get(match.group(1) or match.group(2), match.group(0)), value)
    if isinstance(value, list):
        return [_expand_env_value(item, env) for item in value]
    return value


__all__ = [
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]
