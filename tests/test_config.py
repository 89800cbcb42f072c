# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and layered loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from intlsync.config import ConfigError, IntlConfig, default_parallel_jobs
from intlsync.config_loader import PyProjectConfigSource, TomlConfigSource, load_config


def test_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.default_language == "en-US"
    assert config.export_path == Path("intl")
    assert config.filename_template == "intl.{language}.json"
    assert config.check_only is False
    assert config.roots == [Path()]
    assert config.excludes == []
    assert config.filename_filter is None
    assert config.jobs == default_parallel_jobs()
    assert config.resolve_export_path(tmp_path) == (tmp_path / "intl").resolve()


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.intlsync]\ndefault-language = "fr"\nexport-path = "locales"\n',
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.default_language == "fr"
    assert config.export_path == Path("locales")


def test_dedicated_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.intlsync]\ndefault_language = "fr"\ncheck_only = true\n',
        encoding="utf-8",
    )
    (tmp_path / ".intlsync.toml").write_text('default_language = "de"\n', encoding="utf-8")

    config = load_config(tmp_path)

    assert config.default_language == "de"
    assert config.check_only is True


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".intlsync.toml").write_text('default_language = "de"\njobs = 3\n', encoding="utf-8")

    config = load_config(tmp_path, {"default_language": "it", "jobs": None})

    assert config.default_language == "it"
    assert config.jobs == 3


def test_pyproject_without_section_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert PyProjectConfigSource(path).load() == {}


def test_environment_variables_are_expanded(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('export_path = "${INTL_ROOT}/intl"\nexcludes = ["$BUILD_DIR"]\n', encoding="utf-8")
    source = TomlConfigSource(path, env={"INTL_ROOT": "/srv/app", "BUILD_DIR": "out"})

    config = load_config(tmp_path, sources=[source])

    assert config.export_path == Path("/srv/app/intl")
    assert config.excludes == [Path("out")]
    assert config.resolve_export_path(tmp_path) == Path("/srv/app/intl")


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".intlsync.toml").write_text("default_language = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"default_language": "not a language"},
        {"filename_template": "intl.json"},
        {"filename_template": "{language}/{language}.json"},
        {"filename_filter": "(unclosed"},
        {"jobs": 0},
        {"unknown_option": True},
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, overrides: dict) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, overrides)


def test_assignment_is_validated() -> None:
    config = IntlConfig(jobs=1)

    with pytest.raises(ValueError):
        config.default_language = "??"


def test_template_is_compiled() -> None:
    config = IntlConfig(jobs=1, filename_template="messages.{language}.json")

    assert config.template().expand("en-US") == "messages.en-US.json"
