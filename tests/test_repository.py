# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading and persisting resource files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from intlsync.errors import ResourceFormatError
from intlsync.resources import FilenameTemplate, LocalFileSystem, ResourceRepository, serialize_resource


class DeniedFileSystem(LocalFileSystem):
    def listdir(self, path: Path) -> list[str]:
        raise PermissionError(13, "Permission denied", str(path))


def test_serialize_resource_is_sorted_and_indented() -> None:
    assert serialize_resource({"b": "Bé", "a": "A"}) == '{\n  "a": "A",\n  "b": "Bé"\n}'


def test_missing_export_directory_loads_empty(tmp_path: Path) -> None:
    assert ResourceRepository(tmp_path / "intl").load() == {}


def test_export_path_that_is_a_file_loads_empty(tmp_path: Path) -> None:
    target = tmp_path / "intl"
    target.write_text("not a directory", encoding="utf-8")

    assert ResourceRepository(target).load() == {}


def test_load_reads_matching_files_only(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    export.mkdir()
    (export / "intl.en-US.json").write_text('{"a": "A"}', encoding="utf-8")
    (export / "intl.de.json").write_text('{"a": "Ä"}', encoding="utf-8")
    (export / "README.md").write_text("notes", encoding="utf-8")
    (export / "intl.en-US.json.bak").write_text("{}", encoding="utf-8")

    assert ResourceRepository(export).load() == {"en-US": {"a": "A"}, "de": {"a": "Ä"}}


def test_load_is_cached_until_save(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    repository = ResourceRepository(export)
    assert repository.load() == {}

    export.mkdir()
    (export / "intl.fr.json").write_text('{"a": "A"}', encoding="utf-8")
    assert repository.load() == {}

    repository.save({"en-US": {"a": "A"}})
    assert repository.load() == {"en-US": {"a": "A"}, "fr": {"a": "A"}}


def test_custom_template_round_trips_language(tmp_path: Path) -> None:
    export = tmp_path / "locales"
    repository = ResourceRepository(export, template=FilenameTemplate("messages_{language}.json"))

    written = repository.save({"pt-BR": {"a": "Olá"}})

    assert written == [export / "messages_pt-BR.json"]
    assert repository.path_for("pt-BR") == export / "messages_pt-BR.json"
    assert repository.load() == {"pt-BR": {"a": "Olá"}}


def test_save_skips_identical_content(tmp_path: Path, recording_fs) -> None:
    export = tmp_path / "intl"
    repository = ResourceRepository(export, filesystem=recording_fs)

    first = repository.save({"en-US": {"a": "A"}, "de": {"a": "Ä"}})
    second = repository.save({"en-US": {"a": "A"}, "de": {"a": "Ae"}})

    assert first == [export / "intl.de.json", export / "intl.en-US.json"]
    assert second == [export / "intl.de.json"]
    assert len(recording_fs.writes) == 3


def test_save_with_nothing_to_write_creates_no_directory(tmp_path: Path) -> None:
    export = tmp_path / "intl"

    assert ResourceRepository(export).save({}) == []
    assert not export.exists()


def test_corrupt_json_raises_resource_format_error(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    export.mkdir()
    (export / "intl.en-US.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ResourceFormatError, match="invalid JSON"):
        ResourceRepository(export).load()


@pytest.mark.parametrize(
    ("content", "reason"),
    [
        ('["a"]', "expected a JSON object"),
        ('{"a": 1}', "must be a string"),
    ],
)
def test_unexpected_shapes_raise(tmp_path: Path, content: str, reason: str) -> None:
    export = tmp_path / "intl"
    export.mkdir()
    (export / "intl.en-US.json").write_text(content, encoding="utf-8")

    with pytest.raises(ResourceFormatError, match=reason) as excinfo:
        ResourceRepository(export).load()

    assert excinfo.value.path == export / "intl.en-US.json"


def test_saved_files_decode_as_written(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    ResourceRepository(export).save({"ja": {"greeting": "こんにちは"}})

    raw = (export / "intl.ja.json").read_text(encoding="utf-8")

    assert "こんにちは" in raw
    assert json.loads(raw) == {"greeting": "こんにちは"}


def test_unlistable_export_directory_loads_empty(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    export.mkdir()
    (export / "intl.en-US.json").write_text('{"a": "A"}', encoding="utf-8")

    assert ResourceRepository(export, filesystem=DeniedFileSystem()).load() == {}


def test_unreadable_matching_entry_raises_resource_format_error(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    (export / "intl.fr.json").mkdir(parents=True)

    with pytest.raises(ResourceFormatError, match="cannot read file") as excinfo:
        ResourceRepository(export).load()

    assert excinfo.value.path == export / "intl.fr.json"


def test_undecodable_resource_raises_resource_format_error(tmp_path: Path) -> None:
    export = tmp_path / "intl"
    export.mkdir()
    (export / "intl.de.json").write_bytes(b'{"a": "\xff"}')

    with pytest.raises(ResourceFormatError, match="cannot read file"):
        ResourceRepository(export).load()
