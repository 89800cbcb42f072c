# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the console logger."""

from __future__ import annotations

import pytest

from intlsync.interfaces import Logger
from intlsync.logging import ConsoleLogger


def test_progress_goes_to_stdout_and_problems_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLogger(use_emoji=False, use_color=False)

    logger.info("Starting intl extraction")
    logger.ok("done")
    logger.warn("We found 1 unused translations")
    logger.error("Could not access files a.py")

    captured = capsys.readouterr()
    assert captured.out == "[intlsync]: Starting intl extraction\n[intlsync]: done\n"
    assert captured.err == "[intlsync]: We found 1 unused translations\n[intlsync]: Could not access files a.py\n"


def test_emoji_and_prefix_are_configurable(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleLogger(use_emoji=True, use_color=False, prefix="").error("boom")

    assert capsys.readouterr().err == "❌ boom\n"


def test_brackets_are_not_treated_as_markup(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleLogger(use_emoji=False, use_color=False).info("[bold]key[/bold]")

    assert capsys.readouterr().out == "[intlsync]: [bold]key[/bold]\n"


def test_section_without_colour_is_plain(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleLogger(use_emoji=False, use_color=False).section("intlsync pass 1")

    assert capsys.readouterr().out == "\n--- intlsync pass 1 ---\n"


def test_console_logger_satisfies_logger_protocol() -> None:
    assert isinstance(ConsoleLogger(), Logger)
