# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (options, logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Final

import typer

from ..config import ConfigError, IntlConfig
from ..config_loader import load_config
from ..logging import ConsoleLogger

CONFIG_ERROR_EXIT_CODE: Final[int] = 2
FAILURE_EXIT_CODE: Final[int] = 1


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = FAILURE_EXIT_CODE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root containing sources and configuration."),
]
DefaultLanguageOption = Annotated[
    str | None,
    typer.Option("--default-language", "-l", help="Language whose resource drives rename detection."),
]
ExportPathOption = Annotated[
    Path | None,
    typer.Option("--export-path", "-o", help="Directory holding the per-language resource files."),
]
TemplateOption = Annotated[
    str | None,
    typer.Option("--template", help="Resource file name template containing '{language}'."),
]
CheckOnlyOption = Annotated[
    bool | None,
    typer.Option("--check-only/--write", help="Fail instead of writing when resources are out of date."),
]
FilterOption = Annotated[
    str | None,
    typer.Option("--filter", help="Regular expression a tracked file path must match."),
]
JobsOption = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Concurrent reads used to fingerprint tracked files."),
]
EmojiOption = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output."),
]


@dataclass(slots=True)
class SyncCLIOptions:
    """Options shared by every command that runs reconciliation passes."""

    root: Path
    default_language: str | None = None
    export_path: Path | None = None
    template: str | None = None
    check_only: bool | None = None
    filename_filter: str | None = None
    jobs: int | None = None
    emoji: bool = True

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides for options provided on the command line."""

        return {
            "default_language": self.default_language,
            "export_path": self.export_path,
            "filename_template": self.template,
            "check_only": self.check_only,
            "filename_filter": self.filename_filter,
            "jobs": self.jobs,
        }


def build_logger(options: SyncCLIOptions) -> ConsoleLogger:
    """Return the console logger honouring the emoji preference."""

    return ConsoleLogger(use_emoji=options.emoji)


def resolve_config(options: SyncCLIOptions) -> IntlConfig:
    """Load the effective configuration for ``options.root``.

    Raises:
        CLIError: If the root does not exist or configuration is invalid.
    """

    root = options.root.resolve()
    if not root.is_dir():
        raise CLIError(f"Project root {root} is not a directory", exit_code=CONFIG_ERROR_EXIT_CODE)
    try:
        return load_config(root, options.overrides())
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=CONFIG_ERROR_EXIT_CODE) from exc


__all__ = [
    "CLIError",
    "CONFIG_ERROR_EXIT_CODE",
    "FAILURE_EXIT_CODE",
    "SyncCLIOptions",
    "build_logger",
    "resolve_config",
]
