# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the sync and watch commands."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Annotated

import typer

from ..logging import ConsoleLogger
from ..pipeline import IntlPipeline, PassOutcome, PassStatus
from .shared import (
    FAILURE_EXIT_CODE,
    CheckOnlyOption,
    CLIError,
    DefaultLanguageOption,
    EmojiOption,
    ExportPathOption,
    FilterOption,
    JobsOption,
    RootOption,
    SyncCLIOptions,
    TemplateOption,
    build_logger,
    resolve_config,
)

app = typer.Typer(
    name="intlsync",
    help="Extract translation declarations and keep per-language resources in sync.",
    no_args_is_help=True,
    add_completion=False,
)


def _build_pipeline(options: SyncCLIOptions, logger: ConsoleLogger) -> IntlPipeline:
    try:
        config = resolve_config(options)
    except CLIError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    return IntlPipeline(config, logger=logger)


def _summarise(outcome: PassOutcome, logger: ConsoleLogger) -> None:
    if outcome.result is None:
        return
    if outcome.status is PassStatus.VERIFIED:
        logger.ok(f"Translation resources are up to date ({len(outcome.result.merged)} translations)")
    elif outcome.status is PassStatus.UPDATED:
        logger.ok(f"Reconciled {len(outcome.result.merged)} translations across {len(outcome.tracked)} files")


@app.command("sync")
def sync_command(
    root: RootOption = Path(),
    default_language: DefaultLanguageOption = None,
    export_path: ExportPathOption = None,
    template: TemplateOption = None,
    check_only: CheckOnlyOption = None,
    filename_filter: FilterOption = None,
    jobs: JobsOption = None,
    emoji: EmojiOption = True,
) -> None:
    """Run a single extraction and reconciliation pass."""

    options = SyncCLIOptions(
        root=root,
        default_language=default_language,
        export_path=export_path,
        template=template,
        check_only=check_only,
        filename_filter=filename_filter,
        jobs=jobs,
        emoji=emoji,
    )
    logger = build_logger(options)
    pipeline = _build_pipeline(options, logger)
    outcome = pipeline.run(options.root)
    if not outcome.ok:
        raise typer.Exit(code=FAILURE_EXIT_CODE)
    _summarise(outcome, logger)


@app.command("watch")
def watch_command(
    root: RootOption = Path(),
    default_language: DefaultLanguageOption = None,
    export_path: ExportPathOption = None,
    template: TemplateOption = None,
    check_only: CheckOnlyOption = None,
    filename_filter: FilterOption = None,
    jobs: JobsOption = None,
    emoji: EmojiOption = True,
    interval: Annotated[float, typer.Option("--interval", min=0.0, help="Seconds between passes.")] = 1.0,
    max_passes: Annotated[
        int | None,
        typer.Option("--max-passes", min=1, help="Stop after this many passes."),
    ] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Exit on the first failed pass.")] = False,
) -> None:
    """Re-run passes until interrupted, skipping extraction while sources are unchanged."""

    options = SyncCLIOptions(
        root=root,
        default_language=default_language,
        export_path=export_path,
        template=template,
        check_only=check_only,
        filename_filter=filename_filter,
        jobs=jobs,
        emoji=emoji,
    )
    logger = build_logger(options)
    pipeline = _build_pipeline(options, logger)
    passes = 0
    try:
        while max_passes is None or passes < max_passes:
            passes += 1
            logger.section(f"intlsync pass {passes}")
            outcome = pipeline.run(options.root)
            if not outcome.ok and strict:
                raise typer.Exit(code=FAILURE_EXIT_CODE)
            _summarise(outcome, logger)
            if max_passes is None or passes < max_passes:
                time.sleep(interval)
    except KeyboardInterrupt:
        typer.echo("Stopped watching.")


__all__ = ["app", "sync_command", "watch_command"]
