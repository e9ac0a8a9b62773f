# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``stylegate check`` command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import typer

from ..errors import (
    CheckerExecutionError,
    ConfigNotFoundError,
    ConfigurationInvalidError,
    LintGateFailure,
    ReportWriteError,
    SettingsError,
    StylegateError,
)
from ..pipeline import run_lint
from ..settings import ProjectTaskHost, load_settings
from .shared import CLIError, CLILogger, ExitCode, build_cli_logger

_EXIT_CODES: Final[tuple[tuple[type[StylegateError], ExitCode], ...]] = (
    (LintGateFailure, ExitCode.GATE_FAILURE),
    (ConfigNotFoundError, ExitCode.CONFIG_ERROR),
    (ConfigurationInvalidError, ExitCode.CONFIG_ERROR),
    (SettingsError, ExitCode.CONFIG_ERROR),
    (ReportWriteError, ExitCode.RUNTIME_ERROR),
    (CheckerExecutionError, ExitCode.RUNTIME_ERROR),
)


def exit_code_for(exc: StylegateError) -> ExitCode:
    """Return the process exit status associated with ``exc``."""

    for error_type, code in _EXIT_CODES:
        if isinstance(exc, error_type):
            return code
    return ExitCode.RUNTIME_ERROR


def check_command(
    tokens: list[str] | None = typer.Argument(
        None,
        metavar="[q] [w]",
        help="'q' suppresses the console summary, 'w' fails the build on warnings. Other tokens are ignored.",
        show_default=False,
    ),
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root holding pyproject.toml."),
    config: Path | None = typer.Option(None, "--config", "-c", help="Rule configuration file."),
    sources: list[Path] | None = typer.Option(
        None,
        "--source",
        "-s",
        help="Source directory to check (repeatable).",
    ),
    target: Path | None = typer.Option(None, "--target", "-t", help="Path of the XML report."),
    fail_on_error: bool | None = typer.Option(
        None,
        "--fail-on-error/--no-fail-on-error",
        help="Fail the build when the gate trips instead of only logging it.",
        show_default=False,
    ),
    encoding: str | None = typer.Option(None, "--encoding", help="Text codec for the XML report."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji in log output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colour in log output."),
    debug: bool = typer.Option(False, "--debug", help="Print debug details about the run."),
) -> None:
    """Run the configured lint engine and gate the build on its findings."""

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    overrides = {
        "config": config,
        "sources": tuple(sources) if sources else None,
        "target": target,
        "fail_on_error": fail_on_error,
        "encoding": encoding,
    }
    try:
        _run_check(root.resolve(), tokens or [], overrides, logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc


def _run_check(root: Path, tokens: list[str], overrides: dict[str, object], logger: CLILogger) -> None:
    """Load settings, run the pipeline and translate failures into :class:`CLIError`.

    Raises:
        CLIError: If any stage of the pipeline fails.
    """

    try:
        settings = load_settings(root, overrides)
        run_lint(ProjectTaskHost(settings=settings, logger=logger), tokens)
    except StylegateError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=exit_code_for(exc)) from exc


__all__ = ["check_command", "exit_code_for"]
