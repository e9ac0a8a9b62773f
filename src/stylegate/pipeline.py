# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint pipeline: locate config, check, aggregate, report, gate."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .aggregate import aggregate
from .checker import CheckerClient, CommandChecker
from .gate import GateDecision, enforce_gate, evaluate_gate
from .interfaces import Checker, TaskHost
from .models import AggregateResult, Diagnostic, RunOptions
from .reporting import ReportEmitter
from .rules import load_rule_configuration, locate_config

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Return a monotonic timestamp in milliseconds."""

    return time.monotonic_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class LintRunSummary:
    """Everything a finished, non-fatal run produced.

    Attributes:
        diagnostics: Diagnostics in checker order.
        result: Aggregated counts.
        decision: Gate decision that was enforced.
        report: Path of the written XML report.
    """

    diagnostics: tuple[Diagnostic, ...]
    result: AggregateResult
    decision: GateDecision
    report: Path


def run_lint(
    host: TaskHost,
    args: Iterable[str],
    *,
    checker: Checker | None = None,
    console: Console | None = None,
    clock: Clock = monotonic_ms,
) -> LintRunSummary:
    """Run one lint invocation against the settings exposed by ``host``.

    Args:
        host: Build host providing settings and a logger.
        args: Positional CLI tokens (``q`` quiet, ``w`` fail on warnings).
        checker: Engine to use; defaults to :class:`CommandChecker`.
        console: Console receiving the summary; defaults to stdout.
        clock: Millisecond clock used for the elapsed time.

    Returns:
        LintRunSummary: Details of the run when no fatal condition occurred.

    Raises:
        ConfigNotFoundError: If the rule configuration does not exist.
        ConfigurationInvalidError: If the rule configuration cannot be loaded.
        CheckerExecutionError: If the engine cannot be run.
        ReportWriteError: If the XML report cannot be written.
        LintErrorsFound: If errors were found and ``fail_on_error`` is set.
        LintWarningsFound: If warnings fail the build and ``fail_on_error`` is set.
    """

    logger = host.logger
    options = RunOptions.from_args(args, fail_on_error=bool(host.read_setting("fail_on_error")))
    config_path = locate_config(_as_path(host.read_setting("config")))
    configuration = load_rule_configuration(config_path)
    logger.debug(f"config={config_path} checks={len(configuration.checks)}")

    client = CheckerClient(checker if checker is not None else CommandChecker(logger=logger))
    sources = _as_paths(host.read_setting("sources"))
    start = clock()
    files = client.discover(configuration, sources)
    diagnostics = tuple(client.check_files(configuration, files))
    result = aggregate(diagnostics, start, clock(), files_checked=files)

    target = _as_path(host.read_setting("target"))
    emitter = ReportEmitter(
        target=target,
        encoding=str(host.read_setting("encoding")),
        console=console if console is not None else Console(highlight=False, soft_wrap=True),
    )
    report = emitter.emit(diagnostics, result, options)
    logger.ok(f"created: {report}")

    decision = evaluate_gate(result, options)
    enforce_gate(decision, logger)
    return LintRunSummary(diagnostics=diagnostics, result=result, decision=decision, report=report)


def _as_path(value: object) -> Path:
    if isinstance(value, Path):
        return value
    if isinstance(value, str):
        return Path(value)
    raise TypeError(f"expected a path setting, got {type(value).__name__}")


def _as_paths(value: object) -> Sequence[Path]:
    if isinstance(value, (str, Path)):
        return [_as_path(value)]
    if isinstance(value, Iterable):
        return [_as_path(entry) for entry in value]
    raise TypeError(f"expected path settings, got {type(value).__name__}")


__all__ = ["LintRunSummary", "monotonic_ms", "run_lint"]
