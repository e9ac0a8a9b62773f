# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the report emitter and console summary."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from stylegate.models import AggregateResult, Diagnostic, RunOptions
from stylegate.reporting import ReportEmitter, summary_lines
from stylegate.severity import Severity


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, highlight=False, soft_wrap=True, no_color=True), buffer


class _ExplodingConsole(Console):
    def print(self, *args: object, **kwargs: object) -> None:  # type: ignore[override]
        raise RuntimeError("console unavailable")


def test_summary_lines_format() -> None:
    result = AggregateResult(files=3, errors=2, warnings=1, elapsed_ms=42)
    assert summary_lines(result) == [
        "Processed 3 file(s)",
        "Found 2 errors",
        "Found 1 warnings",
        "Finished in 42 ms",
    ]


def test_emit_prints_summary_and_writes_report(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    console, buffer = _console()
    emitter = ReportEmitter(target=tmp_path / "build" / "result.xml", encoding="utf-8", console=console)
    result = AggregateResult(files=1, errors=1, warnings=0, elapsed_ms=5)

    written = emitter.emit([diagnostic()], result, RunOptions())

    assert written.is_file()
    assert buffer.getvalue().splitlines() == summary_lines(result)


def test_quiet_suppresses_console_but_not_report(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    diagnostics = [diagnostic("a.py", Severity.WARNING), diagnostic("b.py", Severity.ERROR)]
    result = AggregateResult(files=2, errors=1, warnings=1)

    loud_console, loud_buffer = _console()
    loud = ReportEmitter(target=tmp_path / "loud.xml", encoding="utf-8", console=loud_console)
    quiet_console, quiet_buffer = _console()
    quiet = ReportEmitter(target=tmp_path / "quiet.xml", encoding="utf-8", console=quiet_console)

    loud.emit(diagnostics, result, RunOptions())
    quiet.emit(diagnostics, result, RunOptions(quiet=True))

    assert quiet_buffer.getvalue() == ""
    assert loud_buffer.getvalue() != ""
    assert (tmp_path / "loud.xml").read_bytes() == (tmp_path / "quiet.xml").read_bytes()


def test_report_is_written_before_console(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    target = tmp_path / "result.xml"
    emitter = ReportEmitter(target=target, encoding="utf-8", console=_ExplodingConsole(file=io.StringIO()))

    with pytest.raises(RuntimeError, match="console unavailable"):
        emitter.emit([diagnostic()], AggregateResult(files=1, errors=1), RunOptions())

    assert target.is_file()
