# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fold a diagnostic sequence into summary counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from .models import AggregateResult, Diagnostic
from .severity import Severity


def aggregate(
    diagnostics: Sequence[Diagnostic],
    start_ms: int,
    now_ms: int,
    *,
    files_checked: Iterable[Path | str] = (),
) -> AggregateResult:
    """Summarise a run.

    ``files`` counts the distinct files handed to the checker together with any
    other file a diagnostic refers to, so a clean run still reports the number
    of files scanned.

    Args:
        diagnostics: Diagnostics produced by the checker.
        start_ms: Millisecond timestamp taken before the checker ran.
        now_ms: Millisecond timestamp taken after it finished.
        files_checked: Files passed to the checker.

    Returns:
        AggregateResult: Counts of files, errors and warnings plus elapsed time.
    """

    files = {_file_key(entry) for entry in files_checked}
    errors = 0
    warnings = 0
    for diagnostic in diagnostics:
        files.add(diagnostic.file)
        if diagnostic.severity is Severity.ERROR:
            errors += 1
        elif diagnostic.severity is Severity.WARNING:
            warnings += 1
    return AggregateResult(
        files=len(files),
        errors=errors,
        warnings=warnings,
        elapsed_ms=max(0, now_ms - start_ms),
    )


def _file_key(entry: Path | str) -> str:
    return entry.as_posix() if isinstance(entry, Path) else entry


__all__ = ["aggregate"]
