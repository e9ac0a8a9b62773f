# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console summary rendering for lint runs."""

from __future__ import annotations

from rich.console import Console

from ..models import AggregateResult


def summary_lines(result: AggregateResult) -> list[str]:
    """Return the four summary lines describing ``result``."""

    return [
        f"Processed {result.files} file(s)",
        f"Found {result.errors} errors",
        f"Found {result.warnings} warnings",
        f"Finished in {result.elapsed_ms} ms",
    ]


def print_summary(result: AggregateResult, console: Console) -> None:
    """Print the summary lines to ``console`` without markup interpretation."""

    for line in summary_lines(result):
        console.print(line, markup=False, highlight=False, emoji=False)


__all__ = ["print_summary", "summary_lines"]
