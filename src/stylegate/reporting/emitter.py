# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Drive the structured and console sinks for a finished run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ..models import AggregateResult, Diagnostic, RunOptions
from .console import print_summary
from .xml_report import write_xml_report


@dataclass(slots=True)
class ReportEmitter:
    """Write the XML report and, unless quiet, the console summary.

    The XML sink is always written first so a failure while printing never
    loses the persisted report.

    Attributes:
        target: Path of the structured report.
        encoding: Text codec used for the structured report.
        console: Rich console receiving the summary lines.
    """

    target: Path
    encoding: str
    console: Console

    def emit(
        self,
        diagnostics: Sequence[Diagnostic],
        result: AggregateResult,
        options: RunOptions,
    ) -> Path:
        """Write both sinks for one run.

        Args:
            diagnostics: Every diagnostic produced by the checker.
            result: Aggregated counts for the run.
            options: Invocation flags; only ``quiet`` is consulted.

        Returns:
            Path: Location of the written XML report.

        Raises:
            ReportWriteError: If the XML report cannot be written.
        """

        written = write_xml_report(diagnostics, self.target, encoding=self.encoding)
        if not options.quiet:
            print_summary(result, self.console)
        return written


__all__ = ["ReportEmitter"]
