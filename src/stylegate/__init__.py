# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint gate that runs an external checker and fails builds on thresholds."""

from __future__ import annotations

from .errors import (
    CheckerExecutionError,
    ConfigNotFoundError,
    ConfigurationInvalidError,
    LintErrorsFound,
    LintGateFailure,
    LintWarningsFound,
    ReportWriteError,
    StylegateError,
)
from .models import AggregateResult, Diagnostic, RunOptions
from .severity import Severity

__version__ = "0.3.0"

__all__ = [
    "AggregateResult",
    "CheckerExecutionError",
    "ConfigNotFoundError",
    "ConfigurationInvalidError",
    "Diagnostic",
    "LintErrorsFound",
    "LintGateFailure",
    "LintWarningsFound",
    "ReportWriteError",
    "RunOptions",
    "Severity",
    "StylegateError",
    "__version__",
]
