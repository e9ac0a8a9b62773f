# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the lint pipeline and the scaffolder."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class StylegateError(Exception):
    """Base class for every failure that ends a stylegate invocation."""


class SettingsError(StylegateError):
    """Raised when ``[tool.stylegate]`` settings cannot be loaded."""


class ConfigNotFoundError(StylegateError):
    """Raised when the rule configuration path does not denote a readable file."""

    def __init__(self, path: Path) -> None:
        """Record the attempted path.

        Args:
            path: Rule configuration path that could not be found.
        """

        super().__init__(f"not exists: {path}")
        self.path = path


class ConfigurationInvalidError(StylegateError):
    """Raised when the rule configuration exists but cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        """Record the offending path and the loader's complaint.

        Args:
            path: Rule configuration path that failed to load.
            reason: Human-readable parse or validation failure.
        """

        super().__init__(f"invalid configuration {path}: {reason}")
        self.path = path
        self.reason = reason


class ReportWriteError(StylegateError):
    """Raised when the structured report cannot be persisted."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"unable to write report {path}: {reason}")
        self.path = path
        self.reason = reason


class CheckerExecutionError(StylegateError):
    """Raised when the external engine cannot be started or its output cannot be read."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        rendered = " ".join(command) if command else "<empty command>"
        super().__init__(f"checker '{rendered}' failed: {reason}")
        self.command = tuple(command)
        self.reason = reason


class LintGateFailure(StylegateError):
    """Raised when the failure gate decides the build must stop."""


class LintErrorsFound(LintGateFailure):
    """Raised when error diagnostics are fatal for the build."""


class LintWarningsFound(LintGateFailure):
    """Raised when warning diagnostics are fatal for the build."""


__all__ = [
    "CheckerExecutionError",
    "ConfigNotFoundError",
    "ConfigurationInvalidError",
    "LintErrorsFound",
    "LintGateFailure",
    "LintWarningsFound",
    "ReportWriteError",
    "SettingsError",
    "StylegateError",
]
