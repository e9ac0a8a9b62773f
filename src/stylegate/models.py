# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the stylegate package."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity

QUIET_TOKEN: Final[str] = "q"
WARNINGS_TOKEN: Final[str] = "w"


class Diagnostic(BaseModel):
    """Represent one rule violation reported by the checker.

    Instances are frozen: once the checker produces a diagnostic it is only
    folded into an :class:`AggregateResult` and serialised.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    severity: Severity
    message: str
    line: int | None = Field(default=None, ge=0)
    column: int | None = Field(default=None, ge=0)
    code: str | None = None

    @field_validator("file", mode="before")
    @classmethod
    def _normalise_file(cls, value: str | Path) -> str:
        """Store file references as POSIX strings.

        Args:
            value: File reference supplied by the engine or a caller.

        Returns:
            str: POSIX representation of the file reference.
        """

        if isinstance(value, Path):
            return value.as_posix()
        return value

    def location(self) -> str:
        """Return ``file[:line[:column]]`` for human-readable output."""

        parts = [self.file]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class RunOptions(BaseModel):
    """Caller-supplied flags for one lint invocation."""

    model_config = ConfigDict(frozen=True)

    quiet: bool = False
    fail_on_warning: bool = False
    fail_on_error: bool = True

    @classmethod
    def from_args(cls, args: Iterable[str], *, fail_on_error: bool = True) -> RunOptions:
        """Build options from order-independent CLI tokens.

        ``q`` suppresses the console summary and ``w`` makes warnings fail the
        build. Every other token is ignored.

        Args:
            args: Positional tokens passed to the lint task.
            fail_on_error: Whether a failing gate outcome is fatal.

        Returns:
            RunOptions: Immutable options for the invocation.
        """

        tokens = set(args)
        return cls(
            quiet=QUIET_TOKEN in tokens,
            fail_on_warning=WARNINGS_TOKEN in tokens,
            fail_on_error=fail_on_error,
        )


class AggregateResult(BaseModel):
    """Summary counts derived from a diagnostic sequence."""

    model_config = ConfigDict(frozen=True)

    files: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)
    warnings: int = Field(default=0, ge=0)
    elapsed_ms: int = Field(default=0, ge=0)


__all__ = ["AggregateResult", "Diagnostic", "QUIET_TOKEN", "RunOptions", "WARNINGS_TOKEN"]
