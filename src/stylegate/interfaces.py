# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Capability interfaces separating the pipeline from engines and build hosts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Diagnostic
    from .rules import RuleConfiguration


@runtime_checkable
class PipelineLogger(Protocol):
    """Logger surface consumed by the pipeline, gate and scaffolder."""

    def fail(self, message: str) -> None:
        """Log ``message`` at error level."""
        raise NotImplementedError

    def warn(self, message: str) -> None:
        """Log ``message`` at warning level."""
        raise NotImplementedError

    def ok(self, message: str) -> None:
        """Log a success ``message``."""
        raise NotImplementedError

    def debug(self, message: str) -> None:
        """Log a debug ``message`` when debugging is enabled."""
        raise NotImplementedError


@runtime_checkable
class Checker(Protocol):
    """External engine that turns source files into diagnostics.

    Implementations are trusted to be total: files they cannot analyse yield no
    diagnostics instead of an exception.
    """

    def check_files(
        self,
        configuration: RuleConfiguration,
        files: Sequence[Path],
    ) -> Sequence[Diagnostic]:
        """Return diagnostics for ``files`` in the order the engine yields them.

        Args:
            configuration: Parsed rule configuration driving the engine.
            files: Source files discovered under the requested roots.

        Returns:
            Sequence[Diagnostic]: Diagnostics produced for ``files``.
        """
        raise NotImplementedError


@runtime_checkable
class SourceDiscovery(Protocol):
    """Directory-walking collaborator used to enumerate source files."""

    def discover(
        self,
        roots: Sequence[Path],
        *,
        include: Iterable[str],
        exclude: Iterable[str],
    ) -> list[Path]:
        """Return files under ``roots`` matching ``include`` and not ``exclude``."""
        raise NotImplementedError


@runtime_checkable
class TaskHost(Protocol):
    """Build host exposing settings and a logger to the lint task."""

    @property
    def logger(self) -> PipelineLogger:
        """Return the logger user-facing messages are written to."""
        raise NotImplementedError

    def read_setting(self, key: str) -> object:
        """Return the value stored under ``key``.

        Raises:
            KeyError: If ``key`` is not a known setting.
        """
        raise NotImplementedError


__all__ = ["Checker", "PipelineLogger", "SourceDiscovery", "TaskHost"]
