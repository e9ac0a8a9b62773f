# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin adapter between the pipeline and a :class:`Checker`."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ..discovery import FilesystemDiscovery
from ..interfaces import Checker, SourceDiscovery
from ..models import Diagnostic
from ..rules import RuleConfiguration


@dataclass(slots=True)
class CheckerClient:
    """Discover source files and ask the checker to analyse them.

    Attributes:
        checker: Engine producing diagnostics.
        discovery: Directory-walking collaborator.
    """

    checker: Checker
    discovery: SourceDiscovery = field(default_factory=FilesystemDiscovery)

    def discover(self, configuration: RuleConfiguration, source_dirs: Sequence[Path]) -> list[Path]:
        """Return the files under ``source_dirs`` the configuration applies to."""

        engine = configuration.engine
        return self.discovery.discover(source_dirs, include=engine.include, exclude=engine.exclude)

    def check(self, configuration: RuleConfiguration, source_dirs: Sequence[Path]) -> list[Diagnostic]:
        """Discover files under ``source_dirs`` and return their diagnostics.

        Args:
            configuration: Parsed rule configuration.
            source_dirs: One or more source roots.

        Returns:
            list[Diagnostic]: Diagnostics in the order the checker yields them.
        """

        return self.check_files(configuration, self.discover(configuration, source_dirs))

    def check_files(self, configuration: RuleConfiguration, files: Sequence[Path]) -> list[Diagnostic]:
        """Return the checker's diagnostics for an already discovered file list."""

        return list(self.checker.check_files(configuration, files))


__all__ = ["CheckerClient"]
