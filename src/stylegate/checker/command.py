# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checker implementation that shells out to an external lint engine."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..errors import CheckerExecutionError
from ..interfaces import PipelineLogger
from ..models import Diagnostic
from ..rules import RuleConfiguration
from .parsers import get_parser

CommandRunner = Callable[..., subprocess.CompletedProcess[str]]

STDERR_TAIL_LINES: Final[int] = 5


def run_engine(args: Sequence[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run the engine command ``args`` and capture its text output.

    A bare executable name is looked up on ``PATH``; the exit status is left
    for the caller to judge.

    Raises:
        FileNotFoundError: If the executable cannot be located.
    """

    head, *rest = args
    executable = head if Path(head).is_absolute() else shutil.which(head)
    if executable is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return subprocess.run(
        [executable, *rest],
        cwd=str(cwd) if cwd is not None else None,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
    )


def _stderr_tail(stderr: str | None) -> str:
    lines = [line for line in (stderr or "").splitlines() if line.strip()]
    return " | ".join(lines[-STDERR_TAIL_LINES:]) or "no stderr output"


@dataclass(slots=True)
class CommandChecker:
    """Run ``configuration.engine.command`` and parse its stdout.

    Attributes:
        runner: Callable executing the engine; defaults to :func:`run_engine`.
        cwd: Working directory for the engine and base for relative paths it reports.
        logger: Optional logger receiving debug details about the invocation.
    """

    runner: CommandRunner = field(default=run_engine)
    cwd: Path | None = None
    logger: PipelineLogger | None = None

    def check_files(
        self,
        configuration: RuleConfiguration,
        files: Sequence[Path],
    ) -> list[Diagnostic]:
        """Return diagnostics the engine reports for ``files``.

        Args:
            configuration: Rule configuration naming the engine and overrides.
            files: Files discovered under the requested source roots.

        Returns:
            list[Diagnostic]: Diagnostics after ``[[checks]]`` overrides, in engine order.

        Raises:
            CheckerExecutionError: If the engine cannot be launched, exits with a
                status outside ``engine.success_codes`` or its output is unreadable.
        """

        if not files:
            return []
        engine = configuration.engine
        args = list(engine.command)
        if engine.pass_files:
            args.extend(str(path) for path in files)
        self._debug(f"command={engine.command[0]} files={len(files)} format={engine.format}")
        try:
            completed = self.runner(args, cwd=self.cwd)
        except (OSError, ValueError) as exc:
            raise CheckerExecutionError(engine.command, str(exc)) from exc
        self._debug(f"returncode={completed.returncode}")
        if completed.returncode not in engine.success_codes:
            reason = f"exited with status {completed.returncode}: {_stderr_tail(completed.stderr)}"
            raise CheckerExecutionError(engine.command, reason)
        try:
            parsed = get_parser(engine.format)(completed.stdout or "")
        except ValueError as exc:
            raise CheckerExecutionError(engine.command, str(exc)) from exc
        diagnostics = configuration.apply_overrides(self._absolutise(diagnostic) for diagnostic in parsed)
        for diagnostic in diagnostics:
            self._debug(f"finding={diagnostic.location()} code={diagnostic.code} severity={diagnostic.severity.value}")
        return diagnostics

    def _absolutise(self, diagnostic: Diagnostic) -> Diagnostic:
        """Rewrite relative file references against the engine working directory."""

        path = Path(diagnostic.file)
        if path.is_absolute():
            return diagnostic
        base = self.cwd if self.cwd is not None else Path.cwd()
        return diagnostic.model_copy(update={"file": (base / path).resolve().as_posix()})

    def _debug(self, message: str) -> None:
        if self.logger is not None:
            self.logger.debug(message)


__all__ = ["CommandChecker", "CommandRunner", "run_engine"]
