# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class ExitCode(IntEnum):
    """Process exit statuses returned by stylegate commands."""

    SUCCESS = 0
    GATE_FAILURE = 1
    CONFIG_ERROR = 2
    RUNTIME_ERROR = 3


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = ExitCode.GATE_FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = int(exit_code)


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool | None = None
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences.

        Args:
            message: Text describing the successful state.
        """

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple ``key=value`` highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if match.group(1) in {"command", "cmd"} else "bold green"
            text.append(match.group(2), style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(
        console=console,
        use_emoji=emoji,
        use_color=False if no_color else None,
        debug_enabled=debug,
    )


CommandCallable = Callable[..., None]


def register_command(
    app: typer.Typer,
    callback: CommandCallable,
    *,
    name: str,
    help_text: str | None = None,
) -> CommandCallable:
    """Register ``callback`` on ``app`` with consistent metadata handling.

    Args:
        app: Typer application receiving the command registration.
        callback: Command implementation.
        name: Command name exposed on the CLI.
        help_text: Help text shown in CLI usage output.

    Returns:
        CommandCallable: The callback returned by Typer registration.
    """

    decorator = app.command(name=name, help=help_text)
    return decorator(callback)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "ExitCode",
    "build_cli_logger",
    "register_command",
]
