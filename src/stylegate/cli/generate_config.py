# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``stylegate generate-config`` command implementation."""

from __future__ import annotations

from pathlib import Path

import typer

from ..errors import SettingsError
from ..scaffold import ConfirmationPolicy, ScaffoldRequest, scaffold
from ..settings import load_settings
from .shared import ExitCode, build_cli_logger


def generate_config_command(
    destination: Path | None = typer.Argument(
        None,
        metavar="[DEST]",
        help="Where to write the default configuration (defaults to the configured config path).",
        show_default=False,
    ),
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root holding pyproject.toml."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file without asking."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji in log output."),
) -> None:
    """Write the bundled default rule configuration."""

    logger = build_cli_logger(emoji=not no_emoji)
    resolved_root = root.resolve()
    if destination is None:
        try:
            destination = load_settings(resolved_root).config
        except SettingsError as exc:
            logger.fail(str(exc))
            raise typer.Exit(code=ExitCode.CONFIG_ERROR) from exc
    elif not destination.is_absolute():
        destination = resolved_root / destination

    policy = ConfirmationPolicy.OVERWRITE if force else ConfirmationPolicy.ASK
    scaffold(ScaffoldRequest(destination=destination, policy=policy), logger=logger)


__all__ = ["generate_config_command"]
