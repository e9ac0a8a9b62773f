# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .check import check_command
from .generate_config import generate_config_command
from .shared import register_command
from .typer_ext import create_typer

app = create_typer(help="Run a lint engine and gate the build on its findings.")
register_command(
    app,
    check_command,
    name="check",
    help_text="Run the configured lint engine, write the XML report and apply the failure gate.",
)
register_command(
    app,
    generate_config_command,
    name="generate-config",
    help_text="Write the bundled default rule configuration.",
)

__all__ = ["app"]
