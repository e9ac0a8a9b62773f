# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checker adapters and engine output parsers."""

from __future__ import annotations

from .client import CheckerClient
from .command import CommandChecker, CommandRunner, run_engine
from .parsers import PARSERS, get_parser

__all__ = ["CheckerClient", "CommandChecker", "CommandRunner", "PARSERS", "get_parser", "run_engine"]
