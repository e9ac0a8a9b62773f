# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting sinks for lint results."""

from __future__ import annotations

from .console import print_summary, summary_lines
from .emitter import ReportEmitter
from .xml_report import build_checkstyle_tree, parse_checkstyle, read_xml_report, write_xml_report

__all__ = [
    "ReportEmitter",
    "build_checkstyle_tree",
    "parse_checkstyle",
    "print_summary",
    "read_xml_report",
    "summary_lines",
    "write_xml_report",
]
