# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels normalising different engine vocabularies."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "fatal": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "info": Severity.INFO,
    "information": Severity.INFO,
    "note": Severity.INFO,
    "notice": Severity.INFO,
}

_ERROR_PREFIXES: Final[set[str]] = {"E", "F"}
_WARNING_PREFIX: Final[str] = "W"


def lookup_severity(label: str | None) -> Severity | None:
    """Return the :class:`Severity` named by ``label`` or ``None`` when unknown."""

    if not label:
        return None
    return _SEVERITY_ALIASES.get(label.strip().lower())


def parse_severity(label: str | None, default: Severity = Severity.WARNING) -> Severity:
    """Return the :class:`Severity` named by ``label``.

    Args:
        label: Severity label reported by an engine or written in configuration.
        default: Severity returned when ``label`` is empty or unknown.

    Returns:
        Severity: Matching severity, or ``default`` when nothing matches.
    """

    return lookup_severity(label) or default


def severity_from_code(code: str | None, default: Severity = Severity.WARNING) -> Severity:
    """Infer severity from conventional code prefixes (e.g. E, W).

    Args:
        code: Diagnostic code emitted by the engine.
        default: Severity returned when the code does not match known prefixes.

    Returns:
        Severity: Severity derived from the code or ``default`` when unmatched.
    """

    if not code:
        return default
    head = code[0].upper()
    if head in _ERROR_PREFIXES:
        return Severity.ERROR
    if head == _WARNING_PREFIX:
        return Severity.WARNING
    return default


def map_severity(label: object, mapping: Mapping[str, Severity], default: Severity) -> Severity:
    """Return a :class:`Severity` derived from ``label`` using ``mapping``."""

    if isinstance(label, str):
        return mapping.get(label.lower(), default)
    return default


__all__ = ["Severity", "lookup_severity", "map_severity", "parse_severity", "severity_from_code"]
