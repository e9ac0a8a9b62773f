# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning engine output into diagnostics."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias, cast

from ..models import Diagnostic
from ..reporting.xml_report import parse_checkstyle
from ..severity import Severity, map_severity, severity_from_code

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]

OutputParser = Callable[[str], list[Diagnostic]]


def _load_json_stream(stdout: str) -> JsonValue:
    """Decode ``stdout`` as one JSON document or as JSON lines."""

    stdout = stdout.strip()
    if not stdout:
        return []
    try:
        return cast(JsonValue, json.loads(stdout))
    except json.JSONDecodeError:
        payload: list[JsonValue] = []
        for raw_line in stdout.splitlines():
            trimmed = raw_line.strip()
            if not trimmed:
                continue
            try:
                payload.append(cast(JsonValue, json.loads(trimmed)))
            except json.JSONDecodeError:
                continue
        return payload


def iter_dicts(value: JsonValue | None) -> Iterator[Mapping[str, JsonValue]]:
    """Yield mapping items from ``value`` when it is a sequence of dict-like objects."""

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        for item in value:
            if isinstance(item, Mapping):
                yield item


def _mapping(value: JsonValue | None) -> Mapping[str, JsonValue]:
    return value if isinstance(value, Mapping) else {}


def coerce_optional_str(value: JsonValue | None) -> str | None:
    """Return ``value`` as a string, or ``None`` when absent."""

    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def coerce_optional_int(value: JsonValue | None) -> int | None:
    """Return ``value`` as an integer, or ``None`` when it cannot be interpreted."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


@dataclass(slots=True)
class DiagnosticLocation:
    """Describe the file and position associated with a diagnostic."""

    file: str | None
    line: int | None
    column: int | None


def _build(location: DiagnosticLocation, *, severity: Severity, message: str, code: str | None) -> Diagnostic | None:
    """Return a :class:`Diagnostic` or ``None`` when the engine omitted the file."""

    if not location.file:
        return None
    return Diagnostic(
        file=location.file,
        line=location.line if location.line is None or location.line >= 0 else None,
        column=location.column if location.column is None or location.column >= 0 else None,
        severity=severity,
        message=message,
        code=code,
    )


def parse_ruff(stdout: str) -> list[Diagnostic]:
    """Parse ``ruff check --output-format=json`` output.

    Args:
        stdout: Raw engine output.

    Returns:
        list[Diagnostic]: Diagnostics in engine order.
    """

    payload = _load_json_stream(stdout)
    source = payload.get("diagnostics") if isinstance(payload, Mapping) else payload
    results: list[Diagnostic] = []
    for item in iter_dicts(source):
        location = _mapping(item.get("location"))
        code = coerce_optional_str(item.get("code"))
        diagnostic = _build(
            DiagnosticLocation(
                file=coerce_optional_str(item.get("filename")) or coerce_optional_str(item.get("file")),
                line=coerce_optional_int(location.get("row")),
                column=coerce_optional_int(location.get("column")),
            ),
            severity=severity_from_code(code, Severity.WARNING),
            message=coerce_optional_str(item.get("message")) or "",
            code=code,
        )
        if diagnostic is not None:
            results.append(diagnostic)
    return results


_PYLINT_SEVERITIES: Final[dict[str, Severity]] = {
    "fatal": Severity.ERROR,
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "convention": Severity.INFO,
    "refactor": Severity.INFO,
    "info": Severity.INFO,
}


def _normalise_pylint_code(item: Mapping[str, JsonValue]) -> str | None:
    """Return the Pylint symbol in hyphenated form, falling back to the message id."""

    symbol = item.get("symbol")
    if isinstance(symbol, str) and symbol.strip():
        return symbol.strip().replace("_", "-")
    return coerce_optional_str(item.get("message-id")) or coerce_optional_str(item.get("messageId"))


def parse_pylint(stdout: str) -> list[Diagnostic]:
    """Parse ``pylint --output-format=json`` (or ``json2``) output."""

    payload = _load_json_stream(stdout)
    source = payload.get("messages") if isinstance(payload, Mapping) else payload
    results: list[Diagnostic] = []
    for item in iter_dicts(source):
        diagnostic = _build(
            DiagnosticLocation(
                file=coerce_optional_str(item.get("path")) or coerce_optional_str(item.get("filename")),
                line=coerce_optional_int(item.get("line")),
                column=coerce_optional_int(item.get("column")),
            ),
            severity=map_severity(item.get("type"), _PYLINT_SEVERITIES, Severity.WARNING),
            message=coerce_optional_str(item.get("message")) or "",
            code=_normalise_pylint_code(item),
        )
        if diagnostic is not None:
            results.append(diagnostic)
    return results


def parse_flake8(stdout: str) -> list[Diagnostic]:
    """Parse ``flake8 --format=json`` output (a mapping of file to findings)."""

    payload = _load_json_stream(stdout)
    results: list[Diagnostic] = []
    if not isinstance(payload, Mapping):
        return results
    for filename, entries in payload.items():
        for item in iter_dicts(entries):
            code = coerce_optional_str(item.get("code"))
            diagnostic = _build(
                DiagnosticLocation(
                    file=coerce_optional_str(item.get("filename")) or filename,
                    line=coerce_optional_int(item.get("line_number")),
                    column=coerce_optional_int(item.get("column_number")),
                ),
                severity=severity_from_code(code, Severity.WARNING),
                message=coerce_optional_str(item.get("text")) or "",
                code=code,
            )
            if diagnostic is not None:
                results.append(diagnostic)
    return results


def parse_checkstyle_output(stdout: str) -> list[Diagnostic]:
    """Parse checkstyle XML emitted by any engine; empty output means no findings."""

    if not stdout.strip():
        return []
    return parse_checkstyle(stdout.strip())


PARSERS: Final[dict[str, OutputParser]] = {
    "ruff": parse_ruff,
    "pylint": parse_pylint,
    "flake8": parse_flake8,
    "checkstyle": parse_checkstyle_output,
}


def get_parser(name: str) -> OutputParser:
    """Return the parser registered under ``name``.

    Raises:
        KeyError: If no parser is registered for ``name``.
    """

    return PARSERS[name]


__all__ = [
    "PARSERS",
    "OutputParser",
    "get_parser",
    "parse_checkstyle_output",
    "parse_flake8",
    "parse_pylint",
    "parse_ruff",
]
