# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checkstyle-compatible XML report writer and reader."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from defusedxml import ElementTree as SafeET

from ..errors import ReportWriteError
from ..models import Diagnostic
from ..severity import parse_severity

CHECKSTYLE_VERSION: Final[str] = "5.0"
ROOT_TAG: Final[str] = "checkstyle"
FILE_TAG: Final[str] = "file"
ERROR_TAG: Final[str] = "error"
REPLACEMENT_CHAR: Final[str] = "\ufffd"

_XML_ILLEGAL: Final[re.Pattern[str]] = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def xml_safe(value: str) -> str:
    """Replace code points XML 1.0 cannot carry with U+FFFD.

    The mapping is lossy: control characters such as ESC from ANSI colour
    codes, form feeds and NUL bytes read back as U+FFFD.

    Args:
        value: Attribute text reported by the engine.

    Returns:
        str: Text safe to serialise in an XML attribute.
    """

    return _XML_ILLEGAL.sub(REPLACEMENT_CHAR, value)


def build_checkstyle_tree(diagnostics: Iterable[Diagnostic]) -> ET.Element:
    """Group ``diagnostics`` per file into a ``<checkstyle>`` element.

    Files appear in the order of their first diagnostic and each file keeps
    the relative order of its diagnostics.

    Args:
        diagnostics: Diagnostics to serialise.

    Returns:
        ET.Element: Root element of the report.
    """

    root = ET.Element(ROOT_TAG, {"version": CHECKSTYLE_VERSION})
    file_elements: dict[str, ET.Element] = {}
    for diagnostic in diagnostics:
        file_element = file_elements.get(diagnostic.file)
        if file_element is None:
            file_element = ET.SubElement(root, FILE_TAG, {"name": xml_safe(diagnostic.file)})
            file_elements[diagnostic.file] = file_element
        ET.SubElement(file_element, ERROR_TAG, _error_attributes(diagnostic))
    return root


def _error_attributes(diagnostic: Diagnostic) -> dict[str, str]:
    attributes: dict[str, str] = {}
    if diagnostic.line is not None:
        attributes["line"] = str(diagnostic.line)
    if diagnostic.column is not None:
        attributes["column"] = str(diagnostic.column)
    if diagnostic.code is not None:
        attributes["source"] = xml_safe(diagnostic.code)
    attributes["severity"] = diagnostic.severity.value
    attributes["message"] = xml_safe(diagnostic.message)
    return attributes


def write_xml_report(diagnostics: Sequence[Diagnostic], path: Path, *, encoding: str) -> Path:
    """Persist ``diagnostics`` as checkstyle XML at ``path``.

    Args:
        diagnostics: Every diagnostic produced by the run.
        path: Target report path; parent directories are created.
        encoding: Text codec used for the document and its XML declaration.

    Returns:
        Path: The written report path.

    Raises:
        ReportWriteError: If the directory, file or encoding cannot be used.
    """

    tree = ET.ElementTree(build_checkstyle_tree(diagnostics))
    ET.indent(tree)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            tree.write(handle, encoding=encoding, xml_declaration=True)
            handle.write(b"\n")
    except (OSError, LookupError, TypeError) as exc:
        raise ReportWriteError(path, str(exc)) from exc
    return path


def parse_checkstyle(document: str | bytes) -> list[Diagnostic]:
    """Parse a checkstyle XML document into diagnostics.

    Args:
        document: Raw XML text or bytes.

    Returns:
        list[Diagnostic]: Diagnostics in document order.

    Raises:
        ValueError: If the document is not well-formed checkstyle XML.
    """

    try:
        root = SafeET.fromstring(document)
    except SafeET.ParseError as exc:
        raise ValueError(f"malformed checkstyle document: {exc}") from exc
    return list(_iter_diagnostics(root))


def read_xml_report(path: Path) -> list[Diagnostic]:
    """Read a report written by :func:`write_xml_report` back into diagnostics."""

    return parse_checkstyle(path.read_bytes())


def _iter_diagnostics(root: ET.Element) -> Iterable[Diagnostic]:
    if root.tag != ROOT_TAG:
        raise ValueError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")
    for file_element in root.iter(FILE_TAG):
        name = file_element.get("name", "")
        for error in file_element.iter(ERROR_TAG):
            yield Diagnostic(
                file=name,
                severity=parse_severity(error.get("severity")),
                message=error.get("message", ""),
                line=_optional_int(error.get("line")),
                column=_optional_int(error.get("column")),
                code=error.get("source"),
            )


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


__all__ = [
    "CHECKSTYLE_VERSION",
    "build_checkstyle_tree",
    "parse_checkstyle",
    "read_xml_report",
    "write_xml_report",
    "xml_safe",
]
