# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the checkstyle XML report writer and reader."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from stylegate.errors import ReportWriteError
from stylegate.models import Diagnostic
from stylegate.reporting import build_checkstyle_tree, parse_checkstyle, read_xml_report, write_xml_report
from stylegate.reporting.xml_report import xml_safe
from stylegate.severity import Severity


def test_report_round_trips_every_field(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    diagnostics = [
        diagnostic("src/a.py", Severity.ERROR, message='uses "quotes" & <angles>', line=1, column=0, code="F401"),
        diagnostic("src/a.py", Severity.WARNING, message="second", line=7, column=None, code="W291"),
        diagnostic("src/b.py", Severity.INFO, message="no position", line=None, column=None, code=None),
    ]
    report = write_xml_report(diagnostics, tmp_path / "out" / "result.xml", encoding="utf-8")

    assert report == tmp_path / "out" / "result.xml"
    assert read_xml_report(report) == diagnostics


def test_report_groups_files_in_first_appearance_order(diagnostic: Callable[..., Diagnostic]) -> None:
    root = build_checkstyle_tree(
        [
            diagnostic("b.py", code="X1"),
            diagnostic("a.py", code="X2"),
            diagnostic("b.py", code="X3"),
        ],
    )
    assert root.tag == "checkstyle"
    assert root.get("version") == "5.0"
    files = root.findall("file")
    assert [element.get("name") for element in files] == ["b.py", "a.py"]
    assert [error.get("source") for error in files[0].findall("error")] == ["X1", "X3"]


def test_empty_report_is_a_valid_document(tmp_path: Path) -> None:
    report = write_xml_report([], tmp_path / "result.xml", encoding="utf-8")
    assert read_xml_report(report) == []
    assert b"<checkstyle" in report.read_bytes()


def test_report_honours_declared_encoding(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    diagnostics = [diagnostic("café.py", message="naïve résumé")]
    report = write_xml_report(diagnostics, tmp_path / "result.xml", encoding="iso-8859-1")

    raw = report.read_bytes()
    assert raw.startswith(b"<?xml")
    assert b"iso-8859-1" in raw.splitlines()[0]
    assert "naïve résumé".encode("latin-1") in raw
    assert read_xml_report(report) == diagnostics


def test_unknown_encoding_raises_report_write_error(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    with pytest.raises(ReportWriteError) as excinfo:
        write_xml_report([diagnostic()], tmp_path / "result.xml", encoding="no-such-codec")
    assert excinfo.value.path == tmp_path / "result.xml"


def test_unwritable_target_raises_report_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("occupied", encoding="utf-8")
    with pytest.raises(ReportWriteError):
        write_xml_report([], blocker / "result.xml", encoding="utf-8")


@pytest.mark.parametrize("document", ["<checkstyle", "<report version='1'/>"])
def test_parse_checkstyle_rejects_invalid_documents(document: str) -> None:
    with pytest.raises(ValueError):
        parse_checkstyle(document)


def test_control_characters_are_replaced_so_report_stays_readable(
    tmp_path: Path,
    diagnostic: Callable[..., Diagnostic],
) -> None:
    diagnostics = [
        diagnostic("a\x0c.py", message="bad\x1b[31m escape\x00", code="X\x1b1"),
        diagnostic("b.py", message="tabs\tand\nnewlines survive"),
    ]
    report = write_xml_report(diagnostics, tmp_path / "result.xml", encoding="utf-8")

    first, second = read_xml_report(report)

    assert first.file == "a\ufffd.py"
    assert first.message == "bad\ufffd[31m escape\ufffd"
    assert first.code == "X\ufffd1"
    assert second.message == "tabs\tand\nnewlines survive"


def test_xml_safe_keeps_legal_text() -> None:
    assert xml_safe("plain ünïcode \U0001f600") == "plain ünïcode \U0001f600"
    assert xml_safe("\x07\x1b\x7f") == "\ufffd\ufffd\x7f"


def test_text_only_encoding_raises_report_write_error(tmp_path: Path, diagnostic: Callable[..., Diagnostic]) -> None:
    with pytest.raises(ReportWriteError):
        write_xml_report([diagnostic()], tmp_path / "result.xml", encoding="unicode")
