# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for filesystem source discovery."""

from __future__ import annotations

from pathlib import Path

from stylegate.discovery import FilesystemDiscovery


def test_discover_filters_by_include(source_tree: Path) -> None:
    files = FilesystemDiscovery().discover([source_tree], include=["*.py"])
    assert [path.relative_to(source_tree.resolve()).as_posix() for path in files] == [
        "app.py",
        "pkg/__init__.py",
        "pkg/core.py",
    ]
    assert all(path.is_absolute() for path in files)


def test_discover_honours_exclude_patterns(source_tree: Path) -> None:
    files = FilesystemDiscovery().discover([source_tree], include=["*.py"], exclude=["pkg/*"])
    assert [path.name for path in files] == ["app.py"]


def test_discover_prunes_tool_directories(source_tree: Path) -> None:
    cache = source_tree / "__pycache__"
    cache.mkdir()
    (cache / "app.cpython-312.py").write_text("", encoding="utf-8")
    venv = source_tree / ".venv" / "lib"
    venv.mkdir(parents=True)
    (venv / "site.py").write_text("", encoding="utf-8")

    files = FilesystemDiscovery().discover([source_tree], include=["*.py"])

    assert len(files) == 3


def test_discover_deduplicates_overlapping_roots(source_tree: Path) -> None:
    files = FilesystemDiscovery().discover(
        [source_tree, source_tree / "pkg", source_tree / "app.py"],
        include=["*.py"],
    )
    assert len(files) == 3
    assert len(set(files)) == 3


def test_discover_skips_missing_roots(tmp_path: Path) -> None:
    assert FilesystemDiscovery().discover([tmp_path / "absent"], include=["*.py"]) == []
