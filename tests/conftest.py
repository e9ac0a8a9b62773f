# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from stylegate.models import Diagnostic
from stylegate.rules import RuleConfiguration
from stylegate.severity import Severity

ENGINE_SCRIPT = """\
import sys
from xml.sax.saxutils import quoteattr

severity = "error" if "--errors" in sys.argv else "warning"
files = [arg for arg in sys.argv[1:] if not arg.startswith("--")]
print('<?xml version="1.0" encoding="UTF-8"?>')
print('<checkstyle version="5.0">')
for name in files:
    print(f'<file name={quoteattr(name)}>')
    print(f'<error line="1" column="0" source="X100" severity="{severity}" message="fake finding"/>')
    print('</file>')
print('</checkstyle>')
"""


@dataclass
class RecordingLogger:
    """Collect log calls made through the pipeline logger protocol."""

    records: list[tuple[str, str]] = field(default_factory=list)

    def fail(self, message: str) -> None:
        self.records.append(("fail", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def ok(self, message: str) -> None:
        self.records.append(("ok", message))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def messages(self, level: str) -> list[str]:
        return [message for recorded, message in self.records if recorded == level]


@dataclass
class FakeChecker:
    """Checker returning diagnostics built from the files it receives."""

    factory: Callable[[Sequence[Path]], list[Diagnostic]] = lambda files: []
    calls: list[tuple[RuleConfiguration, tuple[Path, ...]]] = field(default_factory=list)

    def check_files(self, configuration: RuleConfiguration, files: Sequence[Path]) -> list[Diagnostic]:
        self.calls.append((configuration, tuple(files)))
        return self.factory(files)


def make_diagnostic(
    file: str | Path = "src/app.py",
    severity: Severity = Severity.ERROR,
    *,
    message: str = "bad things",
    line: int | None = 10,
    column: int | None = 2,
    code: str | None = "F401",
) -> Diagnostic:
    return Diagnostic(file=file, severity=severity, message=message, line=line, column=column, code=code)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create ``src`` with three Python files and one non-Python file."""

    src = tmp_path / "src"
    (src / "pkg").mkdir(parents=True)
    (src / "app.py").write_text("print('app')\n", encoding="utf-8")
    (src / "pkg" / "__init__.py").write_text("", encoding="utf-8")
    (src / "pkg" / "core.py").write_text("VALUE = 1\n", encoding="utf-8")
    (src / "README.txt").write_text("not python\n", encoding="utf-8")
    return src


@pytest.fixture
def rule_config(tmp_path: Path) -> Path:
    """Write a minimal rule configuration using a placeholder engine."""

    path = tmp_path / "stylegate-config.toml"
    path.write_text(
        '[engine]\ncommand = ["fake-engine"]\nformat = "ruff"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def script_engine_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a rule configuration backed by a Python script engine."""

    script = tmp_path / "engine.py"
    script.write_text(ENGINE_SCRIPT, encoding="utf-8")

    def _write(*extra_args: str) -> Path:
        command = [sys.executable, str(script), *extra_args]
        rendered = ", ".join(f"'{part}'" for part in command)
        path = tmp_path / "stylegate-config.toml"
        path.write_text(
            f'[engine]\ncommand = [{rendered}]\nformat = "checkstyle"\n',
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def diagnostic() -> Callable[..., Diagnostic]:
    """Return the :func:`make_diagnostic` factory."""

    return make_diagnostic


@pytest.fixture
def fake_checker() -> Callable[..., FakeChecker]:
    """Return a factory for :class:`FakeChecker` instances."""

    def _build(factory: Callable[[Sequence[Path]], list[Diagnostic]] | None = None) -> FakeChecker:
        return FakeChecker(factory=factory) if factory is not None else FakeChecker()

    return _build
