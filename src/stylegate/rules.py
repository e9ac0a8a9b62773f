# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule configuration models, lookup and loading."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterable, Sequence
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigNotFoundError, ConfigurationInvalidError
from .models import Diagnostic
from .severity import Severity, lookup_severity

EngineFormat = Literal["ruff", "pylint", "flake8", "checkstyle"]

DEFAULT_INCLUDE: Final[tuple[str, ...]] = ("*.py",)


class EngineConfig(BaseModel):
    """Describe how the external engine is launched and how its output is read."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: tuple[str, ...] = ("ruff", "check", "--output-format=json", "--exit-zero")
    format: EngineFormat = "ruff"
    include: tuple[str, ...] = DEFAULT_INCLUDE
    exclude: tuple[str, ...] = ()
    pass_files: bool = True
    success_codes: tuple[int, ...] = (0, 1)

    @field_validator("command")
    @classmethod
    def _require_executable(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Reject an empty engine command."""

        if not value or not value[0].strip():
            raise ValueError("engine command must name an executable")
        return value

    @field_validator("success_codes")
    @classmethod
    def _require_success_codes(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        """Reject an empty set of accepted exit statuses."""

        if not value:
            raise ValueError("success_codes must list at least one exit status")
        return value


class CheckOverride(BaseModel):
    """Enable, disable or re-level the diagnostics of one check."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    level: Severity | None = None
    enabled: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> object:
        """Accept the same severity vocabulary engines report."""

        if isinstance(value, str):
            parsed = lookup_severity(value)
            if parsed is None:
                raise ValueError(f"unknown level '{value}'")
            return parsed
        return value

    def matches(self, code: str | None) -> bool:
        """Return whether the glob ``id`` matches the diagnostic ``code``."""

        return code is not None and fnmatchcase(code, self.id)


class RuleConfiguration(BaseModel):
    """Parsed rule configuration handed to the checker for one invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "stylegate"
    engine: EngineConfig = Field(default_factory=EngineConfig)
    checks: tuple[CheckOverride, ...] = ()

    def find_override(self, code: str | None) -> CheckOverride | None:
        """Return the last override matching ``code``.

        Later entries win so a broad glob can be refined further down the file.
        """

        match: CheckOverride | None = None
        for check in self.checks:
            if check.matches(code):
                match = check
        return match

    def apply_overrides(self, diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
        """Drop disabled checks and re-level diagnostics per ``[[checks]]``.

        Args:
            diagnostics: Diagnostics in the order produced by the engine.

        Returns:
            list[Diagnostic]: New diagnostics honouring the overrides.
        """

        adjusted: list[Diagnostic] = []
        for diagnostic in diagnostics:
            override = self.find_override(diagnostic.code)
            if override is None:
                adjusted.append(diagnostic)
                continue
            if not override.enabled:
                continue
            if override.level is not None and override.level is not diagnostic.severity:
                diagnostic = diagnostic.model_copy(update={"severity": override.level})
            adjusted.append(diagnostic)
        return adjusted


def locate_config(path: Path) -> Path:
    """Return ``path`` resolved when it is an existing, readable file.

    Args:
        path: Candidate rule configuration path.

    Returns:
        Path: Resolved configuration path.

    Raises:
        ConfigNotFoundError: If ``path`` is missing, not a file, or unreadable.
    """

    if not path.is_file() or not os.access(path, os.R_OK):
        raise ConfigNotFoundError(path)
    return path.resolve()


def load_rule_configuration(path: Path) -> RuleConfiguration:
    """Parse the TOML rule configuration stored at ``path``.

    Args:
        path: Location of the rule configuration file.

    Returns:
        RuleConfiguration: Validated configuration.

    Raises:
        ConfigurationInvalidError: If the file cannot be read, parsed or validated.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationInvalidError(path, str(exc)) from exc
    try:
        return RuleConfiguration.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationInvalidError(path, _summarise_validation(exc)) from exc


def _summarise_validation(exc: ValidationError) -> str:
    messages: Sequence[str] = [
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
    ]
    return "; ".join(messages)


__all__ = [
    "CheckOverride",
    "EngineConfig",
    "EngineFormat",
    "RuleConfiguration",
    "load_rule_configuration",
    "locate_config",
]
