# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Task settings read from ``[tool.stylegate]`` and the host built on them."""

from __future__ import annotations

import codecs
import locale
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import SettingsError
from .interfaces import PipelineLogger

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "stylegate"

DEFAULT_CONFIG_NAME: Final[str] = "stylegate-config.toml"
DEFAULT_TARGET: Final[str] = "build/stylegate-result.xml"


def default_encoding() -> str:
    """Return the platform's preferred text codec."""

    return locale.getpreferredencoding(False) or "utf-8"


class StylegateSettings(BaseModel):
    """Settings consumed by the lint task and the config scaffolder."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    config: Path = Path(DEFAULT_CONFIG_NAME)
    sources: tuple[Path, ...] = (Path("src"),)
    target: Path = Path(DEFAULT_TARGET)
    fail_on_error: bool = True
    encoding: str = Field(default_factory=default_encoding)

    @field_validator("sources", mode="before")
    @classmethod
    def _coerce_sources(cls, value: object) -> object:
        """Accept a single source directory as well as a list."""

        if isinstance(value, (str, Path)):
            return (value,)
        return value

    @field_validator("encoding")
    @classmethod
    def _require_byte_codec(cls, value: str) -> str:
        """Reject unknown codecs and the ElementTree-only ``unicode`` pseudo-codec."""

        if value.strip().lower() == "unicode":
            raise ValueError("encoding must name a byte codec, not 'unicode'")
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{value}'") from exc
        return value

    def resolve(self, root: Path) -> StylegateSettings:
        """Return a copy whose relative paths are anchored at ``root``.

        Args:
            root: Project root the settings were loaded from.

        Returns:
            StylegateSettings: Settings with absolute paths.
        """

        return self.model_copy(
            update={
                "config": _anchor(self.config, root),
                "sources": tuple(_anchor(path, root) for path in self.sources),
                "target": _anchor(self.target, root),
            },
        )


def _anchor(path: Path, root: Path) -> Path:
    return path if path.is_absolute() else root / path


def read_pyproject_section(root: Path) -> Mapping[str, Any]:
    """Return the ``[tool.stylegate]`` table of ``root/pyproject.toml``.

    A missing file or section yields an empty mapping.

    Raises:
        SettingsError: If the file exists but is not valid TOML.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return {}
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"unable to read {pyproject}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise SettingsError(f"[tool.{PYPROJECT_SECTION_KEY}] in {pyproject} must be a table")
    return {key.replace("-", "_"): value for key, value in section.items()}


def load_settings(root: Path, overrides: Mapping[str, Any] | None = None) -> StylegateSettings:
    """Load settings for ``root`` layering CLI ``overrides`` over ``pyproject.toml``.

    Args:
        root: Project root directory.
        overrides: Values supplied on the command line; ``None`` entries are ignored.

    Returns:
        StylegateSettings: Validated settings with paths anchored at ``root``.

    Raises:
        SettingsError: If the merged settings fail validation.
    """

    merged: dict[str, Any] = dict(read_pyproject_section(root))
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    try:
        settings = StylegateSettings.model_validate(merged)
    except ValidationError as exc:
        raise SettingsError(f"invalid stylegate settings: {exc}") from exc
    return settings.resolve(root)


@dataclass(slots=True)
class ProjectTaskHost:
    """Task host backed by :class:`StylegateSettings`.

    Attributes:
        settings: Resolved settings for the invocation.
        logger: Logger user-facing messages are written to.
    """

    settings: StylegateSettings
    logger: PipelineLogger

    def read_setting(self, key: str) -> object:
        """Return the setting stored under ``key``.

        Raises:
            KeyError: If ``key`` is not a known setting.
        """

        if key not in StylegateSettings.model_fields:
            raise KeyError(key)
        return getattr(self.settings, key)


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_TARGET",
    "ProjectTaskHost",
    "StylegateSettings",
    "default_encoding",
    "load_settings",
    "read_pyproject_section",
]
