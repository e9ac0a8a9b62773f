# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of source files handed to the checker."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Final

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        ".hg",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        ".tox",
        ".venv",
        "__pycache__",
        "build",
        "dist",
        "node_modules",
        "venv",
    },
)


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Parameters required to walk one source root."""

    base: Path
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    follow_symlinks: bool


class FilesystemDiscovery:
    """Traverse source roots collecting files matching include globs."""

    def __init__(self, *, follow_symlinks: bool = False) -> None:
        """Create a discovery strategy optionally following symlinks.

        Args:
            follow_symlinks: When ``True`` walk directories pointed to by
                symlinks instead of skipping them.
        """

        self.follow_symlinks = follow_symlinks

    def discover(
        self,
        roots: Sequence[Path],
        *,
        include: Iterable[str],
        exclude: Iterable[str] = (),
    ) -> list[Path]:
        """Return files under ``roots`` in a stable, sorted order.

        Args:
            roots: Source directories (or individual files) to scan.
            include: Glob patterns matched against file names or relative paths.
            exclude: Glob patterns whose matches are skipped.

        Returns:
            list[Path]: Resolved, de-duplicated file paths.
        """

        include_patterns = tuple(include)
        exclude_patterns = tuple(exclude)
        seen: set[Path] = set()
        collected: list[Path] = []
        for root in roots:
            if root.is_file():
                candidates: Iterable[Path] = [root.resolve()]
            elif root.is_dir():
                context = WalkContext(
                    base=root.resolve(),
                    include=include_patterns,
                    exclude=exclude_patterns,
                    follow_symlinks=self.follow_symlinks,
                )
                candidates = self._walk(context)
            else:
                continue
            for candidate in candidates:
                if candidate not in seen:
                    seen.add(candidate)
                    collected.append(candidate)
        return collected

    def _walk(self, context: WalkContext) -> Iterator[Path]:
        """Yield files beneath ``context.base`` honouring the filters."""

        for current, dirnames, filenames in os.walk(context.base, followlinks=context.follow_symlinks):
            current_path = Path(current)
            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in ALWAYS_EXCLUDE_DIRS
                and not _matches_any(_relative(current_path / name, context.base), context.exclude)
            )
            for filename in sorted(filenames):
                path = current_path / filename
                relative = _relative(path, context.base)
                if not _matches_any(filename, context.include) and not _matches_any(relative, context.include):
                    continue
                if _matches_any(filename, context.exclude) or _matches_any(relative, context.exclude):
                    continue
                yield path


def _relative(path: Path, base: Path) -> str:
    return path.relative_to(base).as_posix()


def _matches_any(value: str, patterns: Sequence[str]) -> bool:
    return any(fnmatchcase(value, pattern) for pattern in patterns)


__all__ = ["ALWAYS_EXCLUDE_DIRS", "FilesystemDiscovery", "WalkContext"]
