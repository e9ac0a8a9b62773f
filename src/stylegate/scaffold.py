# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generate a default rule configuration from the template bundled with stylegate."""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Final, TextIO

from .interfaces import PipelineLogger

PROMPT_TEMPLATE: Final[str] = "The file {path} exists, do you want to overwrite it? (y/n): "


@dataclass(frozen=True, slots=True)
class ResourceRef:
    """Locate a file shipped inside an importable package.

    Attributes:
        package: Importable package that owns the resource.
        name: Slash-separated path of the resource inside ``package``.
    """

    package: str
    name: str


DEFAULT_TEMPLATE: Final[ResourceRef] = ResourceRef(package="stylegate", name="data/default-config.toml")


class ConfirmationPolicy(str, Enum):
    """How an existing destination file is treated."""

    ASK = "ask"
    OVERWRITE = "overwrite"
    KEEP = "keep"


@dataclass(frozen=True, slots=True)
class ScaffoldRequest:
    """Destination and overwrite policy for one scaffold invocation."""

    destination: Path
    policy: ConfirmationPolicy = ConfirmationPolicy.ASK


@dataclass(slots=True)
class ConfirmationPrompt:
    """Ask a yes/no question until the operator answers it.

    The prompt is re-displayed for any answer whose first non-blank character
    is neither ``y`` nor ``n``. End of input counts as "no".

    Attributes:
        input_stream: Stream answers are read from.
        output_stream: Stream the question is written to.
    """

    input_stream: TextIO = field(default_factory=lambda: sys.stdin)
    output_stream: TextIO = field(default_factory=lambda: sys.stdout)

    def ask(self, question: str) -> bool:
        """Return ``True`` for a "yes" answer and ``False`` for "no".

        Args:
            question: Text written before each read.

        Returns:
            bool: Operator decision.
        """

        while True:
            self.output_stream.write(question)
            self.output_stream.flush()
            answer = self.input_stream.readline()
            if not answer:
                return False
            head = answer.strip()[:1].lower()
            if head == "y":
                return True
            if head == "n":
                return False

    def confirm_overwrite(self, path: Path) -> bool:
        """Ask whether the existing file at ``path`` may be replaced."""

        return self.ask(PROMPT_TEMPLATE.format(path=path))


def resolve_resource(ref: ResourceRef) -> Traversable | None:
    """Return the bundled resource, or ``None`` when it is not packaged.

    Args:
        ref: Package and resource name to look up.

    Returns:
        Traversable | None: Readable resource handle, or ``None``.
    """

    try:
        resource = resources.files(ref.package).joinpath(ref.name)
    except (ModuleNotFoundError, TypeError):
        return None
    return resource if resource.is_file() else None


def safe_to_create(destination: Path, policy: ConfirmationPolicy, prompt: ConfirmationPrompt) -> bool:
    """Return whether ``destination`` may be written under ``policy``."""

    if not destination.exists():
        return True
    if policy is ConfirmationPolicy.OVERWRITE:
        return True
    if policy is ConfirmationPolicy.KEEP:
        return False
    return prompt.confirm_overwrite(destination)


def scaffold(
    request: ScaffoldRequest,
    *,
    resource: ResourceRef = DEFAULT_TEMPLATE,
    prompt: ConfirmationPrompt | None = None,
    logger: PipelineLogger | None = None,
) -> Path | None:
    """Copy the bundled template to ``request.destination``.

    An unresolvable resource and a declined overwrite are both silent no-ops:
    nothing is written, nothing is logged and ``None`` is returned.

    Args:
        request: Destination path and overwrite policy.
        resource: Bundled template to copy.
        prompt: Confirmation prompt used when the destination exists.
        logger: Logger receiving the ``created`` message.

    Returns:
        Path | None: The written path, or ``None`` when nothing was written.
    """

    source = resolve_resource(resource)
    if source is None:
        return None
    destination = request.destination
    if not safe_to_create(destination, request.policy, prompt or ConfirmationPrompt()):
        return None
    destination.parent.mkdir(parents=True, exist_ok=True)
    with source.open("rb") as reader, destination.open("wb") as writer:
        shutil.copyfileobj(reader, writer)
    if logger is not None:
        logger.ok(f"created: {destination}")
    return destination


__all__ = [
    "ConfirmationPolicy",
    "ConfirmationPrompt",
    "DEFAULT_TEMPLATE",
    "PROMPT_TEMPLATE",
    "ResourceRef",
    "ScaffoldRequest",
    "resolve_resource",
    "safe_to_create",
    "scaffold",
]
