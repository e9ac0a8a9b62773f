# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide whether a finished lint run fails the build."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import LintErrorsFound, LintGateFailure, LintWarningsFound
from .interfaces import PipelineLogger
from .models import AggregateResult, RunOptions

ERRORS_MESSAGE: Final[str] = "build has errors"
WARNINGS_MESSAGE: Final[str] = "build has warnings"


class GateOutcome(str, Enum):
    """Enumerate the conditions the gate can raise."""

    PASSED = "passed"
    ERRORS = "errors"
    WARNINGS = "warnings"


@dataclass(frozen=True, slots=True)
class GateDecision:
    """Outcome of :func:`evaluate_gate`.

    Attributes:
        outcome: Condition raised by the run.
        fatal: ``True`` when the condition must terminate the invocation.
        message: User-facing description, empty when the run passed.
    """

    outcome: GateOutcome
    fatal: bool = False
    message: str = ""

    @property
    def passed(self) -> bool:
        """Return ``True`` when no condition was raised."""

        return self.outcome is GateOutcome.PASSED


PASSED: Final[GateDecision] = GateDecision(outcome=GateOutcome.PASSED)


def evaluate_gate(result: AggregateResult, options: RunOptions) -> GateDecision:
    """Return the gate decision for ``result`` under ``options``.

    Errors are checked first; warnings are only considered when there are no
    errors and ``fail_on_warning`` is set. Both conditions are fatal exactly
    when ``fail_on_error`` is set.

    Args:
        result: Aggregated counts for the run.
        options: Invocation flags.

    Returns:
        GateDecision: Condition raised, if any, and whether it is fatal.
    """

    if result.errors > 0:
        return GateDecision(GateOutcome.ERRORS, fatal=options.fail_on_error, message=ERRORS_MESSAGE)
    if options.fail_on_warning and result.warnings > 0:
        return GateDecision(GateOutcome.WARNINGS, fatal=options.fail_on_error, message=WARNINGS_MESSAGE)
    return PASSED


_FAILURES: Final[dict[GateOutcome, type[LintGateFailure]]] = {
    GateOutcome.ERRORS: LintErrorsFound,
    GateOutcome.WARNINGS: LintWarningsFound,
}


def enforce_gate(decision: GateDecision, logger: PipelineLogger) -> None:
    """Act on ``decision``: raise when fatal, otherwise log at error level.

    Args:
        decision: Result of :func:`evaluate_gate`.
        logger: Logger receiving non-fatal conditions.

    Raises:
        LintErrorsFound: If errors were found and the decision is fatal.
        LintWarningsFound: If warnings were found and the decision is fatal.
    """

    if decision.passed:
        return
    if decision.fatal:
        raise _FAILURES[decision.outcome](decision.message)
    logger.fail(decision.message)


__all__ = [
    "ERRORS_MESSAGE",
    "GateDecision",
    "GateOutcome",
    "PASSED",
    "WARNINGS_MESSAGE",
    "enforce_gate",
    "evaluate_gate",
]
