# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the failure gate decision and its enforcement."""

from __future__ import annotations

import pytest

from stylegate.errors import LintErrorsFound, LintWarningsFound
from stylegate.gate import (
    ERRORS_MESSAGE,
    PASSED,
    WARNINGS_MESSAGE,
    GateDecision,
    GateOutcome,
    enforce_gate,
    evaluate_gate,
)
from stylegate.models import AggregateResult, RunOptions


def _result(errors: int = 0, warnings: int = 0) -> AggregateResult:
    return AggregateResult(files=1, errors=errors, warnings=warnings)


def test_errors_short_circuit_warning_evaluation() -> None:
    decision = evaluate_gate(_result(errors=2, warnings=1), RunOptions(fail_on_error=True))
    assert decision == GateDecision(GateOutcome.ERRORS, fatal=True, message=ERRORS_MESSAGE)


def test_errors_win_even_when_warnings_are_requested() -> None:
    decision = evaluate_gate(_result(errors=1, warnings=5), RunOptions(fail_on_warning=True))
    assert decision.outcome is GateOutcome.ERRORS


def test_warnings_fatal_when_requested() -> None:
    decision = evaluate_gate(_result(warnings=3), RunOptions(fail_on_warning=True, fail_on_error=True))
    assert decision == GateDecision(GateOutcome.WARNINGS, fatal=True, message=WARNINGS_MESSAGE)


def test_warnings_ignored_without_flag() -> None:
    assert evaluate_gate(_result(warnings=3), RunOptions()) is PASSED


def test_warning_fatality_follows_fail_on_error() -> None:
    decision = evaluate_gate(_result(warnings=3), RunOptions(fail_on_warning=True, fail_on_error=False))
    assert decision.outcome is GateOutcome.WARNINGS
    assert decision.fatal is False


@pytest.mark.parametrize("fail_on_warning", [True, False])
@pytest.mark.parametrize("fail_on_error", [True, False])
def test_clean_result_never_trips(fail_on_warning: bool, fail_on_error: bool) -> None:
    options = RunOptions(fail_on_warning=fail_on_warning, fail_on_error=fail_on_error)
    assert evaluate_gate(_result(), options).passed


def test_enforce_raises_for_fatal_decisions(recording_logger) -> None:
    with pytest.raises(LintErrorsFound, match=ERRORS_MESSAGE):
        enforce_gate(GateDecision(GateOutcome.ERRORS, fatal=True, message=ERRORS_MESSAGE), recording_logger)
    with pytest.raises(LintWarningsFound, match=WARNINGS_MESSAGE):
        enforce_gate(GateDecision(GateOutcome.WARNINGS, fatal=True, message=WARNINGS_MESSAGE), recording_logger)
    assert recording_logger.records == []


def test_enforce_logs_non_fatal_decisions(recording_logger) -> None:
    enforce_gate(GateDecision(GateOutcome.ERRORS, fatal=False, message=ERRORS_MESSAGE), recording_logger)
    enforce_gate(PASSED, recording_logger)
    assert recording_logger.records == [("fail", ERRORS_MESSAGE)]
