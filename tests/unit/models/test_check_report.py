# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for ModelCheckReport aggregation."""

from __future__ import annotations

import json

from ci_config_checks.enums import EnumCheckOutcome, EnumExpectationKind
from ci_config_checks.models import UNLABELLED_CRITERION, ModelCheckReport, ModelCheckResult


def _result(outcome: EnumCheckOutcome, criterion: str | None = None) -> ModelCheckResult:
    return ModelCheckResult(
        target_path="ci.yml",
        kind=EnumExpectationKind.CONTAINS,
        outcome=outcome,
        description=f"{outcome.value} check",
        criterion=criterion,
    )


class TestModelCheckReport:
    def test_empty_report_passes(self) -> None:
        report = ModelCheckReport()
        assert report.passed
        assert report.total == 0
        assert str(report) == "CI Config Checks: PASS (0 checks, 0 failed)"

    def test_any_failure_fails(self) -> None:
        report = ModelCheckReport(
            results=(
                _result(EnumCheckOutcome.PASSED),
                _result(EnumCheckOutcome.EXPECTATION_NOT_MET),
            )
        )
        assert not report.passed
        assert len(report.failures) == 1
        assert str(report) == "CI Config Checks: FAIL (2 checks, 1 failed)"

    def test_count_by_outcome_includes_all_outcomes(self) -> None:
        report = ModelCheckReport(
            results=(
                _result(EnumCheckOutcome.PASSED),
                _result(EnumCheckOutcome.FILE_MISSING),
                _result(EnumCheckOutcome.FILE_MISSING),
            )
        )
        assert report.count_by_outcome() == {
            EnumCheckOutcome.PASSED: 1,
            EnumCheckOutcome.FILE_MISSING: 2,
            EnumCheckOutcome.INVALID_STRUCTURE: 0,
            EnumCheckOutcome.EXPECTATION_NOT_MET: 0,
        }

    def test_results_by_criterion(self) -> None:
        report = ModelCheckReport(
            results=(
                _result(EnumCheckOutcome.PASSED, "AC-1.2.2"),
                _result(EnumCheckOutcome.PASSED),
                _result(EnumCheckOutcome.FILE_MISSING, "AC-1.2.1"),
                _result(EnumCheckOutcome.PASSED, "AC-1.2.2"),
            )
        )
        grouped = report.results_by_criterion()
        assert list(grouped) == ["AC-1.2.2", UNLABELLED_CRITERION, "AC-1.2.1"]
        assert len(grouped["AC-1.2.2"]) == 2

    def test_summary_dict_is_json_serializable(self) -> None:
        report = ModelCheckReport(
            results=(
                _result(EnumCheckOutcome.PASSED, "AC-1.2.1"),
                _result(EnumCheckOutcome.INVALID_STRUCTURE, "AC-1.2.1"),
            )
        )
        payload = json.loads(json.dumps(report.to_summary_dict()))
        assert payload["passed"] is False
        assert payload["summary"]["checks_total"] == 2
        assert payload["summary"]["checks_failed"] == 1
        assert payload["summary"]["by_outcome"]["invalid_structure"] == 1
        assert payload["results"][1]["outcome"] == "invalid_structure"
        assert payload["results"][1]["kind"] == "contains"
