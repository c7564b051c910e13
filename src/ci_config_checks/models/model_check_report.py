# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Aggregate report of a check run."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ci_config_checks.enums import EnumCheckOutcome
from ci_config_checks.models.model_check_result import ModelCheckResult

# Criterion key used when grouping results that carry no criterion label
UNLABELLED_CRITERION = "unlabelled"


class ModelCheckReport(BaseModel):
    """Ordered results of one run across all targets."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    results: tuple[ModelCheckResult, ...] = Field(
        default=(),
        description="Check results in declaration order",
    )

    @property
    def passed(self) -> bool:
        """True if every expectation passed."""
        return all(r.passed for r in self.results)

    @property
    def total(self) -> int:
        """Number of expectations evaluated."""
        return len(self.results)

    @property
    def failures(self) -> list[ModelCheckResult]:
        """Results that did not pass, in declaration order."""
        return [r for r in self.results if not r.passed]

    def count_by_outcome(self) -> dict[EnumCheckOutcome, int]:
        """Number of results per outcome; every outcome is present."""
        counts = {outcome: 0 for outcome in EnumCheckOutcome}
        for result in self.results:
            counts[result.outcome] += 1
        return counts

    def results_by_criterion(self) -> dict[str, list[ModelCheckResult]]:
        """Group results by acceptance criterion, in first-seen order."""
        grouped: dict[str, list[ModelCheckResult]] = {}
        for result in self.results:
            key = result.criterion or UNLABELLED_CRITERION
            grouped.setdefault(key, []).append(result)
        return grouped

    def to_summary_dict(self) -> dict[str, object]:
        """JSON-serializable report including the aggregate status."""
        return {
            "passed": self.passed,
            "summary": {
                "checks_total": self.total,
                "checks_failed": len(self.failures),
                "by_outcome": {
                    outcome.value: count
                    for outcome, count in self.count_by_outcome().items()
                },
            },
            "results": [r.model_dump(mode="json") for r in self.results],
        }

    def __str__(self) -> str:
        """Format result summary as human-readable string."""
        status = "PASS" if self.passed else "FAIL"
        return f"CI Config Checks: {status} ({self.total} checks, {len(self.failures)} failed)"


__all__ = ["ModelCheckReport", "UNLABELLED_CRITERION"]
