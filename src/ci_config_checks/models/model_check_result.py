# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Result of evaluating one expectation against one target file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ci_config_checks.enums import EnumCheckOutcome, EnumExpectationKind


class ModelCheckResult(BaseModel):
    """Pass/fail result for a single expectation."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    target_path: str = Field(description="Target path relative to project root")
    kind: EnumExpectationKind = Field(description="Kind of expectation checked")
    outcome: EnumCheckOutcome = Field(description="Outcome of the check")
    description: str = Field(description="Human-readable expectation description")
    criterion: str | None = Field(
        default=None,
        description="Acceptance criterion the expectation maps to",
    )
    detail: str = Field(default="", description="Why the check failed, if it did")

    @property
    def passed(self) -> bool:
        """True if the expectation holds."""
        return self.outcome == EnumCheckOutcome.PASSED

    def __str__(self) -> str:
        """Format result as a single report line."""
        status = "PASS" if self.passed else "FAIL"
        criterion = f"[{self.criterion}] " if self.criterion else ""
        msg = f"{status} {criterion}{self.target_path}: {self.description}"
        if not self.passed:
            msg += f" ({self.outcome.value}"
            msg += f": {self.detail})" if self.detail else ")"
        return msg


__all__ = ["ModelCheckResult"]
