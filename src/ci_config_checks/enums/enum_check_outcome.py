# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Outcome classification for a single expectation check."""

from __future__ import annotations

from enum import Enum


class EnumCheckOutcome(str, Enum):
    """Outcome of evaluating one expectation against a target file.

    Values:
        PASSED: The expectation holds.
        FILE_MISSING: The target file does not exist at the expected path.
        INVALID_STRUCTURE: The target file is not valid YAML (or is empty).
        EXPECTATION_NOT_MET: The file was read but the substring, pattern
            or ordering is absent or violated.
    """

    PASSED = "passed"
    """The expectation holds."""

    FILE_MISSING = "file_missing"
    """Target file does not exist."""

    INVALID_STRUCTURE = "invalid_structure"
    """Target file does not parse as YAML."""

    EXPECTATION_NOT_MET = "expectation_not_met"
    """Required substring, pattern or ordering is absent or violated."""

    def is_failure(self) -> bool:
        """Return True for every outcome other than PASSED."""
        return self != EnumCheckOutcome.PASSED

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumCheckOutcome"]
