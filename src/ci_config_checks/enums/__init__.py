# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Enumerations for CI configuration checks.

Exports:
    EnumCheckOutcome: Per-expectation outcome (PASSED, FILE_MISSING, INVALID_STRUCTURE, EXPECTATION_NOT_MET)
    EnumExpectationKind: Expectation discriminator (CONTAINS, PATTERN, ORDERED_KEYWORDS, VALID_YAML)
"""

from ci_config_checks.enums.enum_check_outcome import EnumCheckOutcome
from ci_config_checks.enums.enum_expectation_kind import EnumExpectationKind

__all__: list[str] = [
    "EnumCheckOutcome",
    "EnumExpectationKind",
]
