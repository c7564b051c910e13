# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Expectation kinds supported by the file assertion checker."""

from __future__ import annotations

from enum import Enum


class EnumExpectationKind(str, Enum):
    """Discriminator for declarative expectations.

    Values:
        CONTAINS: Literal, case-sensitive substring containment.
        PATTERN: Unanchored regular-expression search.
        ORDERED_KEYWORDS: First-occurrence line indices strictly increase.
        VALID_YAML: Text is non-empty and parses to a non-null YAML document.
    """

    CONTAINS = "contains"
    PATTERN = "pattern"
    ORDERED_KEYWORDS = "ordered_keywords"
    VALID_YAML = "valid_yaml"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumExpectationKind"]
