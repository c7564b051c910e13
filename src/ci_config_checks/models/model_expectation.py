# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Declarative expectation models.

An expectation is a single condition checked against the text of a target
file. Four kinds exist, discriminated by the ``kind`` field:

- ``contains``: literal, case-sensitive substring containment
- ``pattern``: unanchored regular-expression search over the full text
- ``ordered_keywords``: the first line containing each keyword appears in
  strictly increasing order
- ``valid_yaml``: the text is non-empty and parses to a non-null document

Declarations are validated on construction so that a broken checklist fails
before any file is read.
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ci_config_checks.enums import EnumExpectationKind


class ModelExpectationBase(BaseModel):
    """Fields shared by every expectation kind."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    criterion: str | None = Field(
        default=None,
        description="Acceptance criterion label, e.g. 'AC-1.2.1'",
    )
    description: str = Field(
        default="",
        description="Human-readable description used in reports",
    )

    @property
    def expectation_kind(self) -> EnumExpectationKind:
        """Kind of this expectation as an enum member."""
        return EnumExpectationKind(getattr(self, "kind"))

    def default_description(self) -> str:
        """Description derived from the expectation parameters."""
        return str(self.expectation_kind)

    @property
    def label(self) -> str:
        """Description to report, falling back to the derived one."""
        return self.description or self.default_description()


class ModelContainsExpectation(ModelExpectationBase):
    """Passes if the file text contains ``substring`` verbatim."""

    kind: Literal["contains"] = "contains"
    substring: str = Field(min_length=1, description="Literal substring")

    def default_description(self) -> str:
        return f"contains {self.substring!r}"


class ModelPatternExpectation(ModelExpectationBase):
    """Passes if ``pattern`` matches anywhere in the file text."""

    kind: Literal["pattern"] = "pattern"
    pattern: str = Field(min_length=1, description="Regular expression")

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return value

    def compiled(self) -> re.Pattern[str]:
        """Return the compiled pattern (cached by the ``re`` module)."""
        return re.compile(self.pattern)

    def default_description(self) -> str:
        return f"matches pattern {self.pattern!r}"


class ModelOrderedKeywordsExpectation(ModelExpectationBase):
    """Passes if the keywords first appear on strictly increasing lines.

    Only the first line containing each keyword is considered. A keyword that
    also occurs earlier for unrelated reasons (a comment, a longer keyword
    containing it) shifts its index and can change the result.
    """

    kind: Literal["ordered_keywords"] = "ordered_keywords"
    keywords: tuple[str, ...] = Field(
        min_length=1,
        description="Keywords in their required relative order",
    )

    @field_validator("keywords")
    @classmethod
    def _keywords_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for keyword in value:
            if not keyword:
                raise ValueError("ordered keywords must be non-empty strings")
        return value

    def default_description(self) -> str:
        return "keywords in order: " + " < ".join(self.keywords)


class ModelValidYamlExpectation(ModelExpectationBase):
    """Passes if the file text is non-empty and parses to a non-null value."""

    kind: Literal["valid_yaml"] = "valid_yaml"

    def default_description(self) -> str:
        return "is valid YAML"


ModelExpectation = Annotated[
    ModelContainsExpectation
    | ModelPatternExpectation
    | ModelOrderedKeywordsExpectation
    | ModelValidYamlExpectation,
    Field(discriminator="kind"),
]


__all__ = [
    "ModelContainsExpectation",
    "ModelExpectation",
    "ModelExpectationBase",
    "ModelOrderedKeywordsExpectation",
    "ModelPatternExpectation",
    "ModelValidYamlExpectation",
]
