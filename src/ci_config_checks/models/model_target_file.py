# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Target file model: a relative path and the expectations declared on it."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ci_config_checks.models.model_expectation import ModelExpectation


class ModelTargetFile(BaseModel):
    """A text artifact and the ordered expectations checked against it.

    Attributes:
        path: Path of the file relative to the project root.
        expectations: Expectations in declaration order. Results are
            reported in the same order.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    path: str = Field(min_length=1, description="Path relative to project root")
    expectations: tuple[ModelExpectation, ...] = Field(
        default=(),
        description="Expectations in declaration order",
    )

    def resolve(self, root: Path) -> Path:
        """Return the target path resolved against ``root``."""
        return root / self.path


__all__ = ["ModelTargetFile"]
