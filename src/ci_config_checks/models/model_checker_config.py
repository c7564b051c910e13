# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Configuration model for a check run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

__all__: list[str] = [
    "ENV_MANIFEST",
    "ENV_ROOT",
    "ModelCheckerConfig",
]

ENV_ROOT: Final[str] = "CI_CONFIG_CHECKS_ROOT"
ENV_MANIFEST: Final[str] = "CI_CONFIG_CHECKS_MANIFEST"


@dataclass(frozen=True)
class ModelCheckerConfig:
    """Configuration for a check run.

    Attributes:
        root: Project root that target paths are resolved against.
        manifest_path: Optional checklist manifest. When None the built-in
            checklist is used.
    """

    root: Path = Path(".")
    manifest_path: Path | None = None

    @classmethod
    def from_env(
        cls,
        *,
        root: str | Path | None = None,
        manifest_path: str | Path | None = None,
    ) -> ModelCheckerConfig:
        """Create config from explicit values, then environment variables.

        Reads CI_CONFIG_CHECKS_ROOT and CI_CONFIG_CHECKS_MANIFEST for any
        value not given explicitly. Empty variables count as unset.

        Args:
            root: Project root override.
            manifest_path: Checklist manifest override.

        Returns:
            ModelCheckerConfig populated from arguments and environment.
        """
        if root is None:
            root = os.environ.get(ENV_ROOT) or "."
        if manifest_path is None:
            manifest_path = os.environ.get(ENV_MANIFEST) or None
        return cls(
            root=Path(root),
            manifest_path=Path(manifest_path) if manifest_path else None,
        )
