# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Error classes for CI configuration checks."""

from ci_config_checks.errors.error_config_check import (
    ChecklistConfigurationError,
    ConfigCheckError,
    TargetFileReadError,
    YamlParseError,
)

__all__: list[str] = [
    "ChecklistConfigurationError",
    "ConfigCheckError",
    "TargetFileReadError",
    "YamlParseError",
]
