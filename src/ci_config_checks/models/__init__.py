# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Models for CI configuration checks."""

from ci_config_checks.models.model_check_report import (
    UNLABELLED_CRITERION,
    ModelCheckReport,
)
from ci_config_checks.models.model_check_result import ModelCheckResult
from ci_config_checks.models.model_checker_config import ModelCheckerConfig
from ci_config_checks.models.model_expectation import (
    ModelContainsExpectation,
    ModelExpectation,
    ModelExpectationBase,
    ModelOrderedKeywordsExpectation,
    ModelPatternExpectation,
    ModelValidYamlExpectation,
)
from ci_config_checks.models.model_target_file import ModelTargetFile

__all__: list[str] = [
    "UNLABELLED_CRITERION",
    "ModelCheckReport",
    "ModelCheckResult",
    "ModelCheckerConfig",
    "ModelContainsExpectation",
    "ModelExpectation",
    "ModelExpectationBase",
    "ModelOrderedKeywordsExpectation",
    "ModelPatternExpectation",
    "ModelTargetFile",
    "ModelValidYamlExpectation",
]
