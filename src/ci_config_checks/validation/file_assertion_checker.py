# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
File Assertion Checker.

Evaluates declarative expectations against text files:
- Missing files are reported per expectation as ``file_missing``
- YAML syntax validity is reported as ``invalid_structure``
- Substring, pattern and line-order violations as ``expectation_not_met``

Each target file is read once per run; targets are independent of each other.

Usage:
    from ci_config_checks.validation.file_assertion_checker import (
        FileAssertionChecker,
    )
    from ci_config_checks.validation.default_checklist import (
        build_default_checklist,
    )

    checker = FileAssertionChecker(root=Path("."))
    report = checker.run(build_default_checklist())

Exit Codes (for CI):
    0: All expectations hold
    1: At least one expectation failed
    2: Runtime error (unreadable target, invalid checklist)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ci_config_checks.enums import EnumCheckOutcome
from ci_config_checks.errors import TargetFileReadError, YamlParseError
from ci_config_checks.models import (
    ModelCheckReport,
    ModelCheckResult,
    ModelContainsExpectation,
    ModelExpectationBase,
    ModelOrderedKeywordsExpectation,
    ModelPatternExpectation,
    ModelTargetFile,
    ModelValidYamlExpectation,
)
from ci_config_checks.validation.text_checks import (
    NOT_FOUND,
    check_contains,
    check_order,
    check_pattern,
    file_exists,
    find_first_line_index,
    parse_yaml,
)

# Module-level logger
logger = logging.getLogger(__name__)

MISSING_FILE_DETAIL = "file does not exist"


class FileAssertionChecker:
    """
    Evaluates target files against their declared expectations.

    Designed for CI integration: a run produces one result per expectation
    in declaration order, and the report's ``passed`` flag drives the exit
    status.
    """

    def __init__(self, *, root: Path | str = "."):
        """
        Initialize the checker.

        Args:
            root: Project root that target paths are resolved against.
        """
        self.root = Path(root)

    def run(self, targets: Iterable[ModelTargetFile]) -> ModelCheckReport:
        """
        Check every target and aggregate the results.

        Args:
            targets: Targets in the order they should be reported.

        Returns:
            ModelCheckReport with all results in declaration order.

        Raises:
            TargetFileReadError: If an existing target cannot be read.
        """
        results: list[ModelCheckResult] = []
        for target in targets:
            results.extend(self.check_target(target))

        report = ModelCheckReport(results=tuple(results))
        logger.info("%s", report)
        return report

    def check_target(self, target: ModelTargetFile) -> list[ModelCheckResult]:
        """
        Check one target file.

        Args:
            target: Target and its expectations.

        Returns:
            One ModelCheckResult per expectation, in declaration order.

        Raises:
            TargetFileReadError: If the file exists but cannot be read.
        """
        path = target.resolve(self.root)

        if not file_exists(path):
            logger.warning("Target file not found: %s", path)
            return [
                self._result(
                    target,
                    expectation,
                    EnumCheckOutcome.FILE_MISSING,
                    MISSING_FILE_DETAIL,
                )
                for expectation in target.expectations
            ]

        text = self._read(path)
        lines = text.splitlines()

        results: list[ModelCheckResult] = []
        for expectation in target.expectations:
            outcome, detail = self._evaluate(expectation, text, lines)
            logger.debug(
                "%s: %s -> %s", target.path, expectation.label, outcome.value
            )
            results.append(self._result(target, expectation, outcome, detail))
        return results

    def _read(self, path: Path) -> str:
        """Read a target file as UTF-8 text."""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TargetFileReadError(
                f"Cannot read target file: {e}",
                path=path,
            ) from e

    def _evaluate(
        self,
        expectation: ModelExpectationBase,
        text: str,
        lines: list[str],
    ) -> tuple[EnumCheckOutcome, str]:
        """Evaluate one expectation; returns the outcome and a failure detail."""
        if isinstance(expectation, ModelContainsExpectation):
            if check_contains(text, expectation.substring):
                return EnumCheckOutcome.PASSED, ""
            return (
                EnumCheckOutcome.EXPECTATION_NOT_MET,
                f"substring {expectation.substring!r} not found",
            )

        if isinstance(expectation, ModelPatternExpectation):
            if check_pattern(text, expectation.compiled()):
                return EnumCheckOutcome.PASSED, ""
            return (
                EnumCheckOutcome.EXPECTATION_NOT_MET,
                f"no match for pattern {expectation.pattern!r}",
            )

        if isinstance(expectation, ModelOrderedKeywordsExpectation):
            if check_order(lines, expectation.keywords):
                return EnumCheckOutcome.PASSED, ""
            return (
                EnumCheckOutcome.EXPECTATION_NOT_MET,
                self._describe_order_violation(lines, expectation.keywords),
            )

        if isinstance(expectation, ModelValidYamlExpectation):
            return self._evaluate_yaml(text)

        raise TypeError(f"Unsupported expectation type: {type(expectation).__name__}")

    def _evaluate_yaml(self, text: str) -> tuple[EnumCheckOutcome, str]:
        """Evaluate YAML validity: non-empty text, parseable, non-null value."""
        if not text:
            return EnumCheckOutcome.INVALID_STRUCTURE, "file is empty"
        try:
            parsed = parse_yaml(text)
        except YamlParseError as e:
            return EnumCheckOutcome.INVALID_STRUCTURE, e.message
        if parsed is None:
            return EnumCheckOutcome.INVALID_STRUCTURE, "YAML document is empty"
        return EnumCheckOutcome.PASSED, ""

    def _describe_order_violation(
        self,
        lines: list[str],
        keywords: tuple[str, ...],
    ) -> str:
        """Name the first keyword that is missing or out of order."""
        previous_keyword = ""
        previous = NOT_FOUND
        for keyword in keywords:
            index = find_first_line_index(lines, keyword)
            if index == NOT_FOUND:
                return f"keyword {keyword!r} not found"
            if index <= previous:
                return (
                    f"keyword {keyword!r} (line {index + 1}) does not come after "
                    f"{previous_keyword!r} (line {previous + 1})"
                )
            previous_keyword, previous = keyword, index
        return "keywords out of order"

    def _result(
        self,
        target: ModelTargetFile,
        expectation: ModelExpectationBase,
        outcome: EnumCheckOutcome,
        detail: str,
    ) -> ModelCheckResult:
        return ModelCheckResult(
            target_path=target.path,
            kind=expectation.expectation_kind,
            outcome=outcome,
            description=expectation.label,
            criterion=expectation.criterion,
            detail=detail,
        )


def run_checks(
    targets: Iterable[ModelTargetFile],
    root: str | Path = ".",
) -> ModelCheckReport:
    """
    Check targets against a project root.

    Convenience function that creates a FileAssertionChecker and runs it.

    Args:
        targets: Targets to check.
        root: Project root that target paths are resolved against.

    Returns:
        ModelCheckReport with all results.
    """
    checker = FileAssertionChecker(root=root)
    return checker.run(targets)


__all__ = ["MISSING_FILE_DETAIL", "FileAssertionChecker", "run_checks"]
