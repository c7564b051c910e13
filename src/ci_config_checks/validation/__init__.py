# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Validation for CI configuration files.

Provides the file assertion checker, its text-check primitives, the built-in
checklist and the checklist manifest loader.

Exports:
    FileAssertionChecker: Evaluates expectations against target files
    run_checks: Convenience wrapper around FileAssertionChecker.run
    build_default_checklist: Built-in workflow/Sonar/Gradle checklist
    load_checklist_manifest: Load a checklist from YAML
"""

from ci_config_checks.validation.checklist_manifest_loader import (
    load_checklist_manifest,
    parse_checklist,
)
from ci_config_checks.validation.default_checklist import build_default_checklist
from ci_config_checks.validation.file_assertion_checker import (
    MISSING_FILE_DETAIL,
    FileAssertionChecker,
    run_checks,
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

__all__: list[str] = [
    "MISSING_FILE_DETAIL",
    "NOT_FOUND",
    "FileAssertionChecker",
    "build_default_checklist",
    "check_contains",
    "check_order",
    "check_pattern",
    "file_exists",
    "find_first_line_index",
    "load_checklist_manifest",
    "parse_checklist",
    "parse_yaml",
    "run_checks",
]
