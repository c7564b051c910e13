# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Primitive text checks used by the file assertion checker.

These functions are pure apart from ``file_exists``, which touches the
filesystem. They never raise for a failed expectation; they return False and
leave reporting to the caller.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

import yaml

from ci_config_checks.errors import YamlParseError

logger = logging.getLogger(__name__)

# Sentinel returned by find_first_line_index when no line contains the keyword
NOT_FOUND = -1


def file_exists(path: Path) -> bool:
    """Return True if ``path`` exists."""
    return path.exists()


def check_contains(text: str, substring: str) -> bool:
    """Return True if ``substring`` occurs verbatim in ``text`` (case-sensitive)."""
    return substring in text


def check_pattern(text: str, pattern: str | re.Pattern[str]) -> bool:
    """Return True if ``pattern`` matches anywhere in ``text``.

    The search is not anchored: ``re.search`` semantics, not ``re.match``.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return pattern.search(text) is not None


def find_first_line_index(lines: Sequence[str], keyword: str) -> int:
    """Return the index of the first line containing ``keyword``, or NOT_FOUND."""
    for index, line in enumerate(lines):
        if keyword in line:
            return index
    return NOT_FOUND


def check_order(lines: Sequence[str], keyword_sequence: Sequence[str]) -> bool:
    """Return True if the keywords first appear on strictly increasing lines.

    Fails if any keyword is absent. Only the first occurrence of each keyword
    is used, so a keyword that also appears earlier in an unrelated line
    (for example in a comment) is located there.

    Args:
        lines: File contents split into lines.
        keyword_sequence: Keywords in their required relative order.

    Returns:
        True if all keywords are found and their indices strictly increase.
    """
    previous = NOT_FOUND
    for keyword in keyword_sequence:
        index = find_first_line_index(lines, keyword)
        if index == NOT_FOUND:
            logger.debug("Keyword %r not found", keyword)
            return False
        if index <= previous:
            logger.debug(
                "Keyword %r at line %d does not follow line %d",
                keyword,
                index + 1,
                previous + 1,
            )
            return False
        previous = index
    return True


def parse_yaml(text: str) -> object:
    """Parse ``text`` as YAML and return the resulting value.

    Uses ``yaml.safe_load`` so no arbitrary objects are constructed. The
    value is only used to assert syntactic validity.

    Raises:
        YamlParseError: If the text is not valid YAML.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise YamlParseError(f"YAML parse error: {e}") from e


__all__ = [
    "NOT_FOUND",
    "check_contains",
    "check_order",
    "check_pattern",
    "file_exists",
    "find_first_line_index",
    "parse_yaml",
]
