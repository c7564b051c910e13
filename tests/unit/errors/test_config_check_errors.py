# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the CI configuration check error hierarchy."""

from __future__ import annotations

from pathlib import Path

import pytest

from ci_config_checks.errors import (
    ChecklistConfigurationError,
    ConfigCheckError,
    TargetFileReadError,
    YamlParseError,
)


class TestConfigCheckErrors:
    @pytest.mark.parametrize(
        "error_class",
        [ChecklistConfigurationError, YamlParseError],
    )
    def test_subclasses_base(self, error_class: type[ConfigCheckError]) -> None:
        error = error_class("boom")
        assert isinstance(error, ConfigCheckError)
        assert error.message == "boom"

    def test_base_without_context(self) -> None:
        assert str(ConfigCheckError("boom")) == "boom"

    def test_context_in_message(self) -> None:
        error = ChecklistConfigurationError("bad manifest", manifest="checklist.yaml")
        assert error.context == {"manifest": "checklist.yaml", "operation": "load_checklist"}
        assert str(error) == "bad manifest (manifest=checklist.yaml, operation=load_checklist)"

    def test_target_file_read_error_carries_path(self) -> None:
        error = TargetFileReadError("cannot read", path=Path("ci.yml"))
        assert error.path == Path("ci.yml")
        assert error.context["path"] == "ci.yml"
        assert error.context["operation"] == "read_target"

    def test_operation_can_be_overridden(self) -> None:
        error = YamlParseError("bad yaml", operation="parse_manifest")
        assert error.context["operation"] == "parse_manifest"

    def test_chaining(self) -> None:
        with pytest.raises(TargetFileReadError) as exc_info:
            try:
                raise PermissionError("denied")
            except PermissionError as e:
                raise TargetFileReadError("cannot read", path=Path("ci.yml")) from e
        assert isinstance(exc_info.value.__cause__, PermissionError)
