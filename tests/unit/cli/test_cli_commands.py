# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the ci-config-checks CLI.

Tests cover:
- Exit status 0 / 1 / 2 for pass, failure and runtime error
- JSON report output
- Manifest selection via option and environment
- Checklist listing
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from rich.console import Console

from ci_config_checks.cli import commands
from ci_config_checks.cli.commands import EXIT_ERROR, EXIT_FAILED, EXIT_OK, cli
from ci_config_checks.models.model_checker_config import ENV_MANIFEST, ENV_ROOT
from ci_config_checks.validation.default_checklist import SONAR_PROPERTIES

MANIFEST = """\
targets:
  - path: build.gradle
    expectations:
      - kind: contains
        substring: "org.sonarqube"
        criterion: AC-1.2.3
"""


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    # Wide console so report lines and table cells are not wrapped
    monkeypatch.setattr(commands, "console", Console(width=200))
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env():
    with patch.dict("os.environ", {ENV_ROOT: "", ENV_MANIFEST: ""}):
        yield


class TestCheckCommand:
    def test_passing_project_exits_zero(self, runner: CliRunner, sample_project_root: Path) -> None:
        result = runner.invoke(cli, ["check", "--root", str(sample_project_root)])
        assert result.exit_code == EXIT_OK, result.output
        assert "PASS" in result.output
        assert "FAIL" not in result.output

    def test_failing_project_exits_one(self, runner: CliRunner, project_root: Path) -> None:
        (project_root / SONAR_PROPERTIES).unlink()
        result = runner.invoke(cli, ["check", "--root", str(project_root)])
        assert result.exit_code == EXIT_FAILED
        assert "FAIL" in result.output
        assert "file_missing" in result.output

    def test_json_report(self, runner: CliRunner, project_root: Path) -> None:
        (project_root / SONAR_PROPERTIES).unlink()

        result = runner.invoke(cli, ["check", "--root", str(project_root), "--json"])

        assert result.exit_code == EXIT_FAILED
        payload = json.loads(result.stdout)
        assert payload["passed"] is False
        assert payload["summary"]["checks_total"] == 22
        assert payload["summary"]["by_outcome"]["file_missing"] == 4

    def test_root_from_environment(self, runner: CliRunner, sample_project_root: Path) -> None:
        result = runner.invoke(
            cli, ["check", "--json"], env={ENV_ROOT: str(sample_project_root)}
        )
        assert result.exit_code == EXIT_OK
        assert json.loads(result.stdout)["passed"] is True

    def test_manifest_option(
        self, runner: CliRunner, write_file, sample_project_root: Path
    ) -> None:
        manifest = write_file("checklist.yaml", MANIFEST)

        result = runner.invoke(
            cli,
            ["check", "--root", str(sample_project_root), "--manifest", str(manifest), "--json"],
        )

        assert result.exit_code == EXIT_OK
        payload = json.loads(result.stdout)
        assert payload["summary"]["checks_total"] == 1
        assert payload["results"][0]["criterion"] == "AC-1.2.3"

    def test_manifest_from_environment(
        self, runner: CliRunner, write_file, sample_project_root: Path
    ) -> None:
        manifest = write_file("checklist.yaml", MANIFEST)

        result = runner.invoke(
            cli,
            ["check", "--root", str(sample_project_root), "--json"],
            env={ENV_MANIFEST: str(manifest)},
        )

        assert result.exit_code == EXIT_OK
        assert json.loads(result.stdout)["summary"]["checks_total"] == 1

    def test_invalid_manifest_exits_two(self, runner: CliRunner, write_file) -> None:
        manifest = write_file("checklist.yaml", "targets: []\n")
        result = runner.invoke(cli, ["check", "--manifest", str(manifest)])
        assert result.exit_code == EXIT_ERROR
        assert "Error" in result.output

    def test_unreadable_target_exits_two(self, runner: CliRunner, project_root: Path) -> None:
        (project_root / SONAR_PROPERTIES).unlink()
        (project_root / SONAR_PROPERTIES).mkdir()
        result = runner.invoke(cli, ["check", "--root", str(project_root)])
        assert result.exit_code == EXIT_ERROR


class TestListCommand:
    def test_lists_builtin_checklist(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "Checklist" in result.output
        assert "AC-1.2.4" in result.output

    def test_list_invalid_manifest_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["list", "--manifest", str(tmp_path / "missing.yaml")])
        assert result.exit_code == EXIT_ERROR
