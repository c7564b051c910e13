# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
CI Configuration Check CLI Commands.

Usage:
    ci-config-checks check
    ci-config-checks check --root path/to/project
    ci-config-checks check --manifest checklist.yaml --json

Exit Codes:
    0: All expectations hold
    1: At least one expectation failed
    2: Runtime error (unreadable target, invalid manifest)
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ci_config_checks.errors import ConfigCheckError
from ci_config_checks.models import ModelCheckerConfig, ModelCheckReport, ModelTargetFile
from ci_config_checks.validation import (
    FileAssertionChecker,
    build_default_checklist,
    load_checklist_manifest,
)

console = Console()

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


@click.group()
def cli() -> None:
    """CI configuration checks."""


@cli.command("check")
@click.option(
    "--root",
    default=None,
    help="Project root to check (default: CI_CONFIG_CHECKS_ROOT or '.')",
)
@click.option(
    "--manifest",
    default=None,
    help="Checklist manifest YAML (default: CI_CONFIG_CHECKS_MANIFEST or built-in)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def check_cmd(
    root: str | None, manifest: str | None, as_json: bool, verbose: bool
) -> None:
    """Check CI workflow and build configuration files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = ModelCheckerConfig.from_env(root=root, manifest_path=manifest)
    if not as_json:
        root_label = escape(str(config.root))
        console.print(
            f"[bold blue]Checking CI configuration in {root_label}...[/bold blue]"
        )

    try:
        targets = _load_targets(config)
        report = FileAssertionChecker(root=config.root).run(targets)
    except ConfigCheckError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(EXIT_ERROR) from e

    if as_json:
        click.echo(json.dumps(report.to_summary_dict(), indent=2))
    else:
        _print_report(report)
    raise SystemExit(EXIT_OK if report.passed else EXIT_FAILED)


@cli.command("list")
@click.option(
    "--manifest",
    default=None,
    help="Checklist manifest YAML (default: CI_CONFIG_CHECKS_MANIFEST or built-in)",
)
def list_cmd(manifest: str | None) -> None:
    """List the expectations of a checklist without checking anything."""
    config = ModelCheckerConfig.from_env(manifest_path=manifest)
    try:
        targets = _load_targets(config)
    except ConfigCheckError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(EXIT_ERROR) from e

    table = Table(title="Checklist")
    table.add_column("Target", style="cyan")
    table.add_column("Kind")
    table.add_column("Criterion")
    table.add_column("Description")
    for target in targets:
        for expectation in target.expectations:
            table.add_row(
                target.path,
                expectation.expectation_kind.value,
                expectation.criterion or "",
                escape(expectation.label),
            )
    console.print(table)


def _load_targets(config: ModelCheckerConfig) -> list[ModelTargetFile]:
    if config.manifest_path is None:
        return build_default_checklist()
    return load_checklist_manifest(config.manifest_path)


def _print_report(report: ModelCheckReport) -> None:
    """Print check results with rich formatting."""
    for result in report.results:
        color = "green" if result.passed else "red"
        console.print(f"  [{color}]{escape(str(result))}[/{color}]")
    if report.passed:
        console.print(f"[bold green]{report}[/bold green]")
    else:
        console.print(f"[bold red]{report}[/bold red]")


if __name__ == "__main__":
    cli()
