# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Checklist Manifest Loader.

Loads a checklist (target files and their expectations) from a YAML manifest
so that the file assertion checker can be pointed at files other than the
built-in ones.

The loader validates:
- Manifest file existence and size
- YAML syntax validity
- Required manifest structure (a mapping with a ``targets`` list)
- Each expectation declaration (kind, non-empty substring, compilable pattern,
  non-empty keyword list)

Manifest File Structure:

    ```yaml
    targets:
      - path: .github/workflows/ci.yml
        expectations:
          - kind: valid_yaml
            criterion: AC-1.2.1
          - kind: contains
            substring: "push:"
            description: Workflow should trigger on push
          - kind: pattern
            pattern: "java-version:\\\\s*'?21'?"
          - kind: ordered_keywords
            keywords: [Checkout code, Set up Java]
    ```

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
    - Manifest files are treated as trusted configuration
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ci_config_checks.errors import ChecklistConfigurationError
from ci_config_checks.models import ModelTargetFile

logger = logging.getLogger(__name__)

# Maximum manifest file size (1 MB)
MAX_MANIFEST_SIZE_BYTES = 1024 * 1024


def load_checklist_manifest(manifest_path: str | Path) -> list[ModelTargetFile]:
    """Load a checklist from a YAML manifest file.

    Args:
        manifest_path: Path to the manifest.

    Returns:
        Targets in manifest order, expectations in declaration order.

    Raises:
        ChecklistConfigurationError: If the manifest is missing, too large,
            not valid YAML, structurally wrong, or declares an invalid
            expectation.
    """
    path = Path(manifest_path)

    if not path.exists():
        raise ChecklistConfigurationError(
            f"Checklist manifest not found: {path}",
            manifest=str(path),
        )

    file_size = path.stat().st_size
    if file_size > MAX_MANIFEST_SIZE_BYTES:
        raise ChecklistConfigurationError(
            f"Checklist manifest too large: {file_size} bytes (max {MAX_MANIFEST_SIZE_BYTES})",
            manifest=str(path),
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ChecklistConfigurationError(
            f"Invalid YAML in checklist manifest: {e}",
            manifest=str(path),
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ChecklistConfigurationError(
            f"Cannot read checklist manifest: {e}",
            manifest=str(path),
        ) from e

    targets = parse_checklist(content, source=str(path))
    logger.debug("Loaded %d checklist targets from %s", len(targets), path)
    return targets


def parse_checklist(content: object, *, source: str = "<memory>") -> list[ModelTargetFile]:
    """Build checklist targets from an already-parsed manifest document.

    Args:
        content: Parsed manifest (expected: mapping with a ``targets`` list).
        source: Where the content came from, for error messages.

    Returns:
        Targets in manifest order.

    Raises:
        ChecklistConfigurationError: If the structure or any expectation is invalid.
    """
    if not isinstance(content, dict):
        raise ChecklistConfigurationError(
            f"Checklist manifest must be a mapping, got {type(content).__name__}",
            manifest=source,
        )

    raw_targets = content.get("targets")
    if not isinstance(raw_targets, list) or not raw_targets:
        raise ChecklistConfigurationError(
            "Checklist manifest must define a non-empty 'targets' list",
            manifest=source,
        )

    targets: list[ModelTargetFile] = []
    for index, raw_target in enumerate(raw_targets):
        if not isinstance(raw_target, dict):
            raise ChecklistConfigurationError(
                f"targets[{index}] must be a mapping, got {type(raw_target).__name__}",
                manifest=source,
            )
        try:
            targets.append(ModelTargetFile.model_validate(raw_target))
        except ValidationError as e:
            raise ChecklistConfigurationError(
                f"Invalid checklist target targets[{index}]: {e}",
                manifest=source,
                target=raw_target.get("path"),
            ) from e

    return targets


__all__ = [
    "MAX_MANIFEST_SIZE_BYTES",
    "load_checklist_manifest",
    "parse_checklist",
]
