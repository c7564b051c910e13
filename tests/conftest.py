"""Pytest configuration and shared fixtures for ci_config_checks tests."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

SAMPLE_PROJECT_DIR = Path(__file__).resolve().parent / "fixtures" / "sample_project"


@pytest.fixture
def sample_project_root() -> Path:
    """Read-only sample project that satisfies the built-in checklist."""
    return SAMPLE_PROJECT_DIR


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Writable copy of the sample project.

    Tests mutate or delete files in the copy; the fixture directory itself
    is never modified.
    """
    root = tmp_path / "project"
    shutil.copytree(SAMPLE_PROJECT_DIR, root)
    return root


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory fixture for creating files under tmp_path.

    Example:
        def test_something(write_file):
            path = write_file("ci.yml", "on: push\\n")
    """

    def _write(relative_path: str, content: str) -> Path:
        """Create ``relative_path`` (and parents) with ``content``.

        Args:
            relative_path: Path relative to tmp_path.
            content: The content to write to the file.

        Returns:
            Path to the created file.
        """
        file_path = tmp_path / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
