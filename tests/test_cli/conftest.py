"""Shared fixtures for CLI module tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """A folder with no image files."""
    d = tmp_path / "empty"
    d.mkdir()
    (d / "readme.txt").touch()
    return d


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A config asking for detailed reports and no log file."""
    path = tmp_path / "check.yaml"
    path.write_text("verbose: true\nwrite_log: false\n")
    return path
