"""Shared fixtures for IO module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def nested_image_dir(tmp_path: Path) -> Path:
    """Create a folder with image files at two levels.

    Layout: b.tif, a.CZI, notes.txt, sub/c.lsm, sub/d.tiff
    """
    d = tmp_path / "nested"
    d.mkdir()
    (d / "b.tif").touch()
    (d / "a.CZI").touch()
    (d / "notes.txt").touch()
    sub = d / "sub"
    sub.mkdir()
    (sub / "c.lsm").touch()
    (sub / "d.tiff").touch()
    return d
