"""Shared test fixtures for nomencheck."""

import pytest

EXAMPLE_NAME = (
    "NES-SAI2d15-CS_200514-01_Vehicle-1_200517_DAPI+goPitx3-dk488_200519_CF_10Xz1-1.tiff"
)
EXAMPLE_CANONICAL = (
    "NES-SAI2d15-CS_200514-01_Vehicle-1_200517_DAPI+goPITX3-dk488_200519_CF_10X-z1-1"
)


@pytest.fixture
def example_name() -> str:
    """A lab filename that splits cleanly but needs normalizing."""
    return EXAMPLE_NAME


@pytest.fixture
def canonical_name() -> str:
    """The canonical stem of ``example_name``."""
    return EXAMPLE_CANONICAL


@pytest.fixture
def image_dir(tmp_path):
    """Folder with one consistent, one mismatched and one malformed name.

    Also holds a non-image file that the scanner must ignore.
    """
    d = tmp_path / "images"
    d.mkdir()
    (d / (EXAMPLE_CANONICAL + ".czi")).touch()
    (d / EXAMPLE_NAME).touch()
    (d / "exp_200514_Vehicle.tif").touch()
    (d / "notes.txt").touch()
    return d
