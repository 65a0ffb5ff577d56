"""Pytest configuration for footlights tests."""

from typing import Any

import pytest
from PIL import Image


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "raster: mark test as requiring raster dependencies (cairosvg)",
    )


# Check if raster dependencies are available
try:
    import cairosvg  # noqa: F401 # type: ignore

    HAS_RASTER = True
except (ImportError, OSError):
    HAS_RASTER = False


# Marker to skip tests that require raster dependencies
skip_without_raster = pytest.mark.skipif(
    not HAS_RASTER,
    reason="Requires raster dependencies: pip install 'footlights[raster]'",
)


@pytest.fixture
def image_file(tmp_path):
    """A 120x80 PNG file on disk."""
    path = tmp_path / "input.png"
    Image.new("RGB", (120, 80), "red").save(path)
    return path
