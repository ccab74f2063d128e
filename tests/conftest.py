"""Test configuration and fixtures for cl_image_resizer.

This module provides:
- Synthesised source images in every supported (and one unsupported) format
- A progress callback recorder for task tests
"""

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

# ============================================================================
# Helpers
# ============================================================================


def make_image_bytes(
    size: tuple[int, int],
    pil_format: str,
    mode: str = "RGB",
    color: tuple[int, ...] | int = (200, 40, 40),
) -> bytes:
    """Encode a solid-colour image of ``size`` in ``pil_format``."""
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format=pil_format)
    return buffer.getvalue()


class MockProgressCallback:
    """Mock progress callback for testing."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, progress: int) -> None:
        self.calls.append(progress)


# ============================================================================
# Function-Scoped Fixtures
# ============================================================================


@pytest.fixture
def progress_callback() -> MockProgressCallback:
    return MockProgressCallback()


@pytest.fixture
def sample_image_path(tmp_path: Path) -> Path:
    """A 1000x500 JPEG (aspect 2.0)."""
    path = tmp_path / "landscape.jpg"
    _ = path.write_bytes(make_image_bytes((1000, 500), "JPEG"))
    return path


@pytest.fixture
def portrait_png_path(tmp_path: Path) -> Path:
    """A 500x1000 RGBA PNG (aspect 0.5)."""
    path = tmp_path / "portrait.png"
    _ = path.write_bytes(make_image_bytes((500, 1000), "PNG", mode="RGBA", color=(0, 90, 200, 128)))
    return path


@pytest.fixture
def sample_gif_path(tmp_path: Path) -> Path:
    """A 400x400 palette GIF."""
    path = tmp_path / "square.gif"
    _ = path.write_bytes(make_image_bytes((400, 400), "GIF", mode="P", color=3))
    return path


@pytest.fixture
def bmp_image_path(tmp_path: Path) -> Path:
    """A valid image in a format the resizer refuses to read."""
    path = tmp_path / "unsupported.bmp"
    _ = path.write_bytes(make_image_bytes((64, 32), "BMP"))
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    d = tmp_path / "output"
    d.mkdir()
    return d


@pytest.fixture(name="make_image_bytes")
def make_image_bytes_fixture():
    """Expose make_image_bytes to tests that need encoded payloads."""
    return make_image_bytes


@pytest.fixture
def cmyk_jpeg_path(tmp_path: Path) -> Path:
    """A 100x50 CMYK JPEG, as written by print workflows."""
    path = tmp_path / "cmyk.jpg"
    _ = path.write_bytes(make_image_bytes((100, 50), "JPEG", mode="CMYK", color=(10, 200, 30, 0)))
    return path
