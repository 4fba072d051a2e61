"""
Pytest configuration and fixtures for photofx tests
"""

import numpy as np
import pytest

from config import reload_settings
from core.image import (
    RgbaImage,
    create_checkerboard_image,
    create_gradient_image,
    create_noise_image,
    create_solid_image,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings so each test sees its own environment."""
    for name in (
        "PHOTOFX_EFFECTS_DEFAULT_MODE",
        "PHOTOFX_EFFECTS_STRIP_COLOR",
        "PHOTOFX_EFFECTS_STRIP_ALPHA",
        "PHOTOFX_EFFECTS_LOG_TIMING",
        "PHOTOFX_SYSTEM_DEBUG",
        "PHOTOFX_SYSTEM_LOG_LEVEL",
        "PHOTOFX_ENVIRONMENT",
        "PHOTOFX_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def black_image():
    """Create a 4x4 opaque black image."""
    return create_solid_image(4, 4, (0, 0, 0, 255))


@pytest.fixture
def noise_image():
    """Create a reproducible 20x20 noise image with varied alpha."""
    image = create_noise_image(20, 20, seed=42)
    image.view()[..., 3] = (np.arange(400) % 256).astype(np.uint8).reshape(20, 20)
    return image


@pytest.fixture
def gradient_image():
    """Create a 20x20 gradient image."""
    return create_gradient_image(20, 20)


@pytest.fixture
def checkerboard_image():
    """Create a 16x16 checkerboard with 4-pixel squares."""
    return create_checkerboard_image(16, 16, square_size=4)


@pytest.fixture
def make_image():
    """Factory building an image from nested rows of (r, g, b, a) tuples."""

    def _make(rows):
        return RgbaImage.from_array(np.array(rows, dtype=np.uint8))

    return _make
