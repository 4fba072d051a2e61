"""
Pixel buffer utilities - functional architecture.

This package provides the image model and the helpers effects build on:
- buffer: RGBA pixel buffer (RgbaImage)
- iterator: Row-major coordinate iteration (ImageIterator)
- drawing: Rectangle fill primitive over OpenCV
- test_patterns: Synthetic images for tests and benchmarks

All utilities are re-exported from this module for convenient access.
"""

from core.image.buffer import RgbaImage
from core.image.drawing import fill_rect
from core.image.iterator import ImageIterator
from core.image.test_patterns import (
    create_checkerboard_image,
    create_gradient_image,
    create_noise_image,
    create_solid_image,
)

__all__ = [
    "RgbaImage",
    "ImageIterator",
    "fill_rect",
    "create_checkerboard_image",
    "create_gradient_image",
    "create_noise_image",
    "create_solid_image",
]
