"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the engine:
- Rgb: an RGB color value
- Rect: an axis-aligned rectangle used by the fill primitive
- WindowStatistic: mean color and variance of one Kuwahara window

IMPORTANT: This module must NOT import from core or effects
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np
from pydantic import BaseModel, Field


class Rgb(BaseModel):
    """RGB color with 8-bit channels."""

    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")

    @classmethod
    def from_tuple(cls, values: Tuple[int, int, int]) -> "Rgb":
        """Create color from an (r, g, b) tuple."""
        r, g, b = values
        return cls(r=int(r), g=int(g), b=int(b))

    def to_tuple(self) -> Tuple[int, int, int]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def square_distance(self, other: Union["Rgb", np.ndarray]) -> Union[int, np.ndarray]:
        """
        Squared Euclidean distance to another color in RGB space.

        Args:
            other: An Rgb, or an array whose last axis holds (r, g, b)

        Returns:
            int for an Rgb, otherwise an int64 array of distances shaped like
            ``other`` without its last axis
        """
        if isinstance(other, Rgb):
            return (self.r - other.r) ** 2 + (self.g - other.g) ** 2 + (self.b - other.b) ** 2
        diff = np.asarray(other, dtype=np.int64)[..., :3] - np.array(self.to_tuple(), dtype=np.int64)
        return (diff * diff).sum(axis=-1)


class Rect(BaseModel):
    """
    Axis-aligned rectangle in pixel coordinates.

    The rectangle covers columns [x, x + width) and rows [y, y + height).
    """

    x: int = Field(..., ge=0, description="X coordinate")
    y: int = Field(..., ge=0, description="Y coordinate")
    width: int = Field(..., gt=0, description="Width")
    height: int = Field(..., gt=0, description="Height")

    @property
    def x2(self) -> int:
        """Get right edge coordinate (exclusive)."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Get bottom edge coordinate (exclusive)."""
        return self.y + self.height


class WindowStatistic(BaseModel):
    """Mean color and summed per-channel variance of a square window."""

    avg_r: int = Field(..., ge=0, le=255)
    avg_g: int = Field(..., ge=0, le=255)
    avg_b: int = Field(..., ge=0, le=255)
    variance: float = Field(..., ge=0.0)

    @property
    def average(self) -> Rgb:
        """Mean color of the window."""
        return Rgb(r=self.avg_r, g=self.avg_g, b=self.avg_b)
