"""
Types package - fundamental types without external project dependencies.

This package contains basic types that are used throughout the engine:
- Constants (ImageConstants, KuwaharaConstants, etc.)
- Base models (Rgb, Rect, WindowStatistic)

IMPORTANT: This package must NOT import from any other project packages
(core, effects) to avoid circular dependencies.
"""

# Export base models
from common.base import Rect, Rgb, WindowStatistic

# Export all constants
from common.constants import (
    BrightnessConstants,
    ColorizeConstants,
    ContrastConstants,
    HalftoneConstants,
    ImageConstants,
    KuwaharaConstants,
    OffsetConstants,
    StripConstants,
    SystemConstants,
    ToneConstants,
)

__all__ = [
    # Constants
    "BrightnessConstants",
    "ColorizeConstants",
    "ContrastConstants",
    "HalftoneConstants",
    "ImageConstants",
    "KuwaharaConstants",
    "OffsetConstants",
    "StripConstants",
    "SystemConstants",
    "ToneConstants",
    # Base models
    "Rect",
    "Rgb",
    "WindowStatistic",
]
