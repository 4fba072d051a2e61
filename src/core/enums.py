"""
Centralized enums for the effects engine.

This module contains all enumeration types used throughout the engine,
providing a single source of truth for enum definitions.
"""

from enum import Enum, IntEnum


# Pixel buffer enums
class Channel(IntEnum):
    """Color channel index inside an RGBA pixel."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


# Effect behavior enums
class EffectMode(str, Enum):
    """
    Behavior variant for effects with a historical quirk.

    LEGACY reproduces the historical output bit for bit, CORRECTED applies
    the evidently intended behavior.
    """

    LEGACY = "legacy"
    CORRECTED = "corrected"


# Strip overlay enums
class StripOrientation(str, Enum):
    """Axis along which strip bands are laid out."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
