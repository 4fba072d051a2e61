"""
Core modules for the photofx effects engine
"""

from .enums import Channel, EffectMode, StripOrientation
from .exceptions import (
    EffectsException,
    InvalidChannelException,
    InvalidImageException,
    InvalidParameterException,
    PixelOutOfBoundsException,
)

__all__ = [
    "Channel",
    "EffectMode",
    "StripOrientation",
    "EffectsException",
    "InvalidChannelException",
    "InvalidImageException",
    "InvalidParameterException",
    "PixelOutOfBoundsException",
]
