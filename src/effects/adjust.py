"""
Brightness, contrast and tint adjustment.

All adjustments touch R, G and B only; alpha is left untouched.
"""

import logging

import numpy as np

from common.constants import BrightnessConstants, ContrastConstants
from core.image.buffer import RgbaImage
from core.utils.decorators import log_effect
from effects.validation import validate_non_negative, validate_range

logger = logging.getLogger(__name__)


def _saturating_add(values: np.ndarray, amount) -> np.ndarray:
    """Add and clamp at 255, per channel."""
    return np.minimum(values.astype(np.int64) + amount, 255).astype(np.uint8)


@log_effect
def inc_brightness(image: RgbaImage, brightness: int) -> None:
    """
    Increase the brightness of an image.

    Args:
        image: Image to modify in place
        brightness: Amount in [0, 255] added to R, G and B, saturating at 255

    Raises:
        InvalidParameterException: If brightness is outside [0, 255]
    """
    validate_range(
        brightness,
        "brightness",
        BrightnessConstants.MIN_BRIGHTNESS,
        BrightnessConstants.MAX_BRIGHTNESS,
    )
    view = image.view()
    view[..., :3] = _saturating_add(view[..., :3], int(brightness))


def build_contrast_table(contrast: float) -> np.ndarray:
    """
    Build the 256-entry contrast lookup table.

    The contrast is clamped to [-255, 255], then
    factor = 259 * (c + 255) / (255 * (259 - c)) and
    table[i] = clamp(i * factor + 128 - 128 * factor, 0, 255), truncated.
    Arithmetic is single precision.

    Args:
        contrast: Contrast adjustment, values outside [-255, 255] are clamped

    Returns:
        uint8 array of length 256
    """
    c = np.float32(np.clip(contrast, ContrastConstants.MIN_CONTRAST, ContrastConstants.MAX_CONTRAST))
    numerator = np.float32(ContrastConstants.FACTOR_NUMERATOR)
    denominator = np.float32(ContrastConstants.FACTOR_DENOMINATOR)
    midpoint = np.float32(ContrastConstants.MIDPOINT)

    factor = (numerator * (c + denominator)) / (denominator * (numerator - c))
    bias = -midpoint * factor + midpoint

    values = np.arange(ContrastConstants.TABLE_SIZE, dtype=np.float32) * factor + bias
    return np.clip(values, 0.0, 255.0).astype(np.uint8)


@log_effect
def adjust_contrast(image: RgbaImage, contrast: float) -> None:
    """
    Adjust the contrast of an image.

    Args:
        image: Image to modify in place
        contrast: Adjustment in [-255, 255]; out of range values are clamped
    """
    table = build_contrast_table(contrast)
    view = image.view()
    view[..., :3] = table[view[..., :3]]


@log_effect
def tint(image: RgbaImage, r_offset: int, g_offset: int, b_offset: int) -> None:
    """
    Tint an image by adding an offset to each RGB channel.

    A channel becomes 255 when value + offset reaches 255, otherwise the
    offset is added exactly.

    Args:
        image: Image to modify in place
        r_offset: Amount added to red
        g_offset: Amount added to green
        b_offset: Amount added to blue

    Raises:
        InvalidParameterException: If any offset is negative
    """
    offsets = np.array(
        [
            validate_non_negative(r_offset, "r_offset"),
            validate_non_negative(g_offset, "g_offset"),
            validate_non_negative(b_offset, "b_offset"),
        ],
        dtype=np.int64,
    )
    view = image.view()
    view[..., :3] = _saturating_add(view[..., :3], offsets)
