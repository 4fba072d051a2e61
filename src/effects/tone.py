"""
Tone effects: primary color quantization, solarize and colorize.
"""

import logging
from typing import Optional, Union

import numpy as np

from common.base import Rgb
from common.constants import ColorizeConstants, ImageConstants, ToneConstants
from core.enums import EffectMode
from core.image.buffer import RgbaImage
from core.image.iterator import ImageIterator
from core.utils.decorators import log_effect
from effects.validation import resolve_mode

logger = logging.getLogger(__name__)


def _all_but_last_pixel(image: RgbaImage) -> np.ndarray:
    """Pixel rows (N-1, 4) visited by a raw stride-4 scan that stops 4 bytes early."""
    pixels = image.raw_pixels.reshape(-1, ImageConstants.CHANNELS)
    return pixels[:-1]


def _quantize(values: np.ndarray) -> np.ndarray:
    return np.where(values > ToneConstants.PRIMARY_THRESHOLD, 255, 0).astype(np.uint8)


@log_effect
def primary(image: RgbaImage, mode: Optional[Union[EffectMode, str]] = None) -> None:
    """
    Reduce an image to the primary colors.

    Each of R, G and B becomes 255 when above 128 and 0 otherwise.

    In LEGACY mode the decision for every pixel is taken from the first
    pixel's stored values, and the raw scan stops before the last pixel.
    CORRECTED mode thresholds every pixel against its own values.

    Args:
        image: Image to modify in place
        mode: EffectMode, defaults to the configured mode
    """
    mode = resolve_mode(mode)
    pixels = image.raw_pixels.reshape(-1, ImageConstants.CHANNELS)
    if pixels.shape[0] == 0:
        return

    if mode is EffectMode.CORRECTED:
        pixels[:, :3] = _quantize(pixels[:, :3])
        return

    first = _quantize(pixels[0, :3].copy())
    _all_but_last_pixel(image)[:, :3] = first


@log_effect
def solarize(image: RgbaImage) -> None:
    """
    Solarize the red channel in place.

    For every pixel but the last (the raw stride-4 scan stops 4 bytes early),
    red becomes 200 - red when that is positive.

    Args:
        image: Image to modify in place
    """
    pixels = _all_but_last_pixel(image)
    red = pixels[:, 0]
    pivot = ToneConstants.SOLARIZE_PIVOT
    pixels[:, 0] = np.where(red < pivot, pivot - red.astype(np.int16), red).astype(np.uint8)


def _solarize_value(value: int) -> int:
    pivot = ToneConstants.SOLARIZE_PIVOT
    return pivot - value if pivot - value > 0 else value


@log_effect
def solarize_retimg(image: RgbaImage) -> RgbaImage:
    """
    Solarize the red channel, returning a new image.

    Unlike ``solarize`` this goes through the pixel accessors and covers
    every pixel. The source image is not modified.

    Args:
        image: Source image

    Returns:
        New solarized image
    """
    result = image.copy()
    for x, y in ImageIterator.with_dimension(result.dimensions()):
        r, g, b, a = result.get_pixel(x, y)
        result.set_pixel(x, y, (_solarize_value(r), g, b, a))
    return result


@log_effect
def colorize(image: RgbaImage) -> None:
    """
    Boost green on pixels close to cyan.

    Pixels whose squared RGB distance to (0, 255, 255) is below 220² get
    red and blue halved and green multiplied by 1.25, with a saturating
    truncating cast back to 8 bits.

    Args:
        image: Image to modify in place
    """
    target = Rgb.from_tuple(ColorizeConstants.TARGET_COLOR)
    view = image.view()
    rgb = view[..., :3].astype(np.int32)

    near = target.square_distance(rgb) < ColorizeConstants.THRESHOLD**2
    logger.debug(f"Colorize affects {int(near.sum())} of {near.size} pixels")

    factors = np.array(
        [ColorizeConstants.RED_FACTOR, ColorizeConstants.GREEN_FACTOR, ColorizeConstants.BLUE_FACTOR],
        dtype=np.float32,
    )
    scaled = np.clip(np.trunc(rgb.astype(np.float32) * factors), 0, 255).astype(np.uint8)
    view[..., :3] = np.where(near[..., np.newaxis], scaled, view[..., :3])
