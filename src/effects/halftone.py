"""
Halftone dithering.

The image is split into non-overlapping 2x2 blocks. Each block's mean luma
picks one of five black/white dither patterns.
"""

import logging
from typing import Optional, Union

import numpy as np

from common.constants import HalftoneConstants
from core.enums import EffectMode
from core.image.buffer import RgbaImage
from core.image.iterator import ImageIterator
from core.utils.decorators import log_effect
from effects.validation import resolve_mode

logger = logging.getLogger(__name__)

# Block positions as (dx, dy), in the order of HalftoneConstants.BAND_PATTERNS
BLOCK_POSITIONS = ((0, 0), (1, 0), (0, 1), (1, 1))


def luma(rgb: np.ndarray) -> np.ndarray:
    """
    Perceptual luma of RGB values.

    Args:
        rgb: Array whose last axis holds (r, g, b)

    Returns:
        float64 array of 0.299 R + 0.587 G + 0.114 B
    """
    rgb = rgb.astype(np.float64)
    return (
        rgb[..., 0] * HalftoneConstants.LUMA_RED
        + rgb[..., 1] * HalftoneConstants.LUMA_GREEN
        + rgb[..., 2] * HalftoneConstants.LUMA_BLUE
    )


def classify_band(sat: np.ndarray) -> np.ndarray:
    """
    Map mean block luma to a band index 0 (brightest) .. 4 (darkest).

    Args:
        sat: Mean luma per block

    Returns:
        int array of band indices
    """
    conditions = [sat > threshold for threshold in HalftoneConstants.BAND_THRESHOLDS]
    choices = list(range(len(HalftoneConstants.BAND_THRESHOLDS)))
    return np.select(conditions, choices, default=len(HalftoneConstants.BAND_THRESHOLDS))


@log_effect
def halftone(image: RgbaImage, mode: Optional[Union[EffectMode, str]] = None) -> None:
    """
    Apply a 2x2 halftone dither.

    Blocks are anchored every 2 pixels on both axes; a trailing odd row or
    column is not visited. Only R, G and B are written.

    In LEGACY mode only the top-left pixel of each block is written back; the
    other three keep their values. CORRECTED mode writes all four.

    Args:
        image: Image to modify in place
        mode: EffectMode, defaults to the configured mode
    """
    mode = resolve_mode(mode)
    width, height = image.dimensions()
    step = HalftoneConstants.BLOCK_SIZE
    blocks = ImageIterator(width - 1, height - 1, step=step) if width and height else None
    if blocks is None or len(blocks) == 0:
        logger.debug(f"No complete {step}x{step} block in {width}x{height} image")
        return

    view = image.view()
    top_left, top_right, bottom_left, bottom_right = (
        luma(blocks.select(view, dx=dx, dy=dy)[..., :3]) for dx, dy in BLOCK_POSITIONS
    )
    # Summation order: (x, y), (x, y + 1), (x + 1, y), (x + 1, y + 1)
    sat = (top_left + bottom_left + top_right + bottom_right) / 4.0
    bands = classify_band(sat)

    patterns = np.array(HalftoneConstants.BAND_PATTERNS, dtype=np.uint8)
    positions = BLOCK_POSITIONS if mode is EffectMode.CORRECTED else BLOCK_POSITIONS[:1]
    for index, (dx, dy) in enumerate(positions):
        values = patterns[bands, index]
        blocks.select(view, dx=dx, dy=dy)[..., :3] = values[..., np.newaxis]
