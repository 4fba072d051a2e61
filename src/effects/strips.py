"""
Strip overlays.

Divide an image into 2n - 1 equal bands along one axis and paint every
other band, starting with the second, in a solid color.
"""

import logging
from typing import Iterator, Tuple, Union

from common.base import Rect
from common.constants import StripConstants
from config import get_settings
from core.enums import StripOrientation
from core.exceptions import InvalidParameterException
from core.image.buffer import RgbaImage
from core.image.drawing import fill_rect
from core.utils.decorators import log_effect

logger = logging.getLogger(__name__)


def strip_bands(extent: int, num_strips: int) -> Iterator[Tuple[int, int]]:
    """
    Positions of the painted bands along one axis.

    Args:
        extent: Image size along the axis
        num_strips: Number of unpainted strips (n)

    Yields:
        (start, size) of each painted band; n - 1 bands in total, none when
        the band size rounds down to zero
    """
    total_strips = num_strips * 2 - 1
    band = extent // total_strips
    if band == 0:
        return
    position = 0
    for i in range(1, num_strips):
        yield (position + band, band)
        position = i * (band * 2)


@log_effect
def strips(
    image: RgbaImage,
    num_strips: int,
    orientation: Union[StripOrientation, str] = StripOrientation.HORIZONTAL,
) -> None:
    """
    Paint strip bands over the image.

    Remainder pixels left by the integer division of the image extent are
    not covered by any band.

    Args:
        image: Image to modify in place
        num_strips: Number of strips (n >= 1); n == 1 leaves the image unchanged
        orientation: HORIZONTAL bands stack vertically, VERTICAL side by side

    Raises:
        InvalidParameterException: If num_strips < 1 or orientation is unknown
    """
    if num_strips < StripConstants.MIN_STRIPS:
        raise InvalidParameterException("num_strips", num_strips, "must be at least 1")
    try:
        orientation = StripOrientation(orientation)
    except ValueError:
        raise InvalidParameterException(
            "orientation", orientation, f"must be one of {[o.value for o in StripOrientation]}"
        ) from None

    width, height = image.dimensions()
    effects_config = get_settings().effects
    color = (*effects_config.strip_color, effects_config.strip_alpha)

    horizontal = orientation is StripOrientation.HORIZONTAL
    extent = height if horizontal else width
    painted = 0
    for start, size in strip_bands(extent, num_strips):
        if horizontal:
            rect = Rect(x=0, y=start, width=max(width, 1), height=size)
        else:
            rect = Rect(x=start, y=0, width=size, height=max(height, 1))
        fill_rect(image, rect, color)
        painted += 1

    logger.debug(f"Painted {painted} {orientation.value} bands over {width}x{height} image")


def horizontal_strips(image: RgbaImage, num_strips: int) -> None:
    """Divide an image into equal-height strips, painting every other one white."""
    strips(image, num_strips, StripOrientation.HORIZONTAL)


def vertical_strips(image: RgbaImage, num_strips: int) -> None:
    """Divide an image into equal-width strips, painting every other one white."""
    strips(image, num_strips, StripOrientation.VERTICAL)
