"""
Channel offset effects.

Shift one or two color channels of an image by a number of pixels, giving
the chromatic-aberration look. All effects run in place.

The scan order is row-major. Sources read "ahead" of the scan (larger x or y)
are still untouched when read, so those copies are vectorized against a
snapshot. Sources read "behind" the scan observe earlier writes and are
applied column by column to reproduce the sequential cascade exactly.
"""

import logging

from common.constants import OffsetConstants
from core.enums import Channel
from core.image.buffer import RgbaImage
from core.image.iterator import ImageIterator
from core.utils.decorators import log_effect
from effects.validation import validate_channel_index, validate_non_negative

logger = logging.getLogger(__name__)


@log_effect
def offset(image: RgbaImage, channel_index: int, offset: int) -> None:
    """
    Offset one channel of the image by a number of pixels on both axes.

    Visits x in [0, width - 10) and y in [0, height - 10). A pixel takes the
    channel value of the pixel at (x + offset, y + offset) when that source
    satisfies x + offset < width - 1 and y + offset < height - 1; otherwise
    it is left as is.

    The 10-pixel margin does not grow with ``offset``. Offsets above 10 are
    still kept in bounds by the source check, they simply leave more of the
    visited area untouched.

    Args:
        image: Image to modify in place
        channel_index: 0 (red), 1 (green) or 2 (blue)
        offset: Non-negative shift in pixels

    Raises:
        InvalidChannelException: If channel_index is not 0, 1 or 2
        InvalidParameterException: If offset is negative
    """
    channel = validate_channel_index(channel_index)
    offset = validate_non_negative(offset, "offset")

    width, height = image.dimensions()
    region = ImageIterator(
        max(width - OffsetConstants.MARGIN, 0), max(height - OffsetConstants.MARGIN, 0)
    )

    # Portion of the visited region whose source passes the bounds check
    cols = max(min(region.width, width - 1 - offset), 0)
    rows = max(min(region.height, height - 1 - offset), 0)
    if cols == 0 or rows == 0:
        logger.debug(f"Offset {offset} leaves no pixel to shift in {width}x{height} image")
        return

    view = image.view()
    targets = ImageIterator(cols, rows)
    source = targets.select(view, dx=offset, dy=offset)[..., channel].copy()
    targets.select(view)[..., channel] = source


def offset_red(image: RgbaImage, offset_amt: int) -> None:
    """Offset the red channel by ``offset_amt`` pixels."""
    offset(image, Channel.RED, offset_amt)


def offset_green(image: RgbaImage, offset_amt: int) -> None:
    """Offset the green channel by ``offset_amt`` pixels."""
    offset(image, Channel.GREEN, offset_amt)


def offset_blue(image: RgbaImage, offset_amt: int) -> None:
    """Offset the blue channel by ``offset_amt`` pixels."""
    offset(image, Channel.BLUE, offset_amt)


@log_effect
def multiple_offsets(
    image: RgbaImage, offset: int, channel_index: int, channel_index2: int
) -> None:
    """
    Offset two channels in opposite horizontal directions.

    Scans the whole image row by row. For each pixel:
    - ``channel_index`` takes the value at (x + offset, y) when
      x + offset < width - 1 and y + offset < height - 1;
    - ``channel_index2`` then takes the value at (x - offset, y) when
      x > offset and y > offset.

    The second copy reads pixels already rewritten by the scan, so values
    cascade along each row exactly as a sequential in-place pass would.

    Args:
        image: Image to modify in place
        offset: Non-negative shift in pixels
        channel_index: Channel shifted to the left (0, 1 or 2)
        channel_index2: Channel shifted to the right (0, 1 or 2)

    Raises:
        InvalidChannelException: If either channel index is not 0, 1 or 2
        InvalidParameterException: If offset is negative
    """
    first = validate_channel_index(channel_index, "channel_index")
    second = validate_channel_index(channel_index2, "channel_index2")
    offset = validate_non_negative(offset, "offset")

    width, height = image.dimensions()
    view = image.view()

    # First channel: sources lie ahead of the scan, read from a snapshot
    cols = max(width - 1 - offset, 0)
    rows = max(height - 1 - offset, 0)
    if cols and rows:
        ahead = ImageIterator(cols, rows)
        source = ahead.select(view, dx=offset)[..., first].copy()
        ahead.select(view)[..., first] = source

    # Second channel: sources lie behind the scan, so walk columns in order
    if offset == 0:
        return
    first_row = offset + 1
    for x in range(offset + 1, width):
        view[first_row:, x, second] = view[first_row:, x - offset, second]
