"""
Drawing primitives on RGBA pixel buffers.

Thin wrappers over OpenCV drawing calls operating directly on the buffer's
(height, width, 4) view, so the pixels are modified in place.
"""

import logging
from typing import Tuple

import cv2

from common.base import Rect
from core.image.buffer import RgbaImage

logger = logging.getLogger(__name__)

# Negative thickness makes OpenCV fill the shape
FILLED = -1


def fill_rect(image: RgbaImage, rect: Rect, color: Tuple[int, int, int, int]) -> RgbaImage:
    """
    Fill a rectangle of the image with a solid RGBA color.

    Parts of the rectangle outside the image are clipped.

    Args:
        image: Image to paint on (modified in-place)
        rect: Rectangle covering [x, x + width) x [y, y + height)
        color: (r, g, b, a) fill color

    Returns:
        The same image, for chaining
    """
    if image.width == 0 or image.height == 0:
        return image

    # OpenCV treats pt2 as inclusive
    pt1 = (rect.x, rect.y)
    pt2 = (rect.x2 - 1, rect.y2 - 1)
    view = image.view()
    painted = cv2.rectangle(view, pt1, pt2, tuple(int(c) for c in color), FILLED)
    if painted is not view:
        view[...] = painted
    logger.debug(f"Filled rect {pt1}-{pt2} with {color}")
    return image
