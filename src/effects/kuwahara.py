"""
Kuwahara edge-preserving smoothing filter.

The filter runs in two passes:

1. For every window anchor, compute the mean color and the summed
   per-channel variance of the (num + 1) x (num + 1) window whose top-left
   corner is the anchor. Results go into a ``WindowStatistics`` buffer.
2. For every pixel, consider the (up to) four windows touching it from the
   top-left, top-right, bottom-left and bottom-right, and paint the pixel
   with the mean color of the window with the lowest variance.

Ties are broken by comparing top-left with top-right, then bottom-left with
bottom-right, then the two winners, always keeping the left operand when the
variances are equal.

Window sums come from integral images, so pass 1 costs O(width * height)
regardless of the window size. The float operations match a direct
per-window loop exactly: sums are exact integers, means are truncated
``sum / k / k`` and each channel's variance is ``squares / k / k``.
"""

import logging
from typing import Tuple

import numpy as np

from common.base import WindowStatistic
from common.constants import KuwaharaConstants
from core.exceptions import InvalidParameterException, PixelOutOfBoundsException
from core.image.buffer import RgbaImage
from core.image.iterator import ImageIterator
from core.utils.decorators import log_effect

logger = logging.getLogger(__name__)


class WindowStatistics:
    """
    Per-anchor window statistics, row-major over a (width, height) grid.

    Attributes:
        averages: (height, width, 3) uint8 mean colors
        variances: (height, width) float64 summed channel variances
    """

    def __init__(self, averages: np.ndarray, variances: np.ndarray):
        self.averages = averages
        self.variances = variances
        self.height, self.width = variances.shape

    def index_of(self, x: int, y: int) -> int:
        """
        Row-major index of anchor (x, y).

        Raises:
            PixelOutOfBoundsException: If the anchor lies outside the grid
        """
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise PixelOutOfBoundsException(x, y, self.width, self.height)
        return y * self.width + x

    def at(self, x: int, y: int) -> WindowStatistic:
        """Statistic of the window anchored at (x, y)."""
        self.index_of(x, y)
        r, g, b = (int(c) for c in self.averages[y, x])
        return WindowStatistic(avg_r=r, avg_g=g, avg_b=b, variance=float(self.variances[y, x]))

    def __len__(self) -> int:
        return self.width * self.height


def validate_radius(image: RgbaImage, num: int) -> int:
    """
    Check the window parameter against the image.

    Raises:
        InvalidParameterException: If num < 0 or num >= min(width, height)
    """
    if num < KuwaharaConstants.MIN_RADIUS:
        raise InvalidParameterException("num", num, "must be non-negative")
    width, height = image.dimensions()
    if num >= min(width, height):
        raise InvalidParameterException(
            "num", num, f"must be smaller than both image dimensions ({width}x{height})"
        )
    return int(num)


def _integral(values: np.ndarray) -> np.ndarray:
    """Summed-area table with a leading zero row and column."""
    table = np.zeros((values.shape[0] + 1, values.shape[1] + 1) + values.shape[2:], np.int64)
    table[1:, 1:] = values.cumsum(axis=0).cumsum(axis=1)
    return table


def _window_sums(table: np.ndarray, anchors: ImageIterator, size: int) -> np.ndarray:
    """Sum of every size x size window anchored on the iterator's grid."""
    return (
        anchors.select(table, dx=size, dy=size)
        - anchors.select(table, dy=size)
        - anchors.select(table, dx=size)
        + anchors.select(table)
    )


def compute_window_statistics(image: RgbaImage, num: int) -> WindowStatistics:
    """
    First pass: mean color and variance for every window anchor.

    Anchors cover x in [0, width - num) and y in [0, height - num); each
    window spans (num + 1) x (num + 1) pixels.

    Args:
        image: Source image (not modified)
        num: Window parameter, already validated

    Returns:
        WindowStatistics over a (width - num, height - num) grid
    """
    width, height = image.dimensions()
    size = num + 1
    anchors = ImageIterator(width - num, height - num)

    rgb = image.view()[..., :3].astype(np.int64)
    sums = _window_sums(_integral(rgb), anchors, size)
    squares = _window_sums(_integral(rgb * rgb), anchors, size)

    averages = (sums.astype(np.float64) / size / size).astype(np.uint8)

    # sum((p - a)^2) = sum(p^2) - 2 a sum(p) + n a^2, exact in integers
    a = averages.astype(np.int64)
    deviations = squares - 2 * a * sums + size * size * a * a
    per_channel = deviations.astype(np.float64) / size / size
    variances = per_channel[..., 0] + per_channel[..., 1] + per_channel[..., 2]

    return WindowStatistics(averages, variances)


def _candidate(
    stats: WindowStatistics, shape: Tuple[int, int], rows: slice, cols: slice
) -> Tuple[np.ndarray, np.ndarray]:
    """Place the statistics grid over the pixel grid; uncovered pixels get infinite variance."""
    averages = np.zeros(shape + (3,), dtype=np.uint8)
    variances = np.full(shape, np.inf)
    averages[rows, cols] = stats.averages
    variances[rows, cols] = stats.variances
    return averages, variances


def _pick(
    left: Tuple[np.ndarray, np.ndarray], right: Tuple[np.ndarray, np.ndarray]
) -> Tuple[np.ndarray, np.ndarray]:
    """Keep the lower variance, preferring the left operand on ties."""
    keep_left = left[1] <= right[1]
    return (
        np.where(keep_left[..., np.newaxis], left[0], right[0]),
        np.where(keep_left, left[1], right[1]),
    )


def select_window_colors(stats: WindowStatistics, num: int) -> np.ndarray:
    """
    Second pass: choose the window color for every pixel.

    Args:
        stats: Output of the first pass
        num: Window parameter

    Returns:
        (height, width, 3) uint8 colors

    Raises:
        InvalidParameterException: If some pixel is touched by no window
    """
    height, width = stats.height + num, stats.width + num
    shape = (height, width)
    upper_rows, lower_rows = slice(0, stats.height), slice(num, height)
    left_cols, right_cols = slice(0, stats.width), slice(num, width)

    # Candidate anchors relative to pixel (x, y)
    top_left = _candidate(stats, shape, lower_rows, right_cols)  # (x - num, y - num)
    top_right = _candidate(stats, shape, lower_rows, left_cols)  # (x, y - num)
    bottom_left = _candidate(stats, shape, upper_rows, right_cols)  # (x - num, y)
    bottom_right = _candidate(stats, shape, upper_rows, left_cols)  # (x, y)

    colors, variances = _pick(_pick(top_left, top_right), _pick(bottom_left, bottom_right))

    uncovered = np.isinf(variances)
    if uncovered.any():
        ys, xs = np.nonzero(uncovered)
        raise InvalidParameterException(
            "num",
            num,
            f"no window covers pixel ({int(xs[0])}, {int(ys[0])}) of {width}x{height} image",
        )
    return colors


@log_effect
def kuwahara(image: RgbaImage, num: int) -> None:
    """
    Apply the Kuwahara filter in place.

    Args:
        image: Image to modify in place; alpha is left untouched
        num: Window parameter; windows are (num + 1) x (num + 1)

    Raises:
        InvalidParameterException: If num < 0, num >= min(width, height), or
            the image is too small for every pixel to be covered by a window
            (width or height below 2 * num). Raised before any pixel is written.
    """
    num = validate_radius(image, num)

    stats = compute_window_statistics(image, num)
    logger.debug(f"Computed {len(stats)} window statistics (window {num + 1}x{num + 1})")

    colors = select_window_colors(stats, num)
    image.view()[..., :3] = colors
