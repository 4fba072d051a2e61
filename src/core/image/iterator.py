"""
Coordinate iteration over a pixel grid.

``ImageIterator`` is the single source of in-bounds coordinates for the
effects. It yields ``(x, y)`` pairs in row-major order (y outer, x inner),
and can hand out the NumPy view or index arrays for the very same
coordinates so vectorized effects keep the scalar iteration contract.
"""

from typing import Iterator, Tuple

import numpy as np

from core.exceptions import InvalidParameterException


class ImageIterator:
    """
    Lazy, finite, restartable sequence of coordinates over [0, width) x [0, height).

    Args:
        width: Number of columns to visit
        height: Number of rows to visit
        step: Stride on both axes (2 visits the top-left corner of 2x2 blocks)
    """

    def __init__(self, width: int, height: int, step: int = 1):
        if width < 0:
            raise InvalidParameterException("width", width, "must be non-negative")
        if height < 0:
            raise InvalidParameterException("height", height, "must be non-negative")
        if step < 1:
            raise InvalidParameterException("step", step, "must be positive")

        self.width = int(width)
        self.height = int(height)
        self.step = int(step)

    @classmethod
    def with_dimension(cls, dimensions: Tuple[int, int]) -> "ImageIterator":
        """Create an iterator from a (width, height) tuple."""
        width, height = dimensions
        return cls(width, height)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for y in range(0, self.height, self.step):
            for x in range(0, self.width, self.step):
                yield (x, y)

    def __len__(self) -> int:
        rows, cols = self.shape
        return rows * cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Number of visited (rows, columns)."""
        return (len(range(0, self.height, self.step)), len(range(0, self.width, self.step)))

    def select(self, array: np.ndarray, dx: int = 0, dy: int = 0) -> np.ndarray:
        """
        View of ``array`` at the iterated coordinates shifted by (dx, dy).

        The caller guarantees the shifted coordinates stay inside ``array``.

        Args:
            array: Array indexed as [y, x, ...]
            dx: Column shift
            dy: Row shift

        Returns:
            Array view of shape ``self.shape + array.shape[2:]``
        """
        return array[
            dy : dy + self.height : self.step,
            dx : dx + self.width : self.step,
        ]

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Row-major coordinate arrays.

        Returns:
            Tuple of (xs, ys), each a 1-D int array in iteration order
        """
        ys, xs = np.meshgrid(
            np.arange(0, self.height, self.step),
            np.arange(0, self.width, self.step),
            indexing="ij",
        )
        return xs.reshape(-1), ys.reshape(-1)
