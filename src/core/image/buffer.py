"""
RGBA pixel buffer.

The buffer is a flat ``uint8`` NumPy array holding ``width * height`` pixels
in row-major order, four bytes per pixel (R, G, B, A). Pixel ``(x, y)``
occupies bytes ``[4 * (y * width + x), 4 * (y * width + x) + 4)``.

Effects either work on ``view()``, a writable ``(height, width, 4)`` view
sharing the buffer's memory, or go through ``get_pixel``/``set_pixel``.
"""

import logging
from typing import Tuple, Union

import numpy as np

from common.constants import ImageConstants
from core.exceptions import InvalidImageException, PixelOutOfBoundsException

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int, int]
PixelSource = Union[np.ndarray, bytes, bytearray, memoryview, list]


class RgbaImage:
    """
    An image stored as a flat RGBA byte buffer.

    A contiguous ``uint8`` NumPy array passed in by the host is wrapped without
    copying, so in-place effects are visible to the caller. Other sources
    (bytes, lists) are copied into a new array.

    Raises:
        InvalidImageException: If the array is not uint8, not C-contiguous
            (a strided slice, for instance) or read-only, or if its length
            does not match the dimensions
    """

    def __init__(self, raw_pixels: PixelSource, width: int, height: int):
        if width < 0 or height < 0:
            raise InvalidImageException(
                f"dimensions must be non-negative, got {width}x{height}",
                details={"width": width, "height": height},
            )

        if isinstance(raw_pixels, np.ndarray):
            if raw_pixels.dtype != np.uint8:
                raise InvalidImageException(
                    f"pixel array must be uint8, got {raw_pixels.dtype}",
                    details={"dtype": str(raw_pixels.dtype)},
                )
            if not raw_pixels.flags.c_contiguous:
                raise InvalidImageException(
                    "pixel array must be C-contiguous, in-place effects would not reach a copy",
                    details={"shape": list(raw_pixels.shape), "strides": list(raw_pixels.strides)},
                )
            if not raw_pixels.flags.writeable:
                raise InvalidImageException("pixel array is read-only", details={"writeable": False})
            pixels = raw_pixels.reshape(-1)
        elif isinstance(raw_pixels, (bytes, bytearray, memoryview)):
            pixels = np.frombuffer(bytes(raw_pixels), dtype=np.uint8).copy()
        else:
            pixels = np.array(raw_pixels, dtype=np.uint8).reshape(-1)

        expected = width * height * ImageConstants.CHANNELS
        if pixels.size != expected:
            raise InvalidImageException(
                f"expected {expected} bytes for {width}x{height} RGBA, got {pixels.size}",
                details={"width": width, "height": height, "length": int(pixels.size)},
            )

        self._pixels = pixels
        self.width = int(width)
        self.height = int(height)

    # ─── Construction helpers ──────────────────────────────────────
    @classmethod
    def from_array(cls, array: np.ndarray) -> "RgbaImage":
        """
        Wrap an HxWx4 (or copy an HxWx3) uint8 array.

        Args:
            array: Image as NumPy array in RGB or RGBA channel order

        Returns:
            RgbaImage backed by the array (RGBA) or by a new array (RGB, opaque alpha)
        """
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise InvalidImageException(
                f"expected HxWx3 or HxWx4 array, got shape {array.shape}",
                details={"shape": list(array.shape)},
            )

        height, width = array.shape[:2]
        if array.shape[2] == 3:
            alpha = np.full((height, width, 1), ImageConstants.OPAQUE_ALPHA, dtype=np.uint8)
            array = np.concatenate([array.astype(np.uint8), alpha], axis=2)

        return cls(array, width, height)

    @classmethod
    def blank(cls, width: int, height: int, color: Pixel = (0, 0, 0, 255)) -> "RgbaImage":
        """Create an image filled with a single RGBA color."""
        array = np.empty((height, width, ImageConstants.CHANNELS), dtype=np.uint8)
        array[...] = color
        return cls(array, width, height)

    def copy(self) -> "RgbaImage":
        """Deep copy with its own buffer."""
        return RgbaImage(self._pixels.copy(), self.width, self.height)

    # ─── Accessors ─────────────────────────────────────────────────
    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    @property
    def raw_pixels(self) -> np.ndarray:
        """The flat pixel buffer (shared, not a copy)."""
        return self._pixels

    def get_raw_pixels(self) -> bytes:
        """Copy of the flat pixel buffer as bytes."""
        return self._pixels.tobytes()

    def view(self) -> np.ndarray:
        """Writable (height, width, 4) view sharing the buffer's memory."""
        return self._pixels.reshape(self.height, self.width, ImageConstants.CHANNELS)

    def to_array(self) -> np.ndarray:
        """Copy of the image as a (height, width, 4) array."""
        return self.view().copy()

    def _offset(self, x: int, y: int) -> int:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise PixelOutOfBoundsException(x, y, self.width, self.height)
        return ImageConstants.CHANNELS * (y * self.width + x)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """
        Read one pixel.

        Args:
            x: Column
            y: Row

        Returns:
            (r, g, b, a) tuple

        Raises:
            PixelOutOfBoundsException: If (x, y) lies outside the buffer
        """
        i = self._offset(x, y)
        r, g, b, a = self._pixels[i : i + ImageConstants.CHANNELS]
        return (int(r), int(g), int(b), int(a))

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """
        Write one pixel.

        Args:
            x: Column
            y: Row
            pixel: (r, g, b, a) tuple of values in [0, 255]

        Raises:
            PixelOutOfBoundsException: If (x, y) lies outside the buffer
        """
        i = self._offset(x, y)
        self._pixels[i : i + ImageConstants.CHANNELS] = pixel

    def __repr__(self) -> str:
        return f"RgbaImage(width={self.width}, height={self.height})"
