"""
Tests for core.image.drawing module.
"""

import numpy as np
import pytest
from pydantic import ValidationError

from common.base import Rect
from core.image.buffer import RgbaImage
from core.image.drawing import fill_rect

WHITE = (255, 255, 255, 255)


class TestFillRect:
    """Tests for fill_rect function."""

    def test_fills_exact_region(self):
        """Test only pixels inside the rectangle are painted."""
        image = RgbaImage.blank(4, 4)

        fill_rect(image, Rect(x=1, y=1, width=2, height=2), WHITE)

        view = image.view()
        assert np.all(view[1:3, 1:3] == 255)
        mask = np.ones((4, 4), dtype=bool)
        mask[1:3, 1:3] = False
        assert np.all(view[mask] == [0, 0, 0, 255])

    def test_fill_sets_alpha(self):
        """Test the alpha component of the color is written."""
        image = RgbaImage.blank(2, 2, (0, 0, 0, 0))

        fill_rect(image, Rect(x=0, y=0, width=1, height=1), (10, 20, 30, 40))

        assert image.get_pixel(0, 0) == (10, 20, 30, 40)
        assert image.get_pixel(1, 1) == (0, 0, 0, 0)

    def test_clips_to_image(self):
        """Test rectangles extending past the edge are clipped."""
        image = RgbaImage.blank(4, 2)

        fill_rect(image, Rect(x=3, y=0, width=5, height=1), WHITE)

        assert image.get_pixel(3, 0) == WHITE
        assert image.get_pixel(2, 0) == (0, 0, 0, 255)
        assert image.get_pixel(3, 1) == (0, 0, 0, 255)

    def test_single_pixel(self):
        """Test a 1x1 rectangle paints exactly one pixel."""
        image = RgbaImage.blank(3, 3)

        fill_rect(image, Rect(x=1, y=1, width=1, height=1), WHITE)

        assert int((image.view()[..., 0] == 255).sum()) == 1

    def test_returns_same_image(self):
        """Test the painted image is returned for chaining."""
        image = RgbaImage.blank(2, 2)
        assert fill_rect(image, Rect(x=0, y=0, width=1, height=1), WHITE) is image

    def test_zero_sized_rect_rejected(self):
        """Test rectangles must have a positive size."""
        with pytest.raises(ValidationError):
            Rect(x=0, y=0, width=0, height=1)
