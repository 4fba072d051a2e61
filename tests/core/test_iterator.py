"""
Tests for core.image.iterator module.

Tests the row-major coordinate contract and its vectorized helpers.
"""

import numpy as np
import pytest

from core.exceptions import InvalidParameterException
from core.image.iterator import ImageIterator


class TestIteration:
    """Tests for scalar iteration."""

    def test_row_major_order(self):
        """Test y is the outer loop and x the inner loop."""
        coords = list(ImageIterator(3, 2))

        assert coords == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_restartable(self):
        """Test iterating twice yields the same sequence."""
        iterator = ImageIterator(4, 3)

        assert list(iterator) == list(iterator)

    def test_lazy(self):
        """Test iteration produces a generator rather than a list."""
        iterator = iter(ImageIterator(1000, 1000))

        assert next(iterator) == (0, 0)
        assert next(iterator) == (1, 0)

    def test_empty(self):
        """Test zero-sized dimensions yield nothing."""
        assert list(ImageIterator(0, 5)) == []
        assert list(ImageIterator(5, 0)) == []

    def test_step(self):
        """Test stride on both axes."""
        coords = list(ImageIterator(3, 3, step=2))

        assert coords == [(0, 0), (2, 0), (0, 2), (2, 2)]

    def test_len_and_shape(self):
        """Test length and shape agree with the sequence."""
        iterator = ImageIterator(5, 3, step=2)

        assert iterator.shape == (2, 3)
        assert len(iterator) == len(list(iterator)) == 6

    def test_with_dimension(self):
        """Test construction from a (width, height) tuple."""
        iterator = ImageIterator.with_dimension((2, 3))

        assert (iterator.width, iterator.height) == (2, 3)

    @pytest.mark.parametrize("width,height,step", [(-1, 1, 1), (1, -1, 1), (1, 1, 0)])
    def test_invalid_arguments(self, width, height, step):
        """Test negative dimensions and non-positive steps are rejected."""
        with pytest.raises(InvalidParameterException):
            ImageIterator(width, height, step=step)


class TestVectorizedHelpers:
    """Tests for select() and coordinates()."""

    def test_select_matches_iteration(self):
        """Test select visits exactly the iterated coordinates."""
        array = np.arange(6 * 7).reshape(6, 7)
        iterator = ImageIterator(4, 3)

        selected = iterator.select(array, dx=2, dy=1)

        expected = [array[y + 1, x + 2] for x, y in iterator]
        assert selected.reshape(-1).tolist() == expected

    def test_select_with_step(self):
        """Test select honors the stride."""
        array = np.arange(5 * 5).reshape(5, 5)
        iterator = ImageIterator(4, 4, step=2)

        selected = iterator.select(array, dx=1, dy=1)

        expected = [array[y + 1, x + 1] for x, y in iterator]
        assert selected.reshape(-1).tolist() == expected

    def test_select_is_a_view(self):
        """Test writes through select reach the underlying array."""
        array = np.zeros((3, 3), dtype=np.uint8)

        ImageIterator(2, 2).select(array)[...] = 1

        assert int(array.sum()) == 4
        assert array[2, 2] == 0

    def test_select_keeps_trailing_axes(self):
        """Test channel axes are preserved."""
        array = np.zeros((4, 4, 4), dtype=np.uint8)

        assert ImageIterator(3, 2).select(array).shape == (2, 3, 4)

    def test_coordinates_match_iteration(self):
        """Test coordinate arrays follow the iteration order."""
        iterator = ImageIterator(3, 4, step=2)

        xs, ys = iterator.coordinates()

        assert list(zip(xs.tolist(), ys.tolist())) == list(iterator)
