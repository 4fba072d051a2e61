"""
Tests for effects.kuwahara module.
"""

import math

import numpy as np
import pytest

from core.exceptions import InvalidParameterException, PixelOutOfBoundsException
from core.image import create_noise_image, create_solid_image
from effects.kuwahara import compute_window_statistics, kuwahara


def reference_kuwahara(image, num):
    """Direct per-window loop, written with the pixel accessors."""
    width, height = image.dimensions()
    size = num + 1
    stats = {}
    for y in range(height - num):
        for x in range(width - num):
            window = [
                image.get_pixel(x + i, y + j)[:3] for j in range(size) for i in range(size)
            ]
            avg = [int(sum(p[c] for p in window) / size / size) for c in range(3)]
            variance = 0.0
            for c in range(3):
                variance += sum((p[c] - avg[c]) ** 2 for p in window) / size / size
            stats[(x, y)] = (tuple(avg), variance)

    def candidate(x, y):
        return stats.get((x, y), ((0, 0, 0), math.inf))

    def pick(left, right):
        return left if left[1] <= right[1] else right

    result = image.copy()
    for y in range(height):
        for x in range(width):
            upper = pick(candidate(x - num, y - num), candidate(x, y - num))
            lower = pick(candidate(x - num, y), candidate(x, y))
            color, _ = pick(upper, lower)
            alpha = image.get_pixel(x, y)[3]
            result.set_pixel(x, y, (*color, alpha))
    return result


class TestWindowStatistics:
    """Tests for compute_window_statistics."""

    def test_mean_and_variance(self, make_image):
        """Test a single 2x2 window: reds 0, 10, 20, 30."""
        image = make_image([[(0, 0, 0, 255), (10, 0, 0, 255)], [(20, 0, 0, 255), (30, 0, 0, 255)]])

        stats = compute_window_statistics(image, 1)

        assert len(stats) == 1
        window = stats.at(0, 0)
        assert window.average.to_tuple() == (15, 0, 0)
        assert window.variance == 125.0

    def test_mean_truncates(self, make_image):
        """Test the mean is truncated and the variance uses the truncated mean."""
        image = make_image([[(0, 0, 0, 255), (0, 0, 0, 255)], [(0, 0, 0, 255), (1, 0, 0, 255)]])

        window = compute_window_statistics(image, 1).at(0, 0)

        assert window.avg_r == 0
        assert window.variance == 0.25

    def test_grid_size(self, noise_image):
        """Test anchors cover (width - num) x (height - num)."""
        stats = compute_window_statistics(noise_image, 3)

        assert (stats.width, stats.height) == (17, 17)
        assert len(stats) == 289
        assert stats.index_of(2, 1) == 19

    def test_out_of_grid(self, noise_image):
        """Test anchors outside the grid are rejected."""
        stats = compute_window_statistics(noise_image, 3)

        with pytest.raises(PixelOutOfBoundsException):
            stats.at(17, 0)


class TestKuwahara:
    """Tests for kuwahara function."""

    def test_zero_is_identity(self, noise_image):
        """Test num = 0 uses 1x1 windows and leaves the image unchanged."""
        before = noise_image.to_array()

        kuwahara(noise_image, 0)

        assert np.array_equal(noise_image.to_array(), before)

    def test_single_bright_pixel(self):
        """Test every window of a 3x3 image contains the bright center."""
        image = create_solid_image(3, 3, (100, 100, 100, 77))
        image.set_pixel(1, 1, (200, 200, 200, 77))

        kuwahara(image, 1)

        assert np.all(image.to_array() == [125, 125, 125, 77])

    def test_preserves_edges(self):
        """Test a hard vertical edge survives smoothing."""
        image = create_solid_image(8, 8, (0, 0, 0, 255))
        image.view()[:, 4:, :3] = 255
        before = image.to_array()

        kuwahara(image, 1)

        assert np.array_equal(image.to_array(), before)

    def test_tie_prefers_top_left(self, make_image):
        """Test equal variances keep the top-left window over the top-right one."""
        red = (8, 0, 0, 255)
        green = (0, 8, 0, 255)
        black = (0, 0, 0, 255)
        gray = (200, 200, 200, 255)
        image = make_image([[red, black, green], [red, black, green], [gray, gray, gray]])

        kuwahara(image, 1)

        assert image.get_pixel(1, 1) == (4, 0, 0, 255)

    @pytest.mark.parametrize("num", [1, 2])
    def test_matches_direct_loop(self, num):
        """Test the integral-image implementation matches a direct loop exactly."""
        image = create_noise_image(7, 6, seed=7)
        image.view()[..., 3] = np.arange(42, dtype=np.uint8).reshape(6, 7)
        expected = reference_kuwahara(image, num)

        kuwahara(image, num)

        assert np.array_equal(image.to_array(), expected.to_array())

    @pytest.mark.parametrize("num", [-1, 4, 10])
    def test_invalid_num(self, black_image, num):
        """Test num must be non-negative and below both dimensions."""
        with pytest.raises(InvalidParameterException):
            kuwahara(black_image, num)

    def test_uncovered_pixel_rejected_before_write(self):
        """Test a window too large to cover the center raises without mutating."""
        image = create_noise_image(3, 3, seed=3)
        before = image.to_array()

        with pytest.raises(InvalidParameterException) as exc_info:
            kuwahara(image, 2)

        assert "no window covers pixel (1, 0)" in exc_info.value.message
        assert np.array_equal(image.to_array(), before)
