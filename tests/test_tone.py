import math

import numpy as np
import pytest

from asciiramp.errors import InvalidParameter
from asciiramp.tone import adjust_tone, luminance, tone_map


def rgba(*pixels):
    return np.array([list(pixels)], dtype=np.uint8)


def test_perceptual_weights():
    result = luminance(rgba((255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255)))
    np.testing.assert_allclose(result[0], [76.245, 149.685, 29.07])


def test_white_and_grey_are_exact():
    result = luminance(rgba((255, 255, 255, 255), (128, 128, 128, 255), (0, 0, 0, 255)))
    assert result[0].tolist() == [255.0, 128.0, 0.0]


def test_alpha_is_ignored():
    opaque = luminance(rgba((10, 200, 30, 255)))
    transparent = luminance(rgba((10, 200, 30, 0)))
    np.testing.assert_array_equal(opaque, transparent)


def test_average_mode():
    result = luminance(rgba((30, 60, 90, 255)), mode="average")
    assert result[0, 0] == 60.0


def test_unknown_mode():
    with pytest.raises(InvalidParameter):
        luminance(rgba((0, 0, 0, 255)), mode="hsl")


def test_identity_settings():
    luma = np.array([0.0, 64.0, 128.0, 255.0])
    np.testing.assert_allclose(adjust_tone(luma), luma)


def test_brightness_above_one_lightens_midtones():
    luma = np.array([64.0])
    assert adjust_tone(luma, brightness=2.0)[0] > 64.0
    assert adjust_tone(luma, brightness=0.5)[0] < 64.0


def test_brightness_keeps_extremes():
    result = adjust_tone(np.array([0.0, 255.0]), brightness=3.0)
    np.testing.assert_allclose(result, [0.0, 255.0])


def test_zero_contrast_collapses_to_mid_gray():
    result = adjust_tone(np.array([0.0, 50.0, 255.0]), contrast=0.0)
    np.testing.assert_array_equal(result, 128.0)


def test_contrast_is_clamped():
    result = adjust_tone(np.array([10.0, 250.0]), contrast=4.0)
    assert result.tolist() == [0.0, 255.0]


@pytest.mark.parametrize("brightness", [0.0, -1.0])
def test_non_positive_brightness(brightness):
    with pytest.raises(InvalidParameter):
        adjust_tone(np.array([1.0]), brightness=brightness)


def test_tone_map_returns_working_grid():
    pixels = np.zeros((3, 5, 4), dtype=np.uint8)
    grid = tone_map(pixels)
    assert (grid.width, grid.height) == (5, 3)
    assert grid.values.dtype == np.float64


@pytest.mark.parametrize("brightness, contrast", [(math.nan, 1.0), (1.0, math.nan), (1.0, math.inf)])
def test_non_finite_settings(brightness, contrast):
    with pytest.raises(InvalidParameter):
        adjust_tone(np.array([128.0]), brightness=brightness, contrast=contrast)
