import numpy as np
import pytest

from asciiramp.model import SourceImage


def gray_source(levels) -> SourceImage:
    """Opaque grey SourceImage from a 2D list of 0-255 levels."""
    levels = np.asarray(levels, dtype=np.uint8)
    pixels = np.empty(levels.shape + (4,), dtype=np.uint8)
    pixels[:, :, :3] = levels[:, :, None]
    pixels[:, :, 3] = 255
    return SourceImage(pixels)


@pytest.fixture
def make_gray():
    return gray_source
