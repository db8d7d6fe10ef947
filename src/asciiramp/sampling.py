import math

import numpy as np
from PIL import Image

from asciiramp.errors import InvalidDimensions
from asciiramp.model import ConversionParameters, SourceImage


def target_size(source: SourceImage, params: ConversionParameters) -> tuple[int, int]:
    """Return the (columns, rows) of the character grid."""
    if params.target_width <= 0:
        raise InvalidDimensions(f"Target width must be positive, got {params.target_width}")
    if not params.preserve_aspect_ratio:
        if params.target_height <= 0:
            raise InvalidDimensions(f"Target height must be positive, got {params.target_height}")
        return params.target_width, params.target_height

    if source.height == 0 or source.width == 0:
        raise InvalidDimensions(f"Cannot preserve the aspect ratio of a {source.width}x{source.height} image")
    aspect_ratio = source.width / source.height
    # Round half up; very wide images still get one row
    rows = math.floor(params.target_width / aspect_ratio + 0.5)
    return params.target_width, max(1, rows)


def resample(source: SourceImage, width: int, height: int) -> np.ndarray:
    """Scale the source to (height, width, 4) RGBA with a bilinear filter.

    Colour and alpha are scaled as separate planes so that transparent
    pixels keep their colour; alpha is ignored downstream anyway.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Cannot resample to {width}x{height}")
    if source.width == 0 or source.height == 0:
        raise InvalidDimensions(f"Cannot resample a {source.width}x{source.height} image")

    rgb = Image.fromarray(np.ascontiguousarray(source.pixels[:, :, :3]))
    alpha = Image.fromarray(np.ascontiguousarray(source.pixels[:, :, 3]))
    rgb = rgb.resize((width, height), Image.BILINEAR)
    alpha = alpha.resize((width, height), Image.BILINEAR)

    out = np.empty((height, width, 4), dtype=np.uint8)
    out[:, :, :3] = np.asarray(rgb)
    out[:, :, 3] = np.asarray(alpha)
    return out
