import io
from collections.abc import Sequence
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciiramp import charsets
from asciiramp.dither import render_grid
from asciiramp.errors import DecodeError
from asciiramp.model import ConversionParameters, RenderedArt, SourceImage
from asciiramp.sampling import resample, target_size
from asciiramp.tone import tone_map

_background = ThreadPoolExecutor(max_workers=1, thread_name_prefix="asciiramp")


def convert(
    image: SourceImage,
    params: ConversionParameters | None = None,
    ramp: str | Sequence[str] = charsets.DEFAULT,
) -> RenderedArt:
    """Resample, tone-map and quantize one image into text lines."""
    if params is None:
        params = ConversionParameters()
    params.validate()
    symbols = charsets.validate_ramp(ramp)

    width, height = target_size(image, params)
    rgba = resample(image, width, height)
    grid = tone_map(rgba, params.brightness, params.contrast, params.luminance)
    return render_grid(grid, symbols, dither=params.dither)


def convert_in_background(
    image: SourceImage,
    params: ConversionParameters | None = None,
    ramp: str | Sequence[str] = charsets.DEFAULT,
    executor: Executor | None = None,
) -> "Future[RenderedArt]":
    """Run convert() as one unit of work on an executor. Errors surface from result()."""
    if executor is None:
        executor = _background
    return executor.submit(convert, image, params, ramp)


def _from_pil(image: Image.Image) -> SourceImage:
    return SourceImage(np.asarray(image.convert("RGBA")))


def decode(data: bytes) -> SourceImage:
    """Decode an encoded image (PNG, JPEG, ...) into RGBA pixels."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return _from_pil(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(f"Cannot decode image: {e}") from e


def load_image(image: Image.Image | str | Path | bytes) -> SourceImage:
    if isinstance(image, Image.Image):
        return _from_pil(image)
    if isinstance(image, (bytes, bytearray)):
        return decode(bytes(image))
    path = Path(image)
    try:
        with Image.open(path) as opened:
            return _from_pil(opened)
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(f"Cannot decode {path}: {e}") from e


def image_to_ascii(
    image: Image.Image | str | Path | bytes,
    params: ConversionParameters | None = None,
    ramp: str | Sequence[str] = charsets.DEFAULT,
) -> str:
    return convert(load_image(image), params, ramp).to_text()
