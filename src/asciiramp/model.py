from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from asciiramp.errors import InvalidDimensions, InvalidParameter

LUMINANCE_MODES = ("perceptual", "average")


def check_tone(brightness: float, contrast: float) -> None:
    """Brightness must be finite and positive, contrast finite."""
    if not (math.isfinite(brightness) and brightness > 0):
        raise InvalidParameter(f"Brightness must be a positive number, got {brightness}")
    if not math.isfinite(contrast):
        raise InvalidParameter(f"Contrast must be a finite number, got {contrast}")


@dataclass(frozen=True)
class SourceImage:
    """Decoded RGBA8 pixels, row-major, shape (height, width, 4)."""

    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.asarray(self.pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidDimensions(f"Expected (height, width, 4) RGBA pixels, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            if not np.issubdtype(pixels.dtype, np.integer):
                raise InvalidParameter(f"RGBA samples must be integers, got dtype {pixels.dtype}")
            if pixels.size and (pixels.min() < 0 or pixels.max() > 255):
                raise InvalidParameter("RGBA samples must lie in 0..255")
        pixels = pixels.astype(np.uint8, copy=True)
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def from_rgba(cls, width: int, height: int, data) -> "SourceImage":
        """Build from a flat sequence of width*height RGBA samples (or bytes)."""
        flat = np.frombuffer(data, dtype=np.uint8) if isinstance(data, (bytes, bytearray)) else np.asarray(data)
        if flat.size != width * height * 4:
            raise InvalidDimensions(f"Expected {width * height * 4} samples for {width}x{height}, got {flat.size}")
        return cls(flat.reshape(height, width, 4))


@dataclass(frozen=True)
class ConversionParameters:
    target_width: int = 100
    preserve_aspect_ratio: bool = False
    # Character cells are roughly twice as tall as wide, hence half the width.
    target_height: int = 50
    brightness: float = 1.0
    contrast: float = 1.0
    dither: bool = True
    luminance: str = "perceptual"

    def validate(self) -> None:
        if self.target_width <= 0:
            raise InvalidDimensions(f"Target width must be positive, got {self.target_width}")
        if not self.preserve_aspect_ratio and self.target_height <= 0:
            raise InvalidDimensions(f"Target height must be positive, got {self.target_height}")
        check_tone(self.brightness, self.contrast)
        if self.luminance not in LUMINANCE_MODES:
            raise InvalidParameter(f"Unknown luminance mode: {self.luminance!r}")

    @classmethod
    def reduced(cls, target_width: int = 100, target_height: int | None = None, **kwargs) -> "ConversionParameters":
        """Plain averaging, no error diffusion."""
        if target_height is None:
            target_height = max(1, target_width // 2)
        return cls(
            target_width=target_width, target_height=target_height, dither=False, luminance="average", **kwargs
        )


@dataclass
class WorkingGrid:
    """Mutable intensity buffer, shape (height, width), values nominally in [0, 255]."""

    values: np.ndarray

    @property
    def width(self) -> int:
        return self.values.shape[1]

    @property
    def height(self) -> int:
        return self.values.shape[0]


@dataclass(frozen=True)
class RenderedArt:
    lines: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    def to_text(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.to_text()
