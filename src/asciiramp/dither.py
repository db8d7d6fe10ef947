"""Symbol quantization with Floyd-Steinberg error diffusion.

Cells are visited in strict raster order. Each cell is read exactly once,
when the scan reaches it; its quantization error is then added to the
neighbours that have not been visited yet, so the buffer is only ever
written ahead of the cursor.
"""

import math
from collections.abc import Sequence

import numpy as np

from asciiramp.charsets import validate_ramp
from asciiramp.model import RenderedArt, WorkingGrid

# (dx, dy, weight) for the unvisited neighbours; weights sum to 1
DIFFUSION_WEIGHTS = (
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
)


def quantize_index(value: float, ramp_length: int) -> int:
    if ramp_length == 1:
        return 0
    index = math.floor(value / 255.0 * (ramp_length - 1))
    return min(max(index, 0), ramp_length - 1)


def quantized_value(index: int, ramp_length: int) -> float:
    """Intensity a ramp index stands for. A single-symbol ramp stands for 0."""
    if ramp_length == 1:
        return 0.0
    return index / (ramp_length - 1) * 255.0


def diffuse(values: np.ndarray, x: int, y: int, error: float) -> None:
    """Spread error from (x, y) to in-bounds unvisited neighbours; the rest is dropped."""
    height, width = values.shape
    for dx, dy, weight in DIFFUSION_WEIGHTS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and ny < height:
            values[ny, nx] += error * weight


def render_grid(grid: WorkingGrid, ramp: str | Sequence[str], dither: bool = True) -> RenderedArt:
    """Quantize the grid to ramp symbols, one line per row.

    The grid's buffer is consumed: diffused error is accumulated into it.
    """
    symbols = validate_ramp(ramp)
    n = len(symbols)
    values = grid.values
    height, width = values.shape

    lines = []
    for y in range(height):
        row = []
        for x in range(width):
            v = float(values[y, x])
            index = quantize_index(v, n)
            row.append(symbols[index])
            if dither:
                diffuse(values, x, y, v - quantized_value(index, n))
        lines.append("".join(row))
    return RenderedArt(tuple(lines))
