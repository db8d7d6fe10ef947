import numpy as np

from asciiramp.errors import InvalidParameter
from asciiramp.model import LUMINANCE_MODES, WorkingGrid, check_tone

# ITU-R 601 weights scaled by 1000 so integer pixels give exact results
_PERCEPTUAL_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)

MID_GRAY = 128.0


def luminance(rgba: np.ndarray, mode: str = "perceptual") -> np.ndarray:
    """Per-pixel luminance in [0, 255] of an (h, w, 3|4) array. Alpha is ignored."""
    rgb = np.asarray(rgba)[..., :3].astype(np.int64)
    if mode == "perceptual":
        return (rgb @ _PERCEPTUAL_WEIGHTS) / 1000.0
    if mode == "average":
        return rgb.sum(axis=-1) / 3.0
    raise InvalidParameter(f"Unknown luminance mode: {mode!r}, expected one of {LUMINANCE_MODES}")


def adjust_tone(luma: np.ndarray, brightness: float = 1.0, contrast: float = 1.0) -> np.ndarray:
    """Gamma-style brightness, then contrast around mid-gray, clamped to [0, 255]."""
    check_tone(brightness, contrast)
    luma = np.asarray(luma, dtype=np.float64)
    toned = 255.0 * (luma / 255.0) ** (1.0 / brightness)
    contrasted = (toned - MID_GRAY) * contrast + MID_GRAY
    return np.clip(contrasted, 0.0, 255.0)


def tone_map(rgba: np.ndarray, brightness: float = 1.0, contrast: float = 1.0, mode: str = "perceptual") -> WorkingGrid:
    return WorkingGrid(adjust_tone(luminance(rgba, mode), brightness, contrast))
