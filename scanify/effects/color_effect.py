"""Contrast, brightness and saturation adjustment."""

import numpy as np

from ..core.utils import from_unit, to_unit
from .base import check_range

# Rec. 709 luma weights for gamma-encoded RGB
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float32)


def adjust_color(
    frame: np.ndarray,
    contrast: float = 1.0,
    brightness: float = 0.0,
    saturation: float = 1.0,
) -> np.ndarray:
    """Adjust contrast, then brightness, then saturation in one pass.

    Intermediate values are kept unclipped; the result is clipped once.

    Args:
        frame: Input frame (RGB, uint8).
        contrast: Scale around mid-gray (1.0 = unchanged).
        brightness: Additive offset in [0, 1] units (0.0 = unchanged).
        saturation: Blend toward luma (1.0 = unchanged, 0.0 = gray).

    Returns:
        Adjusted frame.
    """
    rgb = to_unit(frame)
    rgb = (rgb - 0.5) * contrast + 0.5
    rgb = rgb + brightness
    luma = (rgb @ LUMA_WEIGHTS)[:, :, np.newaxis]
    rgb = luma + saturation * (rgb - luma)
    return from_unit(rgb)


class ColorAdjustEffect:
    """Scanner color response: contrast, brightness and saturation."""

    name = "color"

    def __init__(
        self, contrast: float = 1.1, brightness: float = -0.02, saturation: float = 0.9
    ):
        """Initialize the effect.

        Args:
            contrast: Contrast factor, 0 to 4.
            brightness: Brightness offset, -1 to 1.
            saturation: Saturation factor, 0 to 4.
        """
        self.contrast = check_range("contrast", contrast, 0.0, 4.0)
        self.brightness = check_range("brightness", brightness, -1.0, 1.0)
        self.saturation = check_range("saturation", saturation, 0.0, 4.0)

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        return adjust_color(frame, self.contrast, self.brightness, self.saturation)
