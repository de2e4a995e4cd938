"""Monochrome grain effect."""

import numpy as np

from ..core.utils import from_unit, to_unit
from .base import check_range


class NoiseEffect:
    """Additive film-like grain.

    One uniform noise field is shared by all three channels so the grain
    reads as luminance noise rather than color speckle.
    """

    name = "noise"

    def __init__(self, intensity: float = 0.025):
        """Initialize the effect.

        Args:
            intensity: Total width of the noise distribution in [0, 1]
                sample units; offsets fall in [-intensity/2, intensity/2].
        """
        self.intensity = check_range("noise_intensity", intensity, 0.0, 1.0)

    def noise_field(self, width: int, height: int, rng: np.random.Generator) -> np.ndarray:
        """Draw the per-pixel offsets for one frame.

        Returns:
            (H, W) float32 array of offsets.
        """
        field = rng.random((height, width), dtype=np.float32)
        return (field - 0.5) * np.float32(self.intensity)

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        if self.intensity <= 0:
            return frame.copy()
        height, width = frame.shape[:2]
        offsets = self.noise_field(width, height, rng)
        return from_unit(to_unit(frame) + offsets[:, :, np.newaxis])
