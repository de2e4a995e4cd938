"""Uneven scanner lighting."""

import numpy as np

from ..core.utils import multiply_mask, radial_gradient
from .base import check_range

CENTER_JITTER = 0.1
OUTER_RADIUS_FACTOR = 0.8
INNER_RADIUS_FACTOR = 0.2


class UnevenLightingEffect:
    """Radial brightness falloff around a slightly off-center hot spot.

    The lamp of a flatbed scanner is never perfectly uniform: the page is
    brightest near one point and dims by ``intensity`` toward the rim.
    """

    name = "lighting"

    def __init__(self, intensity: float = 0.08):
        """Initialize the effect.

        Args:
            intensity: Brightness lost at the outer radius, in [0, 1].
        """
        self.intensity = check_range("uneven_lighting", intensity, 0.0, 1.0)

    def sample_center(
        self, width: int, height: int, rng: np.random.Generator
    ) -> tuple[float, float]:
        """Pick the hot spot within 10% of the frame center."""
        cx = width / 2 + width * rng.uniform(-CENTER_JITTER, CENTER_JITTER)
        cy = height / 2 + height * rng.uniform(-CENTER_JITTER, CENTER_JITTER)
        return cx, cy

    def lighting_mask(
        self, width: int, height: int, center: tuple[float, float]
    ) -> np.ndarray:
        outer = max(width, height) * OUTER_RADIUS_FACTOR
        return radial_gradient(
            width,
            height,
            center,
            inner_radius=outer * INNER_RADIUS_FACTOR,
            outer_radius=outer,
            inner_value=1.0,
            outer_value=1.0 - self.intensity,
        )

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        if self.intensity <= 0:
            return frame.copy()
        height, width = frame.shape[:2]
        center = self.sample_center(width, height, rng)
        return multiply_mask(frame, self.lighting_mask(width, height, center))
