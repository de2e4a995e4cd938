"""Edge shadows from the scanner lid."""

import numpy as np

from ..core.utils import distance_map, linear_ramp, multiply_mask
from .base import check_range

VIGNETTE_RADIUS_FACTOR = 0.7
TOP_SHADOW_HEIGHT = 0.15
TOP_SHADOW_STRENGTH = 0.5


def vignette_mask(width: int, height: int, strength: float) -> np.ndarray:
    """Radial darkening toward the corners.

    Args:
        width: Frame width.
        height: Frame height.
        strength: Darkening reached at the vignette radius.

    Returns:
        (H, W) float32 mask.
    """
    radius = max(width, height) * VIGNETTE_RADIUS_FACTOR
    dist = distance_map(width, height, (width / 2, height / 2))
    falloff = np.clip(dist / radius, 0.0, 1.0) ** 4
    return (1.0 - strength * falloff).astype(np.float32)


def top_shadow_profile(height: int, strength: float) -> np.ndarray:
    """Per-row factors for the shadow cast along the top edge."""
    shadow_height = max(1, int(height * TOP_SHADOW_HEIGHT))
    return linear_ramp(height, 0, shadow_height, 1.0 - strength, 1.0)


class EdgeShadowEffect:
    """Vignette plus a linear shadow along the top edge."""

    name = "edge_shadow"

    def __init__(self, intensity: float = 0.4):
        """Initialize the effect.

        Args:
            intensity: Vignette strength in [0, 1]; the top shadow uses half.
        """
        self.intensity = check_range("edge_shadow", intensity, 0.0, 1.0)

    def shadow_mask(self, width: int, height: int) -> np.ndarray:
        vignette = vignette_mask(width, height, self.intensity)
        top = top_shadow_profile(height, self.intensity * TOP_SHADOW_STRENGTH)
        return vignette * top[:, np.newaxis]

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        if self.intensity <= 0:
            return frame.copy()
        height, width = frame.shape[:2]
        return multiply_mask(frame, self.shadow_mask(width, height))
