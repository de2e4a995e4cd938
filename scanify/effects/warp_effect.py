"""Paper warp effects.

Two renderings of non-flat paper are available. ``ShadowBandWarp`` darkens a
horizontal band as if the sheet were creased across its middle;
``BumpWarp`` displaces pixels with a lens-like bulge. The strategy is fixed
when the pipeline is built.
"""

from dataclasses import dataclass

import cv2
import numpy as np

from ..config import WarpStrategy
from ..core.utils import multiply_mask

BAND_CENTER_JITTER = 0.15
BAND_THICKNESS_RANGE = (0.25, 0.40)
BAND_INTENSITY_RANGE = (0.25, 0.40)


@dataclass(frozen=True)
class ShadowBand:
    """A horizontal shadow band.

    Attributes:
        center: Row of the darkest point.
        thickness: Full band height in pixels.
        intensity: Darkening at the band center.
    """

    center: float
    thickness: float
    intensity: float


@dataclass(frozen=True)
class Bump:
    """A radial bulge.

    Attributes:
        center_x: Bulge center column.
        center_y: Bulge center row.
        radius: Radius of the displaced area.
        scale: Magnification strength, in [0, 1).
    """

    center_x: float
    center_y: float
    radius: float
    scale: float


def band_profile(height: int, band: ShadowBand) -> np.ndarray:
    """Per-row brightness factors: white, ramping to the band center and back."""
    rows = np.arange(height, dtype=np.float32)
    half = max(band.thickness / 2, 1e-6)
    depth = np.clip(1.0 - np.abs(rows - band.center) / half, 0.0, 1.0)
    return (1.0 - band.intensity * depth).astype(np.float32)


class ShadowBandWarp:
    """Shadow band across the page suggesting a bend in the paper."""

    name = "warp"

    def sample_band(self, height: int, rng: np.random.Generator) -> ShadowBand:
        center = height / 2 + height * rng.uniform(-BAND_CENTER_JITTER, BAND_CENTER_JITTER)
        thickness = height * rng.uniform(*BAND_THICKNESS_RANGE)
        intensity = rng.uniform(*BAND_INTENSITY_RANGE)
        return ShadowBand(center=center, thickness=thickness, intensity=intensity)

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        height, width = frame.shape[:2]
        band = self.sample_band(height, rng)
        canvas = np.ones((height, width), dtype=np.float32)
        canvas *= band_profile(height, band)[:, np.newaxis]
        return multiply_mask(frame, canvas)


def bump_maps(width: int, height: int, bump: Bump) -> tuple[np.ndarray, np.ndarray]:
    """Sampling maps for ``cv2.remap`` that produce a bulge.

    A pixel at distance ``d < radius`` from the center samples from
    ``center + offset * (1 - scale * (1 - d / radius) ** 2)``; pixels outside
    the radius map to themselves.

    Returns:
        Tuple of (map_x, map_y) float32 arrays.
    """
    xs = np.arange(width, dtype=np.float32) - np.float32(bump.center_x)
    ys = np.arange(height, dtype=np.float32) - np.float32(bump.center_y)
    dx = np.broadcast_to(xs[np.newaxis, :], (height, width))
    dy = np.broadcast_to(ys[:, np.newaxis], (height, width))
    t = np.clip(np.sqrt(dx * dx + dy * dy) / bump.radius, 0.0, 1.0)
    factor = 1.0 - bump.scale * (1.0 - t) ** 2
    map_x = (bump.center_x + dx * factor).astype(np.float32)
    map_y = (bump.center_y + dy * factor).astype(np.float32)
    return map_x, map_y


class BumpWarp:
    """Lens-like displacement simulating paper curvature.

    The bulge follows one of three layouts: a bend along the horizontal axis,
    a bend along the vertical axis, or one lifted corner.
    """

    name = "warp"

    def sample_bump(self, width: int, height: int, rng: np.random.Generator) -> Bump:
        layout = int(rng.integers(0, 3))
        if layout == 0:
            return Bump(
                center_x=width / 2 + width * rng.uniform(-0.05, 0.05),
                center_y=height / 2,
                radius=width * 0.8,
                scale=rng.uniform(0.15, 0.25),
            )
        if layout == 1:
            return Bump(
                center_x=width / 2,
                center_y=height / 2 + height * rng.uniform(-0.05, 0.05),
                radius=height * 0.7,
                scale=rng.uniform(0.12, 0.22),
            )
        corners = [
            (width * 0.2, height * 0.2),
            (width * 0.8, height * 0.2),
            (width * 0.2, height * 0.8),
            (width * 0.8, height * 0.8),
        ]
        cx, cy = corners[int(rng.integers(0, len(corners)))]
        return Bump(
            center_x=cx,
            center_y=cy,
            radius=min(width, height) * 0.4,
            scale=rng.uniform(0.18, 0.28),
        )

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        height, width = frame.shape[:2]
        bump = self.sample_bump(width, height, rng)
        if bump.radius < 1:
            return frame.copy()
        map_x, map_y = bump_maps(width, height, bump)
        return cv2.remap(
            frame,
            map_x,
            map_y,
            interpolation=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_REPLICATE,
        )


def create_warp_effect(strategy) -> ShadowBandWarp | BumpWarp:
    """Create the warp effect for a strategy.

    Args:
        strategy: WarpStrategy or its string value.

    Raises:
        ValueError: If the strategy is unknown.
    """
    strategy = WarpStrategy(strategy)
    if strategy is WarpStrategy.SHADOW_BAND:
        return ShadowBandWarp()
    if strategy is WarpStrategy.GEOMETRIC_BUMP:
        return BumpWarp()
    raise ValueError(f"Unknown warp strategy: {strategy}")
