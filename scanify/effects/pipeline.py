"""Effect composition pipeline."""

from typing import Dict, Optional

import numpy as np

from ..config import ScanPreset
from ..core.utils import validate_frame
from .base import Effect
from .blur_effect import BlurEffect
from .color_effect import ColorAdjustEffect
from .dust_effect import DustEffect
from .lighting_effect import UnevenLightingEffect
from .noise_effect import NoiseEffect
from .paper_effect import PaperDarkeningEffect
from .rotation_effect import RotationEffect
from .shadow_effect import EdgeShadowEffect
from .warp_effect import create_warp_effect

# Every stage slot gets its own random stream, whether or not the stage is
# enabled, so toggling one effect never changes another effect's draws.
STAGE_ORDER = (
    "warp",
    "paper",
    "color",
    "blur",
    "noise",
    "lighting",
    "edge_shadow",
    "rotation",
    "dust",
)


class EffectPipeline:
    """Chain multiple effects and apply them in sequence."""

    def __init__(self, effects: list[Effect]):
        """Initialize pipeline with ordered effects.

        Args:
            effects: Effects to apply in order. Each effect's ``name`` must be
                a stage in STAGE_ORDER and may appear only once.

        Raises:
            ValueError: If an effect name is unknown or repeated.
        """
        names = [effect.name for effect in effects]
        unknown = [name for name in names if name not in STAGE_ORDER]
        if unknown:
            raise ValueError(f"Unknown pipeline stage(s): {', '.join(unknown)}")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate pipeline stages: {names}")
        self.effects = list(effects)

    @property
    def stage_names(self) -> list[str]:
        return [effect.name for effect in self.effects]

    def stage_streams(self, rng: np.random.Generator) -> Dict[str, np.random.Generator]:
        """Split a page generator into one independent stream per stage."""
        return dict(zip(STAGE_ORDER, rng.spawn(len(STAGE_ORDER))))

    def apply(
        self, frame: np.ndarray, rng: Optional[np.random.Generator] = None
    ) -> np.ndarray:
        """Apply all effects to a frame in sequence.

        Args:
            frame: Input frame (RGB, uint8). Left unmodified.
            rng: Random generator for this page; a fresh unseeded one is
                used when omitted.

        Returns:
            The processed frame after all effects, same shape as the input.

        Raises:
            RasterError: If the frame is not a non-empty RGB uint8 raster.
        """
        validate_frame(frame)
        if rng is None:
            rng = np.random.default_rng()
        streams = self.stage_streams(rng)

        output = frame
        for effect in self.effects:
            output = effect.apply(output, streams[effect.name])
        return output


def build_pipeline(preset: ScanPreset) -> EffectPipeline:
    """Build the scan pipeline for a preset.

    Order: warp (optional), paper darkening, color, blur, noise, uneven
    lighting, edge shadow, rotation, dust (optional). Dust comes after the
    rotation because it lies on the scanner glass, not on the page.

    Args:
        preset: Effect strengths and toggles.

    Returns:
        Configured EffectPipeline.

    Raises:
        ValueError: If a preset value is out of range.
    """
    effects: list[Effect] = []
    if preset.apply_warp:
        effects.append(create_warp_effect(preset.warp_strategy))
    effects.extend(
        [
            PaperDarkeningEffect(preset.paper_darkening),
            ColorAdjustEffect(
                contrast=preset.contrast,
                brightness=preset.brightness,
                saturation=preset.saturation,
            ),
            BlurEffect(preset.blur_radius),
            NoiseEffect(preset.noise_intensity),
            UnevenLightingEffect(preset.uneven_lighting),
            EdgeShadowEffect(preset.edge_shadow),
            RotationEffect(preset.rotation_range),
        ]
    )
    if preset.apply_dust:
        effects.append(DustEffect())
    return EffectPipeline(effects)


def apply_scan_effect(
    frame: np.ndarray,
    preset: ScanPreset,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Make one page look scanned.

    Args:
        frame: Input page (RGB, uint8).
        preset: Effect strengths and toggles.
        rng: Random generator for this page.

    Returns:
        Scanned-looking page with the same shape.
    """
    return build_pipeline(preset).apply(frame, rng)
