"""Scan simulation effects."""

from .base import Effect
from .blur_effect import BlurEffect
from .color_effect import ColorAdjustEffect
from .dust_effect import DustEffect
from .lighting_effect import UnevenLightingEffect
from .noise_effect import NoiseEffect
from .paper_effect import PaperDarkeningEffect
from .pipeline import EffectPipeline, apply_scan_effect, build_pipeline
from .rotation_effect import RotationEffect
from .shadow_effect import EdgeShadowEffect
from .warp_effect import BumpWarp, ShadowBandWarp, create_warp_effect

__all__ = [
    "Effect",
    "BlurEffect",
    "BumpWarp",
    "ColorAdjustEffect",
    "DustEffect",
    "EdgeShadowEffect",
    "EffectPipeline",
    "NoiseEffect",
    "PaperDarkeningEffect",
    "RotationEffect",
    "ShadowBandWarp",
    "UnevenLightingEffect",
    "apply_scan_effect",
    "build_pipeline",
    "create_warp_effect",
]
