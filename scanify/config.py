"""Configuration dataclasses for scanify."""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .core.io import REFERENCE_DPI


class WarpStrategy(str, Enum):
    """How paper curvature is simulated."""

    SHADOW_BAND = "shadow-band"
    GEOMETRIC_BUMP = "bump"


@dataclass(frozen=True)
class ScanPreset:
    """Named bundle of scan effect strengths.

    Attributes:
        name: Preset name.
        rotation_range: (min, max) page rotation in degrees.
        noise_intensity: Width of the additive grain, in [0, 1] sample units.
        contrast: Contrast factor around mid-gray (1.0 = unchanged).
        brightness: Additive brightness offset (0.0 = unchanged).
        saturation: Saturation factor (1.0 = unchanged, 0.0 = gray).
        blur_radius: Gaussian sigma in pixels.
        paper_darkening: Gamma strength; whites map to ``v ** (1 + 2 * d)``.
        edge_shadow: Vignette strength, also drives the top-edge shadow.
        uneven_lighting: Brightness lost at the rim of the lighting falloff.
        apply_warp: Simulate non-flat paper.
        apply_dust: Add dust specks and hairs from the scanner glass.
        warp_strategy: Warp rendering used when ``apply_warp`` is set.
    """

    name: str
    rotation_range: Tuple[float, float]
    noise_intensity: float
    contrast: float
    brightness: float
    saturation: float
    blur_radius: float
    paper_darkening: float
    edge_shadow: float
    uneven_lighting: float
    apply_warp: bool = False
    apply_dust: bool = False
    warp_strategy: WarpStrategy = WarpStrategy.SHADOW_BAND

    def with_options(
        self,
        apply_warp: Optional[bool] = None,
        apply_dust: Optional[bool] = None,
        warp_strategy: Optional[str] = None,
    ) -> "ScanPreset":
        """Return a copy with the optional effects toggled.

        Arguments left as None keep the current value.
        """
        changes = {}
        if apply_warp is not None:
            changes["apply_warp"] = apply_warp
        if apply_dust is not None:
            changes["apply_dust"] = apply_dust
        if warp_strategy is not None:
            changes["warp_strategy"] = WarpStrategy(warp_strategy)
        return replace(self, **changes)


DEFAULT_PRESET = ScanPreset(
    name="default",
    rotation_range=(-0.4, 0.4),
    noise_intensity=0.025,
    contrast=1.1,
    brightness=-0.02,
    saturation=0.9,
    blur_radius=0.3,
    paper_darkening=0.06,
    edge_shadow=0.4,
    uneven_lighting=0.08,
)

AGGRESSIVE_PRESET = ScanPreset(
    name="aggressive",
    rotation_range=(-1.5, 1.5),
    noise_intensity=0.05,
    contrast=1.2,
    brightness=-0.04,
    saturation=0.75,
    blur_radius=0.6,
    paper_darkening=0.12,
    edge_shadow=0.6,
    uneven_lighting=0.15,
)

PRESETS: Dict[str, ScanPreset] = {
    preset.name: preset for preset in (DEFAULT_PRESET, AGGRESSIVE_PRESET)
}

WARP_STRATEGIES = [strategy.value for strategy in WarpStrategy]


def get_preset(name: str) -> ScanPreset:
    """Look up a built-in preset by name.

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown preset: {name!r} (choose from {', '.join(sorted(PRESETS))})"
        ) from None


@dataclass
class OutputConfig:
    """Configuration for processed page output."""

    output_dir: Optional[str] = None
    suffix: str = "_scanned"
    extension: str = ".png"
    dpi: int = REFERENCE_DPI

    def path_for(self, input_path: str) -> str:
        """Output location for one input page."""
        source = Path(input_path)
        directory = Path(self.output_dir) if self.output_dir else source.parent
        return str(directory / f"{source.stem}{self.suffix}{self.extension}")


@dataclass
class ProcessingConfig:
    """Combined configuration for a batch of pages."""

    input_paths: List[str]
    preset: ScanPreset
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: Optional[int] = None
    workers: Optional[int] = None

    def output_path_for(self, input_path: str) -> str:
        return self.output.path_for(input_path)

    def output_collisions(self) -> Dict[str, List[str]]:
        """Output paths claimed by more than one input page.

        Returns:
            Mapping of output path to the input paths that would write it.
        """
        claims: Dict[str, List[str]] = {}
        for input_path in self.input_paths:
            target = os.path.abspath(self.output_path_for(input_path))
            claims.setdefault(target, []).append(input_path)
        return {target: sources for target, sources in claims.items() if len(sources) > 1}

    @classmethod
    def from_args(
        cls,
        input_paths: List[str],
        output_dir: Optional[str] = None,
        aggressive: bool = False,
        warp: bool = False,
        warp_strategy: str = WarpStrategy.SHADOW_BAND.value,
        dust: bool = False,
        seed: Optional[int] = None,
        workers: Optional[int] = None,
        dpi: int = REFERENCE_DPI,
    ) -> "ProcessingConfig":
        """Create ProcessingConfig from CLI arguments."""
        base = AGGRESSIVE_PRESET if aggressive else DEFAULT_PRESET
        return cls(
            input_paths=list(input_paths),
            preset=base.with_options(
                apply_warp=warp,
                apply_dust=dust,
                warp_strategy=warp_strategy,
            ),
            output=OutputConfig(output_dir=output_dir, dpi=dpi),
            seed=seed,
            workers=workers,
        )
