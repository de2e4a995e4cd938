import dataclasses
from pathlib import Path

import pytest

from scanify.config import (
    AGGRESSIVE_PRESET,
    DEFAULT_PRESET,
    OutputConfig,
    ProcessingConfig,
    WarpStrategy,
    get_preset,
)


def test_builtin_presets_match_reference_values():
    assert DEFAULT_PRESET.rotation_range == (-0.4, 0.4)
    assert AGGRESSIVE_PRESET.rotation_range == (-1.5, 1.5)
    assert DEFAULT_PRESET.noise_intensity == 0.025
    assert AGGRESSIVE_PRESET.noise_intensity == 0.05
    assert DEFAULT_PRESET.paper_darkening == 0.06
    assert AGGRESSIVE_PRESET.paper_darkening == 0.12


def test_aggressive_preset_is_stronger_on_every_knob():
    for knob in (
        "noise_intensity",
        "blur_radius",
        "paper_darkening",
        "edge_shadow",
        "uneven_lighting",
    ):
        assert getattr(AGGRESSIVE_PRESET, knob) > getattr(DEFAULT_PRESET, knob)
    assert AGGRESSIVE_PRESET.contrast > DEFAULT_PRESET.contrast
    assert AGGRESSIVE_PRESET.brightness < DEFAULT_PRESET.brightness
    assert AGGRESSIVE_PRESET.saturation < DEFAULT_PRESET.saturation


def test_builtin_presets_have_optional_effects_off():
    for preset in (DEFAULT_PRESET, AGGRESSIVE_PRESET):
        assert preset.apply_warp is False
        assert preset.apply_dust is False
        assert preset.warp_strategy is WarpStrategy.SHADOW_BAND


def test_presets_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PRESET.noise_intensity = 1.0


def test_with_options_returns_new_preset():
    toggled = DEFAULT_PRESET.with_options(apply_warp=True, apply_dust=True, warp_strategy="bump")

    assert toggled.apply_warp is True
    assert toggled.apply_dust is True
    assert toggled.warp_strategy is WarpStrategy.GEOMETRIC_BUMP
    assert toggled.noise_intensity == DEFAULT_PRESET.noise_intensity
    assert DEFAULT_PRESET.apply_warp is False


def test_with_options_rejects_unknown_warp_strategy():
    with pytest.raises(ValueError):
        DEFAULT_PRESET.with_options(warp_strategy="ripple")


def test_get_preset():
    assert get_preset("default") is DEFAULT_PRESET
    assert get_preset("aggressive") is AGGRESSIVE_PRESET
    with pytest.raises(ValueError, match="Unknown preset"):
        get_preset("gentle")


def test_output_path_defaults_next_to_input():
    output = OutputConfig()
    assert output.path_for("docs/page-1.jpg") == str(Path("docs") / "page-1_scanned.png")


def test_output_path_in_output_dir():
    output = OutputConfig(output_dir="out")
    assert output.path_for("docs/page-1.png") == str(Path("out") / "page-1_scanned.png")


def test_processing_config_from_args():
    config = ProcessingConfig.from_args(
        input_paths=["a.png"],
        aggressive=True,
        warp=True,
        dust=True,
        seed=5,
        workers=2,
        dpi=200,
    )

    assert config.preset.name == "aggressive"
    assert config.preset.apply_warp is True
    assert config.preset.apply_dust is True
    assert config.seed == 5
    assert config.workers == 2
    assert config.output.dpi == 200
