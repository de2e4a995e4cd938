import numpy as np
import pytest

from scanify.config import AGGRESSIVE_PRESET, DEFAULT_PRESET
from scanify.effects.rotation_effect import SCANNER_BED_GRAY, RotationEffect


@pytest.mark.parametrize("preset", [DEFAULT_PRESET, AGGRESSIVE_PRESET], ids=lambda p: p.name)
def test_angles_stay_within_preset_range(preset):
    effect = RotationEffect(preset.rotation_range)
    low, high = preset.rotation_range
    rng = np.random.default_rng(0)
    angles = [effect.sample_angle(rng) for _ in range(2000)]

    assert min(angles) >= low
    assert max(angles) <= high
    # draws cover the range rather than collapsing to one side
    assert min(angles) < low / 2
    assert max(angles) > high / 2


def test_tiny_angle_is_identity(text_page):
    out = RotationEffect((-1, 1)).rotate(text_page, 0.005)
    np.testing.assert_array_equal(out, text_page)
    assert out is not text_page


def test_rotation_keeps_extent_and_fills_corners_gray(white_page):
    out = RotationEffect((-5, 5)).rotate(white_page, 3.0)

    assert out.shape == white_page.shape
    for corner in (out[0, 0], out[0, -1], out[-1, 0], out[-1, -1]):
        np.testing.assert_array_equal(corner, [SCANNER_BED_GRAY] * 3)
    assert out[80, 60, 0] == 255


def test_rotation_moves_content(text_page):
    out = RotationEffect().rotate(text_page, 2.0)
    assert not np.array_equal(out, text_page)


def test_rotation_rejects_inverted_range():
    with pytest.raises(ValueError):
        RotationEffect((1.0, -1.0))


def test_fixed_range_is_allowed():
    effect = RotationEffect((0.0, 0.0))
    assert effect.sample_angle(np.random.default_rng(0)) == 0.0
