import numpy as np
import pytest

from scanify.effects.dust_effect import (
    HAIR_COUNT,
    SPECK_COUNT,
    DustEffect,
    DustHair,
    DustSpeck,
    hair_stroke,
)


def test_scatter_counts_stay_in_range():
    effect = DustEffect()
    speck_counts = set()
    hair_counts = set()
    for seed in range(300):
        specks, hairs = effect.scatter(800, 1000, np.random.default_rng(seed))
        speck_counts.add(len(specks))
        hair_counts.add(len(hairs))

    assert SPECK_COUNT == (15, 50)
    assert HAIR_COUNT == (0, 4)
    assert min(speck_counts) >= 15 and max(speck_counts) <= 50
    assert min(hair_counts) >= 0 and max(hair_counts) <= 4
    # hairs are optional: some frames get none
    assert 0 in hair_counts


def test_scatter_mark_parameters():
    effect = DustEffect()
    rng = np.random.default_rng(9)
    for _ in range(50):
        specks, hairs = effect.scatter(300, 400, rng)
        for speck in specks:
            assert 0 <= speck.x <= 300 and 0 <= speck.y <= 400
            assert 0.6 <= speck.radius_x <= 8 * 1.4
            assert 0.6 <= speck.radius_y <= 8 * 1.4
            assert 0.15 <= speck.tone <= 0.45
        for hair in hairs:
            length = np.hypot(hair.x1 - hair.x0, hair.y1 - hair.y0)
            assert 15 - 1e-6 <= length <= 80 + 1e-6
            assert 0.5 <= hair.width <= 1.5
            assert 0.2 <= hair.tone <= 0.45


def test_most_specks_are_small():
    effect = DustEffect()
    rng = np.random.default_rng(2)
    radii = []
    for _ in range(100):
        specks, _ = effect.scatter(300, 300, rng)
        radii.extend(max(s.radius_x, s.radius_y) for s in specks)
    # small specks (radius <= 4) scaled by at most 1.4
    small = np.mean(np.array(radii) <= 4 * 1.4)
    assert small > 0.8


def test_render_empty_canvas_is_white():
    mask = DustEffect().render(50, 40, [], [])
    assert mask.shape == (40, 50)
    assert np.all(mask == 1.0)


def test_render_speck_and_hair():
    speck = DustSpeck(x=20.0, y=20.0, radius_x=4.0, radius_y=4.0, tone=0.2)
    hair = DustHair(x0=5.0, y0=35.0, x1=45.0, y1=35.0, width=1.0, tone=0.3)
    mask = DustEffect().render(50, 40, [speck], [hair])

    assert mask[20, 20] == pytest.approx(0.2, abs=0.01)
    assert mask[35, 25] < 0.6
    assert mask[5, 45] == 1.0


def test_dust_only_darkens(white_page, rng):
    out = DustEffect().apply(white_page, rng)
    assert out.shape == white_page.shape
    assert np.all(out <= white_page)
    assert out.min() < 200


def test_dust_rejects_bad_ranges():
    with pytest.raises(ValueError):
        DustEffect(speck_count=(10, 5))
    with pytest.raises(ValueError):
        DustEffect(hair_count=(-1, 2))


def test_hair_width_changes_the_mark():
    def hair(width):
        return DustHair(x0=5.0, y0=20.0, x1=45.0, y1=20.0, width=width, tone=0.3)

    effect = DustEffect()
    thin = effect.render(50, 40, [], [hair(0.5)])
    thick = effect.render(50, 40, [], [hair(1.4)])

    assert not np.array_equal(thin, thick)
    assert thin[20, 25] > thick[20, 25]
    assert thin.sum() > thick.sum()


def test_hair_stroke_keeps_tone_for_full_pixel_width():
    full = DustHair(x0=0, y0=0, x1=1, y1=1, width=1.2, tone=0.3)
    faint = DustHair(x0=0, y0=0, x1=1, y1=1, width=0.6, tone=0.3)
    wide = DustHair(x0=0, y0=0, x1=1, y1=1, width=1.5, tone=0.3)

    assert hair_stroke(full) == (1, round(0.3 * 255))
    assert hair_stroke(faint)[0] == 1
    assert hair_stroke(faint)[1] > hair_stroke(full)[1]
    assert hair_stroke(wide)[0] == 2
