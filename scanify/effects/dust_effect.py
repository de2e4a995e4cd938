"""Dust and hair on the scanner glass."""

from dataclasses import dataclass
from typing import List, Tuple

import cv2
import numpy as np

from ..core.utils import multiply_mask

SPECK_COUNT = (15, 50)
HAIR_COUNT = (0, 4)
SMALL_SPECK_RATIO = 0.87
SMALL_SPECK_RADIUS = (1.0, 4.0)
LARGE_SPECK_RADIUS = (4.0, 8.0)
SPECK_TONE = (0.15, 0.45)
HAIR_LENGTH = (15.0, 80.0)
HAIR_WIDTH = (0.5, 1.5)
HAIR_TONE = (0.2, 0.45)

# Fractional bits for sub-pixel drawing
_SHIFT = 4
_ONE = 1 << _SHIFT


@dataclass(frozen=True)
class DustSpeck:
    """A filled ellipse. ``tone`` is its gray level (0 = black, 1 = white)."""

    x: float
    y: float
    radius_x: float
    radius_y: float
    tone: float


@dataclass(frozen=True)
class DustHair:
    """A thin line segment. ``tone`` is its gray level."""

    x0: float
    y0: float
    x1: float
    y1: float
    width: float
    tone: float


def _fixed(value: float) -> int:
    return int(round(value * _ONE))


def hair_stroke(hair: DustHair) -> Tuple[int, int]:
    """Pixel thickness and gray value used to draw a hair.

    Strokes thinner than a pixel are drawn one pixel wide with their
    darkening scaled by the covered fraction.

    Returns:
        Tuple of (thickness, gray) for cv2.line.
    """
    thickness = max(1, int(round(hair.width)))
    coverage = min(hair.width / thickness, 1.0)
    gray = 255.0 - coverage * (255.0 - hair.tone * 255.0)
    return thickness, int(round(gray))


class DustEffect:
    """Speckles and hairlines multiplied onto the page.

    Dust sits on the glass rather than the paper, so the pipeline applies
    this after rotation.
    """

    name = "dust"

    def __init__(
        self,
        speck_count: Tuple[int, int] = SPECK_COUNT,
        hair_count: Tuple[int, int] = HAIR_COUNT,
    ):
        """Initialize the effect.

        Args:
            speck_count: Inclusive (min, max) number of specks.
            hair_count: Inclusive (min, max) number of hairs.
        """
        for label, (low, high) in (
            ("speck_count", speck_count),
            ("hair_count", hair_count),
        ):
            if low < 0 or high < low:
                raise ValueError(f"Invalid {label} range: {(low, high)}")
        self.speck_count = speck_count
        self.hair_count = hair_count

    def scatter(
        self, width: int, height: int, rng: np.random.Generator
    ) -> Tuple[List[DustSpeck], List[DustHair]]:
        """Plan the marks for one frame.

        Returns:
            Tuple of (specks, hairs).
        """
        specks = []
        for _ in range(int(rng.integers(self.speck_count[0], self.speck_count[1] + 1))):
            if rng.random() < SMALL_SPECK_RATIO:
                radius = rng.uniform(*SMALL_SPECK_RADIUS)
            else:
                radius = rng.uniform(*LARGE_SPECK_RADIUS)
            if rng.random() < 0.5:
                radius_x = radius_y = radius
            else:
                radius_x = radius * rng.uniform(0.6, 1.4)
                radius_y = radius * rng.uniform(0.6, 1.4)
            specks.append(
                DustSpeck(
                    x=rng.uniform(0, width),
                    y=rng.uniform(0, height),
                    radius_x=radius_x,
                    radius_y=radius_y,
                    tone=rng.uniform(*SPECK_TONE),
                )
            )

        hairs = []
        for _ in range(int(rng.integers(self.hair_count[0], self.hair_count[1] + 1))):
            x0 = rng.uniform(0, width)
            y0 = rng.uniform(0, height)
            length = rng.uniform(*HAIR_LENGTH)
            angle = rng.uniform(0, 2 * np.pi)
            hairs.append(
                DustHair(
                    x0=x0,
                    y0=y0,
                    x1=x0 + np.cos(angle) * length,
                    y1=y0 + np.sin(angle) * length,
                    width=rng.uniform(*HAIR_WIDTH),
                    tone=rng.uniform(*HAIR_TONE),
                )
            )
        return specks, hairs

    def render(
        self, width: int, height: int, specks: List[DustSpeck], hairs: List[DustHair]
    ) -> np.ndarray:
        """Draw planned marks on a white canvas.

        Returns:
            (H, W) float32 mask in [0, 1].
        """
        canvas = np.full((height, width), 255, dtype=np.uint8)
        for speck in specks:
            cv2.ellipse(
                canvas,
                (_fixed(speck.x), _fixed(speck.y)),
                (max(1, _fixed(speck.radius_x)), max(1, _fixed(speck.radius_y))),
                0,
                0,
                360,
                int(round(speck.tone * 255)),
                -1,
                cv2.LINE_AA,
                _SHIFT,
            )
        for hair in hairs:
            thickness, gray = hair_stroke(hair)
            cv2.line(
                canvas,
                (_fixed(hair.x0), _fixed(hair.y0)),
                (_fixed(hair.x1), _fixed(hair.y1)),
                gray,
                thickness,
                cv2.LINE_AA,
                _SHIFT,
            )
        return canvas.astype(np.float32) / 255.0

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        height, width = frame.shape[:2]
        specks, hairs = self.scatter(width, height, rng)
        return multiply_mask(frame, self.render(width, height, specks, hairs))
