"""Paper darkening effect."""

import cv2
import numpy as np

from .base import check_range


def paper_lut(amount: float) -> np.ndarray:
    """Lookup table for the power-law darkening ``v ** (1 + 2 * amount)``.

    Args:
        amount: Darkening strength (0 = identity).

    Returns:
        256-entry uint8 table.
    """
    levels = np.arange(256, dtype=np.float64) / 255.0
    darkened = levels ** (1.0 + 2.0 * amount)
    return np.clip(np.rint(darkened * 255.0), 0, 255).astype(np.uint8)


def darken_paper(frame: np.ndarray, amount: float) -> np.ndarray:
    """Darken highlights so paper is never pure white.

    Args:
        frame: Input frame (RGB, uint8).
        amount: Darkening strength (0 = identity).

    Returns:
        Darkened frame.
    """
    return cv2.LUT(frame, paper_lut(amount))


class PaperDarkeningEffect:
    """Gamma transform that pulls whites toward off-white."""

    name = "paper"

    def __init__(self, amount: float = 0.06):
        """Initialize the effect.

        Args:
            amount: Darkening strength in [0, 1].
        """
        self.amount = check_range("paper_darkening", amount, 0.0, 1.0)
        self._lut = paper_lut(self.amount)

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        return cv2.LUT(frame, self._lut)
