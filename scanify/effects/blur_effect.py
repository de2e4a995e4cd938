"""Optical softness blur."""

import cv2
import numpy as np

from .base import check_range


class BlurEffect:
    """Low-radius Gaussian blur with replicated borders.

    Replicating the border keeps page edges from picking up a dark fringe.
    """

    name = "blur"

    def __init__(self, radius: float = 0.3):
        """Initialize the blur.

        Args:
            radius: Gaussian sigma in pixels (0 disables the blur).
        """
        self.radius = check_range("blur_radius", radius, 0.0, 25.0)

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        if self.radius <= 0:
            return frame.copy()
        return cv2.GaussianBlur(
            frame,
            (0, 0),
            sigmaX=self.radius,
            sigmaY=self.radius,
            borderType=cv2.BORDER_REPLICATE,
        )
