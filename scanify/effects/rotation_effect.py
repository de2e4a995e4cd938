"""Small random page rotation."""

from typing import Tuple

import cv2
import numpy as np

# Rotations this small are skipped to avoid a needless resample
MIN_ANGLE = 0.01

# "grey85", the tone of the scanner bed showing at rotated corners
SCANNER_BED_GRAY = 217


class RotationEffect:
    """Rotate the page about its center, keeping the original extent."""

    name = "rotation"

    def __init__(
        self,
        angle_range: Tuple[float, float] = (-0.4, 0.4),
        fill_value: int = SCANNER_BED_GRAY,
    ):
        """Initialize the effect.

        Args:
            angle_range: Inclusive (min, max) angle in degrees; positive
                angles turn the page counter-clockwise.
            fill_value: Gray level for corners uncovered by the rotation.
        """
        low, high = angle_range
        if low > high:
            raise ValueError(f"Invalid rotation range: {angle_range}")
        if not 0 <= fill_value <= 255:
            raise ValueError(f"fill_value must be between 0 and 255, got {fill_value}")
        self.angle_range = (float(low), float(high))
        self.fill_value = int(fill_value)

    def sample_angle(self, rng: np.random.Generator) -> float:
        """Draw a rotation angle in degrees."""
        low, high = self.angle_range
        return float(np.clip(rng.uniform(low, high), low, high))

    def rotate(self, frame: np.ndarray, angle: float) -> np.ndarray:
        """Rotate a frame by ``angle`` degrees, cropped to its extent."""
        if abs(angle) <= MIN_ANGLE:
            return frame.copy()
        height, width = frame.shape[:2]
        center = ((width - 1) / 2, (height - 1) / 2)
        matrix = cv2.getRotationMatrix2D(center, angle, 1.0)
        fill = (self.fill_value,) * 3
        return cv2.warpAffine(
            frame,
            matrix,
            (width, height),
            flags=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=fill,
        )

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        return self.rotate(frame, self.sample_angle(rng))
