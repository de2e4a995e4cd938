"""Base effect protocol."""

from typing import Protocol

import numpy as np


class Effect(Protocol):
    """Protocol for page effects.

    Effects are stateless: every random choice comes from the generator
    handed to ``apply``, and the input frame is never modified.
    """

    name: str

    def apply(self, frame: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """Apply effect to a frame.

        Args:
            frame: Input frame (RGB, uint8).
            rng: Random stream for this effect.

        Returns:
            Processed frame (RGB, uint8) with the same shape.
        """
        ...


def check_range(name: str, value: float, low: float, high: float) -> float:
    """Validate an effect parameter at construction time.

    Raises:
        ValueError: If value lies outside [low, high].
    """
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return float(value)
