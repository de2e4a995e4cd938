"""Raster validation and compositing helpers."""

import numpy as np


class RasterError(ValueError):
    """Raised when a frame cannot be processed as an RGB page raster."""


def validate_frame(frame: np.ndarray) -> None:
    """Check that a frame is a non-empty 8-bit RGB raster.

    Args:
        frame: Candidate frame.

    Raises:
        RasterError: If the frame has the wrong type, shape or dtype, or
            covers zero pixels.
    """
    if not isinstance(frame, np.ndarray):
        raise RasterError(f"Expected numpy array, got {type(frame).__name__}")
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise RasterError(f"Expected (H, W, 3) RGB frame, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise RasterError(f"Expected uint8 frame, got {frame.dtype}")
    height, width = frame.shape[:2]
    if height == 0 or width == 0:
        raise RasterError(f"Frame has zero area: {width}x{height}")


def to_unit(frame: np.ndarray) -> np.ndarray:
    """Convert a uint8 frame to float32 samples in [0, 1]."""
    return frame.astype(np.float32) / 255.0


def from_unit(samples: np.ndarray) -> np.ndarray:
    """Convert [0, 1] samples back to a uint8 frame, rounding and clipping."""
    return np.clip(samples * 255.0 + 0.5, 0, 255).astype(np.uint8)


def multiply_mask(frame: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Multiply-composite a grayscale mask onto a frame.

    Args:
        frame: RGB frame (uint8).
        mask: Brightness factors in [0, 1], shape (H, W) or (H, W, 3).

    Returns:
        Composited frame as uint8 array.

    Raises:
        ValueError: If mask and frame extents don't match.
    """
    if mask.shape[:2] != frame.shape[:2]:
        raise ValueError(f"Shape mismatch: {frame.shape} vs {mask.shape}")

    if mask.ndim == 2:
        mask = mask[:, :, np.newaxis]

    return from_unit(to_unit(frame) * mask)


def distance_map(width: int, height: int, center: tuple[float, float]) -> np.ndarray:
    """Euclidean distance of every pixel from a center point.

    Args:
        width: Raster width.
        height: Raster height.
        center: (x, y) point in pixel coordinates.

    Returns:
        (H, W) float32 array of distances.
    """
    cx, cy = center
    xs = np.arange(width, dtype=np.float32) - np.float32(cx)
    ys = np.arange(height, dtype=np.float32) - np.float32(cy)
    return np.sqrt(ys[:, np.newaxis] ** 2 + xs[np.newaxis, :] ** 2)


def radial_gradient(
    width: int,
    height: int,
    center: tuple[float, float],
    inner_radius: float,
    outer_radius: float,
    inner_value: float = 1.0,
    outer_value: float = 0.0,
) -> np.ndarray:
    """Linear radial ramp between two radii.

    Pixels closer than ``inner_radius`` get ``inner_value``, pixels beyond
    ``outer_radius`` get ``outer_value``.

    Returns:
        (H, W) float32 mask.
    """
    if outer_radius <= inner_radius:
        raise ValueError(
            f"outer_radius ({outer_radius}) must exceed inner_radius ({inner_radius})"
        )
    dist = distance_map(width, height, center)
    t = np.clip((dist - inner_radius) / (outer_radius - inner_radius), 0.0, 1.0)
    return (inner_value + (outer_value - inner_value) * t).astype(np.float32)


def linear_ramp(
    length: int, start: float, stop: float, start_value: float, stop_value: float
) -> np.ndarray:
    """1D ramp from ``start_value`` at ``start`` to ``stop_value`` at ``stop``.

    Values are held constant outside [start, stop].

    Returns:
        float32 array of ``length`` samples.
    """
    positions = np.arange(length, dtype=np.float32)
    span = max(stop - start, 1e-6)
    t = np.clip((positions - start) / span, 0.0, 1.0)
    return (start_value + (stop_value - start_value) * t).astype(np.float32)
