"""Page image reading and writing."""

from pathlib import Path
from typing import Protocol, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError


IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"}

REFERENCE_DPI = 150
POINTS_PER_INCH = 72.0


def is_image_file(filename: str) -> bool:
    """Check if filename has a supported image extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has an image extension.
    """
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


def page_pixel_size(
    width_pt: float, height_pt: float, dpi: int = REFERENCE_DPI
) -> Tuple[int, int]:
    """Raster size for a page measured in PostScript points.

    Args:
        width_pt: Page width in points.
        height_pt: Page height in points.
        dpi: Target resolution.

    Returns:
        Tuple of (width, height) in pixels.

    Raises:
        ValueError: If the page would rasterize to zero pixels.
    """
    scale = dpi / POINTS_PER_INCH
    width = int(width_pt * scale)
    height = int(height_pt * scale)
    if width <= 0 or height <= 0:
        raise ValueError(
            f"Page {width_pt}x{height_pt}pt at {dpi} DPI has no pixels"
        )
    return width, height


def flatten_onto_white(image: Image.Image) -> Image.Image:
    """Convert an image to RGB, compositing any transparency over white."""
    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    if not has_alpha:
        return image.convert("RGB")

    rgba = image.convert("RGBA")
    background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
    background.alpha_composite(rgba)
    return background.convert("RGB")


class Rasterizer(Protocol):
    """Protocol for page sources."""

    def read_page(self, path: str) -> np.ndarray:
        """Load one page.

        Args:
            path: Page location.

        Returns:
            RGB uint8 frame.
        """
        ...


class Reassembler(Protocol):
    """Protocol for page sinks."""

    def write_page(self, frame: np.ndarray, path: str) -> None:
        """Store one processed page.

        Args:
            frame: RGB uint8 frame.
            path: Destination.
        """
        ...


class PageImageReader:
    """Read page images from disk as RGB frames."""

    def read_page(self, path: str) -> np.ndarray:
        if not Path(path).is_file():
            raise IOError(f"Cannot open page image: {path}")
        try:
            with Image.open(path) as image:
                rgb = flatten_onto_white(image)
        except (UnidentifiedImageError, OSError) as exc:
            raise IOError(f"Cannot read page image: {path}") from exc
        return np.array(rgb)


class PageImageWriter:
    """Write processed frames to image files."""

    def __init__(self, dpi: int = REFERENCE_DPI):
        """Initialize the writer.

        Args:
            dpi: Resolution recorded in the file so viewers keep the
                physical page size.
        """
        self.dpi = dpi

    def write_page(self, frame: np.ndarray, path: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            Image.fromarray(frame).save(target, dpi=(self.dpi, self.dpi))
        except (ValueError, OSError) as exc:
            raise IOError(f"Cannot write page image: {path}") from exc
