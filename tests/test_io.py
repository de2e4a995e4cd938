from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from scanify.core.io import (
    PageImageReader,
    PageImageWriter,
    is_image_file,
    page_pixel_size,
)


def test_is_image_file():
    assert is_image_file("page.PNG")
    assert is_image_file("scan.tiff")
    assert not is_image_file("document.pdf")


def test_page_pixel_size_letter_at_reference_dpi():
    assert page_pixel_size(612, 792) == (1275, 1650)
    assert page_pixel_size(595, 842, dpi=72) == (595, 842)


def test_page_pixel_size_rejects_empty_page():
    with pytest.raises(ValueError):
        page_pixel_size(0, 792)


def test_reader_flattens_transparency_onto_white(tmp_path: Path):
    path = tmp_path / "transparent.png"
    image = Image.new("RGBA", (8, 6), (255, 0, 0, 0))
    image.putpixel((2, 2), (0, 0, 255, 255))
    image.save(path)

    frame = PageImageReader().read_page(str(path))

    assert frame.shape == (6, 8, 3)
    assert frame.dtype == np.uint8
    np.testing.assert_array_equal(frame[0, 0], [255, 255, 255])
    np.testing.assert_array_equal(frame[2, 2], [0, 0, 255])


def test_reader_expands_grayscale(tmp_path: Path):
    path = tmp_path / "gray.png"
    Image.new("L", (5, 4), 100).save(path)

    frame = PageImageReader().read_page(str(path))

    assert frame.shape == (4, 5, 3)
    assert np.all(frame == 100)


def test_reader_missing_file(tmp_path: Path):
    with pytest.raises(IOError, match="Cannot open"):
        PageImageReader().read_page(str(tmp_path / "missing.png"))


def test_reader_rejects_garbage(tmp_path: Path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(IOError, match="Cannot read"):
        PageImageReader().read_page(str(path))


def test_writer_records_dpi_and_creates_directories(tmp_path: Path):
    frame = np.full((10, 12, 3), 200, dtype=np.uint8)
    path = tmp_path / "nested" / "page_scanned.png"

    PageImageWriter(dpi=150).write_page(frame, str(path))

    with Image.open(path) as image:
        assert image.size == (12, 10)
        assert image.mode == "RGB"
        dpi_x, dpi_y = image.info["dpi"]
    assert dpi_x == pytest.approx(150, abs=1)
    assert dpi_y == pytest.approx(150, abs=1)
