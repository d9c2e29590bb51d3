from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from instafilter.errors import ImageLoadError
from instafilter.io.file_source import FileImageSource, load_image


def test_load_image_converts_to_rgb(tmp_path: Path) -> None:
    path = tmp_path / "grey.png"
    Image.new("L", (5, 3), 128).save(path)

    image = load_image(path)

    assert image.mode == "RGB"
    assert image.size == (5, 3)
    assert image.getpixel((0, 0)) == (128, 128, 128)


def test_load_image_keeps_transparency(tmp_path: Path) -> None:
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (4, 4), (1, 2, 3, 4)).save(path)

    assert load_image(path).mode == "RGBA"


def test_load_image_applies_exif_orientation(tmp_path: Path) -> None:
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 degrees clockwise when displayed
    Image.new("RGB", (40, 20), (255, 0, 0)).save(path, exif=exif)

    assert load_image(path).size == (20, 40)


def test_missing_file_raises_image_load_error(tmp_path: Path) -> None:
    with pytest.raises(ImageLoadError, match="not found"):
        load_image(tmp_path / "missing.png")


def test_garbage_file_raises_image_load_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a picture")

    with pytest.raises(ImageLoadError):
        load_image(path)


def test_file_source_without_path_returns_none() -> None:
    assert FileImageSource().pick_image() is None


def test_file_source_loads_configured_path(tmp_path: Path, gradient_image) -> None:
    path = tmp_path / "card.png"
    gradient_image.save(path)

    picked = FileImageSource(path).pick_image()

    assert picked is not None
    assert picked.tobytes() == gradient_image.tobytes()
