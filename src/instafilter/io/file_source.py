"""Load pictures from disk with Pillow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import ImageLoadError
from .base import ImageSource

_LOGGER = logging.getLogger(__name__)


def load_image(path: Path) -> Image.Image:
    """Decode *path* into an upright RGB or RGBA image.

    The EXIF orientation is applied so portrait photos are not shown sideways.
    The file handle is closed before returning.
    """

    try:
        with Image.open(path) as handle:
            handle.load()
            upright = ImageOps.exif_transpose(handle)
    except FileNotFoundError as exc:
        raise ImageLoadError(f"Image not found: {path}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Cannot decode image {path}: {exc}") from exc

    if upright.mode in ("RGBA", "LA", "PA") or "transparency" in upright.info:
        converted = upright.convert("RGBA")
    else:
        converted = upright.convert("RGB")
    _LOGGER.debug("Loaded %s (%sx%s, %s)", path, converted.width, converted.height, converted.mode)
    return converted


class FileImageSource(ImageSource):
    """Source returning a fixed file; the GUI swaps the path per pick."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path

    def pick_image(self) -> Optional[Image.Image]:
        if self.path is None:
            return None
        return load_image(self.path)
