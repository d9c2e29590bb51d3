"""Write rendered images into the user's photo library directory."""

from __future__ import annotations

import contextlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from PIL import Image

from ..errors import SaveError
from ..utils.jsonio import atomic_replace
from .base import ImageSink

_LOGGER = logging.getLogger(__name__)

SUPPORTED_FORMATS = {"png": ".png", "jpeg": ".jpg"}


class PhotoLibrarySink(ImageSink):
    """Store each save as a new timestamped file inside *directory*.

    Files are written to a temporary name first and moved into place so an
    interrupted save never leaves a truncated picture in the library.
    """

    def __init__(
        self,
        directory: Path,
        *,
        image_format: str = "png",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        normalised = image_format.strip().lower()
        if normalised == "jpg":
            normalised = "jpeg"
        if normalised not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported library format: {image_format!r}")
        self._directory = Path(directory).expanduser()
        self._format = normalised
        self._clock = clock or datetime.now

    @property
    def directory(self) -> Path:
        return self._directory

    def save(self, image: Image.Image) -> Path:
        target = self._next_path()
        tmp_path = target.with_name(target.name + ".tmp")
        payload = image
        if self._format == "jpeg" and image.mode != "RGB":
            # JPEG has no alpha channel.
            payload = image.convert("RGB")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            payload.save(tmp_path, format=self._format.upper())
            atomic_replace(tmp_path, target)
        except (OSError, ValueError) as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise SaveError(f"Could not save image to {target}: {exc}") from exc
        _LOGGER.debug("Wrote %s", target)
        return target

    def _next_path(self) -> Path:
        stamp = self._clock().strftime("%Y%m%d-%H%M%S")
        suffix = SUPPORTED_FORMATS[self._format]
        candidate = self._directory / f"Instafilter-{stamp}{suffix}"
        counter = 1
        while candidate.exists():
            candidate = self._directory / f"Instafilter-{stamp}-{counter}{suffix}"
            counter += 1
        return candidate
