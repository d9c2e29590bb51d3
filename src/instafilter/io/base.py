"""Interfaces for the collaborators that supply and persist images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from PIL import Image


class ImageSource(ABC):
    """Supplies the picture the user wants to edit."""

    @abstractmethod
    def pick_image(self) -> Optional[Image.Image]:
        """Return the chosen image, or ``None`` when the user cancelled.

        Raises
        ------
        ImageLoadError
            If a file was chosen but could not be decoded.
        """


class ImageSink(ABC):
    """Persists rendered images, e.g. into the user's photo library."""

    @abstractmethod
    def save(self, image: Image.Image) -> Path:
        """Write *image* and return where it was stored.

        Raises
        ------
        SaveError
            If the image could not be written.  Sinks never retry.
        """


__all__ = ["ImageSink", "ImageSource"]
