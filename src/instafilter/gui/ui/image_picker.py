"""Image source backed by a file dialog."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image
from PySide6.QtWidgets import QWidget

from ...io.base import ImageSource
from ...io.file_source import load_image
from .widgets.dialogs import select_image_file


class DialogImageSource(ImageSource):
    """Ask the user for a picture and decode it with Pillow."""

    def __init__(self, parent: QWidget, *, start: Optional[Path] = None) -> None:
        self._parent = parent
        self._start = start

    def pick_image(self) -> Optional[Image.Image]:
        path = select_image_file(self._parent, "Select a picture", self._start)
        if path is None:
            return None
        # Reopen the dialog where the user left off.
        self._start = path.parent
        return load_image(path)
