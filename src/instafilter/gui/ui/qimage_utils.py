"""Conversions between Pillow images and :class:`QImage`."""

from __future__ import annotations

from PIL import Image
from PySide6.QtGui import QImage


def pil_to_qimage(image: Image.Image) -> QImage:
    """Return a detached ``QImage`` holding the pixels of *image*."""

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    width, height = rgba.size
    data = rgba.tobytes("raw", "RGBA")
    # ``QImage`` only borrows *data*; ``copy()`` detaches it before the bytes
    # object goes out of scope.
    qimage = QImage(data, width, height, width * 4, QImage.Format.Format_RGBA8888)
    return qimage.copy()


__all__ = ["pil_to_qimage"]
