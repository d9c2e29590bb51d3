"""Conversion helpers shared by the filter executors."""

from __future__ import annotations

from typing import Optional

import numpy as np
from PIL import Image


def split_alpha(image: Image.Image) -> tuple[Image.Image, Optional[Image.Image]]:
    """Return an RGB copy of *image* and its alpha channel, if it has one."""

    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    if has_alpha:
        rgba = image.convert("RGBA")
        return rgba.convert("RGB"), rgba.getchannel("A")
    if image.mode != "RGB":
        return image.convert("RGB"), None
    return image, None


def merge_alpha(rgb: Image.Image, alpha: Optional[Image.Image]) -> Image.Image:
    """Reattach *alpha* to *rgb*; filters never touch transparency."""

    if alpha is None:
        return rgb
    if alpha.size != rgb.size:
        alpha = alpha.resize(rgb.size)
    result = rgb.convert("RGBA")
    result.putalpha(alpha)
    return result


def to_float_array(rgb: Image.Image) -> np.ndarray:
    """Return an ``H x W x 3`` ``float32`` array of *rgb* in ``[0, 255]``."""

    return np.asarray(rgb, dtype=np.float32)


def from_float_array(array: np.ndarray) -> Image.Image:
    """Round, clip and wrap *array* back into an RGB image."""

    clipped = np.clip(np.rint(array), 0.0, 255.0).astype(np.uint8)
    return Image.fromarray(clipped)
