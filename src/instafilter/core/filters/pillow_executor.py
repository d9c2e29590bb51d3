"""Filters that map directly onto Pillow's C-optimised :mod:`PIL.ImageFilter`."""

from __future__ import annotations

from typing import Mapping

from PIL import Image, ImageFilter

from .algorithms import scale_edges
from .utils import from_float_array, to_float_array


def gaussian_blur(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    """Blur *rgb* with a Gaussian whose standard deviation is ``radius``."""

    radius = float(params.get("radius", 0.0))
    if radius <= 0.0:
        return rgb.copy()
    return rgb.filter(ImageFilter.GaussianBlur(radius=radius))


def unsharp_mask(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    """Sharpen *rgb*; ``intensity`` is the amount of the mask (1.0 == 100 %)."""

    radius = float(params.get("radius", 0.0))
    intensity = float(params.get("intensity", 0.0))
    percent = int(round(intensity * 100.0))
    if radius <= 0.0 or percent <= 0:
        return rgb.copy()
    return rgb.filter(ImageFilter.UnsharpMask(radius=radius, percent=percent, threshold=0))


def edges(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    """Return the edge response of *rgb* scaled by ``intensity``."""

    intensity = float(params.get("intensity", 0.0))
    # ``FIND_EDGES`` runs a 3x3 Laplacian per channel in native code; only the
    # scaling step needs NumPy.
    response = to_float_array(rgb.filter(ImageFilter.FIND_EDGES))
    return from_float_array(scale_edges(response, intensity))
