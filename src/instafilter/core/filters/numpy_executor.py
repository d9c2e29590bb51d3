"""NumPy vectorised executor for the array based filters."""

from __future__ import annotations

from typing import Mapping

from PIL import Image

from . import algorithms
from .utils import from_float_array, to_float_array


def sepia_tone(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    intensity = float(params.get("intensity", 0.0))
    return from_float_array(algorithms.sepia(to_float_array(rgb), intensity))


def pixellate(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    scale = float(params.get("scale", 0.0))
    return from_float_array(algorithms.pixellate(to_float_array(rgb), scale))


def vignette(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    radius = float(params.get("radius", 0.0))
    intensity = float(params.get("intensity", 0.0))
    return from_float_array(algorithms.vignette(to_float_array(rgb), radius, intensity))


def crystallize(rgb: Image.Image, params: Mapping[str, float]) -> Image.Image:
    radius = float(params.get("radius", 0.0))
    return from_float_array(algorithms.crystallize(to_float_array(rgb), radius))
