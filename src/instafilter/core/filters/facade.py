"""Dispatch a filter identifier to the executor that implements it."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from PIL import Image

from . import numpy_executor, pillow_executor
from .utils import merge_alpha, split_alpha

_LOGGER = logging.getLogger(__name__)

FilterFunction = Callable[[Image.Image, Mapping[str, float]], Image.Image]

_EXECUTORS: dict[str, FilterFunction] = {
    "crystallize": numpy_executor.crystallize,
    "edges": pillow_executor.edges,
    "gaussian_blur": pillow_executor.gaussian_blur,
    "pixellate": numpy_executor.pixellate,
    "sepia_tone": numpy_executor.sepia_tone,
    "unsharp_mask": pillow_executor.unsharp_mask,
    "vignette": numpy_executor.vignette,
}


def supported_filter_ids() -> frozenset[str]:
    return frozenset(_EXECUTORS)


def apply_filter(
    filter_id: str,
    params: Mapping[str, float],
    image: Image.Image,
) -> Optional[Image.Image]:
    """Return a new image with *filter_id* applied to *image*.

    ``None`` signals that the filter produced no output: the id is not
    implemented or the image has an empty extent.  The input image is never
    modified.
    """

    executor = _EXECUTORS.get(filter_id)
    if executor is None:
        _LOGGER.warning("No executor registered for filter %r", filter_id)
        return None

    width, height = image.size
    if width <= 0 or height <= 0:
        return None

    rgb, alpha = split_alpha(image)
    result = executor(rgb, params)
    return merge_alpha(result, alpha)
