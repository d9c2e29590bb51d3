"""Backends executing a filter against pixel data."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from PIL import Image

from .filters import apply_filter, supported_filter_ids

_LOGGER = logging.getLogger(__name__)


class FilterBackend(ABC):
    """Opaque capability rendering ``filter_id`` with ``params`` onto an image.

    Backends only know about filter identifiers and parameter names; the
    catalog and the intensity mapping live above them.  Returning ``None``
    means "no output" and is handled by :class:`~instafilter.core.engine.FilterEngine`.
    """

    tier_name: str = "unknown"
    """Human readable tier label (e.g. ``"CPU"``)."""

    @abstractmethod
    def render(
        self,
        filter_id: str,
        params: Mapping[str, float],
        image: Image.Image,
    ) -> Optional[Image.Image]:
        """Return *image* filtered by *filter_id*, or ``None`` without output."""

    def supports(self, filter_id: str) -> bool:
        """Return ``True`` when the backend can render *filter_id*."""

        return True


class CpuFilterBackend(FilterBackend):
    """CPU implementation using Pillow and NumPy."""

    tier_name = "CPU"

    def render(
        self,
        filter_id: str,
        params: Mapping[str, float],
        image: Image.Image,
    ) -> Optional[Image.Image]:
        return apply_filter(filter_id, params, image)

    def supports(self, filter_id: str) -> bool:
        return filter_id in supported_filter_ids()


def select_filter_backend() -> FilterBackend:
    """Return the most capable filter backend available on the system."""

    backend = CpuFilterBackend()
    _LOGGER.info("Using %s filter backend", backend.tier_name)
    return backend


__all__ = ["CpuFilterBackend", "FilterBackend", "select_filter_backend"]
