"""Image sources and sinks used by the edit session."""

from __future__ import annotations

from .base import ImageSink, ImageSource
from .library_sink import PhotoLibrarySink
from .file_source import FileImageSource, load_image

__all__ = [
    "FileImageSource",
    "ImageSink",
    "ImageSource",
    "PhotoLibrarySink",
    "load_image",
]
