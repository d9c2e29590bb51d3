"""Exception hierarchy shared across the Instafilter packages."""

from __future__ import annotations


class InstafilterError(Exception):
    """Base class for every error raised by Instafilter."""


class UnknownFilterError(InstafilterError, KeyError):
    """Raised when a filter identifier is not registered in the catalog."""

    def __init__(self, filter_id: str) -> None:
        super().__init__(filter_id)
        self.filter_id = filter_id

    def __str__(self) -> str:
        return f"Unknown filter: {self.filter_id!r}"


class RenderPreconditionError(InstafilterError):
    """Raised when :meth:`FilterEngine.render` is called with invalid inputs."""


class ImageLoadError(InstafilterError):
    """Raised when an image source cannot decode the selected file."""


class SaveError(InstafilterError):
    """Raised when an image sink fails to persist a rendered image."""


class SettingsError(InstafilterError):
    """Raised when the settings file cannot be read or parsed."""


__all__ = [
    "ImageLoadError",
    "InstafilterError",
    "RenderPreconditionError",
    "SaveError",
    "SettingsError",
    "UnknownFilterError",
]
