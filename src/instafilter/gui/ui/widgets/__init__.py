"""Widgets composing the Instafilter main window."""

from .filter_menu import FilterMenu
from .image_view import ImageView

__all__ = ["FilterMenu", "ImageView"]
