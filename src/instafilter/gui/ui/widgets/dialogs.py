"""Reusable dialog helpers for the desktop UI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QApplication, QFileDialog, QMessageBox, QWidget

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff *.webp)"


def select_image_file(parent: QWidget, caption: str, start: Optional[Path] = None) -> Optional[Path]:
    """Return an image file selected by the user or ``None`` when cancelled."""

    directory = str(start) if start is not None else ""
    path, _ = QFileDialog.getOpenFileName(parent, caption, directory, IMAGE_FILE_FILTER)
    if not path:
        return None
    return Path(path)


def _message_box(parent: Optional[QWidget], icon: QMessageBox.Icon, title: str, message: str) -> QMessageBox:
    """Build a message box that follows the palette of *parent*."""

    box = QMessageBox(icon, title, message, QMessageBox.StandardButton.Ok, parent)
    palette = parent.palette() if parent is not None else QApplication.palette()
    window = palette.color(QPalette.ColorRole.Window).name()
    text = palette.color(QPalette.ColorRole.WindowText).name()
    box.setStyleSheet(f"QMessageBox, QLabel {{ background-color: {window}; color: {text}; }}")
    return box


def show_error(parent: QWidget, message: str, *, title: str = "Instafilter") -> None:
    _message_box(parent, QMessageBox.Icon.Critical, title, message).exec()


def show_information(parent: QWidget, message: str, *, title: str = "Instafilter") -> None:
    """Tell the user about a non-error condition, e.g. nothing to save yet."""

    _message_box(parent, QMessageBox.Icon.Information, title, message).exec()
