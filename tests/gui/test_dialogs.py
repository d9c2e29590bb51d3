from __future__ import annotations

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QMessageBox, QWidget

from instafilter.gui.ui.widgets.dialogs import _message_box


def test_message_box_follows_parent_palette(qtbot) -> None:
    parent = QWidget()
    qtbot.addWidget(parent)

    box = _message_box(parent, QMessageBox.Icon.Information, "Nothing to save!", "Please choose an image.")

    assert box.windowTitle() == "Nothing to save!"
    assert box.text() == "Please choose an image."
    assert box.icon() is QMessageBox.Icon.Information
    assert parent.palette().color(QPalette.ColorRole.WindowText).name() in box.styleSheet()
