"""Preview area showing the rendered frame or a call to action."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QMouseEvent, QPixmap, QResizeEvent
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

PLACEHOLDER_TEXT = "Tap to select a picture"


class ImageView(QLabel):
    """Scaled-to-fit image display that reports clicks."""

    clicked = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(320, 240)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setStyleSheet("QLabel { background-color: palette(mid); color: white; font-weight: bold; }")
        self.setText(PLACEHOLDER_TEXT)

    def has_image(self) -> bool:
        return self._pixmap is not None

    def set_image(self, image: QImage) -> None:
        if image.isNull():
            return
        self._pixmap = QPixmap.fromImage(image)
        self._update_scaled()

    def clear_image(self) -> None:
        self._pixmap = None
        self.clear()
        self.setText(PLACEHOLDER_TEXT)

    # ------------------------------------------------------------------
    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._update_scaled()

    def _update_scaled(self) -> None:
        if self._pixmap is None:
            return
        scaled = self._pixmap.scaled(
            self.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.setPixmap(scaled)
