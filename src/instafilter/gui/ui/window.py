"""Main window wiring the preview, slider, filter menu and Save button."""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from ...core.catalog import display_name_of
from ...core.session import SaveOutcome, SaveStatus
from ...errors import ImageLoadError
from ...io.base import ImageSink, ImageSource
from .controllers.edit_controller import EditController
from .image_picker import DialogImageSource
from .widgets.dialogs import show_error, show_information
from .widgets.filter_menu import FilterMenu
from .widgets.image_view import ImageView

_LOGGER = logging.getLogger(__name__)

SLIDER_STEPS = 1000


class MainWindow(QMainWindow):
    """Single-view editor: pick a photo, choose a filter, drag, save."""

    def __init__(
        self,
        controller: EditController,
        *,
        sink: ImageSink,
        source: Optional[ImageSource] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Instafilter")
        self._controller = controller
        self._sink = sink
        self._source = source if source is not None else DialogImageSource(self)

        self.image_view = ImageView(self)
        self.intensity_slider = QSlider(Qt.Orientation.Horizontal, self)
        self.intensity_slider.setRange(0, SLIDER_STEPS)
        self.filter_button = QPushButton(self)
        self.filter_menu = FilterMenu(self)
        self.filter_button.setMenu(self.filter_menu)
        self.save_button = QPushButton("Save", self)

        slider_row = QHBoxLayout()
        slider_row.addWidget(QLabel("Intensity", self))
        slider_row.addWidget(self.intensity_slider, 1)

        button_row = QHBoxLayout()
        button_row.addWidget(self.filter_button)
        button_row.addStretch(1)
        button_row.addWidget(self.save_button)

        layout = QVBoxLayout()
        layout.addWidget(self.image_view, 1)
        layout.addLayout(slider_row)
        layout.addLayout(button_row)
        central = QWidget(self)
        central.setLayout(layout)
        self.setCentralWidget(central)

        session = controller.session
        self.filter_button.setText(session.display_name)
        self.intensity_slider.setValue(int(round(session.intensity * SLIDER_STEPS)))

        self.image_view.clicked.connect(self.pick_image)
        self.intensity_slider.valueChanged.connect(self._handle_slider_moved)
        self.filter_menu.filterSelected.connect(self._controller.set_filter)
        self.save_button.clicked.connect(self.save_image)
        self._controller.previewChanged.connect(self._handle_preview_changed)
        self._controller.filterChanged.connect(self._handle_filter_changed)
        self._controller.intensityChanged.connect(self._handle_intensity_changed)
        self._controller.renderFailed.connect(self._handle_render_failed)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def pick_image(self) -> None:
        try:
            image = self._source.pick_image()
        except ImageLoadError as exc:
            _LOGGER.warning("Could not open picture: %s", exc)
            show_error(self, str(exc))
            return
        if image is None:
            return
        self.load_image(image)

    def load_image(self, image: Image.Image) -> None:
        """Show the placeholder until the first frame of *image* arrives."""

        self.image_view.clear_image()
        self._controller.load_image(image)

    def save_image(self) -> SaveOutcome:
        outcome = self._controller.save(self._sink)
        if outcome.status is SaveStatus.NO_OUTPUT_TO_SAVE:
            show_information(self, "Please choose an image.", title="Nothing to save!")
        elif outcome.status is SaveStatus.FAILED:
            show_error(self, f"Oops: {outcome.error}")
        else:
            self.statusBar().showMessage(f"Saved to {outcome.location}", 5000)
        return outcome

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------
    def _handle_slider_moved(self, value: int) -> None:
        self._controller.set_intensity(value / SLIDER_STEPS)

    def _handle_preview_changed(self, image: QImage) -> None:
        self.image_view.set_image(image)

    def _handle_intensity_changed(self, value: float) -> None:
        position = int(round(value * SLIDER_STEPS))
        if self.intensity_slider.value() != position:
            self.intensity_slider.blockSignals(True)
            self.intensity_slider.setValue(position)
            self.intensity_slider.blockSignals(False)

    def _handle_filter_changed(self, _filter_id: str, display_name: str) -> None:
        self.filter_button.setText(display_name)

    def _handle_render_failed(self, filter_id: str, has_fallback: bool) -> None:
        if has_fallback:
            return
        show_error(self, f"{display_name_of(filter_id)} could not process this picture.")
