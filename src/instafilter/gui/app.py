"""Application bootstrap for the Instafilter window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..core import catalog
from ..core.engine import FilterEngine
from ..core.filter_backends import select_filter_backend
from ..core.parameter_mapper import clamp_intensity
from ..core.session import DEFAULT_INTENSITY, EditSession
from ..io.library_sink import PhotoLibrarySink
from ..settings import SettingsManager
from ..utils.logging import get_logger, set_log_level
from .ui.controllers.edit_controller import EditController
from .ui.window import MainWindow


def build_session(settings: SettingsManager) -> EditSession:
    """Create an asynchronous :class:`EditSession` from the stored defaults."""

    logger = get_logger()
    filter_id = settings.get("edit.default_filter", catalog.DEFAULT_FILTER_ID)
    if not isinstance(filter_id, str) or not catalog.is_known(filter_id):
        logger.warning("Unknown default filter %r; using %s", filter_id, catalog.DEFAULT_FILTER_ID)
        filter_id = catalog.DEFAULT_FILTER_ID

    stored_intensity = settings.get("edit.default_intensity", DEFAULT_INTENSITY)
    try:
        intensity = clamp_intensity(float(stored_intensity))
    except (TypeError, ValueError):
        intensity = DEFAULT_INTENSITY

    return EditSession(
        FilterEngine(select_filter_backend()),
        default_filter=filter_id,
        default_intensity=intensity,
        auto_render=False,
    )


def build_sink(settings: SettingsManager) -> PhotoLibrarySink:
    directory = Path(str(settings.get("library.directory"))).expanduser()
    image_format = str(settings.get("library.format", "png"))
    try:
        return PhotoLibrarySink(directory, image_format=image_format)
    except ValueError:
        get_logger().warning("Unsupported library format %r; saving PNG files", image_format)
        return PhotoLibrarySink(directory)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the editor and return the Qt exit code."""

    settings = SettingsManager()
    settings.load_or_default()
    set_log_level(settings.get("logging.level", "INFO"))

    app = QApplication.instance() or QApplication(list(argv) if argv is not None else sys.argv)
    controller = EditController(build_session(settings))
    window = MainWindow(controller, sink=build_sink(settings))
    window.resize(720, 860)
    window.show()
    return app.exec()
