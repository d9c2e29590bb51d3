from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image
from PySide6.QtCore import QThreadPool

from instafilter.core import catalog
from instafilter.core.engine import FilterEngine
from instafilter.core.filter_backends import CpuFilterBackend
from instafilter.core.session import EditSession, SaveStatus
from instafilter.gui.ui import window as window_module
from instafilter.gui.ui.controllers.edit_controller import EditController
from instafilter.gui.ui.window import SLIDER_STEPS, MainWindow
from instafilter.io.file_source import FileImageSource
from instafilter.io.library_sink import PhotoLibrarySink


@pytest.fixture
def notices(monkeypatch):
    shown: list[tuple[str, str]] = []
    monkeypatch.setattr(
        window_module, "show_information", lambda parent, message, *, title="": shown.append((title, message))
    )
    monkeypatch.setattr(window_module, "show_error", lambda parent, message, **kwargs: shown.append(("error", message)))
    return shown


@pytest.fixture
def main_window(qtbot, tmp_path: Path, gradient_image):
    picture = tmp_path / "picture.png"
    gradient_image.save(picture)
    pool = QThreadPool()
    pool.setMaxThreadCount(4)
    session = EditSession(FilterEngine(CpuFilterBackend()), auto_render=False)
    controller = EditController(session, thread_pool=pool)
    window = MainWindow(
        controller,
        sink=PhotoLibrarySink(tmp_path / "Library"),
        source=FileImageSource(picture),
    )
    qtbot.addWidget(window)
    yield window
    pool.waitForDone(5000)


def test_initial_controls(main_window) -> None:
    assert main_window.filter_button.text() == "Sepia Tone"
    assert main_window.intensity_slider.value() == SLIDER_STEPS // 2
    assert main_window.filter_menu.filter_ids() == [d.id for d in catalog.list_all()]
    assert not main_window.image_view.has_image()


def test_save_without_picture_shows_notice(main_window, notices) -> None:
    outcome = main_window.save_image()

    assert outcome.status is SaveStatus.NO_OUTPUT_TO_SAVE
    assert notices == [("Nothing to save!", "Please choose an image.")]


def test_pick_render_and_save(qtbot, main_window, notices, tmp_path: Path) -> None:
    controller = main_window._controller
    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        main_window.pick_image()
    assert main_window.image_view.has_image()

    with qtbot.waitSignal(controller.filterChanged, timeout=1000):
        main_window.filter_menu.action_for("pixellate").trigger()
    assert main_window.filter_button.text() == "Pixellate"

    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        main_window.intensity_slider.setValue(800)
    assert controller.session.resolved_parameters == {"scale": 8.0}

    outcome = main_window.save_image()

    assert outcome.ok
    assert outcome.location.parent == tmp_path / "Library"
    assert outcome.location.exists()
    assert notices == []


def test_new_picture_clears_previous_preview(qtbot, main_window, gradient_image) -> None:
    controller = main_window._controller
    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        main_window.pick_image()
    assert main_window.image_view.has_image()

    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        main_window.load_image(gradient_image.transpose(Image.Transpose.FLIP_LEFT_RIGHT))
        assert not main_window.image_view.has_image()

    assert main_window.image_view.has_image()


def test_slider_follows_clamped_intensity(main_window) -> None:
    main_window._controller.set_intensity(4.0)

    assert main_window.intensity_slider.value() == SLIDER_STEPS
    assert main_window._controller.session.intensity == 1.0
