from __future__ import annotations

import threading
from pathlib import Path

import pytest
from PIL import Image
from PySide6.QtCore import QThreadPool
from PySide6.QtGui import QImage

from instafilter.core.engine import FilterEngine
from instafilter.core.filter_backends import CpuFilterBackend
from instafilter.core.session import EditSession, SaveStatus, SessionState
from instafilter.gui.ui.controllers.edit_controller import EditController
from instafilter.io.base import ImageSink


class _GatedBackend(CpuFilterBackend):
    """Blocks renders of a chosen intensity until released and tracks overlap."""

    def __init__(self) -> None:
        self.gate = threading.Event()
        self.gate.set()
        self.blocked_intensity: float | None = None
        self.fail = False
        self.rendered: list[dict[str, float]] = []
        self.running = 0
        self.peak = 0
        self._lock = threading.Lock()

    def render(self, filter_id, params, image):
        with self._lock:
            self.rendered.append(dict(params))
            self.running += 1
            self.peak = max(self.peak, self.running)
        try:
            if params.get("intensity") == self.blocked_intensity:
                self.gate.wait(5)
            if self.fail:
                return None
            return super().render(filter_id, params, image)
        finally:
            with self._lock:
                self.running -= 1


class _MemorySink(ImageSink):
    def __init__(self) -> None:
        self.saved: list[Image.Image] = []

    def save(self, image: Image.Image) -> Path:
        self.saved.append(image)
        return Path("memory.png")


@pytest.fixture
def backend() -> _GatedBackend:
    return _GatedBackend()


@pytest.fixture
def controller(qtbot, backend):
    pool = QThreadPool()
    pool.setMaxThreadCount(4)
    session = EditSession(FilterEngine(backend), auto_render=False)
    controller = EditController(session, thread_pool=pool)
    yield controller
    backend.gate.set()
    pool.waitForDone(5000)


def test_controller_requires_manual_session() -> None:
    with pytest.raises(ValueError):
        EditController(EditSession(auto_render=True))


def test_load_image_emits_preview(qtbot, controller, gradient_image) -> None:
    with qtbot.waitSignal(controller.previewChanged, timeout=5000) as blocker:
        controller.load_image(gradient_image)

    preview = blocker.args[0]
    assert isinstance(preview, QImage)
    assert (preview.width(), preview.height()) == gradient_image.size
    assert controller.session.state is SessionState.RENDERED


def test_filter_change_reports_display_name(qtbot, controller) -> None:
    with qtbot.waitSignal(controller.filterChanged, timeout=1000) as blocker:
        controller.set_filter("gaussian_blur")

    assert blocker.args == ["gaussian_blur", "Gaussian Blur"]


def test_stale_render_is_dropped(qtbot, controller, backend, gradient_image) -> None:
    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        controller.load_image(gradient_image)

    backend.blocked_intensity = 0.2
    backend.gate.clear()
    controller.set_intensity(0.2)
    controller.set_intensity(0.9)
    assert controller.has_pending_render()

    previews: list[QImage] = []
    controller.previewChanged.connect(previews.append)
    backend.gate.set()
    qtbot.waitUntil(lambda: not controller.has_pending_render(), timeout=5000)

    assert len(previews) == 1
    assert controller.session.state is SessionState.RENDERED
    assert controller.session.resolved_parameters == {"intensity": 0.9}
    assert backend.rendered[-1] == {"intensity": 0.9}


def test_slider_burst_keeps_one_render_in_flight(qtbot, controller, backend, gradient_image) -> None:
    backend.blocked_intensity = 0.5
    backend.gate.clear()
    controller.load_image(gradient_image)
    for step in range(1, 10):
        controller.set_intensity(step / 10)

    previews: list[QImage] = []
    controller.previewChanged.connect(previews.append)
    backend.gate.set()
    qtbot.waitUntil(lambda: not controller.has_pending_render(), timeout=5000)

    assert backend.peak == 1
    assert backend.rendered == [{"intensity": 0.5}, {"intensity": 0.9}]
    assert len(previews) == 1
    assert controller.session.state is SessionState.RENDERED


def test_failure_on_new_picture_reports_no_fallback(qtbot, controller, backend, gradient_image) -> None:
    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        controller.load_image(gradient_image)

    backend.fail = True
    with qtbot.waitSignal(controller.renderFailed, timeout=5000) as blocker:
        controller.load_image(gradient_image.copy())

    assert blocker.args == ["sepia_tone", False]
    assert controller.session.output_image is None


def test_render_failure_signal(qtbot, controller, backend, gradient_image) -> None:
    backend.fail = True

    with qtbot.waitSignal(controller.renderFailed, timeout=5000) as blocker:
        controller.load_image(gradient_image)

    assert blocker.args == ["sepia_tone", False]
    assert controller.session.state is SessionState.LOADED


def test_save_without_output_emits_outcome(qtbot, controller) -> None:
    sink = _MemorySink()

    with qtbot.waitSignal(controller.saveFinished, timeout=1000) as blocker:
        outcome = controller.save(sink)

    assert outcome.status is SaveStatus.NO_OUTPUT_TO_SAVE
    assert blocker.args[0] is outcome
    assert sink.saved == []


def test_save_after_render(qtbot, controller, gradient_image) -> None:
    with qtbot.waitSignal(controller.previewChanged, timeout=5000):
        controller.load_image(gradient_image)
    sink = _MemorySink()

    outcome = controller.save(sink)

    assert outcome.ok
    assert sink.saved == [controller.session.output_image]
