"""Controller connecting the edit widgets to an :class:`EditSession`."""

from __future__ import annotations

import logging
from typing import Optional, Union

from PIL import Image
from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from ....core.catalog import FilterDescriptor
from ....core.engine import RenderResult
from ....core.session import EditSession, RenderRequest, SaveOutcome
from ....io.base import ImageSink
from ..qimage_utils import pil_to_qimage
from ..tasks.filter_render_worker import FilterRenderSignals, FilterRenderWorker

_LOGGER = logging.getLogger(__name__)


class EditController(QObject):
    """Drive an :class:`EditSession` and render previews off the GUI thread.

    Slider drags produce a burst of intensity changes.  At most one
    :class:`FilterRenderWorker` runs at a time; changes made while it runs are
    coalesced into a single follow-up render of the newest selection.  The
    superseded result is discarded by :meth:`EditSession.apply_render`, so the
    view only ever shows the frame matching the latest slider position.
    """

    previewChanged = Signal(QImage)
    """Emitted with the freshly rendered frame."""

    filterChanged = Signal(str, str)
    """Emitted with the filter id and its display name."""

    intensityChanged = Signal(float)
    """Emitted with the clamped intensity the session stored."""

    renderFailed = Signal(str, bool)
    """Emitted with the filter id and whether the current picture has a frame to fall back on."""

    saveFinished = Signal(object)
    """Emitted with the :class:`SaveOutcome` of :meth:`save`."""

    def __init__(
        self,
        session: Optional[EditSession] = None,
        *,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else EditSession(auto_render=False)
        if self._session.auto_render:
            raise ValueError("EditController requires a session with auto_render disabled")
        self._pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()
        # Signals of the running worker stay referenced until it reports back.
        self._active: Optional[FilterRenderSignals] = None
        self._render_queued = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def session(self) -> EditSession:
        return self._session

    def has_pending_render(self) -> bool:
        return self._active is not None or self._render_queued

    def load_image(self, image: Image.Image) -> None:
        self._session.set_input_image(image)
        self._schedule_render()

    def set_filter(self, descriptor: Union[FilterDescriptor, str]) -> None:
        self._session.set_filter(descriptor)
        current = self._session.current_filter
        self.filterChanged.emit(current.id, self._session.display_name)
        self._schedule_render()

    def set_intensity(self, value: float) -> None:
        self._session.set_intensity(value)
        self.intensityChanged.emit(self._session.intensity)
        self._schedule_render()

    def rerender(self) -> None:
        self._schedule_render()

    def save(self, sink: ImageSink) -> SaveOutcome:
        """Save the current output synchronously and broadcast the outcome."""

        outcome = self._session.save(sink)
        self.saveFinished.emit(outcome)
        return outcome

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _schedule_render(self) -> None:
        if self._active is not None:
            # The running request is already superseded; render the newest
            # selection once it reports back.
            self._render_queued = True
            return
        self._start_render()

    def _start_render(self) -> None:
        self._render_queued = False
        request = self._session.prepare_render()
        if request is None:
            return
        worker = FilterRenderWorker(self._session, request)
        worker.signals.finished.connect(self._handle_render_finished)
        self._active = worker.signals
        self._pool.start(worker)

    @Slot(object, object)
    def _handle_render_finished(self, request: RenderRequest, result: RenderResult) -> None:
        self._active = None
        applied = self._session.apply_render(request, result)
        if self._render_queued:
            self._start_render()
        if not applied:
            return
        if result.ok and result.image is not None:
            self.previewChanged.emit(pil_to_qimage(result.image))
            return
        has_fallback = self._session.has_rendered_once
        _LOGGER.info(
            "Keeping %s after failed render of %s",
            "previous frame" if has_fallback else "empty view",
            request.descriptor.id,
        )
        self.renderFailed.emit(request.descriptor.id, has_fallback)


__all__ = ["EditController"]
