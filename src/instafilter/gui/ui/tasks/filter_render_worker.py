"""Worker that executes filter renders on a background thread."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from ....core.engine import RenderResult
from ....core.session import EditSession, RenderRequest

_LOGGER = logging.getLogger(__name__)


class FilterRenderSignals(QObject):
    """Signals emitted by :class:`FilterRenderWorker`."""

    finished = Signal(object, object)
    """Emitted with the :class:`RenderRequest` and its :class:`RenderResult`."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)


class FilterRenderWorker(QRunnable):
    """Render a :class:`RenderRequest` using ``EditSession.render_request``.

    The worker never writes to the session.  The controller applies the result
    on the GUI thread, where superseded generations are dropped.
    """

    def __init__(self, session: EditSession, request: RenderRequest) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._session = session
        self._request = request
        self.signals = FilterRenderSignals()

    @property
    def request(self) -> RenderRequest:
        return self._request

    def run(self) -> None:  # type: ignore[override]
        """Render the frame and notify listeners when done."""

        try:
            result = self._session.render_request(self._request)
        except Exception:  # pragma: no cover - the engine already guards backends
            _LOGGER.exception("Filter render worker failed")
            result = RenderResult.no_output()
        self.signals.finished.emit(self._request, result)


__all__ = ["FilterRenderSignals", "FilterRenderWorker"]
