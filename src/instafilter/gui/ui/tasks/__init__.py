"""Background worker helpers for GUI tasks."""

from .filter_render_worker import FilterRenderSignals, FilterRenderWorker

__all__ = ["FilterRenderSignals", "FilterRenderWorker"]
