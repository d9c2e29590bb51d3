"""Edit session coordinating the picture, the filter and the rendered output."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Union

from PIL import Image

from ..errors import SaveError
from ..io.base import ImageSink
from . import catalog
from .catalog import FilterDescriptor
from .engine import FilterEngine, RenderResult
from .parameter_mapper import clamp_intensity, resolve

_LOGGER = logging.getLogger(__name__)

DEFAULT_INTENSITY = 0.5


class SessionState(Enum):
    """Lifecycle of an :class:`EditSession`."""

    EMPTY = "empty"
    """No input image has been supplied yet."""

    LOADED = "loaded"
    """An input image is present; the output may be stale or absent."""

    RENDERED = "rendered"
    """The output matches the current image, filter and intensity."""


@dataclass
class FilterSelection:
    """The active filter together with the slider position."""

    descriptor: FilterDescriptor
    intensity: float = DEFAULT_INTENSITY


@dataclass(frozen=True)
class RenderRequest:
    """Snapshot of everything a render needs, tagged with its generation."""

    generation: int
    descriptor: FilterDescriptor
    params: Mapping[str, float]
    image: Image.Image


class SaveStatus(Enum):
    SAVED = "saved"
    NO_OUTPUT_TO_SAVE = "no_output_to_save"
    FAILED = "failed"


@dataclass(frozen=True)
class SaveOutcome:
    """Result of :meth:`EditSession.save`."""

    status: SaveStatus
    location: Optional[Path] = None
    error: Optional[SaveError] = None

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.SAVED


class EditSession:
    """Own the edit state and keep the output in sync with it.

    Every mutation bumps a generation counter.  Render results are only
    applied when they belong to the newest generation, which lets callers run
    :meth:`prepare_render` / :meth:`apply_render` on a worker thread without
    ever writing a superseded frame into :attr:`output_image`.

    With ``auto_render`` enabled (the default) each mutation renders
    synchronously and returns the :class:`RenderResult`.  Controllers that
    render in the background disable it and drive the two-step API instead.
    """

    def __init__(
        self,
        engine: Optional[FilterEngine] = None,
        *,
        default_filter: Union[FilterDescriptor, str, None] = None,
        default_intensity: float = DEFAULT_INTENSITY,
        auto_render: bool = True,
    ) -> None:
        self._engine = engine if engine is not None else FilterEngine()
        self._auto_render = auto_render
        self._lock = threading.RLock()
        descriptor = (
            catalog.default_filter()
            if default_filter is None
            else self._coerce_descriptor(default_filter)
        )
        self._selection = FilterSelection(descriptor, clamp_intensity(default_intensity))
        self._params: dict[str, float] = resolve(descriptor, self._selection.intensity)
        self._input: Optional[Image.Image] = None
        self._output: Optional[Image.Image] = None
        self._state = SessionState.EMPTY
        self._generation = 0
        self._has_rendered = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def selection(self) -> FilterSelection:
        """Return a copy of the current selection."""

        with self._lock:
            return FilterSelection(self._selection.descriptor, self._selection.intensity)

    @property
    def current_filter(self) -> FilterDescriptor:
        with self._lock:
            return self._selection.descriptor

    @property
    def intensity(self) -> float:
        with self._lock:
            return self._selection.intensity

    @property
    def display_name(self) -> str:
        """Label of the current filter, ``"Unknown Filter"`` if uncatalogued."""

        return catalog.display_name_of(self.current_filter.id)

    @property
    def resolved_parameters(self) -> dict[str, float]:
        with self._lock:
            return dict(self._params)

    @property
    def input_image(self) -> Optional[Image.Image]:
        with self._lock:
            return self._input

    @property
    def output_image(self) -> Optional[Image.Image]:
        with self._lock:
            return self._output

    @property
    def has_rendered_once(self) -> bool:
        """Whether a render of the current input image has succeeded."""

        with self._lock:
            return self._has_rendered

    @property
    def auto_render(self) -> bool:
        return self._auto_render

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_input_image(self, image: Image.Image) -> Optional[RenderResult]:
        """Replace the input picture and render it with the current filter."""

        if image is None:
            raise ValueError("set_input_image() requires an image")
        with self._lock:
            self._input = image
            self._output = None
            self._state = SessionState.LOADED
            self._has_rendered = False
            self._generation += 1
            _LOGGER.debug("Loaded input image %sx%s", *image.size)
            return self._maybe_render()

    def set_filter(self, descriptor: Union[FilterDescriptor, str]) -> Optional[RenderResult]:
        """Switch to *descriptor*; the slider position is kept.

        Raises
        ------
        UnknownFilterError
            If *descriptor* is an id that is not in the catalog.
        """

        resolved_descriptor = self._coerce_descriptor(descriptor)
        with self._lock:
            self._selection = FilterSelection(resolved_descriptor, self._selection.intensity)
            self._params = resolve(resolved_descriptor, self._selection.intensity)
            self._generation += 1
            self._invalidate_output()
            return self._maybe_render()

    def set_intensity(self, value: float) -> Optional[RenderResult]:
        """Store *value* clamped to ``[0, 1]`` and re-render."""

        with self._lock:
            self._selection.intensity = clamp_intensity(value)
            self._params = resolve(self._selection.descriptor, self._selection.intensity)
            self._generation += 1
            self._invalidate_output()
            return self._maybe_render()

    def rerender(self) -> Optional[RenderResult]:
        """Render the current selection synchronously.

        Returns ``None`` without an input image.  A failed render leaves the
        previous output in place and is reported through the returned result
        rather than raised.
        """

        with self._lock:
            request = self.prepare_render()
            if request is None:
                return None
            result = self._engine.render(request.descriptor, request.params, request.image)
            self.apply_render(request, result)
            return result

    # ------------------------------------------------------------------
    # Two-step rendering for background workers
    # ------------------------------------------------------------------
    def prepare_render(self) -> Optional[RenderRequest]:
        """Snapshot the inputs of a render and supersede older requests."""

        with self._lock:
            if self._input is None:
                return None
            self._generation += 1
            return RenderRequest(
                generation=self._generation,
                descriptor=self._selection.descriptor,
                params=dict(self._params),
                image=self._input,
            )

    def render_request(self, request: RenderRequest) -> RenderResult:
        """Execute *request* without touching session state.

        Safe to call from a worker thread.
        """

        return self._engine.render(request.descriptor, request.params, request.image)

    def apply_render(self, request: RenderRequest, result: RenderResult) -> bool:
        """Apply *result* if *request* is still the newest; return whether it was."""

        with self._lock:
            if request.generation != self._generation:
                _LOGGER.debug(
                    "Discarding superseded render %s (current %s)",
                    request.generation,
                    self._generation,
                )
                return False
            if result.ok:
                self._output = result.image
                self._state = SessionState.RENDERED
                self._has_rendered = True
            else:
                # Keep the last good frame; it no longer matches the selection.
                self._state = SessionState.LOADED
                _LOGGER.warning(
                    "Render of %s failed: %s",
                    request.descriptor.id,
                    result.failure.value if result.failure else "unknown",
                )
            return True

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save(self, sink: ImageSink) -> SaveOutcome:
        """Hand the rendered output to *sink*.

        Never raises for the documented failure modes: a missing output yields
        :attr:`SaveStatus.NO_OUTPUT_TO_SAVE` and a :class:`SaveError` from the
        sink yields :attr:`SaveStatus.FAILED`.  Session state is not modified.
        """

        output = self.output_image
        if output is None:
            _LOGGER.info("Nothing to save: no rendered output")
            return SaveOutcome(SaveStatus.NO_OUTPUT_TO_SAVE)
        try:
            location = sink.save(output)
        except SaveError as exc:
            _LOGGER.warning("Saving the rendered image failed: %s", exc)
            return SaveOutcome(SaveStatus.FAILED, error=exc)
        _LOGGER.info("Saved rendered image to %s", location)
        return SaveOutcome(SaveStatus.SAVED, location=location)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _invalidate_output(self) -> None:
        # The kept frame was rendered with the previous selection.
        if self._input is not None:
            self._state = SessionState.LOADED

    def _maybe_render(self) -> Optional[RenderResult]:
        if not self._auto_render:
            return None
        return self.rerender()

    @staticmethod
    def _coerce_descriptor(value: Union[FilterDescriptor, str]) -> FilterDescriptor:
        if isinstance(value, FilterDescriptor):
            return value
        return catalog.lookup(value)


__all__ = [
    "DEFAULT_INTENSITY",
    "EditSession",
    "FilterSelection",
    "RenderRequest",
    "SaveOutcome",
    "SaveStatus",
    "SessionState",
]
