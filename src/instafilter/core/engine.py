"""Run a catalog filter through a backend and validate the result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from PIL import Image

from ..errors import RenderPreconditionError
from .catalog import FilterDescriptor
from .filter_backends import FilterBackend, select_filter_backend

_LOGGER = logging.getLogger(__name__)


class RenderFailure(Enum):
    """Recoverable reasons a render produced nothing."""

    NO_OUTPUT = "no_output"


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a single render: either an image or a failure."""

    image: Optional[Image.Image] = None
    failure: Optional[RenderFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.image is not None

    @classmethod
    def success(cls, image: Image.Image) -> "RenderResult":
        return cls(image=image)

    @classmethod
    def no_output(cls) -> "RenderResult":
        return cls(failure=RenderFailure.NO_OUTPUT)


class FilterEngine:
    """Feed resolved parameters into a :class:`FilterBackend`.

    The engine's only responsibilities are to refuse parameters the filter does
    not accept and to turn a missing or broken backend result into
    :attr:`RenderFailure.NO_OUTPUT`.  Backend exceptions are logged and never
    propagated, because a failed preview must not take the edit view down.
    """

    def __init__(self, backend: Optional[FilterBackend] = None) -> None:
        self._backend = backend if backend is not None else select_filter_backend()

    @property
    def backend(self) -> FilterBackend:
        return self._backend

    def render(
        self,
        descriptor: FilterDescriptor,
        params: Mapping[str, float],
        image: Optional[Image.Image],
    ) -> RenderResult:
        """Apply *descriptor* with *params* to *image*.

        Raises
        ------
        RenderPreconditionError
            If *image* is ``None`` or *params* contains a key the filter does
            not accept.  Both indicate a bug in the caller.
        """

        if image is None:
            raise RenderPreconditionError("render() requires an input image")
        unsupported = sorted(key for key in params if not descriptor.accepts(key))
        if unsupported:
            raise RenderPreconditionError(
                f"{descriptor.display_name} does not accept parameters: {', '.join(unsupported)}"
            )

        try:
            output = self._backend.render(descriptor.id, dict(params), image)
        except Exception:
            _LOGGER.exception(
                "%s backend failed to render %s", self._backend.tier_name, descriptor.id
            )
            return RenderResult.no_output()

        if output is None:
            _LOGGER.warning("Filter %s produced no output", descriptor.id)
            return RenderResult.no_output()
        width, height = output.size
        if width <= 0 or height <= 0:
            _LOGGER.warning("Filter %s produced an empty image", descriptor.id)
            return RenderResult.no_output()
        return RenderResult.success(output)


__all__ = ["FilterEngine", "RenderFailure", "RenderResult"]
