"""Registry of the built-in filters offered by the edit view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownFilterError


class FilterParameter(str, Enum):
    """Scalar inputs a filter may accept."""

    INTENSITY = "intensity"
    RADIUS = "radius"
    SCALE = "scale"


@dataclass(frozen=True)
class FilterDescriptor:
    """Identity, label and accepted parameters of a single filter."""

    id: str
    display_name: str
    accepted_parameters: frozenset[FilterParameter]

    def accepts(self, parameter: FilterParameter | str) -> bool:
        """Return ``True`` when *parameter* may be passed to this filter."""

        try:
            key = FilterParameter(parameter)
        except ValueError:
            return False
        return key in self.accepted_parameters


UNKNOWN_FILTER_NAME = "Unknown Filter"

DEFAULT_FILTER_ID = "sepia_tone"

_I = FilterParameter.INTENSITY
_R = FilterParameter.RADIUS
_S = FilterParameter.SCALE

# Presentation order of the filter menu.  The accepted parameters mirror the
# inputs exposed by the corresponding platform filters.
_FILTERS: tuple[FilterDescriptor, ...] = (
    FilterDescriptor("crystallize", "Crystallize", frozenset({_R})),
    FilterDescriptor("edges", "Edges", frozenset({_I})),
    FilterDescriptor("gaussian_blur", "Gaussian Blur", frozenset({_R})),
    FilterDescriptor("pixellate", "Pixellate", frozenset({_S})),
    FilterDescriptor("sepia_tone", "Sepia Tone", frozenset({_I})),
    FilterDescriptor("unsharp_mask", "Unsharp Mask", frozenset({_R, _I})),
    FilterDescriptor("vignette", "Vignette", frozenset({_R, _I})),
)

FILTERS: Mapping[str, FilterDescriptor] = MappingProxyType(
    {descriptor.id: descriptor for descriptor in _FILTERS}
)


def lookup(filter_id: str) -> FilterDescriptor:
    """Return the descriptor registered under *filter_id*.

    Raises
    ------
    UnknownFilterError
        If *filter_id* is not part of the catalog.
    """

    try:
        return FILTERS[filter_id]
    except KeyError:
        raise UnknownFilterError(filter_id) from None


def list_all() -> tuple[FilterDescriptor, ...]:
    """Return every filter in menu order."""

    return _FILTERS


def is_known(filter_id: str) -> bool:
    return filter_id in FILTERS


def display_name_of(filter_id: str) -> str:
    """Return the label for *filter_id*, or ``"Unknown Filter"``.

    Filters created outside the catalog still need a label in the toolbar, so
    an unknown id is answered with a placeholder instead of an error.
    """

    descriptor = FILTERS.get(filter_id)
    if descriptor is None:
        return UNKNOWN_FILTER_NAME
    return descriptor.display_name


def default_filter() -> FilterDescriptor:
    return FILTERS[DEFAULT_FILTER_ID]


__all__ = [
    "DEFAULT_FILTER_ID",
    "FILTERS",
    "FilterDescriptor",
    "FilterParameter",
    "UNKNOWN_FILTER_NAME",
    "default_filter",
    "display_name_of",
    "is_known",
    "list_all",
    "lookup",
]
