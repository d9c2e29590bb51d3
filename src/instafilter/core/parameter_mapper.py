"""Translate the intensity slider into concrete filter parameters."""

from __future__ import annotations

import math

from .catalog import FilterDescriptor, FilterParameter

# Linear gains applied to the slider value.  Every accepted parameter is
# driven by the same slider so switching filters keeps a comparable strength.
RADIUS_GAIN = 200.0
SCALE_GAIN = 10.0


def clamp_intensity(value: float) -> float:
    """Return *value* limited to the inclusive ``[0.0, 1.0]`` range.

    ``NaN`` collapses to ``0.0`` so a misbehaving slider cannot poison the
    stored selection.
    """

    numeric = float(value)
    if math.isnan(numeric):
        return 0.0
    return max(0.0, min(1.0, numeric))


def resolve(descriptor: FilterDescriptor, intensity: float) -> dict[str, float]:
    """Return the parameters *descriptor* expects for the slider *intensity*.

    Parameters the filter does not accept are omitted rather than zeroed;
    backends may reject keys they do not know.
    """

    value = clamp_intensity(intensity)
    accepted = descriptor.accepted_parameters
    resolved: dict[str, float] = {}
    if FilterParameter.INTENSITY in accepted:
        resolved[FilterParameter.INTENSITY.value] = value
    if FilterParameter.RADIUS in accepted:
        resolved[FilterParameter.RADIUS.value] = value * RADIUS_GAIN
    if FilterParameter.SCALE in accepted:
        resolved[FilterParameter.SCALE.value] = value * SCALE_GAIN
    return resolved


__all__ = ["RADIUS_GAIN", "SCALE_GAIN", "clamp_intensity", "resolve"]
