"""Filter pipeline: catalog, parameter mapping, rendering and the edit session."""

from __future__ import annotations

from .catalog import FilterDescriptor, FilterParameter, display_name_of, list_all, lookup
from .engine import FilterEngine, RenderFailure, RenderResult
from .parameter_mapper import clamp_intensity, resolve
from .session import EditSession, SaveOutcome, SaveStatus, SessionState

__all__ = [
    "EditSession",
    "FilterDescriptor",
    "FilterEngine",
    "FilterParameter",
    "RenderFailure",
    "RenderResult",
    "SaveOutcome",
    "SaveStatus",
    "SessionState",
    "clamp_intensity",
    "display_name_of",
    "list_all",
    "lookup",
    "resolve",
]
