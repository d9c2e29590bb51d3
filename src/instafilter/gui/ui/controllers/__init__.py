"""Controllers coordinating widgets with the edit session."""

from .edit_controller import EditController

__all__ = ["EditController"]
