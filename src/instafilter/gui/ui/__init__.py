"""Widgets, controllers and background tasks of the main window."""
