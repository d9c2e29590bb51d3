"""Menu listing every catalog filter."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu, QWidget

from ....core import catalog


class FilterMenu(QMenu):
    """Offer the catalog filters in presentation order."""

    filterSelected = Signal(str)
    """Emitted with the id of the chosen filter."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Select a filter", parent)
        self._actions: dict[str, QAction] = {}
        for descriptor in catalog.list_all():
            action = self.addAction(descriptor.display_name)
            action.setData(descriptor.id)
            action.triggered.connect(
                lambda _checked=False, filter_id=descriptor.id: self.filterSelected.emit(filter_id)
            )
            self._actions[descriptor.id] = action

    def filter_ids(self) -> list[str]:
        return list(self._actions)

    def action_for(self, filter_id: str) -> Optional[QAction]:
        return self._actions.get(filter_id)
