"""
Target Objects List
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QFont
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QListWidget, QListWidgetItem

from stereotrig.controller.store import SceneStore
from stereotrig.model.presentation import object_rows
from stereotrig.model.state import SceneState
from stereotrig.view.panels.base import BasePanel

OBJECT_ID_ROLE = Qt.ItemDataRole.UserRole


class ObjectsPanel(BasePanel):
    def __init__(self, store: SceneStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Objects")
        grp_layout = QVBoxLayout(grp)

        self.object_list = QListWidget()
        self.object_list.itemClicked.connect(self.on_item_clicked)
        grp_layout.addWidget(self.object_list)

        layout.addWidget(grp)

        self.load_from_state(self.store.state)

    def on_item_clicked(self, item: QListWidgetItem) -> None:
        self.store.select_object(item.data(OBJECT_ID_ROLE))

    def load_from_state(self, state: SceneState) -> None:
        rows = object_rows(state)

        self.object_list.blockSignals(True)
        try:
            # Items are updated in-place; the clicked item may still be in use
            if self.object_list.count() != len(rows):
                self.object_list.clear()
                for _ in rows:
                    self.object_list.addItem(QListWidgetItem())

            for i, row in enumerate(rows):
                item = self.object_list.item(i)
                item.setText(f"{row.icon}  {row.name}\t{row.distance_text}")
                item.setData(OBJECT_ID_ROLE, row.id)
                item.setForeground(QBrush(QColor(row.color)))
                font = QFont(item.font())
                font.setBold(row.selected)
                item.setFont(font)
                item.setSelected(row.selected)
        finally:
            self.object_list.blockSignals(False)
