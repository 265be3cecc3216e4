"""Entry list pane - titles of the entries in the selected category."""

from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from gui.design_tokens import PaneStyles
from gui.ui_helpers import create_styled_label
from services.category_service import EntrySummary


class EntryListPane(QWidget):
    """Read-only list of entries; the URI is kept as item data and tooltip."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("entryListPane")
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)

        layout.addWidget(create_styled_label("Entries", "header"))

        self.list_widget = QListWidget()
        layout.addWidget(self.list_widget, stretch=1)

        self.empty_label = QLabel("No entries in this category")
        self.empty_label.setStyleSheet(PaneStyles.empty_hint())
        layout.addWidget(self.empty_label)
        self.empty_label.hide()

    def set_entries(self, entries: Iterable[EntrySummary]) -> None:
        self.list_widget.clear()
        for entry in entries:
            item = QListWidgetItem(entry.display_title)
            item.setData(Qt.ItemDataRole.UserRole, entry.uri)
            item.setToolTip(entry.uri)
            self.list_widget.addItem(item)
        self.empty_label.setVisible(self.list_widget.count() == 0)

    def titles(self) -> list[str]:
        return [self.list_widget.item(i).text() for i in range(self.list_widget.count())]
