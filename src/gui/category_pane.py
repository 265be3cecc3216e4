"""Category pane - header with an add button above the category tree."""

from __future__ import annotations

from typing import Any, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget

from gui.tree_view.widget import CategoryTreeWidget
from gui.ui_helpers import create_ghost_button, create_styled_label
from services.category_tree import CategoryNode


class CategoryPane(QWidget):
    """Left pane of the main window.

    The "+" button only announces the request; creating the category is up
    to whoever listens to ``add_category_requested``.
    """

    add_category_requested = pyqtSignal()
    category_selected = pyqtSignal(int)

    def __init__(self, selection: Any = None, parent=None):
        super().__init__(parent)
        self.setObjectName("categoryPane")
        self._selection = selection
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header = QHBoxLayout()
        header.setContentsMargins(12, 8, 12, 8)
        header.addWidget(create_styled_label("Categories", "header"))
        header.addStretch()

        self.add_button = create_ghost_button("+", tooltip="Add category")
        self.add_button.clicked.connect(self.add_category_requested.emit)
        header.addWidget(self.add_button)
        layout.addLayout(header)

        self.tree = CategoryTreeWidget(selection=self._selection)
        self.tree.category_selected.connect(self.category_selected.emit)
        layout.addWidget(self.tree, stretch=1)

    def set_categories(self, root: CategoryNode) -> None:
        self.tree.set_categories(root)

    def selection(self) -> Optional[int]:
        return self.tree.selection()
