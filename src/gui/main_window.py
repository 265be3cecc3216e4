"""Main application window."""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QSize
from PyQt6.QtWidgets import (
    QInputDialog,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStatusBar,
)

from .category_pane import CategoryPane
from .entry_list_pane import EntryListPane
from services.category_service import CategoryService, CategoryServiceError
from services.category_tree import ROOT_CATEGORY_ID, CategoryTreeError
from utils.error_handling import format_error_message, log_exception

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Category tree on the left, entries of the selected category on the right."""

    def __init__(self, service: CategoryService, selection: int = ROOT_CATEGORY_ID):
        super().__init__()
        self.service = service
        self.setWindowTitle("Category Browser")
        self.setMinimumSize(QSize(900, 600))
        self.setObjectName("mainWindow")

        self._create_central_widget(selection)
        self._create_status_bar()

        self.reload_categories()
        self._show_entries(selection)

    def _create_central_widget(self, selection: int):
        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.category_pane = CategoryPane(selection=selection)
        self.category_pane.category_selected.connect(self._on_category_selected)
        self.category_pane.add_category_requested.connect(self._on_add_category)
        splitter.addWidget(self.category_pane)

        self.entry_pane = EntryListPane()
        splitter.addWidget(self.entry_pane)

        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

    def _create_status_bar(self):
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def reload_categories(self) -> bool:
        """Reload the category tree from the database; False on failure."""
        try:
            tree = self.service.load_tree()
        except (CategoryTreeError, CategoryServiceError) as e:
            log_exception(e, "Failed to load categories")
            QMessageBox.critical(self, "Categories", format_error_message(e, "Failed to load categories"))
            return False
        self.category_pane.set_categories(tree)
        return True

    def _show_entries(self, category_id: int) -> None:
        try:
            entries = self.service.entries_for(category_id)
        except CategoryServiceError as e:
            log_exception(e, "Failed to list entries", extra={"category_id": category_id})
            self.entry_pane.set_entries([])
            self.status_bar.showMessage("Entries unavailable")
            QMessageBox.warning(self, "Entries", format_error_message(e, include_type=False))
            return
        self.entry_pane.set_entries(entries)
        self.status_bar.showMessage(f"{len(entries)} entries")

    def _on_category_selected(self, category_id: int) -> None:
        self._show_entries(category_id)

    def _prompt_category_name(self) -> Optional[str]:
        name, accepted = QInputDialog.getText(
            self, "Add Category", "Category name:", QLineEdit.EchoMode.Normal, ""
        )
        return name if accepted else None

    def _on_add_category(self) -> None:
        name = self._prompt_category_name()
        if name is None:
            return

        parent_id = self.category_pane.selection()
        if parent_id is None:
            parent_id = ROOT_CATEGORY_ID

        try:
            category_id = self.service.add_category(name, parent_id)
        except CategoryServiceError as e:
            log_exception(e, "Failed to add category", extra={"parent_id": parent_id}, level=logging.WARNING)
            QMessageBox.warning(self, "Add Category", format_error_message(e, include_type=False))
            return

        self.reload_categories()
        self.status_bar.showMessage(f"Added category '{name.strip()}' (#{category_id})")
