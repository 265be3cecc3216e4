"""Qt widget that displays a TreeView and re-emits its selection."""

from __future__ import annotations

import logging
from typing import Any, Optional

from PyQt6.QtCore import pyqtSignal, pyqtSlot
from PyQt6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

from gui.design_tokens import PALETTE
from gui.settings_manager import settings
from services.category_tree import CategoryNode

from .elements import Element
from .qt_renderer import render_element
from .tree_view import TreeView

logger = logging.getLogger(__name__)


class CategoryTreeWidget(QWidget):
    """Scrollable category tree.

    The TreeView renders Element trees; every render replaces the displayed
    widgets. Old widgets are released with ``deleteLater`` because the
    re-render usually happens inside one of their own click handlers.
    """

    category_selected = pyqtSignal(int)  # category id

    def __init__(self, selection: Any = None, parent=None):
        super().__init__(parent)
        self._initial_selection = selection
        self.view: Optional[TreeView] = None
        self._content: Optional[QWidget] = None
        self.setup_ui()

        # Follow tree_indentation changes while open
        settings.settings_changed.connect(self._on_settings_changed)

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        self._host = QWidget()
        self._host_layout = QVBoxLayout(self._host)
        self._host_layout.setContentsMargins(8, 4, 8, 4)
        self._host_layout.addStretch()
        self.scroll.setWidget(self._host)

        layout.addWidget(self.scroll)

    def set_categories(self, root: CategoryNode) -> None:
        """Display ``root``; fold state survives reloads of the same tree."""
        if self.view is None:
            self.view = TreeView(
                root,
                selection=self._initial_selection,
                on_select=self.category_selected.emit,
                indent=settings.tree_indentation,
            )
            self.view.subscribe(self._rebuild)
            self.view.render()
        else:
            self.view.set_data(root)

    def selection(self) -> Any:
        if self.view is None:
            return self._initial_selection
        return self.view.get_selection()

    def select(self, category_id: int) -> None:
        if self.view is None:
            self._initial_selection = category_id
        else:
            self.view.select(category_id)

    def content_widget(self) -> Optional[QWidget]:
        return self._content

    @pyqtSlot(str, object)
    def _on_settings_changed(self, key: str, value) -> None:
        if key == "tree_indentation" and self.view is not None:
            self.view.set_indent(settings.tree_indentation)

    def _rebuild(self, element: Element) -> None:
        if self._content is not None:
            self._host_layout.removeWidget(self._content)
            self._content.hide()
            self._content.deleteLater()

        self._content = render_element(element, icon_color=PALETTE["text_secondary"])
        self._host_layout.insertWidget(0, self._content)
        logger.debug("Category tree rebuilt (%d items)", sum(1 for _ in self.view.iter_items()))
