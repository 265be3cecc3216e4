"""Tree view coordinator - owns the selected category for one rendered tree."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, Optional

from config.visual_config import TREE_INDENT_PX
from services.category_tree import CategoryNode
from utils.error_handling import timed

from .elements import Element
from .tree_item import TreeItem

logger = logging.getLogger(__name__)

RenderListener = Callable[[Element], None]


class TreeView:
    """Root of a category tree with single selection.

    The canonical selection lives only here. Descendant items receive the
    bound ``get_selection`` and ``select`` methods and never copy the value.
    Every state change (selection or fold) is followed by a synchronous
    re-render whose result is stored in ``element`` and handed to the
    subscribed listeners.

    Args:
        root: Category tree to display
        selection: Initially selected node id (not validated)
        on_select: Called with the node id after every label click
        folded: Initial fold state of the root item (default: expanded)
        indent: Left margin per depth level, in pixels
    """

    def __init__(
        self,
        root: CategoryNode,
        selection: Any = None,
        on_select: Optional[Callable[[Any], None]] = None,
        folded: Optional[bool] = None,
        indent: int = TREE_INDENT_PX,
    ):
        self._root = root
        self._selection = selection
        self._on_select = on_select
        self._indent = indent
        self._listeners: List[RenderListener] = []
        self.element: Optional[Element] = None
        self.root_item = self._create_root_item(folded)

    def _create_root_item(self, folded: Optional[bool] = None) -> TreeItem:
        return TreeItem(
            self._root,
            get_selection=self.get_selection,
            on_select=self.select,
            depth=0,
            selected=self.get_selection() == self._root.id,
            folded=folded,
            on_change=self.render,
            indent=self._indent,
        )

    @property
    def root(self) -> CategoryNode:
        return self._root

    def get_selection(self) -> Any:
        return self._selection

    def select(self, node_id: Any) -> None:
        """Make ``node_id`` the selected category, re-render, then notify ``on_select``.

        The tree is drawn before the callback runs, so a failing callback
        cannot leave the display behind ``get_selection()``.
        """
        logger.debug("Selected item %s", node_id)
        self._selection = node_id
        self.render()
        if self._on_select is not None:
            self._on_select(node_id)

    def set_data(self, root: CategoryNode) -> None:
        """Show a reloaded category tree.

        Mounted items whose node ids are still present keep their fold
        state. A different root id mounts a fresh root item.
        """
        previous = self._root
        self._root = root
        if previous.id != root.id:
            self.root_item = self._create_root_item()
        self.render()

    def set_indent(self, indent: int) -> None:
        """Re-render with a new per-depth margin; fold state is kept."""
        self._indent = indent
        self.root_item.set_indent(indent)
        self.render()

    def subscribe(self, listener: RenderListener) -> Callable[[], None]:
        """Call ``listener`` after every render; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @timed
    def render(self) -> Element:
        self.root_item.update(self._root, 0, self.get_selection() == self._root.id)
        self.element = self.root_item.render()
        for listener in list(self._listeners):
            listener(self.element)
        return self.element

    def iter_items(self) -> Iterator[TreeItem]:
        """Walk the currently mounted tree items (pre-order)."""
        return self.root_item.iter_items()

    def find_item(self, node_id: Any) -> Optional[TreeItem]:
        for item in self.iter_items():
            if item.node.id == node_id:
                return item
        return None

    def selected_items(self) -> List[TreeItem]:
        return [item for item in self.iter_items() if item.selected]
