"""Recursive tree item: one category label plus its (optionally folded) subtree."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from config.visual_config import SELECTED_ITEM_CLASS, TREE_INDENT_PX
from services.category_tree import CategoryNode

from .elements import Element, h
from .fold_indicator import FoldIndicator

logger = logging.getLogger(__name__)

SelectCallback = Callable[[Any], None]
SelectionAccessor = Callable[[], Any]


class TreeItem:
    """Renders one node and, while expanded, one TreeItem per child.

    Selection is never stored here. Each render asks ``get_selection`` for
    the current value and hands the same accessor to every child, so the
    whole tree reads one source of truth. Label clicks are forwarded to
    ``on_select``; the owner of the selection decides what happens.

    Child items are kept by node id between renders. Folding drops them,
    which also drops their fold state: unfolding mounts fresh children.
    """

    def __init__(
        self,
        node: CategoryNode,
        get_selection: SelectionAccessor,
        on_select: SelectCallback,
        depth: int = 0,
        selected: bool = False,
        folded: Optional[bool] = None,
        on_change: Optional[Callable[[], None]] = None,
        indent: int = TREE_INDENT_PX,
    ):
        self.node = node
        self.depth = depth
        self.selected = selected
        self._get_selection = get_selection
        self._on_select = on_select
        self._on_change = on_change
        self._indent = indent
        self._folded = False if folded is None else bool(folded)
        self._children: Dict[Any, TreeItem] = {}
        self.fold_indicator = FoldIndicator(folded=self._folded, on_click=self._on_fold_clicked)

    @property
    def folded(self) -> bool:
        return self._folded

    @property
    def expanded(self) -> bool:
        return not self._folded

    def update(self, node: CategoryNode, depth: int, selected: bool) -> None:
        """Receive fresh props from the parent for the next render."""
        self.node = node
        self.depth = depth
        self.selected = selected

    def set_indent(self, indent: int) -> None:
        """Change the per-depth margin for this item and its mounted subtree."""
        for item in self.iter_items():
            item._indent = indent

    def toggle(self) -> None:
        """Same as clicking the fold indicator."""
        self.fold_indicator.activate()

    def click(self) -> None:
        """Same as clicking the label."""
        self._on_select(self.node.id)

    def _on_fold_clicked(self) -> None:
        self._folded = not self._folded
        if self._folded:
            self._children = {}
        if self._on_change is not None:
            self._on_change()

    def child_items(self) -> List["TreeItem"]:
        """Currently mounted children, in node order."""
        return list(self._children.values())

    def iter_items(self) -> Iterator["TreeItem"]:
        yield self
        for child in self._children.values():
            yield from child.iter_items()

    def _mount_children(self, selection: Any) -> List[Element]:
        mounted: Dict[Any, TreeItem] = {}
        rendered: List[Element] = []
        for child in self.node.children:
            is_selected = selection == child.id
            item = self._children.get(child.id)
            if item is None:
                item = TreeItem(
                    child,
                    get_selection=self._get_selection,
                    on_select=self._on_select,
                    depth=self.depth + 1,
                    selected=is_selected,
                    on_change=self._on_change,
                    indent=self._indent,
                )
            else:
                item.update(child, self.depth + 1, is_selected)
            mounted[child.id] = item
            rendered.append(item.render())
        self._children = mounted
        return rendered

    def render(self) -> Element:
        selection = self._get_selection()
        logger.debug(
            "Drawing item %s, selection is %s, selected is %s",
            self.node.id,
            selection,
            self.selected,
        )

        if self.expanded:
            children = self._mount_children(selection)
        else:
            self._children = {}
            children = []

        class_name = SELECTED_ITEM_CLASS if self.selected else ""
        return h(
            "div",
            {"key": self.node.id},
            h(
                "div",
                {"style": {"margin_left": self.depth * self._indent}},
                self.fold_indicator.render(),
                h(
                    "span",
                    {"class_name": class_name, "on_click": self.click, "data_id": self.node.id},
                    self.node.name,
                ),
            ),
            children,
        )
