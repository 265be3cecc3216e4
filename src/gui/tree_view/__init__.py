"""Category tree view package.

This package provides the toolkit-independent tree components and the Qt
glue that displays them:
- elements: Element render descriptions
- fold_indicator: FoldIndicator toggle control
- tree_item: Recursive TreeItem
- tree_view: TreeView coordinator (owns the selection)
- qt_renderer: Element -> PyQt6 widget conversion
- widget: CategoryTreeWidget hosting a TreeView
"""

from .elements import Element, h
from .fold_indicator import FoldIndicator
from .tree_item import TreeItem
from .tree_view import TreeView

__all__ = ["Element", "FoldIndicator", "TreeItem", "TreeView", "h"]
