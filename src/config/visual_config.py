"""Shared visual constants for the category tree."""

from __future__ import annotations

from typing import Tuple


TREE_INDENT_PX = 16

FOLD_INDICATOR_SIZE = 8
FOLD_INDICATOR_POINTS: Tuple[Tuple[int, int], ...] = ((0, 2), (8, 2), (4, 6))
FOLD_INDICATOR_FILL = "black"
FOLD_INDICATOR_FOLDED_TRANSFORM = "translate(0, 8) rotate(-90)"

SELECTED_ITEM_CLASS = "TreeItemSelected"


def polygon_points_attr(points: Tuple[Tuple[int, int], ...] = FOLD_INDICATOR_POINTS) -> str:
    """Return polygon points in SVG attribute form ("x,y x,y ...")."""
    return " ".join(f"{x},{y}" for x, y in points)
