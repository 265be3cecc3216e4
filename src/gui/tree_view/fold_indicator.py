"""Triangle control that flips between folded and expanded."""

from __future__ import annotations

from typing import Callable, Optional

from config.visual_config import (
    FOLD_INDICATOR_FILL,
    FOLD_INDICATOR_FOLDED_TRANSFORM,
    FOLD_INDICATOR_SIZE,
    polygon_points_attr,
)

from .elements import Element, h


class FoldIndicator:
    """Owns its own folded flag and notifies its owner on activation.

    The owner keeps a separate structural flag; both flip together because
    every activation flips this flag and then calls ``on_click``.
    """

    def __init__(self, folded: bool = False, on_click: Optional[Callable[[], None]] = None):
        self.folded = bool(folded)
        self._on_click = on_click

    def activate(self) -> None:
        self.folded = not self.folded
        if self._on_click is not None:
            self._on_click()

    def render(self) -> Element:
        transform = FOLD_INDICATOR_FOLDED_TRANSFORM if self.folded else ""
        return h(
            "span",
            {"class_name": "FoldIndicator", "on_click": self.activate},
            h(
                "svg",
                {
                    "version": "1.1",
                    "width": FOLD_INDICATOR_SIZE,
                    "height": FOLD_INDICATOR_SIZE,
                    "xmlns": "http://www.w3.org/2000/svg",
                },
                h(
                    "polygon",
                    {
                        "points": polygon_points_attr(),
                        "fill": FOLD_INDICATOR_FILL,
                        "transform": transform,
                    },
                ),
            ),
        )
