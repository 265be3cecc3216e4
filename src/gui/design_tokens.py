"""Color and type tokens plus the stylesheet fragments for each pane."""

from __future__ import annotations

from typing import Dict, Final

from config.visual_config import SELECTED_ITEM_CLASS

PALETTE: Final[Dict[str, str]] = {
    "bg_window": "#0a0c10",
    "bg_pane": "#161b22",
    "bg_list": "#1c2128",
    "bg_hover": "rgba(255, 255, 255, 0.03)",
    "text_primary": "#d1d5db",
    "text_secondary": "#9ca3af",  # tree labels, fold triangles
    "text_muted": "#7f8b9a",
    "accent": "#4a7d89",
    "accent_bright": "#67e8f9",
    "accent_selected": "rgba(74, 125, 137, 0.12)",
    "border": "#2c313a",
}

FONT_PX: Final[Dict[str, int]] = {
    "hint": 12,
    "small": 13,
    "body": 14,
    "header": 18,
}


class PaneStyles:
    """Stylesheet fragments, one per area of the main window."""

    @staticmethod
    def category_tree() -> str:
        """Labels built from the rendered tree; selection uses the item class."""
        p = PALETTE
        return f"""
        QLabel[categoryId] {{
            color: {p['text_secondary']};
            font-size: {FONT_PX['body']}px;
            padding: 3px 6px;
            border-radius: 4px;
        }}
        QLabel[categoryId]:hover {{
            color: {p['text_primary']};
            background-color: {p['bg_hover']};
        }}
        QLabel[styleClass="{SELECTED_ITEM_CLASS}"] {{
            color: {p['accent_bright']};
            background-color: {p['accent_selected']};
        }}
        """

    @staticmethod
    def entry_list() -> str:
        p = PALETTE
        return f"""
        QListWidget {{
            background-color: {p['bg_list']};
            border: 1px solid {p['border']};
            border-radius: 6px;
            padding: 4px;
        }}
        QListWidget::item {{
            padding: 6px 8px;
        }}
        QListWidget::item:selected {{
            background-color: {p['accent_selected']};
        }}
        """

    @staticmethod
    def splitter() -> str:
        p = PALETTE
        return f"""
        QSplitter::handle {{
            background-color: {p['border']};
            width: 2px;
        }}
        QSplitter::handle:hover {{
            background-color: {p['accent']};
        }}
        """

    @staticmethod
    def empty_hint() -> str:
        """Inline style for "nothing here" labels."""
        return f"color: {PALETTE['text_muted']}; font-size: {FONT_PX['hint']}px; font-style: italic;"
