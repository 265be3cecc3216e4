"""Application stylesheet assembled from the design tokens."""

from gui.design_tokens import FONT_PX, PALETTE, PaneStyles


def _base() -> str:
    p = PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg_window']};
        color: {p['text_primary']};
        font-size: {FONT_PX['body']}px;
    }}
    #categoryPane, #entryListPane {{
        background-color: {p['bg_pane']};
    }}
    QLabel {{
        background-color: transparent;
    }}
    QLabel[styleClass="header"] {{
        font-size: {FONT_PX['header']}px;
        font-weight: 600;
    }}
    QLabel[styleClass="muted"] {{
        color: {p['text_muted']};
    }}
    """


def _buttons() -> str:
    p = PALETTE
    return f"""
    QPushButton {{
        background-color: {p['accent']};
        border: none;
        border-radius: 6px;
        padding: 6px 14px;
    }}
    QPushButton[styleClass="ghost"] {{
        background-color: transparent;
    }}
    QPushButton[styleClass="ghost"]:hover {{
        background-color: {p['bg_hover']};
        color: {p['accent_bright']};
    }}
    QPushButton[size="sm"] {{
        padding: 2px 8px;
        font-size: {FONT_PX['small']}px;
    }}
    """


def get_stylesheet() -> str:
    """Return the full dark stylesheet for ``QApplication.setStyleSheet``."""
    return "".join(
        [
            _base(),
            _buttons(),
            PaneStyles.category_tree(),
            PaneStyles.entry_list(),
            PaneStyles.splitter(),
        ]
    )
