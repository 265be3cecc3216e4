"""Small helpers for widgets styled through the ``styleClass`` property."""

from typing import Literal

from PyQt6.QtWidgets import QLabel, QPushButton, QWidget

LabelStyle = Literal["header", "muted"]


def set_style_class(widget: QWidget, style_class: str) -> None:
    """Tag ``widget`` for the stylesheet and re-polish so the rule applies now."""
    widget.setProperty("styleClass", style_class)
    widget.style().unpolish(widget)
    widget.style().polish(widget)


def create_ghost_button(text: str, tooltip: str = "") -> QPushButton:
    """Compact transparent button, used for pane header actions like "+"."""
    button = QPushButton(text)
    button.setProperty("size", "sm")
    set_style_class(button, "ghost")
    if tooltip:
        button.setToolTip(tooltip)
    return button


def create_styled_label(text: str, style: LabelStyle) -> QLabel:
    label = QLabel(text)
    set_style_class(label, style)
    return label
