"""Build PyQt6 widgets from rendered ``Element`` trees."""

from __future__ import annotations

import logging
import re
from typing import Optional

from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPixmap, QPolygonF, QTransform
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from .elements import Element

logger = logging.getLogger(__name__)

_TRANSFORM_RE = re.compile(r"(translate|rotate)\s*\(([^)]*)\)")


class ClickableLabel(QLabel):
    """QLabel that emits ``clicked`` on left mouse press."""

    clicked = pyqtSignal()

    def mousePressEvent(self, event):
        super().mousePressEvent(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()


def parse_transform(value: str) -> QTransform:
    """Parse the ``translate(...)``/``rotate(...)`` subset of SVG transforms."""
    transform = QTransform()
    for name, raw_args in _TRANSFORM_RE.findall(value or ""):
        args = [float(arg) for arg in re.split(r"[\s,]+", raw_args.strip()) if arg]
        if name == "translate":
            dx = args[0] if args else 0.0
            dy = args[1] if len(args) > 1 else 0.0
            transform.translate(dx, dy)
        elif args:
            transform.rotate(args[0])
    return transform


def parse_points(value: str) -> QPolygonF:
    polygon = QPolygonF()
    for pair in (value or "").split():
        x, y = pair.split(",")
        polygon.append(QPointF(float(x), float(y)))
    return polygon


def render_svg_icon(svg: Element, color: Optional[str] = None) -> QPixmap:
    """Paint the polygons of an ``svg`` element onto a transparent pixmap."""
    width = int(svg.attrs.get("width", 8))
    height = int(svg.attrs.get("height", 8))
    pixmap = QPixmap(width, height)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    for polygon in svg.find_all(lambda el: el.tag == "polygon"):
        painter.setBrush(QColor(color or polygon.attrs.get("fill", "black")))
        transform = parse_transform(polygon.attrs.get("transform", ""))
        painter.drawPolygon(transform.map(parse_points(polygon.attrs.get("points", ""))))
    painter.end()
    return pixmap


def _render_span(element: Element, icon_color: Optional[str]) -> QWidget:
    label = ClickableLabel()
    svg = element.find(lambda el: el.tag == "svg")
    if svg is not None:
        label.setPixmap(render_svg_icon(svg, icon_color))
        label.setFixedSize(label.sizeHint())
    else:
        label.setText(element.text())

    class_name = element.attrs.get("class_name")
    if class_name:
        label.setProperty("styleClass", class_name)
    if "data_id" in element.attrs:
        label.setProperty("categoryId", element.attrs["data_id"])

    handler = element.attrs.get("on_click")
    if handler is not None:
        label.setCursor(Qt.CursorShape.PointingHandCursor)
        label.clicked.connect(handler)
    return label


def _render_div(element: Element, icon_color: Optional[str]) -> QWidget:
    container = QWidget()
    children = element.child_elements()
    inline = bool(children) and all(child.tag == "span" for child in children)
    layout = QHBoxLayout(container) if inline else QVBoxLayout(container)

    margin_left = int(element.attrs.get("style", {}).get("margin_left", 0))
    layout.setContentsMargins(margin_left, 0, 0, 0)
    layout.setSpacing(4 if inline else 0)

    for child in element.children:
        if isinstance(child, Element):
            layout.addWidget(render_element(child, icon_color))
        elif child:
            layout.addWidget(QLabel(child))

    if inline:
        layout.addStretch()
    return container


def render_element(element: Element, icon_color: Optional[str] = None) -> QWidget:
    """Return a widget tree mirroring ``element``.

    ``div`` becomes a vertical container (horizontal when every child is a
    ``span``), ``span`` becomes a clickable label or icon. Other tags fall
    back to a plain label showing their text.
    """
    if element.tag == "div":
        return _render_div(element, icon_color)
    if element.tag == "span":
        return _render_span(element, icon_color)
    logger.debug("No widget mapping for <%s>, rendering text only", element.tag)
    return QLabel(element.text())


__all__ = ["ClickableLabel", "parse_points", "parse_transform", "render_element", "render_svg_icon"]
