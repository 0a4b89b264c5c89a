"""QPainter artwork for every DNA component.

Each draw procedure paints in the element's local frame: the caller has
already translated to the element origin, rotated and scaled. Hovered
elements get a stronger fill or an opaque stroke.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPen, QPolygonF

from .elements import BASE_NAMES, BASE_TYPES, Element, ElementType, spec_for
from .geometry import BOND_LENGTH, bent_bond_path, straight_bond_path

DEFAULT_TEXT_COLOR = "#ededed"
FILL_ALPHA = 0x20
FILL_ALPHA_HOVER = 0x40
STROKE_ALPHA = 0x80

DrawFn = Callable[[QPainter, ElementType, bool, QColor], None]


def _color(value: str, alpha: int = 0xFF) -> QColor:
    color = QColor(value)
    color.setAlpha(alpha)
    return color


def _fill(value: str, hovered: bool) -> QColor:
    return _color(value, FILL_ALPHA_HOVER if hovered else FILL_ALPHA)


def _stroke(value: str, hovered: bool) -> QColor:
    return _color(value, 0xFF if hovered else STROKE_ALPHA)


def _pen(color: QColor, width: float) -> QPen:
    pen = QPen(color)
    pen.setWidthF(width)
    return pen


def _text(
    painter: QPainter,
    label: str,
    x: float,
    y: float,
    px_size: int,
    color: QColor,
    bold: bool = True,
    align: str = "center",
) -> None:
    font = QFont(painter.font())
    font.setPixelSize(px_size)
    font.setBold(bold)
    painter.setFont(font)
    painter.setPen(color)
    box_w = 160.0
    box_h = px_size * 2.0
    if align == "left":
        rect = QRectF(x, y - box_h / 2.0, box_w, box_h)
        flags = Qt.AlignLeft | Qt.AlignVCenter
    else:
        rect = QRectF(x - box_w / 2.0, y - box_h / 2.0, box_w, box_h)
        flags = Qt.AlignCenter
    painter.drawText(rect, flags, label)


# ---------------------------------------------------------------------------
# Per-type artwork


def draw_deoxyribose(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    radius = 40.0
    ring = QPolygonF()
    for i in range(5):
        angle = math.radians(i * 72 - 90)
        ring.append(QPointF(math.cos(angle) * radius, math.sin(angle) * radius))
    painter.setBrush(_fill(accent, hovered))
    painter.setPen(_pen(_color(accent), 2.0))
    painter.drawPolygon(ring)

    # Ring oxygen on top, then C1' (rightmost) clockwise to C4'.
    # C5' is labelled at the elbow of the bent phosphodiester bond instead.
    atoms = [(-90, "O"), (-18, "C1'"), (54, "C2'"), (126, "C3'"), (198, "C4'")]
    for angle_deg, label in atoms:
        angle = math.radians(angle_deg)
        _text(painter, label, math.cos(angle) * 28, math.sin(angle) * 28, 11, text_color)


def draw_phosphate(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    painter.setBrush(_fill(accent, hovered))
    painter.setPen(_pen(_color(accent), 2.0))
    painter.drawEllipse(QPointF(0.0, 0.0), 30.0, 30.0)
    _text(painter, "P", 0.0, 0.0, 20, _color(accent))
    for x, y in ((0.0, -20.0), (-17.0, 10.0), (17.0, 10.0)):
        _text(painter, "O", x, y, 10, text_color)


def draw_base(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    spec = spec_for(kind)
    accent = spec.draw_color
    painter.setBrush(_fill(accent, hovered))
    painter.setPen(_pen(_color(accent), 2.0))
    painter.drawRoundedRect(QRectF(-35.0, -25.0, 70.0, 50.0), 8.0, 8.0)
    _text(painter, spec.symbol or "?", 0.0, -5.0, 24, _color(accent))
    _text(painter, BASE_NAMES.get(kind, ""), 0.0, 15.0, 10, text_color, bold=False)


def draw_hydrogen_bond(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    half = BOND_LENGTH / 2.0
    pen = _pen(_stroke(accent, hovered), 2.0)
    # Dash lengths are in pen widths: 2.5 * 2px gives 5px dashes and gaps.
    pen.setDashPattern([2.5, 2.5])
    painter.setPen(pen)
    painter.drawLine(QPointF(-half, 0.0), QPointF(half, 0.0))
    _text(painter, "H", -BOND_LENGTH / 4.0, -10.0, 12, _color(accent))
    _text(painter, "H", BOND_LENGTH / 4.0, -10.0, 12, _color(accent))


def _draw_path(painter: QPainter, points, color: QColor, width: float) -> None:
    painter.setPen(_pen(color, width))
    painter.setBrush(Qt.NoBrush)
    painter.drawPolyline(QPolygonF([QPointF(float(x), float(y)) for x, y in points]))


def draw_phosphodiester_straight(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    _draw_path(painter, straight_bond_path(), _stroke(accent, hovered), 3.0)
    _text(painter, "Phosphodiester", 0.0, -20.0, 9, _color(accent))


def draw_phosphodiester_bent(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    path = bent_bond_path()
    _draw_path(painter, path, _stroke(accent, hovered), 3.0)
    elbow_x, elbow_y = float(path[1][0]), float(path[1][1])
    _text(painter, "Phosphodiester", 0.0, elbow_y + 15.0, 9, _color(accent))
    _text(painter, "C5'", elbow_x + 6.0, elbow_y, 10, text_color, align="left")


def draw_chemical_bond(painter: QPainter, kind: ElementType, hovered: bool, text_color: QColor) -> None:
    accent = spec_for(kind).draw_color
    half = BOND_LENGTH / 2.0
    painter.setPen(_pen(_stroke(accent, hovered), 2.0))
    painter.drawLine(QPointF(-half, 0.0), QPointF(half, 0.0))


RENDERERS: Dict[ElementType, DrawFn] = {
    ElementType.DEOXYRIBOSE: draw_deoxyribose,
    ElementType.PHOSPHATE: draw_phosphate,
    ElementType.HYDROGEN_BOND: draw_hydrogen_bond,
    ElementType.PHOSPHODIESTER_STRAIGHT: draw_phosphodiester_straight,
    ElementType.PHOSPHODIESTER_BENT: draw_phosphodiester_bent,
    ElementType.CHEMICAL_BOND: draw_chemical_bond,
}
RENDERERS.update({base: draw_base for base in BASE_TYPES})


# ---------------------------------------------------------------------------
# Scene painting


def draw_element(painter: QPainter, element: Element, hovered: bool = False, text_color: str = DEFAULT_TEXT_COLOR) -> None:
    draw = RENDERERS.get(element.type)
    if draw is None:
        return
    painter.save()
    painter.translate(element.x, element.y)
    painter.rotate(element.rotation)
    if element.scale:
        painter.scale(element.scale, element.scale)
    draw(painter, element.type, hovered, QColor(text_color))
    painter.restore()


def draw_scene(
    painter: QPainter,
    elements: Iterable[Element],
    zoom: float = 1.0,
    hovered_id: Optional[str] = None,
    text_color: str = DEFAULT_TEXT_COLOR,
) -> None:
    """Paint ``elements`` bottom to top in device space scaled by ``zoom``."""
    painter.save()
    painter.scale(zoom, zoom)
    for element in elements:
        draw_element(painter, element, element.id == hovered_id, text_color)
    painter.restore()


def render_image(
    elements: Iterable[Element],
    width: int,
    height: int,
    zoom: float = 1.0,
    background: str = "#0a0a0a",
    text_color: str = DEFAULT_TEXT_COLOR,
) -> QImage:
    """Offscreen rendering of a scene, used for headless PNG export."""
    image = QImage(max(1, int(width)), max(1, int(height)), QImage.Format_ARGB32)
    image.fill(QColor(background))
    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setRenderHint(QPainter.TextAntialiasing, True)
        draw_scene(painter, elements, zoom=zoom, text_color=text_color)
    finally:
        painter.end()
    return image
