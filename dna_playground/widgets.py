"""Qt widgets for the DNA Playground UI."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from PySide6.QtCore import QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QCursor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .config import EditorConfig
from .elements import ELEMENT_SPECS, USAGE_STEPS, ElementType, spec_for
from .interaction import EditorSession, Mode
from .rendering import draw_scene
from .scenes import load_scene

logger = logging.getLogger(__name__)


class Canvas(QWidget):
    """Drawing surface that forwards pointer input to an :class:`EditorSession`."""

    status_changed = Signal(str)
    tool_changed = Signal(str)
    history_changed = Signal(bool, bool)
    zoom_changed = Signal(int)

    def __init__(self, session: EditorSession, config: Optional[EditorConfig] = None):
        super().__init__()
        self.setObjectName("DnaCanvas")
        self._session = session
        self._config = config or EditorConfig()
        self._click_armed = False
        self._show_hint = True
        self._last_tool: Optional[ElementType] = None
        self._last_zoom = session.view.zoom_percent
        self.setMinimumSize(QSize(320, 240))
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)
        self.setContextMenuPolicy(Qt.DefaultContextMenu)
        self.setToolTip(
            "Canvas: pick a component, then click to place it.\n"
            "Drag to move, double-click to rotate 180°, right-click to delete."
        )
        session.subscribe(self._on_session_changed)

    @property
    def session(self) -> EditorSession:
        return self._session

    def sizeHint(self) -> QSize:  # pragma: no cover - GUI layout handling
        return QSize(self._config.canvas_width, self._config.canvas_height)

    # ------------------------------------------------------------------
    # Session notifications
    def _on_session_changed(self) -> None:
        session = self._session
        state = session.state
        if state.selected_tool != self._last_tool:
            self._last_tool = state.selected_tool
            self.tool_changed.emit("" if state.selected_tool is None else state.selected_tool.value)
        if session.view.zoom_percent != self._last_zoom:
            self._last_zoom = session.view.zoom_percent
            self.zoom_changed.emit(self._last_zoom)
        self.history_changed.emit(session.can_undo(), session.can_redo())
        self._apply_cursor()
        self.update()

    def _apply_cursor(self) -> None:
        mode = self._session.mode
        if mode is Mode.DRAGGING:
            shape = Qt.ClosedHandCursor
        elif self._session.state.hovered_id is not None:
            shape = Qt.OpenHandCursor
        elif mode is Mode.TOOL_SELECTED:
            shape = Qt.CrossCursor
        else:
            shape = Qt.ArrowCursor
        self.setCursor(QCursor(shape))

    def post_status_message(self, message: str) -> None:
        self.status_changed.emit(message)

    # ------------------------------------------------------------------
    # Controls
    def undo(self) -> None:
        if self._session.undo():
            self.post_status_message("Undo")

    def redo(self) -> None:
        if self._session.redo():
            self.post_status_message("Redo")

    def clear(self) -> None:
        self._session.clear()
        self.post_status_message("Canvas cleared")

    def zoom_in(self) -> None:
        self._session.zoom_in()

    def zoom_out(self) -> None:
        self._session.zoom_out()

    def select_tool(self, element_type: ElementType) -> None:
        self._session.select_tool(element_type)
        self.post_status_message(f"Click the canvas to place {spec_for(element_type).label}")
        self.setFocus()

    def load_scene(self, name: str) -> None:
        placed = load_scene(self._session, name)
        self.post_status_message(f"Loaded demo scene '{name}' ({len(placed)} elements)")

    # ------------------------------------------------------------------
    # Painting
    def paintEvent(self, event):  # pragma: no cover - GUI entry point
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setRenderHint(QPainter.TextAntialiasing, True)
        painter.fillRect(self.rect(), QColor(self._config.background))
        session = self._session
        draw_scene(
            painter,
            session.elements(),
            zoom=session.view.zoom,
            hovered_id=session.state.hovered_id,
            text_color=self._config.text_color,
        )
        tool = session.state.selected_tool
        if tool is not None and self._show_hint:
            self._draw_placement_hint(painter, spec_for(tool).label)
        painter.end()

    def _draw_placement_hint(self, painter: QPainter, label: str) -> None:
        text = f"Click the canvas to place {label}"
        metrics = painter.fontMetrics()
        width = metrics.horizontalAdvance(text) + 32
        height = metrics.height() + 16
        box = QRectF((self.width() - width) / 2.0, 16.0, float(width), float(height))
        painter.save()
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(self._config.text_color))
        painter.drawRoundedRect(box, 8.0, 8.0)
        painter.setPen(QColor(self._config.background))
        painter.drawText(box, Qt.AlignCenter, text)
        painter.restore()

    # ------------------------------------------------------------------
    # Event forwarding to the session
    def resizeEvent(self, event):  # pragma: no cover - GUI layout handling
        super().resizeEvent(event)
        self._session.resize(self.width(), self.height())

    def mousePressEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self._click_armed = True
        self._session.primary_press(pos.x(), pos.y())

    def mouseMoveEvent(self, event):  # pragma: no cover - GUI entry point
        pos = event.position()
        self._session.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self._session.pointer_release()
        if self._click_armed:
            self._click_armed = False
            placed = self._session.primary_click(pos.x(), pos.y())
            if placed is not None:
                self.post_status_message(f"Placed {spec_for(placed.type).label}")

    def mouseDoubleClickEvent(self, event):  # pragma: no cover - GUI entry point
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        self._session.double_click(pos.x(), pos.y())

    def leaveEvent(self, event):  # pragma: no cover - GUI entry point
        self._click_armed = False
        self._session.pointer_leave()
        super().leaveEvent(event)

    def contextMenuEvent(self, event):  # pragma: no cover - GUI entry point
        pos = event.pos()
        removed = self._session.context_click(float(pos.x()), float(pos.y()))
        if removed is not None:
            self.post_status_message(f"Deleted {spec_for(removed.type).label}")
        event.accept()

    def keyPressEvent(self, event):  # pragma: no cover - GUI entry point
        if event.key() == Qt.Key_Escape and self._session.state.selected_tool is not None:
            self._session.deselect_tool()
            self.post_status_message("")
            event.accept()
            return
        super().keyPressEvent(event)

    # ------------------------------------------------------------------
    # Export helpers
    def grab_image(self) -> QPixmap:
        self._show_hint = False
        try:
            return self.grab()
        finally:
            self._show_hint = True

    def export_png(self, parent=None) -> None:
        path, _ = QFileDialog.getSaveFileName(
            parent or self, "Export PNG", self._config.export_filename, "PNG Files (*.png)"
        )
        if not path:
            return
        if self.grab_image().save(path, "PNG"):
            logger.info("Exported canvas to %s", path)
            self.post_status_message(f"Exported {path}")
        else:
            logger.warning("Could not write %s", path)
            self.post_status_message(f"Export failed: {path}")


def _swatch_icon(color: str, size: int = 18) -> QIcon:
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, True)
    fill = QColor(color)
    fill.setAlpha(0x40)
    painter.setBrush(fill)
    painter.setPen(QColor(color))
    painter.drawRoundedRect(1, 1, size - 2, size - 2, 4, 4)
    painter.end()
    return QIcon(pixmap)


class ComponentPalette:
    """Docked list of placeable DNA components plus usage notes."""

    def __init__(self, select_tool_cb: Callable[[ElementType], None], show_instructions: bool = True):
        self._select_tool_cb = select_tool_cb
        self.dock = QDockWidget("DNA Components")
        self.dock.setObjectName("DnaComponentsDock")
        self.dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)
        self.dock.setToolTip("Pick a component, then click the canvas to place it.")
        host = QWidget()
        host.setObjectName("DnaComponentsHost")
        layout = QVBoxLayout(host)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        self._buttons: Dict[ElementType, QPushButton] = {}
        for element_type, spec in ELEMENT_SPECS.items():
            button = QPushButton(_swatch_icon(spec.color), spec.label)
            button.setCheckable(True)
            button.setToolTip(spec.description)
            button.setStatusTip(spec.description)
            button.setStyleSheet("text-align: left; padding: 6px;")
            button.clicked.connect(lambda _checked, t=element_type: self._handle_clicked(t))
            layout.addWidget(button)
            self._buttons[element_type] = button

        if show_instructions:
            usage_box = QGroupBox("How to use")
            usage_layout = QVBoxLayout()
            usage_layout.setContentsMargins(6, 6, 6, 6)
            usage_layout.setSpacing(4)
            usage_box.setLayout(usage_layout)
            for step in USAGE_STEPS:
                label = QLabel(step)
                label.setWordWrap(True)
                usage_layout.addWidget(label)
            layout.addWidget(usage_box)

        layout.addStretch(1)
        self.dock.setWidget(host)

    def _handle_clicked(self, element_type: ElementType) -> None:
        # Re-clicking the active tool keeps it selected.
        self._select_tool_cb(element_type)

    def sync(self, selected: Optional[ElementType]) -> None:
        for element_type, button in self._buttons.items():
            blocked = button.blockSignals(True)
            button.setChecked(element_type is selected)
            button.blockSignals(blocked)
