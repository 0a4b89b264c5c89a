"""Application bootstrap for the DNA Playground."""
from __future__ import annotations

import sys
from typing import Dict, Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar, QToolBar

from .config import EditorConfig
from .elements import ElementType, spec_for
from .history import HistoryManager
from .interaction import EditorSession
from .scenes import scene_description, scene_names
from .viewport import ViewState
from .widgets import Canvas, ComponentPalette


def build_session(config: EditorConfig) -> EditorSession:
    return EditorSession(
        history=HistoryManager(limit=config.history_limit),
        view=ViewState(width=config.canvas_width, height=config.canvas_height),
    )


class Main(QMainWindow):
    """Top-level window wiring together the canvas, palette, and controls."""

    def __init__(self, config: Optional[EditorConfig] = None, session: Optional[EditorSession] = None):
        super().__init__()
        self.setWindowTitle("DNA Structure Playground")
        self._config = config or EditorConfig()
        self.session = session or build_session(self._config)

        self.canvas = Canvas(self.session, self._config)
        self.palette = ComponentPalette(self.canvas.select_tool, self._config.show_instructions)
        self.setCentralWidget(self.canvas)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.palette.dock)

        self._actions: Dict[str, QAction] = {}
        self._setup_status_bar()
        self._make_toolbar()
        self._make_menu()

        self.canvas.status_changed.connect(self._on_status_changed)
        self.canvas.tool_changed.connect(self._on_tool_changed)
        self.canvas.history_changed.connect(self._on_history_changed)
        self.canvas.zoom_changed.connect(self._on_zoom_changed)

        self.resize(self._config.window_width, self._config.window_height)
        self._on_history_changed(self.session.can_undo(), self.session.can_redo())
        self._on_zoom_changed(self.session.view.zoom_percent)

    # ------------------------------------------------------------------
    # UI scaffolding
    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)
        self._tool_label = QLabel("Tool: none")
        self._tool_label.setToolTip("Component that the next canvas click will place.")
        self._zoom_label = QLabel("100%")
        self._zoom_label.setToolTip("Current zoom (50% to 200%).")
        bar.addPermanentWidget(self._tool_label)
        bar.addPermanentWidget(self._zoom_label)

    def _add_action(self, name: str, text: str, tip: str, slot, shortcuts: Sequence = ()) -> QAction:
        action = QAction(text, self)
        action.triggered.connect(slot)
        action.setToolTip(tip)
        action.setStatusTip(tip)
        if shortcuts:
            action.setShortcuts([QKeySequence(s) for s in shortcuts])
        self._actions[name] = action
        return action

    def _make_toolbar(self) -> None:
        toolbar = QToolBar("Controls")
        toolbar.setObjectName("DnaControlsToolbar")
        toolbar.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, toolbar)

        definitions = (
            ("undo", "Undo", "Undo the last placement, deletion or clear (Ctrl+Z).", self.canvas.undo,
             (QKeySequence.Undo,)),
            ("redo", "Redo", "Redo the last undone step (Ctrl+Y).", self.canvas.redo,
             (QKeySequence.Redo, "Ctrl+Y")),
            ("zoom_out", "Zoom Out", "Zoom out by 10%.", self.canvas.zoom_out, (QKeySequence.ZoomOut,)),
            ("zoom_in", "Zoom In", "Zoom in by 10%.", self.canvas.zoom_in, (QKeySequence.ZoomIn,)),
            ("export", "Export PNG", "Export the canvas as a PNG image.", lambda: self.canvas.export_png(self),
             ("Ctrl+E",)),
            ("clear", "Clear", "Remove every element from the canvas.", self.canvas.clear, ()),
        )
        for name, text, tip, slot, shortcuts in definitions:
            toolbar.addAction(self._add_action(name, text, tip, slot, shortcuts))
            if name in ("redo", "zoom_in"):
                toolbar.addSeparator()

    def _make_menu(self) -> None:
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self._actions["export"])
        file_menu.addSeparator()
        quit_action = file_menu.addAction("Quit")
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)

        edit_menu = menu_bar.addMenu("&Edit")
        edit_menu.addAction(self._actions["undo"])
        edit_menu.addAction(self._actions["redo"])
        edit_menu.addSeparator()
        edit_menu.addAction(self._actions["clear"])

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self._actions["zoom_in"])
        view_menu.addAction(self._actions["zoom_out"])
        view_menu.addSeparator()
        scenes_menu = view_menu.addMenu("Load Demo Scene")
        for name in scene_names():
            action = scenes_menu.addAction(name)
            action.setStatusTip(scene_description(name))
            action.triggered.connect(lambda _checked=False, n=name: self.canvas.load_scene(n))
        view_menu.addSeparator()
        view_menu.addAction(self.palette.dock.toggleViewAction())

    # ------------------------------------------------------------------
    # Event handlers
    def _on_status_changed(self, message: str) -> None:
        if message:
            self.statusBar().showMessage(message, 4000)
        else:
            self.statusBar().clearMessage()

    def _on_tool_changed(self, name: str) -> None:
        selected = ElementType(name) if name else None
        self.palette.sync(selected)
        if selected is None:
            self._tool_label.setText("Tool: none")
        else:
            self._tool_label.setText(f"Tool: {spec_for(selected).label}")

    def _on_history_changed(self, can_undo: bool, can_redo: bool) -> None:
        self._actions["undo"].setEnabled(bool(can_undo))
        self._actions["redo"].setEnabled(bool(can_redo))

    def _on_zoom_changed(self, percent: int) -> None:
        self._zoom_label.setText(f"{percent}%")


def main(config: Optional[EditorConfig] = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = Main(config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
