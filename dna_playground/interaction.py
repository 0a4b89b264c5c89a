"""Pointer interaction state machine for the DNA Playground.

:class:`EditorSession` owns everything one editing session needs (element
store, history, view and the transient pointer state) and turns pointer
events, given in device pixels, into store mutations.

Only structural edits (place, delete, clear) create undo points. Dragging and
double-click rotation change the live store without touching the history.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .elements import Element, ElementType, IdGenerator, coerce_type
from .history import HistoryManager
from .store import ElementStore
from .viewport import ViewState

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Listener = Callable[[], None]


class Mode(Enum):
    IDLE = auto()
    TOOL_SELECTED = auto()
    DRAGGING = auto()


@dataclass
class InteractionState:
    """Transient pointer state; never recorded in history."""

    selected_tool: Optional[ElementType] = None
    dragged_id: Optional[str] = None
    drag_offset: Point = (0.0, 0.0)
    hovered_id: Optional[str] = None

    @property
    def mode(self) -> Mode:
        if self.dragged_id is not None:
            return Mode.DRAGGING
        if self.selected_tool is not None:
            return Mode.TOOL_SELECTED
        return Mode.IDLE


class EditorSession:
    """Explicit editing context shared by the canvas, renderer and controls."""

    def __init__(
        self,
        store: Optional[ElementStore] = None,
        history: Optional[HistoryManager] = None,
        view: Optional[ViewState] = None,
    ):
        self.store = store if store is not None else ElementStore()
        self.history = history if history is not None else HistoryManager()
        self.view = view if view is not None else ViewState()
        self.state = InteractionState()
        self._ids = IdGenerator()
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Change notification
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def elements(self) -> List[Element]:
        return self.store.list()

    # ------------------------------------------------------------------
    # Hit testing
    def element_at(self, x: float, y: float) -> Optional[Element]:
        """Topmost element under the device-space point, if any."""
        mx, my = self.view.to_model(x, y)
        return self.store.topmost_at(mx, my)

    # ------------------------------------------------------------------
    # Tool selection
    def select_tool(self, element_type: ElementType) -> None:
        self.state.selected_tool = coerce_type(element_type)
        self.state.hovered_id = None
        self._changed()

    def deselect_tool(self) -> None:
        if self.state.selected_tool is None:
            return
        self.state.selected_tool = None
        self._changed()

    # ------------------------------------------------------------------
    # Structural edits (model coordinates)
    def place(self, element_type: ElementType, x: float, y: float, rotation: float = 0.0) -> Element:
        """Add a new element at model position ``(x, y)`` as one undo step."""
        kind = coerce_type(element_type)
        element = Element(
            id=self._ids.next_id(kind),
            type=kind,
            x=x,
            y=y,
            rotation=rotation % 360.0,
            scale=1.0,
        )
        self.store.add(element)
        self.history.record(self.store.snapshot())
        logger.info("Placed %s at (%.1f, %.1f)", element.id, x, y)
        self._changed()
        return element

    # ------------------------------------------------------------------
    # Pointer events (device coordinates)
    def primary_click(self, x: float, y: float) -> Optional[Element]:
        """Place the selected component at the click; the tool is then released."""
        tool = self.state.selected_tool
        if tool is None:
            return None
        mx, my = self.view.to_model(x, y)
        self.state.selected_tool = None
        return self.place(tool, mx, my)

    def primary_press(self, x: float, y: float) -> Optional[Element]:
        if self.state.selected_tool is not None:
            return None
        mx, my = self.view.to_model(x, y)
        element = self.store.topmost_at(mx, my)
        if element is None:
            return None
        self.state.dragged_id = element.id
        self.state.drag_offset = (mx - element.x, my - element.y)
        self._changed()
        return element

    def pointer_move(self, x: float, y: float) -> None:
        mx, my = self.view.to_model(x, y)
        state = self.state
        if state.dragged_id is not None:
            ox, oy = state.drag_offset
            self.store.update(state.dragged_id, x=mx - ox, y=my - oy)
            self._changed()
            return
        if state.selected_tool is not None:
            hovered = None
        else:
            element = self.store.topmost_at(mx, my)
            hovered = None if element is None else element.id
        if hovered != state.hovered_id:
            state.hovered_id = hovered
            self._changed()

    def pointer_release(self) -> None:
        if self.state.dragged_id is None:
            return
        self.state.dragged_id = None
        self.state.drag_offset = (0.0, 0.0)
        self._changed()

    def pointer_leave(self) -> None:
        self.pointer_release()

    def context_click(self, x: float, y: float) -> Optional[Element]:
        element = self.element_at(x, y)
        if element is None:
            return None
        self.store.delete(element.id)
        self.history.record(self.store.snapshot())
        logger.info("Deleted %s", element.id)
        self._drop_stale_references()
        self._changed()
        return element

    def double_click(self, x: float, y: float) -> Optional[Element]:
        element = self.element_at(x, y)
        if element is None:
            return None
        self.store.update(element.id, rotation=(element.rotation + 180.0) % 360.0)
        self._changed()
        return element

    # ------------------------------------------------------------------
    # Controls
    def undo(self) -> bool:
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self.store.replace(snapshot)
        logger.info("Undo to history index %d", self.history.index)
        self._drop_stale_references()
        self._changed()
        return True

    def redo(self) -> bool:
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self.store.replace(snapshot)
        logger.info("Redo to history index %d", self.history.index)
        self._drop_stale_references()
        self._changed()
        return True

    def clear(self) -> None:
        self.store.clear()
        self.history.record(self.store.snapshot())
        logger.info("Cleared canvas")
        self._drop_stale_references()
        self._changed()

    def zoom_in(self) -> float:
        zoom = self.view.zoom_in()
        self._changed()
        return zoom

    def zoom_out(self) -> float:
        zoom = self.view.zoom_out()
        self._changed()
        return zoom

    def resize(self, width: int, height: int) -> None:
        self.view.resize(width, height)
        self._changed()

    def _drop_stale_references(self) -> None:
        state = self.state
        if state.dragged_id is not None and state.dragged_id not in self.store:
            state.dragged_id = None
            state.drag_offset = (0.0, 0.0)
        if state.hovered_id is not None and state.hovered_id not in self.store:
            state.hovered_id = None
