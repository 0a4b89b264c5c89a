"""DNA Playground: an educational editor for DNA component diagrams.

The editing core (elements, geometry, store, history, viewport and the
interaction session) is Qt-free; ``widgets``, ``rendering`` and ``app`` build
the PySide6 front end on top of it.
"""
from __future__ import annotations

from .elements import ELEMENT_SPECS, Element, ElementType
from .geometry import hit_test, point_to_segment_distance
from .history import HistoryManager
from .interaction import EditorSession, InteractionState, Mode
from .store import ElementStore
from .viewport import ViewState

__version__ = "0.1.0"

__all__ = [
    "ELEMENT_SPECS",
    "EditorSession",
    "Element",
    "ElementStore",
    "ElementType",
    "HistoryManager",
    "InteractionState",
    "Mode",
    "ViewState",
    "hit_test",
    "point_to_segment_distance",
]
