"""Linear undo/redo history over full element snapshots.

Every entry is an independent deep copy: snapshots are copied when recorded
and again when handed back, so later edits to the live store can never leak
into the history.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .elements import Element

logger = logging.getLogger(__name__)

Snapshot = List[Element]


def _copy_snapshot(elements: Iterable[Element]) -> Snapshot:
    return [element.copy() for element in elements]


class HistoryManager:
    """Snapshot history with a cursor; ``index == -1`` means nothing recorded yet."""

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 1:
            raise ValueError("History limit must be at least 1")
        self._history: List[Snapshot] = []
        self._index: int = -1
        self._limit = limit

    def __len__(self) -> int:
        return len(self._history)

    @property
    def index(self) -> int:
        return self._index

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1

    def current(self) -> Optional[Snapshot]:
        if self._index < 0:
            return None
        return _copy_snapshot(self._history[self._index])

    def record(self, snapshot: Iterable[Element]) -> None:
        """Drop any redoable future, append ``snapshot`` and move the cursor onto it."""
        del self._history[self._index + 1:]
        self._history.append(_copy_snapshot(snapshot))
        if self._limit is not None and len(self._history) > self._limit:
            self._history.pop(0)
        self._index = len(self._history) - 1
        logger.debug("History recorded entry %d of %d", self._index, len(self._history))

    def undo(self) -> Optional[Snapshot]:
        if not self.can_undo():
            logger.debug("Undo ignored at history index %d", self._index)
            return None
        self._index -= 1
        return _copy_snapshot(self._history[self._index])

    def redo(self) -> Optional[Snapshot]:
        if not self.can_redo():
            logger.debug("Redo ignored at history index %d", self._index)
            return None
        self._index += 1
        return _copy_snapshot(self._history[self._index])
