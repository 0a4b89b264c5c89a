"""Ordered collection of the elements currently on the canvas."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .elements import Element, ElementType
from .geometry import hit_test

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = frozenset({"x", "y", "rotation", "scale"})


class ElementStore:
    """Elements in paint order: index 0 is bottom-most, the last one is on top."""

    def __init__(self, elements: Iterable[Element] = ()):
        self._elements: List[Element] = []
        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements))

    def __contains__(self, element_id: object) -> bool:
        return self._index_of(element_id) is not None

    def _index_of(self, element_id: object) -> Optional[int]:
        for idx, element in enumerate(self._elements):
            if element.id == element_id:
                return idx
        return None

    # ------------------------------------------------------------------
    # CRUD
    def add(self, element: Element) -> Element:
        if not isinstance(element.type, ElementType):
            raise TypeError(f"Element type must be an ElementType, got {element.type!r}")
        if element.id in self:
            raise ValueError(f"Duplicate element id '{element.id}'")
        self._elements.append(element)
        logger.debug("Added %s at (%.1f, %.1f)", element.id, element.x, element.y)
        return element

    def update(self, element_id: str, **fields) -> Optional[Element]:
        """Shallow-merge ``fields`` into the element; unknown ids are ignored."""
        illegal = set(fields) - MUTABLE_FIELDS
        if illegal:
            raise ValueError(f"Cannot update element fields: {', '.join(sorted(illegal))}")
        idx = self._index_of(element_id)
        if idx is None:
            logger.debug("Update ignored, no element '%s'", element_id)
            return None
        element = self._elements[idx]
        for key, value in fields.items():
            setattr(element, key, value)
        return element

    def delete(self, element_id: str) -> Optional[Element]:
        idx = self._index_of(element_id)
        if idx is None:
            logger.debug("Delete ignored, no element '%s'", element_id)
            return None
        return self._elements.pop(idx)

    def clear(self) -> None:
        self._elements.clear()

    def get(self, element_id: str) -> Optional[Element]:
        idx = self._index_of(element_id)
        return None if idx is None else self._elements[idx]

    def list(self) -> List[Element]:
        return list(self._elements)

    # ------------------------------------------------------------------
    # Snapshots
    def snapshot(self) -> List[Element]:
        return [element.copy() for element in self._elements]

    def replace(self, elements: Iterable[Element]) -> None:
        """Install a copy of ``elements`` as the complete store contents."""
        fresh = ElementStore(element.copy() for element in elements)
        self._elements = fresh._elements

    # ------------------------------------------------------------------
    # Queries
    def topmost_at(self, px: float, py: float) -> Optional[Element]:
        for element in reversed(self._elements):
            if hit_test(px, py, element):
                return element
        return None
