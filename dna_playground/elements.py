"""Element model for the DNA Playground.

Every placed component is an :class:`Element` tagged with one of the ten
:class:`ElementType` variants. The catalog below carries the presentation data
(labels, descriptions, accent colours) shared by the palette and the renderer.
"""
from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

Point = Tuple[float, float]


class ElementType(str, Enum):
    DEOXYRIBOSE = "deoxyribose"
    PHOSPHATE = "phosphate"
    ADENINE = "adenine"
    THYMINE = "thymine"
    GUANINE = "guanine"
    CYTOSINE = "cytosine"
    HYDROGEN_BOND = "hydrogen-bond"
    PHOSPHODIESTER_STRAIGHT = "phosphodiester-straight"
    PHOSPHODIESTER_BENT = "phosphodiester-bent"
    CHEMICAL_BOND = "chemical-bond"


BASE_TYPES = frozenset(
    {ElementType.ADENINE, ElementType.THYMINE, ElementType.GUANINE, ElementType.CYTOSINE}
)


@dataclass(frozen=True)
class ElementSpec:
    """Palette entry for one element type."""

    label: str
    description: str
    color: str
    symbol: str = ""
    fill_color: Optional[str] = None

    @property
    def draw_color(self) -> str:
        return self.fill_color or self.color


ELEMENT_SPECS: Dict[ElementType, ElementSpec] = {
    ElementType.DEOXYRIBOSE: ElementSpec(
        label="Deoxyribose",
        description="Five-carbon sugar (pentose) forming the DNA backbone. C5' links the phosphate group.",
        color="#3b82f6",
    ),
    ElementType.PHOSPHATE: ElementSpec(
        label="Phosphate",
        description="Phosphate group (PO₄³⁻) linking sugar molecules into the backbone.",
        color="#f59e0b",
        symbol="P",
    ),
    ElementType.ADENINE: ElementSpec(
        label="Adenine (A)",
        description="Purine base, pairs with thymine (2 hydrogen bonds).",
        color="#10b981",
        symbol="A",
    ),
    ElementType.THYMINE: ElementSpec(
        label="Thymine (T)",
        description="Pyrimidine base, pairs with adenine (2 hydrogen bonds).",
        color="#ef4444",
        symbol="T",
    ),
    ElementType.GUANINE: ElementSpec(
        label="Guanine (G)",
        description="Purine base, pairs with cytosine (3 hydrogen bonds).",
        color="#8b5cf6",
        symbol="G",
    ),
    ElementType.CYTOSINE: ElementSpec(
        label="Cytosine (C)",
        description="Pyrimidine base, pairs with guanine (3 hydrogen bonds).",
        color="#ec4899",
        symbol="C",
        fill_color="#f59e0b",
    ),
    ElementType.HYDROGEN_BOND: ElementSpec(
        label="Hydrogen bond",
        description="Weak bond between base pairs (dashed line).",
        color="#06b6d4",
        symbol="H",
    ),
    ElementType.PHOSPHODIESTER_STRAIGHT: ElementSpec(
        label="Phosphodiester bond (straight)",
        description="Covalent bond linking adjacent nucleotides.",
        color="#ec4899",
    ),
    ElementType.PHOSPHODIESTER_BENT: ElementSpec(
        label="Phosphodiester bond (bent)",
        description="Covalent bond linking adjacent nucleotides.",
        color="#ec4899",
    ),
    ElementType.CHEMICAL_BOND: ElementSpec(
        label="Chemical bond",
        description="Ordinary covalent bond (solid line).",
        color="#a3a3a3",
    ),
}

# Base names printed under the letter inside a base tile.
BASE_NAMES: Dict[ElementType, str] = {
    ElementType.ADENINE: "Adenine",
    ElementType.THYMINE: "Thymine",
    ElementType.GUANINE: "Guanine",
    ElementType.CYTOSINE: "Cytosine",
}

USAGE_STEPS: Tuple[str, ...] = (
    "1. Pick a component from the list above",
    "2. Click the canvas to place it",
    "3. Drag elements to reposition them",
    "4. Right-click an element to delete it",
    "5. Double-click an element to rotate it by 180°",
    "6. Use the toolbar to undo, redo or clear",
)


def spec_for(element_type: ElementType) -> ElementSpec:
    return ELEMENT_SPECS[ElementType(element_type)]


def coerce_type(value: Any) -> ElementType:
    """Return ``value`` as an :class:`ElementType` or raise ``ValueError``."""
    if isinstance(value, ElementType):
        return value
    try:
        return ElementType(str(value))
    except ValueError as exc:
        raise ValueError(f"Unknown element type '{value}'") from exc


@dataclass
class Element:
    """A placed DNA component. ``id`` and ``type`` never change once created."""

    id: str
    type: ElementType
    x: float
    y: float
    rotation: float = 0.0
    scale: Optional[float] = 1.0

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def effective_scale(self) -> float:
        return float(self.scale) if self.scale else 1.0

    def copy(self) -> "Element":
        return Element(
            id=self.id,
            type=self.type,
            x=self.x,
            y=self.y,
            rotation=self.rotation,
            scale=self.scale,
        )


class IdGenerator:
    """Monotonic per-session element ids such as ``adenine-0003``."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self, element_type: ElementType) -> str:
        return f"{ElementType(element_type).value}-{next(self._counter):04d}"


__all__ = [
    "BASE_NAMES",
    "BASE_TYPES",
    "ELEMENT_SPECS",
    "Element",
    "ElementSpec",
    "ElementType",
    "IdGenerator",
    "USAGE_STEPS",
    "coerce_type",
    "spec_for",
]
