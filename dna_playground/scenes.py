"""Canonical demo layouts used by the ``render`` command and the tests."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .elements import Element, ElementType, IdGenerator
from .interaction import EditorSession

# (type, x, y, rotation) in model space
Placement = Tuple[ElementType, float, float, float]

_SCENES: Dict[str, Dict[str, object]] = {
    "nucleotide": {
        "description": "Phosphate, sugar and adenine joined into one nucleotide.",
        "placements": [
            (ElementType.PHOSPHATE, 120.0, 120.0, 0.0),
            (ElementType.PHOSPHODIESTER_BENT, 200.0, 110.0, 0.0),
            (ElementType.DEOXYRIBOSE, 280.0, 200.0, 0.0),
            (ElementType.CHEMICAL_BOND, 360.0, 190.0, 0.0),
            (ElementType.ADENINE, 435.0, 190.0, 0.0),
        ],
    },
    "base-pair": {
        "description": "An A-T and a G-C pair with their hydrogen bonds between two backbones.",
        "placements": [
            (ElementType.DEOXYRIBOSE, 100.0, 150.0, 0.0),
            (ElementType.CHEMICAL_BOND, 180.0, 150.0, 0.0),
            (ElementType.ADENINE, 255.0, 150.0, 0.0),
            (ElementType.HYDROGEN_BOND, 330.0, 140.0, 0.0),
            (ElementType.HYDROGEN_BOND, 330.0, 160.0, 0.0),
            (ElementType.THYMINE, 405.0, 150.0, 0.0),
            (ElementType.CHEMICAL_BOND, 480.0, 150.0, 0.0),
            (ElementType.DEOXYRIBOSE, 560.0, 150.0, 180.0),
            (ElementType.PHOSPHODIESTER_STRAIGHT, 100.0, 230.0, 90.0),
            (ElementType.PHOSPHODIESTER_STRAIGHT, 560.0, 230.0, 90.0),
            (ElementType.DEOXYRIBOSE, 100.0, 320.0, 0.0),
            (ElementType.CHEMICAL_BOND, 180.0, 320.0, 0.0),
            (ElementType.GUANINE, 255.0, 320.0, 0.0),
            (ElementType.HYDROGEN_BOND, 330.0, 305.0, 0.0),
            (ElementType.HYDROGEN_BOND, 330.0, 320.0, 0.0),
            (ElementType.HYDROGEN_BOND, 330.0, 335.0, 0.0),
            (ElementType.CYTOSINE, 405.0, 320.0, 0.0),
            (ElementType.CHEMICAL_BOND, 480.0, 320.0, 0.0),
            (ElementType.DEOXYRIBOSE, 560.0, 320.0, 180.0),
        ],
    },
    "components": {
        "description": "One of every component in a row, for checking the palette artwork.",
        "placements": [
            (element_type, 70.0 + 110.0 * (idx % 5), 90.0 + 140.0 * (idx // 5), 0.0)
            for idx, element_type in enumerate(ElementType)
        ],
    },
}


def scene_names() -> List[str]:
    return sorted(_SCENES)


def scene_description(name: str) -> str:
    return str(_scene(name)["description"])


def _scene(name: str) -> Dict[str, object]:
    try:
        return _SCENES[name]
    except KeyError as exc:
        raise ValueError(f"Scene '{name}' not found. Use 'list-scenes' to inspect options.") from exc


def scene_placements(name: str) -> List[Placement]:
    return list(_scene(name)["placements"])  # type: ignore[arg-type]


def scene_elements(name: str, ids: Optional[IdGenerator] = None) -> List[Element]:
    ids = ids or IdGenerator()
    return [
        Element(id=ids.next_id(kind), type=kind, x=x, y=y, rotation=rotation, scale=1.0)
        for kind, x, y, rotation in scene_placements(name)
    ]


def load_scene(session: EditorSession, name: str) -> List[Element]:
    """Add a scene to ``session`` one element per undo step, rotations included."""
    placements = scene_placements(name)
    session.deselect_tool()
    return [session.place(kind, x, y, rotation) for kind, x, y, rotation in placements]
