"""Hit-testing geometry for placed DNA elements.

All functions are pure and work in model space. Circles and boxes are tested
around the element origin without undoing its rotation or scale; only the two
phosphodiester bonds are mapped into the element's local frame first, so a
rotated base keeps its axis-aligned hit box.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Sequence, Tuple

import numpy as np

from .elements import BASE_TYPES, Element, ElementType

Point = Tuple[float, float]

BOND_LENGTH = 80.0
BOND_HIT_TOLERANCE = 6.0
SUGAR_RADIUS = 40.0
PHOSPHATE_RADIUS = 30.0
BASE_HALF_SIZE = (35.0, 25.0)
BOND_HALF_SIZE = (40.0, 5.0)


def straight_bond_path(length: float = BOND_LENGTH) -> np.ndarray:
    """Endpoints of the slanted phosphodiester bond in its local frame."""
    return np.array(
        [(length / 2.0, -length / 10.0), (-length / 2.0, length / 10.0)],
        dtype=float,
    )


def bent_bond_path(length: float = BOND_LENGTH) -> np.ndarray:
    """Diagonal drop to the elbow at ``(0, length/2)`` then a horizontal run."""
    elbow = (0.0, length / 2.0)
    return np.array(
        [(-length / 2.0, 0.0), elbow, (length / 2.0, length / 2.0)],
        dtype=float,
    )


def point_to_segment_distance(px: float, py: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance from ``(px, py)`` to the segment, clamping the projection to [0, 1]."""
    vx = x2 - x1
    vy = y2 - y1
    seg_len_sq = vx * vx + vy * vy
    if seg_len_sq <= 0.0:
        return math.hypot(px - x1, py - y1)
    t = ((px - x1) * vx + (py - y1) * vy) / seg_len_sq
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (x1 + t * vx), py - (y1 + t * vy))


def point_to_polyline_distance(point: Sequence[float], polyline: np.ndarray) -> float:
    """Distance from a local-frame point to a bond path such as the bent bond's elbow."""
    polyline = np.asarray(polyline, dtype=float)
    if polyline.shape[0] == 0:
        return float("inf")
    if polyline.shape[0] == 1:
        return float(np.hypot(point[0] - polyline[0, 0], point[1] - polyline[0, 1]))
    seg_vec = polyline[1:] - polyline[:-1]
    seg_len_sq = np.sum(seg_vec ** 2, axis=1)
    to_point = np.asarray(point, dtype=float) - polyline[:-1]
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.sum(to_point * seg_vec, axis=1) / seg_len_sq
    t = np.nan_to_num(np.clip(t, 0.0, 1.0))
    projection = polyline[:-1] + seg_vec * t[:, None]
    dist = np.hypot(point[0] - projection[:, 0], point[1] - projection[:, 1])
    return float(np.min(dist))


def to_local(px: float, py: float, element: Element) -> Point:
    """Map a model-space point into ``element``'s rotated and scaled frame."""
    dx = px - element.x
    dy = py - element.y
    rad = math.radians(-(element.rotation or 0.0))
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    scale = element.effective_scale
    return ((dx * cos_r - dy * sin_r) / scale, (dx * sin_r + dy * cos_r) / scale)


# ---------------------------------------------------------------------------
# Per-type containment tests


def _inside_circle(radius: float) -> Callable[[float, float, Element], bool]:
    def test(px: float, py: float, element: Element) -> bool:
        return math.hypot(px - element.x, py - element.y) < radius

    return test


def _inside_box(half_w: float, half_h: float) -> Callable[[float, float, Element], bool]:
    def test(px: float, py: float, element: Element) -> bool:
        return abs(px - element.x) < half_w and abs(py - element.y) < half_h

    return test


def _near_path(path: np.ndarray) -> Callable[[float, float, Element], bool]:
    def test(px: float, py: float, element: Element) -> bool:
        local = to_local(px, py, element)
        return point_to_polyline_distance(local, path) <= BOND_HIT_TOLERANCE

    return test


HitTest = Callable[[float, float, Element], bool]

HIT_TESTS: Dict[ElementType, HitTest] = {
    ElementType.DEOXYRIBOSE: _inside_circle(SUGAR_RADIUS),
    ElementType.PHOSPHATE: _inside_circle(PHOSPHATE_RADIUS),
    ElementType.HYDROGEN_BOND: _inside_box(*BOND_HALF_SIZE),
    ElementType.CHEMICAL_BOND: _inside_box(*BOND_HALF_SIZE),
    ElementType.PHOSPHODIESTER_STRAIGHT: _near_path(straight_bond_path()),
    ElementType.PHOSPHODIESTER_BENT: _near_path(bent_bond_path()),
}
HIT_TESTS.update({base: _inside_box(*BASE_HALF_SIZE) for base in BASE_TYPES})


def hit_test(px: float, py: float, element: Element) -> bool:
    """Return True when the model-space point lies on ``element``."""
    try:
        test = HIT_TESTS[ElementType(element.type)]
    except ValueError:
        return False
    return test(px, py, element)


__all__ = [
    "BOND_HIT_TOLERANCE",
    "BOND_LENGTH",
    "HIT_TESTS",
    "bent_bond_path",
    "hit_test",
    "point_to_polyline_distance",
    "point_to_segment_distance",
    "straight_bond_path",
    "to_local",
]
