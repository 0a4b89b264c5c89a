"""
Tests for element hit testing.

Covers the per-type containment regions, the segment distance helper and the
rotation handling that only the phosphodiester bonds apply.
"""

import math
import unittest

import numpy as np

from dna_playground.elements import Element, ElementType
from dna_playground.geometry import (
    HIT_TESTS,
    bent_bond_path,
    hit_test,
    point_to_polyline_distance,
    point_to_segment_distance,
    straight_bond_path,
    to_local,
)


def make(kind, x=0.0, y=0.0, rotation=0.0, scale=1.0):
    return Element(id=f"{kind.value}-t", type=kind, x=x, y=y, rotation=rotation, scale=scale)


class TestPointToSegmentDistance(unittest.TestCase):

    def test_perpendicular_projection(self):
        self.assertAlmostEqual(point_to_segment_distance(5, 3, 0, 0, 10, 0), 3.0)

    def test_clamps_before_start(self):
        self.assertAlmostEqual(point_to_segment_distance(-3, 4, 0, 0, 10, 0), 5.0)

    def test_clamps_past_end(self):
        self.assertAlmostEqual(point_to_segment_distance(13, -4, 0, 0, 10, 0), 5.0)

    def test_degenerate_segment(self):
        self.assertAlmostEqual(point_to_segment_distance(3, 4, 1, 1, 1, 1), math.hypot(2, 3))

    def test_polyline_matches_segment_minimum(self):
        path = bent_bond_path()
        point = (10.0, 30.0)
        expected = min(
            point_to_segment_distance(*point, *path[0], *path[1]),
            point_to_segment_distance(*point, *path[1], *path[2]),
        )
        self.assertTrue(np.isclose(point_to_polyline_distance(point, path), expected))

    def test_empty_polyline_is_infinitely_far(self):
        self.assertEqual(point_to_polyline_distance((0, 0), np.zeros((0, 2))), float("inf"))


class TestHitRegions(unittest.TestCase):

    def test_every_type_has_a_hit_test(self):
        self.assertEqual(set(HIT_TESTS), set(ElementType))

    def test_phosphate_boundary(self):
        phosphate = make(ElementType.PHOSPHATE)
        self.assertTrue(hit_test(29.99, 0, phosphate))
        self.assertFalse(hit_test(30.01, 0, phosphate))
        self.assertFalse(hit_test(30.0, 0, phosphate))

    def test_deoxyribose_radius(self):
        sugar = make(ElementType.DEOXYRIBOSE, 100, 100)
        self.assertTrue(hit_test(100, 139.9, sugar))
        self.assertFalse(hit_test(100, 140.1, sugar))

    def test_base_box(self):
        for kind in (ElementType.ADENINE, ElementType.THYMINE, ElementType.GUANINE, ElementType.CYTOSINE):
            base = make(kind, 50, 50)
            self.assertTrue(hit_test(84.9, 74.9, base), kind)
            self.assertFalse(hit_test(85.1, 50, base), kind)
            self.assertFalse(hit_test(50, 75.1, base), kind)

    def test_flat_bonds(self):
        for kind in (ElementType.HYDROGEN_BOND, ElementType.CHEMICAL_BOND):
            bond = make(kind)
            self.assertTrue(hit_test(39.0, 4.0, bond), kind)
            self.assertFalse(hit_test(0.0, 5.5, bond), kind)
            self.assertFalse(hit_test(40.5, 0.0, bond), kind)

    def test_straight_phosphodiester(self):
        bond = make(ElementType.PHOSPHODIESTER_STRAIGHT)
        start, end = straight_bond_path()
        self.assertTrue(hit_test(*start, bond))
        self.assertTrue(hit_test(*end, bond))
        self.assertTrue(hit_test(0.0, 0.0, bond))
        self.assertFalse(hit_test(0.0, 10.0, bond))

    def test_bent_phosphodiester(self):
        bond = make(ElementType.PHOSPHODIESTER_BENT)
        self.assertTrue(hit_test(-20.0, 20.0, bond))
        self.assertTrue(hit_test(30.0, 45.0, bond))
        self.assertTrue(hit_test(0.0, 40.0, bond))
        self.assertFalse(hit_test(0.0, 0.0, bond))

    def test_unknown_type_never_hits(self):
        stray = Element(id="x", type="ribosome", x=0, y=0)  # type: ignore[arg-type]
        self.assertFalse(hit_test(0, 0, stray))


class TestRotationHandling(unittest.TestCase):

    def test_to_local_inverts_rotation_and_scale(self):
        element = make(ElementType.PHOSPHODIESTER_STRAIGHT, 10, 20, rotation=90, scale=2)
        lx, ly = to_local(10, 40, element)
        self.assertTrue(np.isclose(lx, 10.0))
        self.assertTrue(np.isclose(ly, 0.0, atol=1e-9))

    def test_straight_bond_follows_rotation(self):
        bond = make(ElementType.PHOSPHODIESTER_STRAIGHT, rotation=90)
        # The +x end (40, -8) rotated by 90 degrees lands at (8, 40).
        self.assertTrue(hit_test(8.0, 40.0, bond))
        self.assertFalse(hit_test(40.0, -8.0, bond))

    def test_bent_bond_follows_scale(self):
        bond = make(ElementType.PHOSPHODIESTER_BENT, scale=2.0)
        self.assertTrue(hit_test(60.0, 80.0, bond))
        self.assertFalse(hit_test(60.0, 40.0, bond))

    def test_missing_scale_counts_as_one(self):
        bond = make(ElementType.PHOSPHODIESTER_BENT, scale=None)
        self.assertTrue(hit_test(30.0, 40.0, bond))

    def test_base_box_ignores_rotation(self):
        base = make(ElementType.GUANINE, rotation=90)
        self.assertTrue(hit_test(30.0, 0.0, base))
        self.assertFalse(hit_test(0.0, 30.0, base))

    def test_sugar_ignores_scale(self):
        sugar = make(ElementType.DEOXYRIBOSE, scale=3.0)
        self.assertFalse(hit_test(45.0, 0.0, sugar))


if __name__ == "__main__":
    unittest.main()
