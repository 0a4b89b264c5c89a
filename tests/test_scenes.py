"""
Tests for the canonical demo scenes.
"""

import unittest

from dna_playground.elements import ElementType
from dna_playground.interaction import EditorSession
from dna_playground.scenes import (
    load_scene,
    scene_description,
    scene_elements,
    scene_names,
    scene_placements,
)
from dna_playground.viewport import ViewState


class TestScenes(unittest.TestCase):

    def test_names_are_sorted(self):
        self.assertEqual(scene_names(), ["base-pair", "components", "nucleotide"])
        for name in scene_names():
            self.assertTrue(scene_description(name))

    def test_unknown_scene(self):
        with self.assertRaises(ValueError):
            scene_placements("helix")

    def test_components_scene_has_every_type_once(self):
        types = [e.type for e in scene_elements("components")]
        self.assertEqual(sorted(types, key=lambda t: t.value), sorted(ElementType, key=lambda t: t.value))

    def test_scene_elements_have_unique_ids(self):
        elements = scene_elements("base-pair")
        self.assertEqual(len({e.id for e in elements}), len(elements))

    def test_load_scene_is_undoable_step_by_step(self):
        session = EditorSession()
        placed = load_scene(session, "nucleotide")
        self.assertEqual(len(placed), len(scene_placements("nucleotide")))
        self.assertEqual(len(session.history), len(placed))
        session.undo()
        self.assertEqual(len(session.elements()), len(placed) - 1)

    def test_rotations_survive_undo_and_redo(self):
        session = EditorSession()
        placed = load_scene(session, "base-pair")
        last = placed[-1]
        self.assertEqual(last.rotation, 180.0)

        self.assertTrue(session.undo())
        self.assertNotIn(last.id, session.store)
        rotated = [e for e in session.elements() if e.rotation]
        self.assertEqual(
            [(e.type, e.rotation) for e in rotated],
            [
                (ElementType.DEOXYRIBOSE, 180.0),
                (ElementType.PHOSPHODIESTER_STRAIGHT, 90.0),
                (ElementType.PHOSPHODIESTER_STRAIGHT, 90.0),
            ],
        )

        self.assertTrue(session.redo())
        self.assertEqual(session.store.get(last.id).rotation, 180.0)
        self.assertEqual(session.elements(), placed)

    def test_load_scene_keeps_model_positions_under_zoom(self):
        session = EditorSession(view=ViewState(zoom=1.5))
        placed = load_scene(session, "base-pair")
        for element, (kind, x, y, rotation) in zip(placed, scene_placements("base-pair")):
            self.assertEqual(element.type, kind)
            self.assertAlmostEqual(element.x, x)
            self.assertAlmostEqual(element.y, y)
            self.assertEqual(element.rotation, rotation % 360.0)


if __name__ == "__main__":
    unittest.main()
