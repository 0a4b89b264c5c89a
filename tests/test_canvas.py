"""
Mouse-sequence tests for the canvas event adapter; skipped without Qt widgets.
"""

import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtCore import QPoint, Qt
    from PySide6.QtTest import QTest
    from PySide6.QtWidgets import QApplication
except ImportError:  # pragma: no cover - depends on the test machine
    QApplication = None

from dna_playground.elements import ElementType
from dna_playground.interaction import EditorSession, Mode


@unittest.skipIf(QApplication is None, "PySide6 widgets not available")
class TestCanvasClicks(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])
        from dna_playground.widgets import Canvas

        cls.Canvas = Canvas

    def setUp(self):
        self.session = EditorSession()
        self.canvas = self.Canvas(self.session)
        self.canvas.resize(400, 300)
        self.addCleanup(self.canvas.deleteLater)

    def press(self, x, y):
        QTest.mousePress(self.canvas, Qt.LeftButton, Qt.NoModifier, QPoint(x, y))

    def release(self, x, y):
        QTest.mouseRelease(self.canvas, Qt.LeftButton, Qt.NoModifier, QPoint(x, y))

    def test_placement_happens_on_release(self):
        self.canvas.select_tool(ElementType.PHOSPHATE)
        self.press(100, 100)
        self.assertEqual(len(self.session.store), 0)
        self.assertIs(self.session.mode, Mode.TOOL_SELECTED)
        self.release(100, 100)
        elements = self.session.elements()
        self.assertEqual([(e.type, e.x, e.y) for e in elements], [(ElementType.PHOSPHATE, 100.0, 100.0)])
        self.assertIs(self.session.mode, Mode.IDLE)

    def test_press_with_tool_over_element_places_instead_of_dragging(self):
        existing = self.session.place(ElementType.PHOSPHATE, 100, 100)
        self.canvas.select_tool(ElementType.ADENINE)
        self.press(100, 100)
        self.assertIsNone(self.session.state.dragged_id)
        self.release(100, 100)
        self.assertEqual(self.session.store.get(existing.id).position, (100, 100))
        self.assertEqual([e.type for e in self.session.elements()], [ElementType.PHOSPHATE, ElementType.ADENINE])

    def test_press_without_tool_drags_and_release_records_nothing(self):
        existing = self.session.place(ElementType.PHOSPHATE, 100, 100)
        self.press(105, 100)
        self.assertEqual(self.session.state.dragged_id, existing.id)
        self.release(105, 100)
        self.assertIsNone(self.session.state.dragged_id)
        self.assertEqual(len(self.session.store), 1)
        self.assertEqual(len(self.session.history), 1)

    def test_right_button_is_ignored_by_press_handler(self):
        self.canvas.select_tool(ElementType.GUANINE)
        QTest.mouseClick(self.canvas, Qt.RightButton, Qt.NoModifier, QPoint(50, 50))
        self.assertEqual(len(self.session.store), 0)
        self.assertIs(self.session.mode, Mode.TOOL_SELECTED)


@unittest.skipIf(QApplication is None, "PySide6 widgets not available")
class TestMainWindow(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])
        from dna_playground.app import Main

        cls.Main = Main

    def setUp(self):
        self.window = self.Main()
        self.addCleanup(self.window.deleteLater)

    def test_status_bar_shows_component_label(self):
        self.window.canvas.select_tool(ElementType.PHOSPHODIESTER_BENT)
        self.assertEqual(self.window._tool_label.text(), "Tool: Phosphodiester bond (bent)")
        self.window.session.deselect_tool()
        self.assertEqual(self.window._tool_label.text(), "Tool: none")

    def test_demo_scene_loads_as_undo_steps(self):
        self.window.canvas.load_scene("nucleotide")
        self.assertEqual(len(self.window.session.store), 5)
        self.assertTrue(self.window._actions["undo"].isEnabled())
        self.window.canvas.undo()
        self.assertEqual(len(self.window.session.store), 4)
        self.assertTrue(self.window._actions["redo"].isEnabled())


if __name__ == "__main__":
    unittest.main()
