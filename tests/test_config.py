"""
Tests for loading editor settings from JSON.
"""

import json
import os
import tempfile
import unittest

from dna_playground.config import DEFAULT_CONFIG_PATH, EditorConfig, load_config


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write(self, payload, name="settings.json"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as handle:
            if isinstance(payload, str):
                handle.write(payload)
            else:
                json.dump(payload, handle)
        return path

    def test_bundled_defaults_load(self):
        self.assertTrue(DEFAULT_CONFIG_PATH.exists())
        config = load_config()
        self.assertEqual(config.export_filename, "dna-structure.png")
        self.assertEqual((config.canvas_width, config.canvas_height), (800, 600))

    def test_values_override_defaults(self):
        path = self.write({"canvas_width": 1024, "background": "#000000", "history_limit": 50})
        config = load_config(path)
        self.assertEqual(config.canvas_width, 1024)
        self.assertEqual(config.background, "#000000")
        self.assertEqual(config.history_limit, 50)
        self.assertEqual(config.canvas_height, 600)

    def test_invalid_values_are_skipped(self):
        with self.assertLogs("dna_playground.config", level="WARNING"):
            config = load_config(self.write({"canvas_width": -5, "show_instructions": "yes", "history_limit": 0}))
        self.assertEqual(config.canvas_width, 800)
        self.assertTrue(config.show_instructions)
        self.assertIsNone(config.history_limit)

    def test_unknown_keys_are_ignored(self):
        config = load_config(self.write({"theme": "light"}))
        self.assertEqual(config, EditorConfig())

    def test_missing_file_falls_back(self):
        with self.assertLogs("dna_playground.config", level="WARNING"):
            config = load_config(os.path.join(self.tmpdir.name, "nope.json"))
        self.assertEqual(config, EditorConfig())

    def test_malformed_json_falls_back(self):
        with self.assertLogs("dna_playground.config", level="WARNING"):
            config = load_config(self.write("{not json"))
        self.assertEqual(config, EditorConfig())

    def test_non_object_json_falls_back(self):
        with self.assertLogs("dna_playground.config", level="WARNING"):
            config = load_config(self.write([1, 2, 3]))
        self.assertEqual(config, EditorConfig())

    def test_round_trip_through_dict(self):
        config = EditorConfig(canvas_width=900, export_filename="out.png")
        self.assertEqual(EditorConfig.from_dict(config.asdict()), config)


if __name__ == "__main__":
    unittest.main()
