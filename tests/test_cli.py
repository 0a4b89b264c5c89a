"""
Tests for the command line front end that do not need a display.
"""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from dna_playground import cli


class TestCli(unittest.TestCase):

    def test_list_scenes(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(cli.main(["list-scenes"]), 0)
        lines = out.getvalue().splitlines()
        self.assertEqual([line.split(":")[0] for line in lines], ["base-pair", "components", "nucleotide"])

    def test_render_rejects_unknown_scene(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["render", "--scene", "helix"])
        self.assertEqual(ctx.exception.code, 2)

    def test_defaults_to_run_command(self):
        parser = cli._build_parser()
        args = parser.parse_args(["run", "--log-level", "DEBUG"])
        self.assertIs(args.func, cli._cmd_run)
        self.assertEqual(args.log_level, "DEBUG")

    def test_unknown_log_level(self):
        with self.assertRaises(ValueError):
            cli._configure_logging("LOUD")


if __name__ == "__main__":
    unittest.main()
