#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_main.py - Unit tests for the command line entry point
"""

import sys
import os
import io
import signal
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from auto_moc_linker import main as main_module
from auto_moc_linker.core.config import Config


class TestMain(unittest.TestCase):
    """Test cases for the command line entry point."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.vault = self._tmp.name
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

        # Keep the test process's signal handlers untouched
        patches = [
            patch.object(signal, "signal"),
            patch.object(main_module, "setup_logging"),
            # main() builds its own Config; keep it away from real config files and .env
            patch.object(Config, "DEFAULT_LOCATIONS", []),
            patch("auto_moc_linker.core.config.load_dotenv"),
            patch.dict(os.environ),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

        for env_var in ["OBSIDIAN_VAULT_PATH", "AUTO_MOC_DEFAULT_PATH", "AUTO_MOC_SECTION_HEADING",
                        "AUTO_MOC_APPEND_FORMAT", "AUTO_MOC_BATCH_SIZE"]:
            os.environ.pop(env_var, None)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, content):
        with open(os.path.join(self.vault, name), 'w', encoding='utf-8') as f:
            f.write(content)

    def read(self, name):
        with open(os.path.join(self.vault, name), 'r', encoding='utf-8') as f:
            return f.read()

    def run_main(self, *argv, settings=None):
        if settings is None:
            settings = Config(load_defaults=False)
        with redirect_stdout(self.stdout), redirect_stderr(self.stderr):
            return main_module.main(list(argv), settings=settings)

    def run_main_with_defaults(self, *argv):
        """Run main() letting it build its own Config from files and environment."""
        with redirect_stdout(self.stdout), redirect_stderr(self.stderr):
            return main_module.main(list(argv))

    def test_links_notes(self):
        self.write("A.md", "---\ntags: [maths]\n---\n")
        self.write("MOC.md", "## Links\n")

        self.assertEqual(self.run_main("--vault-path", self.vault, "--map", "maths=MOC"), 0)
        self.assertEqual(self.read("MOC.md"), "## Links\n- [[A]]\n")
        self.assertIn("Auto MOC Linker complete: Added 1 notes to MOCs", self.stdout.getvalue())

    def test_missing_vault_path(self):
        self.assertEqual(self.run_main("--map", "maths=MOC"), 1)
        self.assertIn("No vault path provided", self.stderr.getvalue())

    def test_invalid_batch_size(self):
        self.assertEqual(self.run_main("--vault-path", self.vault, "--batch-size", "0"), 1)
        self.assertIn("batch_size", self.stderr.getvalue())

    def test_save_config(self):
        path = os.path.join(self.vault, "config.yaml")
        self.assertEqual(self.run_main("--vault-path", self.vault, "--map", "maths=MOC",
                                       "--save-config", path), 0)

        saved = Config(config_file=path, load_defaults=False)
        self.assertEqual(saved["tag_mappings"], [{"tag": "maths", "hub_path": "MOC"}])
        self.assertEqual(saved["vault_path"], self.vault)

    def test_malformed_default_config_file(self):
        """A broken config.yaml in a default location is reported, not raised."""
        path = os.path.join(self.vault, "config.yaml")
        self.write("config.yaml", "- not a mapping\n")

        with patch.object(Config, "DEFAULT_LOCATIONS", [path]):
            self.assertEqual(self.run_main_with_defaults("--vault-path", self.vault), 1)
        self.assertIn("does not contain a mapping", self.stderr.getvalue())

    def test_environment_is_read_by_main(self):
        self.write("A.md", "#maths\n")
        self.write("MOC.md", "## Index\n")
        os.environ["OBSIDIAN_VAULT_PATH"] = self.vault
        os.environ["AUTO_MOC_SECTION_HEADING"] = "## Index"

        self.assertEqual(self.run_main_with_defaults("--map", "maths=MOC"), 0)
        self.assertEqual(self.read("MOC.md"), "## Index\n- [[A]]\n")

    def test_each_invocation_starts_from_fresh_config(self):
        path = os.path.join(self.vault, "saved.yaml")
        for _ in range(2):
            self.assertEqual(self.run_main_with_defaults("--vault-path", self.vault, "--map", "maths=MOC",
                                                         "--save-config", path), 0)

        saved = Config(config_file=path, load_defaults=False)
        self.assertEqual(saved["tag_mappings"], [{"tag": "maths", "hub_path": "MOC"}])

    def test_importing_package_does_not_read_config_files(self):
        from auto_moc_linker.core.config import config
        self.assertFalse(config.use_env)


if __name__ == '__main__':
    unittest.main()
