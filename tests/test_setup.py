"""Tests for the data directory layout: pclock.common.setup."""

import os
import shutil
import tempfile
import unittest
from dataclasses import fields
from pathlib import Path
from unittest.mock import patch

from pclock.common.setup import ProjectPaths, ensure_directory


class TestProjectPaths(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_ensure_directory_creates_nested_dirs(self):
        target = Path(self.tmpdir) / "a" / "b"
        self.assertEqual(ensure_directory(target), target)
        self.assertTrue(target.is_dir())
        # Calling again on an existing directory is fine
        ensure_directory(target)

    def test_build_uses_playerclock_home(self):
        home = Path(self.tmpdir) / "home"
        with patch.dict(os.environ, {"PLAYERCLOCK_HOME": str(home)}):
            paths = ProjectPaths.build()
        self.assertEqual(paths.data, home)
        self.assertEqual(paths.logs, home / "logs")
        self.assertTrue(paths.logs.is_dir())

    def test_only_data_and_logs_are_tracked(self):
        self.assertEqual([f.name for f in fields(ProjectPaths)], ["data", "logs"])


if __name__ == "__main__":
    unittest.main()
