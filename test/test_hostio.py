#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from llstack.hostio import Loader, LoaderError


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_loader_load_sample_present(self):
        # Test the loader works, and verify the bundled samples are okay
        lines = self.loader.load_sample_script("basics")
        self.assertEqual("push 1", lines[1])
        self.assertEqual(14, len(lines))

        lines = self.loader.load_sample_script("inplace")
        self.assertIn("addall 10", lines)

    def test_loader_load_script(self):
        fd, filename = tempfile.mkstemp(suffix=".stk")
        os.close(fd)

        try:
            f = open(filename, "w", encoding="utf-8")
            f.write("push 1\npop\n")
            f.close()
            self.assertEqual(["push 1", "pop"], self.loader.load_script(filename))
        finally:
            os.remove(filename)

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_script, "NoFile.stk")

    def test_loader_load_sample_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_sample_script, "nosample")

    def test_loader_load_sample_path_rejected(self):
        for name in "../basics", "scripts/basics", "..", "", os.path.join("..", "hostio"):
            self.assertRaises(LoaderError, self.loader.load_sample_script, name)

    def test_loader_load_script_invalid_utf8(self):
        fd, filename = tempfile.mkstemp(suffix=".stk")
        os.close(fd)

        try:
            f = open(filename, "wb")
            f.write(b"push \xff\xfe\n")
            f.close()
            self.assertRaises(UnicodeDecodeError, self.loader.load_script, filename)
        finally:
            os.remove(filename)
