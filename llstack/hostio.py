#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading stack scripts from disk, either user-supplied or one of the
samples shipped in the 'scripts' directory, ready for the interpreter.

Sample names are plain names, not paths, so a sample can never be read from
outside the 'scripts' directory.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from os import path

SCRIPT_EXTENSION = ".stk"


class LoaderError(Exception):
    pass


class Loader:
    def __init__(self):
        self.scripts_dir = path.join(path.abspath(path.dirname(__file__)), "scripts")

    def load_script(self, filename):
        with open(filename, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    def load_sample_script(self, name):
        if not name or path.basename(name) != name or name in (path.curdir, path.pardir):
            raise LoaderError("Sample script names cannot contain paths: '{}'".format(name))

        return self.load_script(path.join(self.scripts_dir, name + SCRIPT_EXTENSION))
