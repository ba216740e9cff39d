#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from llstack import main
from llstack.constants import DEFAULT_TYPE, EXEC_SEPARATOR, SUPPORTED_TYPES


def parse_args():
    parser = ArgumentParser()
    parser.add_argument("filename", nargs="?", help="stack script to execute (normally ending in .stk)")
    parser.add_argument(
        "-s", "--sample",
        help="run one of the bundled sample scripts instead of a file, e.g. 'basics' or 'inplace'"
    )
    parser.add_argument(
        "-e", "--exec",
        help="run instructions given on the command line, separated by '{}', e.g. 'push 1{} pop'".format(
            EXEC_SEPARATOR, EXEC_SEPARATOR
        )
    )
    parser.add_argument(
        "-t", "--type", choices=list(SUPPORTED_TYPES.keys()),
        help="set the element type held by the stack (default {})".format(DEFAULT_TYPE)
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output, showing the stack size and top value before each instruction"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to run scripts from other code by calling this with a dictionary
    main(args)
