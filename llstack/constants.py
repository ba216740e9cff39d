#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "llstack Linked Stack Explorer"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Element types a stack can be bound to from the command line.  Each doubles as the operand parser in scripts.
SUPPORTED_TYPES = {
    "int":      int,
    "float":    float,
    "str":      str
}

DEFAULT_TYPE = "int"

# Display form, e.g. "head->3->2->1."
DISPLAY_HEAD = "head"
DISPLAY_LINK = "->"
DISPLAY_END = "."

# Script syntax
COMMENT_PREFIX = "#"
EXEC_SEPARATOR = ";"  # Splits inline instructions given on the command line
EMPTY_RESULT = "(empty)"
