#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to run a stack script, replacing args with a dictionary
of options.  This can be done via the Terminal or from other Python code.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_TYPE, EXEC_SEPARATOR, SUPPORTED_TYPES
from .debugger import Debugger
from .hostio import Loader, LoaderError
from .interpreter import Interpreter
from .stack import Stack


class StartupError(Exception):
    pass


def main(args, output=print):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    # Exactly one script source is allowed
    sources = [source for source in ("filename", "sample", "exec") if args[source] is not None]

    if len(sources) != 1:
        raise StartupError("Supply exactly one of a script filename, a sample name, or inline instructions.")

    type_name = DEFAULT_TYPE if args["type"] is None else args["type"]

    if type_name not in SUPPORTED_TYPES:
        raise StartupError("Unsupported element type '{}'.".format(type_name))

    loader = Loader()
    source = sources[0]

    if source == "exec":
        lines = args["exec"].split(EXEC_SEPARATOR)
    else:
        try:
            if source == "filename":
                lines = loader.load_script(args["filename"])
            else:
                lines = loader.load_sample_script(args["sample"])
        except FileNotFoundError:
            raise StartupError("There is no {} named '{}'.".format(
                "script file" if source == "filename" else "sample script", args[source]
            )) from None
        except UnicodeDecodeError:
            raise StartupError("Script '{}' is not valid UTF-8 text.".format(args[source])) from None
        except LoaderError as e:
            raise StartupError(str(e)) from None

    # Set up a stack bound to the selected element type
    stack = Stack(SUPPORTED_TYPES[type_name])

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(bool(args["debug"]))

    interpreter = Interpreter(stack, debugger, output=output)

    try:
        interpreter.run(lines)
    finally:
        # Release the chain now, rather than whenever the stack happens to be collected
        stack.clear()
