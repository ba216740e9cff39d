#!/usr/bin/env python3

"""
Stack Debugger

If enabled, this will output information before each instruction executed:
    * SZ  - Number of nodes in the stack
    * TOP - Value held by the top node
    * IN  - Decoded instruction

If a script fails, all of the above will be outputted, with the addition of:
    * Stack - Every value, top to bottom
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import EMPTY_RESULT


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, stack, instruction, verbose=False):
        debug_str = "SZ: {} TOP: {} IN: {}".format(
            len(stack), EMPTY_RESULT if stack.is_empty() else repr(stack.peek()), instruction
        )

        if verbose:
            stack_items = stack.get_items()
            stack_str = (" {!r}" * len(stack_items)).format(*stack_items)
            debug_str += ("\nStack:{}").format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, stack, instruction):
        print(self.debug(stack, instruction))
