#!/usr/bin/env python3

"""
Stack Script Interpreter

Runs a stack script, one instruction per line, against a single stack.  Each
line is a mnemonic optionally followed by one operand, which is everything
after the first run of whitespace.  Blank lines and comment lines (starting
with '#') are skipped.

Operands are converted using the stack's element type, so a stack of int only
accepts operands int() can parse.  Strings are taken as-is, including any
inner spaces.

Results are passed to the 'output' callable (print by default), one value per
call.  Empty-stack conditions produce '(empty)' rather than an error.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, COMMENT_PREFIX, EMPTY_RESULT
from .stack import StackError


class InterpreterError(Exception):
    pass


class Interpreter:
    def __init__(self, stack, debugger, output=print):
        self.stack = stack
        self.debugger = debugger
        self.output = output
        self.live_debug = self.debugger.is_live()
        self.element_type = stack.element_type or str  # Untyped stacks keep operands as text

        # Define instruction pointers, and whether each one takes an operand
        self.instructions = {
            "push":     (self._push, True),
            "pop":      (self._pop, False),
            "peek":     (self._peek, False),
            "set":      (self._set, True),
            "add":      (self._add, True),
            "addall":   (self._addall, True),
            "iter":     (self._iter, False),
            "drain":    (self._drain, False),
            "show":     (self._show, False),
            "len":      (self._len, False),
            "clear":    (self._clear, False)
        }

        self.line_num = 0
        self.line = ""
        self.mnemonic = ""
        self.operand = None

    def run(self, lines):
        for line_num, line in enumerate(lines, 1):
            line = line.strip()

            if not line or line.startswith(COMMENT_PREFIX):
                continue

            # Keep track of where we are, in case there is a failure
            self.line_num = line_num
            self.line = line
            self.decode_exec()

    def decode(self):
        parts = self.line.split(None, 1)
        self.mnemonic = parts[0].lower()
        self.operand = parts[1] if len(parts) > 1 else None

    def decode_exec(self):
        self.decode()
        instruction = self.instructions.get(self.mnemonic)

        if instruction is None:
            self._halt("Instruction '{}' is not recognised.".format(self.mnemonic))

        handler, takes_operand = instruction

        if takes_operand and self.operand is None:
            self._halt("Instruction '{}' needs an operand.".format(self.mnemonic))

        if not takes_operand and self.operand is not None:
            self._halt("Instruction '{}' does not take an operand.".format(self.mnemonic))

        if self.live_debug:
            self.debug(self.line)

        try:
            handler()
        except StackError as e:
            self._halt(str(e))

    @property
    def value(self):
        # Recalculated each time, so don't reference this more than necessary
        try:
            return self.element_type(self.operand)
        except ValueError:
            self._halt("Operand '{}' is not a valid {}.".format(self.operand, self.element_type.__name__))

    def _halt(self, reason):
        raise InterpreterError(
            (
                "Script halted.\n\n" +
                "{}Debug info:\n" +
                "{}\n\n{} (line {})"
            ).format(
                APP_INTRO, self.debugger.debug(self.stack, self.line, verbose=True), reason, self.line_num
            )
        ) from None

    def debug(self, instruction):
        self.debugger.output(self.stack, instruction)

    def _output_or_empty(self, result_found, value):
        self.output(value if result_found else EMPTY_RESULT)

    def _push(self):
        self.stack.push(self.value)

    def _pop(self):
        found = not self.stack.is_empty()
        self._output_or_empty(found, self.stack.pop())

    def _peek(self):
        found = not self.stack.is_empty()
        self._output_or_empty(found, self.stack.peek())

    def _set(self):
        value = self.value
        top = self.stack.peek_mut()

        if top is None:
            self.output(EMPTY_RESULT)
            return

        top.value = value

    def _add(self):
        value = self.value
        top = self.stack.peek_mut()

        if top is None:
            self.output(EMPTY_RESULT)
            return

        top.value += value

    def _addall(self):
        value = self.value

        for element in self.stack.iter_mut():
            element.value += value

    def _iter(self):
        for element in self.stack:
            self.output(element)

    def _drain(self):
        for element in self.stack.drain():
            self.output(element)

    def _show(self):
        self.output(str(self.stack))

    def _len(self):
        self.output(len(self.stack))

    def _clear(self):
        self.stack.clear()
