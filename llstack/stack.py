#!/usr/bin/env python3

"""
Linked Stack

A last-in-first-out stack built from a singly linked chain of nodes.  The stack
holds the top node only; every other node is reachable solely by following the
'next' links down from the top, and each node is linked from exactly one place
(the stack, or the node above it).

Each stack is bound to a single element type, either supplied at construction
or taken from the first value pushed.  Values of any other type, subclasses
included, are refused on the way in.

Popping or peeking an empty stack is not an error.  Those calls simply return
None.

There are no mutable references in Python, so in-place access to elements is
handed out as ElementRef handles.  A handle is only good until the next push,
pop, clear or drain step; after that, touching it raises StackError.  The same
applies to iterators: a structural change part-way through a loop is reported
on the next step rather than producing a half-old, half-new sequence.

None of this is thread-safe.  Share a stack between threads only behind your
own lock.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from itertools import zip_longest
from .constants import DISPLAY_HEAD, DISPLAY_LINK, DISPLAY_END

_MISSING = object()


class StackError(Exception):
    pass


class Node:
    __slots__ = ("element", "next", "__weakref__")

    def __init__(self, element, next_node=None):
        self.element = element
        self.next = next_node


class ElementRef:
    """
    In-place access to one element of a stack.

    Reading or writing 'value' is only allowed while the stack has not been
    structurally changed since the handle was issued.  Writing through the
    handle does not count as a structural change.
    """

    __slots__ = ("_stack", "_node", "_version")

    def __init__(self, stack, node):
        self._stack = stack
        self._node = node
        self._version = stack._version

    def _check_valid(self):
        if self._stack._version != self._version:
            raise StackError("Element reference used after the stack was modified")

    @property
    def value(self):
        self._check_valid()
        return self._node.element

    @value.setter
    def value(self, element):
        self._check_valid()
        self._stack._check_type(element)
        self._node.element = element

    def __repr__(self):
        return "ElementRef({!r})".format(self._node.element)


class Stack:
    def __init__(self, element_type=None):
        self._head = None
        self._version = 0  # Bumped on every structural change

        if element_type is not None and not isinstance(element_type, type):
            raise StackError("Element type must be a class, not {!r}".format(element_type))

        self.element_type = element_type

    def __del__(self):
        # Python would free a long chain one nested node at a time, so unlink it here instead
        self.clear()

    def _check_type(self, element):
        element_type = self.element_type

        if element_type is None:
            # Untyped stacks take the type of the first element pushed, and keep it
            self.element_type = type(element)
            return

        # Exact match only, so a stack of int refuses bool
        if type(element) is not element_type:
            raise StackError(
                "Stack holds {} elements, cannot store {!r}".format(element_type.__name__, element)
            )

    def push(self, element):
        self._check_type(element)
        self._head = Node(element, self._head)
        self._version += 1

    def pop(self):
        node = self._head

        if node is None:
            return None  # Nothing to do, and nothing is invalidated

        self._head = node.next
        node.next = None
        self._version += 1
        return node.element

    def peek(self):
        node = self._head
        return None if node is None else node.element

    def peek_mut(self):
        node = self._head
        return None if node is None else ElementRef(self, node)

    def clear(self):
        # Detach and drop one node at a time, so the chain is never freed recursively
        node = self._head

        if node is None:
            return

        self._head = None
        self._version += 1

        while node is not None:
            node.next, node = None, node.next

    def is_empty(self):
        return self._head is None

    def _walk(self, node, version):
        # Shared traversal for the iterators.  'node' and 'version' are captured when the iterator is created.
        while node is not None:
            yield node

            if self._version != version:
                raise StackError("Stack was modified during iteration")

            node = node.next

    def __iter__(self):
        return (node.element for node in self._walk(self._head, self._version))

    def iter_mut(self):
        return (ElementRef(self, node) for node in self._walk(self._head, self._version))

    def drain(self):
        # Consuming iteration.  Values are popped lazily, so stopping early leaves the rest on the stack.
        while self._head is not None:
            yield self.pop()

    def copy(self):
        duplicate = Stack(self.element_type)
        tail = None

        # Build the duplicate from the top down, appending behind a tail pointer to keep the order
        for element in self:
            node = Node(element)

            if tail is None:
                duplicate._head = node
            else:
                tail.next = node

            tail = node

        return duplicate

    __copy__ = copy

    def get_items(self):
        # For debugging
        return list(self)

    def __len__(self):
        # Size is not stored, just counted
        count = 0

        for _ in self._walk(self._head, self._version):
            count += 1

        return count

    def __bool__(self):
        return self._head is not None

    def __eq__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented

        return all(a == b for a, b in zip_longest(self, other, fillvalue=_MISSING))

    __hash__ = None

    def __str__(self):
        return "".join([DISPLAY_HEAD] + [DISPLAY_LINK + str(element) for element in self] + [DISPLAY_END])

    def __repr__(self):
        type_name = "unbound" if self.element_type is None else self.element_type.__name__
        return "Stack[{}]({!r})".format(type_name, self.get_items())
