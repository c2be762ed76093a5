"""Cons cells and helpers for converting between Scheme lists and Python lists."""

from __future__ import annotations

from typing import Iterable, Iterator

from ezscheme import Value
from ezscheme.types.nil import Nil


class Pair:
    """A mutable two-slot cell.

    Cells are shared by reference: every binding that holds a Pair sees
    mutations made through ``set-car!``/``set-cdr!``. ``==`` compares
    structure, ``is`` compares identity.
    """

    __slots__ = ("first", "second")

    def __init__(self, first: Value, second: Value):
        self.first = first
        self.second = second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return False
        return self.first == other.first and self.second == other.second

    __hash__ = None  # mutable

    def __iter__(self) -> Iterator[Value]:
        """Iterate over the elements of the chain, ignoring a dotted tail."""
        node: Value = self
        while isinstance(node, Pair):
            yield node.first
            node = node.second

    def __repr__(self) -> str:
        from ezscheme.printer import to_repr
        return f"Pair<{to_repr(self)}>"


def from_list(items: Iterable[Value], tail: Value = Nil) -> Value:
    """Build a right-nested chain of Pairs terminated by ``tail``."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(value: Value) -> list[Value]:
    """Expand a chain of Pairs into a Python list. A dotted tail is dropped."""
    if isinstance(value, Pair):
        return list(value)
    return []


def is_list(value: Value) -> bool:
    """True for Nil and for chains of Pairs whose final cdr is Nil."""
    while isinstance(value, Pair):
        value = value.second
    return value is Nil
