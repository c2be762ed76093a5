"""Textual representation of values, as used by ``write`` and the REPL."""

from __future__ import annotations

from io import StringIO
from typing import Optional

from ezscheme import Value
from ezscheme.types.nil import NilType
from ezscheme.types.symbol import Symbol
from ezscheme.types.atoms import Boolean, Number, String
from ezscheme.types.pair import Pair
from ezscheme.types.procedures import Closure, Builtin

# Written in place of a pair that is already being printed further out
CYCLE_MARKER = "..."


def to_repr(value: Value, _active: Optional[set[int]] = None) -> str:
    match value:
        case NilType():
            return "()"
        case Boolean() | Number() | String() | Symbol():
            return str(value)
        case Pair():
            return _pair_repr(value, set() if _active is None else _active)
        case Closure() | Builtin():
            return str(value)
    return f"#<{type(value).__name__}>"


def _pair_repr(pair: Pair, active: set[int]) -> str:
    # `active` holds the ids of the cells on the current printing path.
    # Cells leave it once printed, so shared but acyclic structure prints
    # in full each time it appears.
    if id(pair) in active:
        return CYCLE_MARKER
    path: list[int] = []
    try:
        with StringIO() as buffer:
            buffer.write("(")
            node = pair
            while isinstance(node, Pair):
                if id(node) in active:
                    buffer.write(" " + CYCLE_MARKER)
                    node = None
                    break
                active.add(id(node))
                path.append(id(node))
                if len(path) > 1:
                    buffer.write(" ")
                buffer.write(to_repr(node.first, active))
                node = node.second
            if node is not None and not isinstance(node, NilType):
                buffer.write(" . ")
                buffer.write(to_repr(node, active))
            buffer.write(")")
            return buffer.getvalue()
    finally:
        active.difference_update(path)
