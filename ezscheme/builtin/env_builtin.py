"""Built-in procedures for the ezscheme runtime environment.

Every builtin receives a Python list of already-evaluated arguments and
returns a single value. Violated preconditions raise BuiltinError.
"""

from __future__ import annotations

import operator
import sys
from functools import reduce
from typing import Any, Callable, TextIO, Union

from ezscheme import Value
from ezscheme.builtin.registry import BuiltinRegistry
from ezscheme.errors import BuiltinError
from ezscheme.printer import to_repr
from ezscheme.types.atoms import Boolean, Number, TRUE, FALSE
from ezscheme.types.nil import Nil
from ezscheme.types.pair import Pair, from_list
from ezscheme.types.symbol import Symbol

# Destination for 'write': a text stream, or a callable taking the text
OutputSink = Union[TextIO, Callable[[str], Any]]


def _bool(flag: bool) -> Boolean:
    return TRUE if flag else FALSE


def _expect_args(name: str, args: list[Value], count: int) -> None:
    if len(args) < count:
        raise BuiltinError(f"requires {count} argument(s), got {len(args)}", name)


def _expect_pair(name: str, value: Value) -> Pair:
    if not isinstance(value, Pair):
        raise BuiltinError(f"expected a pair, got {to_repr(value)}", name)
    return value


def _expect_numbers(name: str, args: list[Value]) -> list[int]:
    for a in args:
        if not isinstance(a, Number):
            raise BuiltinError(f"expected a number, got {to_repr(a)}", name)
    return [a.value for a in args]


# -------------------------------
# Predicates
# -------------------------------
def make_type_predicate(name: str, cls: type) -> Callable[[list[Value]], Value]:
    def predicate(args: list[Value]) -> Value:
        _expect_args(name, args, 1)
        return _bool(isinstance(args[0], cls))
    return predicate


def null_p(args: list[Value]) -> Value:
    _expect_args("null?", args, 1)
    return _bool(args[0] is Nil)


def zero_p(args: list[Value]) -> Value:
    _expect_args("zero?", args, 1)
    return _bool(isinstance(args[0], Number) and args[0].value == 0)


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(args: list[Value]) -> Value:
    _expect_args("cons", args, 2)
    return Pair(args[0], args[1])


def car(args: list[Value]) -> Value:
    _expect_args("car", args, 1)
    return _expect_pair("car", args[0]).first


def cdr(args: list[Value]) -> Value:
    _expect_args("cdr", args, 1)
    return _expect_pair("cdr", args[0]).second


def cadr(args: list[Value]) -> Value:
    _expect_args("cadr", args, 1)
    return _expect_pair("cadr", _expect_pair("cadr", args[0]).second).first


def caddr(args: list[Value]) -> Value:
    _expect_args("caddr", args, 1)
    rest = _expect_pair("caddr", _expect_pair("caddr", args[0]).second).second
    return _expect_pair("caddr", rest).first


def list_builtin(args: list[Value]) -> Value:
    return from_list(args)


def set_car(args: list[Value]) -> Value:
    """Mutate the cell in place; every alias of the pair observes the change."""
    _expect_args("set-car!", args, 2)
    _expect_pair("set-car!", args[0]).first = args[1]
    return Nil


def set_cdr(args: list[Value]) -> Value:
    _expect_args("set-cdr!", args, 2)
    _expect_pair("set-cdr!", args[0]).second = args[1]
    return Nil


# -------------------------------
# Equivalence
# -------------------------------
def eqv(args: list[Value]) -> Value:
    """Pairs are compared by identity, everything else by value."""
    _expect_args("eqv?", args, 2)
    left, right = args[0], args[1]
    if isinstance(left, Pair) and isinstance(right, Pair):
        return _bool(left is right)
    return _bool(left == right)


# -------------------------------
# Logic
# -------------------------------
# 'and' and 'or' are procedures here: their arguments are already evaluated.
def logical_not(args: list[Value]) -> Value:
    _expect_args("not", args, 1)
    return _bool(args[0] == FALSE)


def logical_and(args: list[Value]) -> Value:
    for v in args:
        if v == FALSE:
            return v
    return args[-1] if args else TRUE


def logical_or(args: list[Value]) -> Value:
    for v in args:
        if v == TRUE:
            return v
    return args[-1] if args else FALSE


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def make_arith_builtin(name: str, op: Callable[[int, int], int]) -> Callable[[list[Value]], Value]:
    """Left fold of `op` over one or more numbers."""
    def arith(args: list[Value]) -> Value:
        if not args:
            raise BuiltinError("requires at least 1 argument", name)
        try:
            return Number(reduce(op, _expect_numbers(name, args)))
        except ZeroDivisionError:
            raise BuiltinError("division by zero", name) from None
    return arith


def make_comparison_builtin(name: str, op: Callable[[int, int], bool]) -> Callable[[list[Value]], Value]:
    """Chained comparison of adjacent arguments; #t for fewer than two.

    Stops at the first pair that fails, so arguments after it are never
    type-checked.
    """
    def compare(args: list[Value]) -> Value:
        for left, right in zip(args, args[1:]):
            a, b = _expect_numbers(name, [left, right])
            if not op(a, b):
                return FALSE
        return TRUE
    return compare


# -------------------------------
# Output
# -------------------------------
def make_write(output: OutputSink | None = None) -> Callable[[list[Value]], Value]:
    """Build 'write' bound to `output`; None means the current sys.stdout."""
    def write(args: list[Value]) -> Value:
        _expect_args("write", args, 1)
        text = to_repr(args[0]) + "\n"
        sink = sys.stdout if output is None else output
        if hasattr(sink, "write"):
            sink.write(text)
        else:
            sink(text)
        return Nil
    return write


# -------------------------------
# Registration
# -------------------------------
ARITHMETIC = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "quotient": operator.floordiv,
    "modulo": operator.mod,
}

COMPARISONS = {
    "=": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
    ">": operator.gt,
    "<": operator.lt,
}


def register_core(registry: BuiltinRegistry) -> BuiltinRegistry:
    """Register every builtin except 'write', which needs an output sink."""
    registry.register("pair?", make_type_predicate("pair?", Pair))
    registry.register("boolean?", make_type_predicate("boolean?", Boolean))
    registry.register("symbol?", make_type_predicate("symbol?", Symbol))
    registry.register("number?", make_type_predicate("number?", Number))
    registry.register("null?", null_p)
    registry.register("zero?", zero_p)

    registry.register("cons", cons)
    registry.register("car", car)
    registry.register("cdr", cdr)
    registry.register("cadr", cadr)
    registry.register("caddr", caddr)
    registry.register("list", list_builtin)
    registry.register("set-car!", set_car)
    registry.register("set-cdr!", set_cdr)

    registry.register("eq?", eqv)
    registry.register("eqv?", eqv)

    registry.register("not", logical_not)
    registry.register("and", logical_and)
    registry.register("or", logical_or)

    for name, op in ARITHMETIC.items():
        registry.register(name, make_arith_builtin(name, op))
    for name, op in COMPARISONS.items():
        registry.register(name, make_comparison_builtin(name, op))
    return registry


def default_registry(output: OutputSink | None = None) -> BuiltinRegistry:
    """The full builtin table, with 'write' sending text to `output`."""
    registry = register_core(BuiltinRegistry())
    registry.register("write", make_write(output))
    return registry
