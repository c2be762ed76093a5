"""Application engine.

Centralizes procedure application for the evaluator:
- Builtins are called with the list of evaluated arguments. Host errors
  raised from inside a builtin are reported as BuiltinError.
- Closures get a fresh frame whose parent is the closure's captured
  environment; the body is evaluated there as a sequence.

There is no tail-call handling: every nested application adds Python
stack frames.
"""

from __future__ import annotations

from ezscheme import Value
from ezscheme.errors import ArityError, BuiltinError, UnknownFormError
from ezscheme.printer import to_repr
from ezscheme.types.environment import Environment
from ezscheme.types.procedures import Builtin, Closure


def extend_env_for_closure(fn: Closure, args: list[Value]) -> Environment:
    """Bind the closure's parameters positionally in a new frame.

    Too few arguments raise ArityError. Arguments beyond the parameter list
    are ignored.
    """
    if len(args) < len(fn.params):
        missing = fn.params[len(args)]
        raise ArityError(
            fn, len(fn.params), len(args),
            f"Unassigned parameter in procedure call: {missing} "
            f"(expected {len(fn.params)} argument(s), got {len(args)})",
        )
    return Environment(dict(zip(fn.params, args)), outer=fn.env)


def apply_builtin(fn: Builtin, args: list[Value]) -> Value:
    try:
        return fn(args)
    except BuiltinError:
        raise
    except (TypeError, AttributeError, IndexError, ZeroDivisionError) as e:
        raise BuiltinError(str(e), fn.name) from e


def apply(proc: Value, args: list[Value], evaluator) -> Value:
    """Apply either a Closure or a Builtin to already-evaluated arguments."""
    match proc:
        case Builtin():
            return apply_builtin(proc, args)
        case Closure():
            return evaluator.evaluate_sequence(proc.body, extend_env_for_closure(proc, args))
    raise UnknownFormError(f"Unknown procedure type in apply: {to_repr(proc)}")
