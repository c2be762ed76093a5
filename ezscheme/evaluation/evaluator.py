"""Core evaluator.

Implements the eval/apply cycle of SICP 4.1.1 over the ezscheme data model.
Special forms are dispatched through SPECIAL_FORMS before ordinary
procedure application. Evaluation is plainly recursive, so deep Scheme
recursion is bounded by Python's recursion limit.
"""

from __future__ import annotations

from typing import Optional

from ezscheme import SExpression, Value
from ezscheme.errors import ParseError, UnknownFormError
from ezscheme.evaluation.apply import apply as apply_procedure
from ezscheme.evaluation.special_forms import SPECIAL_FORMS
from ezscheme.evaluation.trace import Tracer
from ezscheme.printer import to_repr
from ezscheme.types.atoms import Boolean, Number, String
from ezscheme.types.environment import Environment
from ezscheme.types.pair import Pair, is_list, to_list
from ezscheme.types.symbol import Symbol


class Evaluator:
    """
    Evaluates expressions against environments.

    strict_unbound: reading an unbound variable raises UnboundVariableError
        instead of producing Nil.
    tracer: optional observer notified of every eval and apply step.
    """

    def __init__(self, strict_unbound: bool = False, tracer: Optional[Tracer] = None):
        self.strict_unbound = strict_unbound
        self.tracer = tracer

    def evaluate(self, expr: SExpression, env: Environment) -> Value:
        if self.tracer is not None:
            self.tracer.on_eval(expr, env)

        match expr:
            case Number() | Boolean() | String():
                return expr
            case Symbol():
                return env.lookup(expr, strict=self.strict_unbound)
            case Pair(first=Symbol() as head) if head in SPECIAL_FORMS:
                if not is_list(expr):
                    raise ParseError(f"Malformed {head} form: {to_repr(expr)}")
                return SPECIAL_FORMS[head](to_list(expr.second), env, self)
            case Pair():
                if not is_list(expr):
                    raise UnknownFormError(f"Improper argument list in application: {to_repr(expr)}")
                proc = self.evaluate(expr.first, env)
                # Operands are evaluated strictly left to right
                args = [self.evaluate(arg, env) for arg in to_list(expr.second)]
                return self.apply(proc, args)

        raise UnknownFormError(f"Unknown expression in eval: {to_repr(expr)}")

    def evaluate_sequence(self, exprs: list[SExpression], env: Environment) -> Value:
        """Evaluate `exprs` in order and return the value of the last one."""
        if not exprs:
            raise ParseError("Cannot evaluate an empty sequence of expressions")
        for e in exprs[:-1]:
            self.evaluate(e, env)
        return self.evaluate(exprs[-1], env)

    def apply(self, proc: Value, args: list[Value]) -> Value:
        if self.tracer is not None:
            self.tracer.on_apply(proc, args)
        return apply_procedure(proc, args, self)


_default = Evaluator()


def evaluate(expr: SExpression, env: Environment) -> Value:
    """Evaluate with a default evaluator: lenient unbound reads, no tracing."""
    return _default.evaluate(expr, env)
