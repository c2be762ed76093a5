"""Rewrites of derived expressions into primitive special forms.

'cond' becomes nested 'if's:

    (cond (p1 e1 ...) (p2 e2 ...) (else e3 ...))
    => (if p1 (begin e1 ...) (if p2 (begin e2 ...) (begin e3 ...)))

'let' becomes the application of an anonymous procedure, so the bound
expressions are evaluated in the enclosing environment:

    (let ((v1 x1) ... (vn xn)) body ...)
    => ((lambda (v1 ... vn) body ...) x1 ... xn)

'define' of a procedure is sugar for binding a lambda:

    (define (name p1 ... pn) body ...)
    => (define name (lambda (p1 ... pn) body ...))
"""

from __future__ import annotations

from ezscheme import SExpression
from ezscheme.errors import ParseError
from ezscheme.printer import to_repr
from ezscheme.types.atoms import FALSE
from ezscheme.types.nil import Nil
from ezscheme.types.pair import Pair, from_list, is_list, to_list
from ezscheme.types.symbol import Symbol

LAMBDA = Symbol("lambda")
IF = Symbol("if")
BEGIN = Symbol("begin")
ELSE = Symbol("else")


def make_lambda(params: SExpression, body: SExpression) -> Pair:
    return Pair(LAMBDA, Pair(params, body))


def make_if(predicate: SExpression, consequent: SExpression, alternative: SExpression) -> SExpression:
    return from_list([IF, predicate, consequent, alternative])


def sequence_to_exp(seq: list[SExpression]) -> SExpression:
    """A single expression stays as it is; several are wrapped in 'begin'."""
    if len(seq) == 1:
        return seq[0]
    return Pair(BEGIN, from_list(seq))


def _is_else_clause(clause: SExpression) -> bool:
    return isinstance(clause, Pair) and clause.first == ELSE


def cond_to_if(clauses: list[SExpression]) -> SExpression:
    last = len(clauses) - 1
    for i, clause in enumerate(clauses):
        if not isinstance(clause, Pair) or not is_list(clause):
            raise ParseError(f"Malformed cond clause: {to_repr(clause)}")
        if _is_else_clause(clause) and i != last:
            raise ParseError(f"ELSE clause is not last: {to_repr(from_list(clauses[i:]))}")
        if clause.second is Nil:
            raise ParseError(f"cond clause has no body: {to_repr(clause)}")

    result: SExpression = FALSE
    for clause in reversed(clauses):
        actions = sequence_to_exp(to_list(clause.second))
        if _is_else_clause(clause):
            result = actions
        else:
            result = make_if(clause.first, actions, result)
    return result


def let_to_application(bindings: SExpression, body: list[SExpression]) -> SExpression:
    if not is_list(bindings):
        raise ParseError(f"Malformed let bindings: {to_repr(bindings)}")
    if not body:
        raise ParseError("let requires a body")
    names = []
    values = []
    for binding in to_list(bindings):
        if not (is_list(binding) and len(to_list(binding)) == 2
                and isinstance(binding.first, Symbol)):
            raise ParseError(f"Malformed let binding: {to_repr(binding)}")
        names.append(binding.first)
        values.append(binding.second.first)
    return from_list([make_lambda(from_list(names), from_list(body)), *values])


def definition_parts(tail: list[SExpression]) -> tuple[Symbol, SExpression]:
    """Split the operands of 'define' into the bound name and the value expression."""
    if not tail:
        raise ParseError("define requires a name")
    target = tail[0]
    if isinstance(target, Symbol):
        if len(tail) != 2:
            raise ParseError(f"define of {target} requires exactly one value expression")
        return target, tail[1]
    if isinstance(target, Pair) and isinstance(target.first, Symbol):
        if len(tail) < 2:
            raise ParseError(f"define of procedure {target.first} requires a body")
        return target.first, make_lambda(target.second, from_list(tail[1:]))
    raise ParseError(f"Cannot define {to_repr(target)}")
