from ezscheme import SExpression, Value
from ezscheme.errors import ParseError
from ezscheme.printer import to_repr
from ezscheme.types.environment import Environment
from ezscheme.types.pair import is_list, to_list
from ezscheme.types.procedures import Closure
from ezscheme.types.symbol import Symbol


def lambda_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    # (lambda (params) body...): a flat parameter list and at least one body
    # form, evaluated as an implicit begin. Rest parameters are not supported.
    if not tail:
        raise ParseError("lambda requires a parameter list")

    params_expr = tail[0]
    if not is_list(params_expr):
        raise ParseError(f"lambda parameters must be a proper list: {to_repr(params_expr)}")
    params = to_list(params_expr)
    for p in params:
        if not isinstance(p, Symbol):
            raise ParseError(f"lambda parameter must be a symbol, got {to_repr(p)}")

    body = tail[1:]
    if not body:
        raise ParseError("lambda requires at least one body expression")
    return Closure(params, body, env)
