from ezscheme import SExpression, Value
from ezscheme.errors import ParseError
from ezscheme.types.environment import Environment
from ezscheme.types.nil import Nil
from ezscheme.types.symbol import Symbol


def set_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    """(set! var value) - assign to the nearest existing binding of var."""
    if len(tail) != 2:
        raise ParseError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ParseError(f"set! first argument must be a symbol, got {var_sym}")
    env.set(var_sym, evaluator.evaluate(val_expr, env))
    return Nil
