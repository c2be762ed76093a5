from ezscheme import SExpression, Value
from ezscheme.errors import ParseError
from ezscheme.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    if len(tail) != 1:
        raise ParseError("quote expects exactly 1 argument")
    return tail[0]
