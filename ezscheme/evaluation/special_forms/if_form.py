from ezscheme import SExpression, Value
from ezscheme.errors import ParseError
from ezscheme.types.atoms import FALSE
from ezscheme.types.environment import Environment


def if_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    if len(tail) not in (2, 3):
        raise ParseError("if requires a predicate, a consequent and an optional alternative")

    # Only #f is false; 0 and () are true
    if evaluator.evaluate(tail[0], env) != FALSE:
        return evaluator.evaluate(tail[1], env)
    if len(tail) == 3:
        return evaluator.evaluate(tail[2], env)
    return FALSE
