from ezscheme import SExpression, Value
from ezscheme.types.environment import Environment


def begin_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    return evaluator.evaluate_sequence(tail, env)
