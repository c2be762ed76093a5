from ezscheme import SExpression, Value
from ezscheme.evaluation.derived import cond_to_if
from ezscheme.types.environment import Environment


def cond_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    return evaluator.evaluate(cond_to_if(tail), env)
