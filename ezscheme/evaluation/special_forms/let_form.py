from ezscheme import SExpression, Value
from ezscheme.errors import ParseError
from ezscheme.evaluation.derived import let_to_application
from ezscheme.types.environment import Environment


def let_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    if not tail:
        raise ParseError("let requires a binding list")
    return evaluator.evaluate(let_to_application(tail[0], tail[1:]), env)
