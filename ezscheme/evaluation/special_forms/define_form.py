from ezscheme import SExpression, Value
from ezscheme.evaluation.derived import definition_parts
from ezscheme.types.environment import Environment
from ezscheme.types.nil import Nil
from ezscheme.types.procedures import Closure


def define_form(tail: list[SExpression], env: Environment, evaluator) -> Value:
    """
    (define name value) or (define (name params...) body...)
    Binds in the current frame only.
    """
    name, val_expr = definition_parts(tail)
    value = evaluator.evaluate(val_expr, env)
    if isinstance(value, Closure) and value.name is None:
        value.name = str(name)
    env.define(name, value)
    return Nil
