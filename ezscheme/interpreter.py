from __future__ import annotations

import logging
from typing import Optional

from ezscheme import SExpression, Value
from ezscheme.builtin.env_builtin import OutputSink, default_registry, make_write
from ezscheme.builtin.registry import BuiltinRegistry
from ezscheme.config import get_strict_unbound
from ezscheme.evaluation.evaluator import Evaluator
from ezscheme.evaluation.trace import Tracer
from ezscheme.printer import to_repr
from ezscheme.reader.parser import parse
from ezscheme.types.environment import Environment
from ezscheme.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates Scheme code against a global environment that persists across
    calls: definitions and assignments accumulate.

    output: destination of 'write' (a text stream or a callable taking text);
        None means the current sys.stdout.
    registry: builtin table to install; defaults to the full library.
    strict_unbound: make reads of unbound variables an error. None defers to
        EZSCHEME_STRICT_UNBOUND, then to DefaultStrictUnbound.
    tracer: optional observer of every eval/apply step.
    """

    # Class-level default to avoid env-variable coupling in tests
    DefaultStrictUnbound: bool = False

    def __init__(
        self,
        output: OutputSink | None = None,
        *,
        registry: Optional[BuiltinRegistry] = None,
        strict_unbound: Optional[bool] = None,
        tracer: Optional[Tracer] = None,
    ):
        if strict_unbound is None:
            strict_unbound = get_strict_unbound(self.DefaultStrictUnbound)
        if registry is None:
            registry = default_registry(output)
        elif "write" not in registry:
            registry = registry.copy()
            registry.register("write", make_write(output))

        self.output = output
        self.registry = registry
        self.global_env = Environment()
        registry.install(self.global_env)
        self.evaluator = Evaluator(strict_unbound=strict_unbound, tracer=tracer)

    def interpret(self, expr: SExpression) -> Value:
        """Evaluate one parsed expression in the global environment."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("interpret %s", to_repr(expr))
        return self.evaluator.evaluate(expr, self.global_env)

    def run(self, source: str) -> None:
        """Parse `source` and evaluate each top-level expression, discarding values."""
        for expr in parse(source):
            self.interpret(expr)

    def eval(self, source: str) -> Value:
        """Like run(), but return the value of the last expression (Nil if none)."""
        result: Value = Nil
        for expr in parse(source):
            result = self.interpret(expr)
        return result


def interpret_code(source: str, output: OutputSink | None = None) -> None:
    """Run `source` in a fresh interpreter. Only side effects are visible."""
    Interpreter(output).run(source)
