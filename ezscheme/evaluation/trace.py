"""Optional observers for evaluation events.

The evaluator reports each eval and apply step to the tracer it was given,
if any. LoggingTracer forwards those events to the ``ezscheme.trace``
logger at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ezscheme import SExpression, Value
from ezscheme.printer import to_repr
from ezscheme.types.environment import Environment


class Tracer(Protocol):
    def on_eval(self, expr: SExpression, env: Environment) -> None: ...

    def on_apply(self, proc: Value, args: list[Value]) -> None: ...


class LoggingTracer:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("ezscheme.trace")

    def on_eval(self, expr: SExpression, env: Environment) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("eval %s [%s]", to_repr(expr), type(expr).__name__)

    def on_apply(self, proc: Value, args: list[Value]) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "apply %s to (%s)", to_repr(proc), " ".join(to_repr(a) for a in args)
            )
