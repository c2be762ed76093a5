"""Procedure values: closures created by ``lambda`` and native builtins."""

from __future__ import annotations

from ezscheme import SExpression, Value, NativeFn
from ezscheme.types.environment import Environment
from ezscheme.types.symbol import Symbol


class Closure:
    """A compound procedure: parameters, body forms and the defining environment."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: list[SExpression],
        env: Environment,
        name: str | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        # Captured by reference; the frame lives as long as the closure does
        self.env: Environment = env
        self.name = name

    def __str__(self) -> str:
        return "#<procedure>" if self.name is None else f"#<procedure {self.name}>"

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        return f"Closure(({params}), {len(self.body)} body form(s))"


class Builtin:
    """A procedure implemented in Python."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[Value]) -> Value:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<builtin {self.name}>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
