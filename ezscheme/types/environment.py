"""Runtime environment for ezscheme.

An Environment is one frame of bindings from Symbols to values, linked to
its enclosing frame through ``outer``. Chains end at the global frame, whose
``outer`` is None.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from ezscheme import Value
from ezscheme.errors import UnboundVariableError
from ezscheme.types.nil import Nil
from ezscheme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Optional[dict[Symbol, Value]] = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, Value] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol, strict: bool = False) -> Value:
        """Look up the value bound to `name`, climbing towards the global frame.

        An unbound name yields Nil unless `strict` is set, in which case
        UnboundVariableError is raised.
        """
        env = self.find(name)
        if env is None:
            if strict:
                raise UnboundVariableError(name)
            return Nil
        return env.vars[name]

    def define(self, name: Symbol, value: Value) -> None:
        """Bind `name` in this frame, replacing any existing binding here."""
        self.vars[name] = value

    def set(self, name: Symbol, value: Value) -> None:
        """Update the nearest existing binding for `name`.

        Raises UnboundVariableError if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariableError(name)
        env.vars[name] = value

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
