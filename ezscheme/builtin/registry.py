"""Name -> native procedure table.

A registry is built explicitly for each interpreter and installed into its
global environment, so interpreters never share a mutable builtin table.
"""

from __future__ import annotations

from typing import Iterator, Optional

from ezscheme import NativeFn
from ezscheme.types.environment import Environment
from ezscheme.types.procedures import Builtin
from ezscheme.types.symbol import Symbol


class BuiltinRegistry:
    def __init__(self):
        self._builtins: dict[str, Builtin] = {}

    def register(self, name: str, fn: Optional[NativeFn] = None):
        """Register `fn` under `name`. Without `fn`, acts as a decorator."""
        if fn is None:
            def decorator(f: NativeFn) -> NativeFn:
                self._builtins[name] = Builtin(name, f)
                return f
            return decorator
        self._builtins[name] = Builtin(name, fn)
        return fn

    def install(self, env: Environment) -> None:
        """Define every registered builtin in `env`."""
        env.update({Symbol(name): b for name, b in self._builtins.items()})

    def names(self) -> list[str]:
        return sorted(self._builtins)

    def copy(self) -> BuiltinRegistry:
        other = BuiltinRegistry()
        other._builtins = dict(self._builtins)
        return other

    def __getitem__(self, name: str) -> Builtin:
        return self._builtins[name]

    def __contains__(self, name: object) -> bool:
        return name in self._builtins

    def __iter__(self) -> Iterator[str]:
        return iter(self._builtins)

    def __len__(self) -> int:
        return len(self._builtins)
