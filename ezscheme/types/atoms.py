"""Immutable atomic values: booleans, integers and strings.

Each wraps a Python value so that Scheme's tags stay distinct: ``#f`` is
never equal to ``0`` even though ``False == 0`` holds in Python.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class String:
    value: str

    def __str__(self) -> str:
        return self.value


TRUE = Boolean(True)
FALSE = Boolean(False)
