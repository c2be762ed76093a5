from __future__ import annotations

import sys


class Symbol:
    """A Scheme identifier such as ``car``, ``set-cdr!`` or ``+``.

    Names are kept exactly as read, so ``Foo`` and ``foo`` are different
    symbols. Two symbols with the same name compare equal and hash alike,
    which lets them key environment frames; ``eq?`` on symbols therefore
    compares names, not objects.
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("a symbol needs a non-empty name")
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
