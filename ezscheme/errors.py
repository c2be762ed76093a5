from __future__ import annotations

from typing import Any


class SchemeError(Exception):
    """ Base class for all ezscheme errors"""
    pass


def _coord(line: int | None, column: int | None) -> str:
    return f" [line {line}, column {column}]" if line is not None else ""


class LexError(SchemeError):
    """ Raised when no lexical rule matches at a position of the source

    `pos` is a character offset into the source ``str`` (an index usable as
    ``source[pos]``), not a byte offset into its encoded form. `line` and
    `column` are filled in when the error passes through the parser.
    """

    def __init__(self, pos: int, line: int | None = None, column: int | None = None):
        self.pos = pos
        self.line = line
        self.column = column
        super().__init__(f"syntax error at character {pos}{_coord(line, column)}")


class ParseError(SchemeError):
    """ Raised for malformed source text or malformed special forms"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message}{_coord(line, column)}")


class UnboundVariableError(SchemeError):
    """ Raised when a name that no frame binds is assigned (or read in strict mode)"""

    def __init__(self, name: Any):
        self.name = str(name)
        super().__init__(f"unbound variable '{self.name}'")


class ArityError(SchemeError):
    """ Raised when a procedure receives fewer arguments than it has parameters"""

    def __init__(self, procedure: Any, expected: int, provided: int, message: str | None = None):
        self.procedure = procedure
        self.expected = expected
        self.provided = provided
        super().__init__(
            message or f"{procedure}: expected {expected} argument(s), got {provided}"
        )


class UnknownFormError(SchemeError):
    """ Raised when an expression is neither a special form nor an application"""


class BuiltinError(SchemeError):
    """ Raised when a native procedure's preconditions are violated"""

    def __init__(self, message: str, name: str | None = None):
        self.name = name
        super().__init__(f"{name}: {message}" if name else message)
