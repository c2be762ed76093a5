"""
  Scheme lexer (R5RS 7.1.1, partial)

Rules are tried in declaration order and the first one that matches at the
current position wins, so the order of the groups in TOKEN_RE matters:

    comment, boolean, number, identifier, lparen, rparen, quote, string

Comments are recognised and dropped; every other match is yielded as a
Token carrying the offset where it starts.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from ezscheme.errors import LexError

_INITIAL = r"[a-zA-Z!$%&*.:<=>?^_~]"
_SUBSEQUENT = r"[a-zA-Z!$%&*.:<=>?^_~0-9+\-.@]"

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"
    r"|(?P<boolean>\#[tf])"
    r"|(?P<number>\#b[01]+|\#o[0-7]+|(?:\#d)?[0-9]+|\#x[0-9A-Fa-f]+)"
    rf"|(?P<identifier>{_INITIAL}{_SUBSEQUENT}*|\.\.\.|[+\-.])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"[^"\n]*")'
)

WHITESPACE_RE = re.compile(r"\s*")


class Token(NamedTuple):
    type: str
    text: str
    pos: int

    def __str__(self) -> str:
        return f"{self.type}({self.text})"


def tokenize(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens until the end of `source`.

    Raises LexError with the offending offset when nothing matches. The
    generator cannot be resumed after that.
    """
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise LexError(pos)
        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        yield Token(kind, m.group(kind), m.start())
